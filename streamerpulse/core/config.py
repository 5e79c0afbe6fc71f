from typing import Dict, List, Optional
import os

from pydantic import BaseModel
from pydantic_settings import BaseSettings


class AccountCredential(BaseModel):
    """One affiliate account on the wagering API."""
    invitationCode: str
    accessKey: str

    class Config:
        frozen = True


class Settings(BaseSettings):
    DATABASE_URL: str = os.getenv(
        "DATABASE_URL",
        "sqlite:///./streamerpulse.db"
    )
    ADMIN_TOKEN: str = os.getenv("ADMIN_TOKEN", "change-me")
    DEBUG: bool = os.getenv("DEBUG", "True") == "True"
    CLIENT_URL: str = "http://localhost:3000"

    # Upstream wagering API
    WAGER_API_URL: str = "https://bc.game/api/agent/open-api/kol/invitees/"
    WAGER_API_ORIGIN: str = "https://bc.game"
    WAGER_ACCOUNTS: List[AccountCredential] = []
    WAGER_PAGE_SIZE: int = 500
    WAGER_MAX_PAGES: int = 100

    # Retry policy for upstream calls
    FETCH_MAX_ATTEMPTS: int = 3
    FETCH_BACKOFF_SECONDS: float = 1.0
    FETCH_BACKOFF_MULTIPLIER: float = 2.0
    FETCH_JITTER_SECONDS: float = 0.25
    FETCH_TIMEOUT_SECONDS: float = 10.0

    # Leaderboard
    LEADERBOARD_PERIOD: Optional[str] = None
    LEADERBOARD_MAX_ENTRIES: int = 20
    LEADERBOARD_CACHE_TTL_SECONDS: int = 300
    LEADERBOARD_REFRESH_INTERVAL_SECONDS: int = 300
    LEADERBOARD_BACKGROUND_REFRESH: bool = True
    LEADERBOARD_MAX_CACHED_PERIODS: int = 12
    LEADERBOARD_IMAGE_URL: str = "/img/bc-game-logo.png"
    REWARD_TIERS: Dict[int, float] = {
        1: 3000,
        2: 2000,
        3: 1000,
        4: 500,
        5: 250,
        6: 250,
    }

    class Config:
        env_file = ".env"

settings = Settings()
