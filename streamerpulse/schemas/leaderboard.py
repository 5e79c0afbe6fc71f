from pydantic import BaseModel
from typing import Any, Dict, List, Optional


class LeaderboardEntry(BaseModel):
    rank: Optional[int] = None
    username: str
    totalWager: float
    reward: float
    imageUrl: str

    class Config:
        from_attributes = True


class LeaderboardResponse(BaseModel):
    timestamp: str
    source: str
    data: List[LeaderboardEntry]


class CacheStats(BaseModel):
    default_period: str
    ttl_seconds: int
    refresh_interval_seconds: int
    refreshing: Optional[str] = None
    background_refresh: bool
    cycles: int
    periods: Dict[str, Dict[str, Any]]


class MessageResponse(BaseModel):
    message: str
