"""
Dependency injection for API endpoints.
"""
import secrets
from typing import Generator, Optional

from fastapi import Header, Request

from streamerpulse.core.config import settings
from streamerpulse.core.database import SessionLocal
from streamerpulse.core.exceptions import Unauthorized
from streamerpulse.services.leaderboard_cache import LeaderboardCacheManager


def get_db() -> Generator:
    """
    Database dependency that ensures proper session cleanup.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_leaderboard_cache(request: Request) -> LeaderboardCacheManager:
    """The cache manager created at startup."""
    return request.app.state.leaderboard_cache


def require_admin(authorization: Optional[str] = Header(None)) -> None:
    """
    Guard for privileged endpoints: expects `Authorization: Bearer <ADMIN_TOKEN>`.
    """
    scheme, _, token = (authorization or "").partition(" ")
    if scheme.lower() != "bearer" or not token:
        raise Unauthorized("Missing bearer token")
    if not secrets.compare_digest(token.strip(), settings.ADMIN_TOKEN):
        raise Unauthorized("Invalid token")
