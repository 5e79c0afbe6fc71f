"""
Leaderboard API endpoints.
"""
import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from streamerpulse.api.deps import get_leaderboard_cache, require_admin
from streamerpulse.core.config import settings
from streamerpulse.core.leaderboard_config import parse_period
from streamerpulse.schemas import leaderboard as leaderboard_schemas
from streamerpulse.services.leaderboard_cache import LeaderboardCacheManager
from streamerpulse.services.leaderboard_sources import placeholder_entry
from streamerpulse.services.leaderboard_types import LeaderboardSource

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/leaderboard", response_model=leaderboard_schemas.LeaderboardResponse)
async def get_leaderboard(
        period: Optional[str] = Query(None, description="Month to rank, as YYYY-MM"),
        cache: LeaderboardCacheManager = Depends(get_leaderboard_cache)
):
    """
    Get the wager leaderboard for a month.

    Data comes from the cache, which falls back from live affiliate data
    to the embedded snapshot and finally to a placeholder entry.
    """
    if period is not None:
        parse_period(period)

    try:
        entry = await cache.get(period)
    except Exception as e:
        logger.error(f"Leaderboard cache failed for {period or 'default period'}: {e}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "source": LeaderboardSource.PLACEHOLDER.value,
                "data": [placeholder_entry(settings.LEADERBOARD_IMAGE_URL).to_dict()],
                "error": "Failed to fetch leaderboard"
            }
        )

    return {
        "timestamp": entry.fetched_at.isoformat(),
        "source": entry.source.value,
        "data": [item.to_dict() for item in entry.data]
    }


@router.post(
    "/clear-cache",
    response_model=leaderboard_schemas.MessageResponse,
    dependencies=[Depends(require_admin)]
)
async def clear_cache(cache: LeaderboardCacheManager = Depends(get_leaderboard_cache)):
    """Drop every cached leaderboard so the next read fetches fresh data."""
    cache.clear()
    return {"message": "Leaderboard cache cleared"}


@router.get(
    "/leaderboard/cache-stats",
    response_model=leaderboard_schemas.CacheStats,
    dependencies=[Depends(require_admin)]
)
def get_cache_stats(cache: LeaderboardCacheManager = Depends(get_leaderboard_cache)):
    """Get the state of each cached period."""
    return cache.get_cache_stats()
