"""
Application startup and shutdown logic for the StreamerPulse API.
"""
import logging
from sqlalchemy import text

from streamerpulse.core.config import settings
from streamerpulse.core.database import engine, Base, SessionLocal
# Register every table on Base.metadata before create_all
from streamerpulse.models import contact, giveaway, leaderboard_cache, media, news, review, schedule, tracking  # noqa: F401
from streamerpulse.services.leaderboard_aggregator import LeaderboardAggregator
from streamerpulse.services.leaderboard_cache import LeaderboardCacheManager, LeaderboardSnapshotStore

logger = logging.getLogger(__name__)


def initialize_database() -> None:
    """Initialize database tables and warm up connection pool."""
    try:
        # Create database tables
        Base.metadata.create_all(bind=engine)
        logger.info("Database tables created/verified")

        # Warm up the connection pool
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        logger.info("Database connection pool initialized")

    except Exception as e:
        logger.error(f"Failed to initialize database: {e}")
        raise


def shutdown_database() -> None:
    """Clean up database connections."""
    try:
        engine.dispose()
        logger.info("Database connections closed")
    except Exception as e:
        logger.error(f"Error during database shutdown: {e}")
        # Don't re-raise during shutdown


def create_leaderboard_cache() -> LeaderboardCacheManager:
    """Build the leaderboard cache from settings."""
    if not settings.WAGER_ACCOUNTS:
        logger.warning("No wager accounts configured; leaderboard will serve the embedded snapshot")

    return LeaderboardCacheManager(
        aggregator=LeaderboardAggregator.from_settings(settings),
        ttl_seconds=settings.LEADERBOARD_CACHE_TTL_SECONDS,
        refresh_interval_seconds=settings.LEADERBOARD_REFRESH_INTERVAL_SECONDS,
        store=LeaderboardSnapshotStore(SessionLocal),
        default_period=settings.LEADERBOARD_PERIOD,
        max_cached_periods=settings.LEADERBOARD_MAX_CACHED_PERIODS,
    )
