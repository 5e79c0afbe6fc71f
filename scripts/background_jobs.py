#!/usr/bin/env python3
"""
Operational jobs for the StreamerPulse backend.
Run as cron jobs or by hand when the leaderboard needs attention.

Usage:
    python scripts/background_jobs.py refresh-leaderboard [YYYY-MM]
    python scripts/background_jobs.py cleanup-cache
    python scripts/background_jobs.py system-stats
"""

import asyncio
import sys
import logging
from datetime import datetime
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from streamerpulse.core.config import settings
from streamerpulse.core.database import SessionLocal
from streamerpulse.core.leaderboard_config import parse_period
from streamerpulse.core.startup import create_leaderboard_cache, initialize_database
from streamerpulse.services.leaderboard_cache import utcnow

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.FileHandler('background_jobs.log'),
        logging.StreamHandler()
    ]
)
logger = logging.getLogger(__name__)


def refresh_leaderboard(period=None):
    """Run one aggregation cycle and persist it for the API to pick up."""
    logger.info("=== STARTING LEADERBOARD REFRESH ===")

    cache = create_leaderboard_cache()

    try:
        if period:
            parse_period(period)
        entry = asyncio.run(cache.refresh(period))
    except Exception as e:
        logger.error(f"Fatal error in leaderboard refresh: {e}")
        return False

    logger.info(f"Leaderboard refreshed for {period or cache.default_period}:")
    logger.info(f"  Source: {entry.source.value}")
    logger.info(f"  Entries: {len(entry.data)}")
    for item in entry.data[:5]:
        logger.info(f"    #{item.rank} {item.username}: {item.totalWager:.2f} (reward {item.reward:.0f})")
    return True


def cleanup_cache():
    """Daily job: Clean up expired persisted leaderboards."""
    logger.info("=== STARTING CACHE CLEANUP ===")

    cache = create_leaderboard_cache()

    try:
        deleted_count = cache.store.delete_expired()
        logger.info(f"Cache cleanup completed: {deleted_count} entries removed")
        return True

    except Exception as e:
        logger.error(f"Error in cache cleanup: {e}")
        return False


def show_system_stats():
    """Show current system statistics."""
    logger.info("=== SYSTEM STATISTICS ===")

    with SessionLocal() as db:
        from sqlalchemy import func
        from streamerpulse.models.contact import Contact
        from streamerpulse.models.giveaway import GiveawayEntry
        from streamerpulse.models.leaderboard_cache import LeaderboardCache
        from streamerpulse.models.tracking import LinkClick, Visitor

        try:
            total_entries = db.query(func.count(GiveawayEntry.id)).scalar()
            spun_entries = db.query(func.count(GiveawayEntry.id)).filter(
                GiveawayEntry.prize.isnot(None)
            ).scalar()
            contacts = db.query(func.count(Contact.id)).scalar()
            visitors = db.query(func.count(Visitor.id)).scalar()
            unique_sessions = db.query(func.count(func.distinct(Visitor.session_id))).scalar()
            link_clicks = db.query(func.count(LinkClick.id)).scalar()
            cache_entries = db.query(func.count(LeaderboardCache.cache_key)).scalar()
            active_cache = db.query(func.count(LeaderboardCache.cache_key)).filter(
                LeaderboardCache.expires_at > utcnow().replace(tzinfo=None)
            ).scalar()

            logger.info(f"Giveaway: {total_entries} entries, {spun_entries} spun")
            logger.info(f"Contact messages: {contacts}")
            logger.info(f"Visitors: {visitors} visits, {unique_sessions} sessions")
            logger.info(f"Link clicks: {link_clicks}")
            logger.info(f"Leaderboard cache: {active_cache}/{cache_entries} active entries")
            logger.info(f"Wager accounts configured: {len(settings.WAGER_ACCOUNTS)}")

            return True

        except Exception as e:
            logger.error(f"Error getting system stats: {e}")
            return False


def main():
    """Main CLI entry point."""
    if len(sys.argv) not in (2, 3):
        print(__doc__)
        sys.exit(1)

    command = sys.argv[1]
    success = False

    start_time = datetime.now()
    initialize_database()

    if command == "refresh-leaderboard":
        success = refresh_leaderboard(sys.argv[2] if len(sys.argv) == 3 else None)
    elif command == "cleanup-cache":
        success = cleanup_cache()
    elif command == "system-stats":
        success = show_system_stats()
    else:
        logger.error(f"Unknown command: {command}")
        print(__doc__)
        sys.exit(1)

    duration = datetime.now() - start_time
    logger.info(f"Command '{command}' completed in {duration}")

    if success:
        logger.info("✅ Job completed successfully")
        sys.exit(0)
    else:
        logger.error("❌ Job failed")
        sys.exit(1)


if __name__ == "__main__":
    main()
