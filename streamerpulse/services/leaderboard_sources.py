"""
Fallback tiers for the leaderboard: live data, embedded snapshot, placeholder.
"""
import logging
from typing import List, Optional, Tuple

from streamerpulse.core.leaderboard_config import PLACEHOLDER_USERNAME
from streamerpulse.services.leaderboard_types import LeaderboardEntry, LeaderboardSource

logger = logging.getLogger(__name__)

SNAPSHOT_LAST_UPDATED = "2025-10-15T03:30:00+00:00"

# (rank, masked username, wagered, prize)
_SNAPSHOT_ROWS = [
    (1, "ЖЕ*****ЧУ", 243747.58, 4000),
    (2, "Ma***ts", 205427.81, 2000),
    (3, "Lb*******yb", 97128.16, 1000),
    (4, "El********cc", 94694.31, 250),
    (5, "St********ac", 68815.0, 250),
    (6, "Ma*****f5", 35404.04, 250),
    (7, "Ki**_K", 13919.21, 250),
    (8, "Ma*****ay", 13235.44, 250),
    (9, "Re**im", 11396.51, 250),
    (10, "Ng******ri", 10468.95, 250),
    (11, "اب***کل", 9752.73, 250),
    (12, "Az******🚬", 7833.94, 250),
    (13, "ᘻᓍ******🎭", 6474.33, 250),
    (14, "Tr******oa", 6094.99, 250),
    (15, "Sa**********te", 5830.2, 250),
    (16, "Bu**********ze", 5253.2, 0),
    (17, "Br***um", 4680.0, 0),
    (18, "सा************🚩", 4331.13, 0),
    (19, "ih*****fe", 4240.0, 0),
    (20, "La*****25", 3588.75, 0),
]


def embedded_snapshot(image_url: str) -> List[LeaderboardEntry]:
    """Get the fixed historical leaderboard shipped with the service."""
    return [
        LeaderboardEntry(
            rank=rank,
            username=username,
            totalWager=wagered,
            reward=float(prize),
            imageUrl=image_url,
        )
        for rank, username, wagered, prize in _SNAPSHOT_ROWS
    ]


def placeholder_entry(image_url: str) -> LeaderboardEntry:
    """The single entry served when no other tier has data."""
    return LeaderboardEntry(
        rank=None,
        username=PLACEHOLDER_USERNAME,
        totalWager=0.0,
        reward=0.0,
        imageUrl=image_url,
    )


def select_source(
    live: Optional[List[LeaderboardEntry]],
    snapshot: Optional[List[LeaderboardEntry]],
    image_url: str,
) -> Tuple[LeaderboardSource, List[LeaderboardEntry]]:
    """
    Pick the first non-empty tier. Tiers are never blended.
    """
    if live:
        return LeaderboardSource.LIVE, list(live)
    if snapshot:
        logger.info("No live wager data, serving embedded snapshot")
        return LeaderboardSource.SNAPSHOT, list(snapshot)
    logger.warning("No live or snapshot data, serving placeholder entry")
    return LeaderboardSource.PLACEHOLDER, [placeholder_entry(image_url)]
