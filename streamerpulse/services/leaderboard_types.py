"""
Data types shared by the leaderboard aggregation pipeline.
"""
from dataclasses import dataclass, asdict
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional


class LeaderboardSource(str, Enum):
    LIVE = "live"
    SNAPSHOT = "snapshot"
    PLACEHOLDER = "placeholder"


class CacheState(str, Enum):
    COLD = "cold"
    WARM = "warm"
    STALE = "stale"


@dataclass
class WagerRecord:
    """A single user's wager from one account page."""
    username: str
    wager: float


@dataclass
class LeaderboardEntry:
    """A ranked row of the public leaderboard."""
    rank: Optional[int]
    username: str
    totalWager: float
    reward: float
    imageUrl: str

    def to_dict(self) -> Dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict) -> "LeaderboardEntry":
        return cls(
            rank=data.get("rank"),
            username=data["username"],
            totalWager=float(data.get("totalWager", 0)),
            reward=float(data.get("reward", 0)),
            imageUrl=data.get("imageUrl", ""),
        )


@dataclass
class AggregationResult:
    """Output of one aggregation cycle."""
    source: LeaderboardSource
    entries: List[LeaderboardEntry]


@dataclass
class CacheEntry:
    """Cached leaderboard for one period."""
    data: List[LeaderboardEntry]
    fetched_at: datetime
    source: LeaderboardSource

    def age_seconds(self, now: datetime) -> float:
        return (now - self.fetched_at).total_seconds()
