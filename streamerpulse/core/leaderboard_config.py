"""
Configuration constants and pure helpers for the wager leaderboard.
"""
import calendar
import re
from datetime import datetime, timezone
from typing import Mapping, Optional, Tuple

from streamerpulse.core.exceptions import InvalidPeriod

# Username masking
MASK = "*****"
MASK_MIN_LENGTH = 5
HIDDEN_USERNAMES = {"hidden"}

# Placeholder tier
PLACEHOLDER_USERNAME = "Unknown"

_PERIOD_RE = re.compile(r"^(\d{4})-(\d{2})$")

# Earliest month the affiliate API can hold data for
MIN_PERIOD_YEAR = 2017


def reward_for_rank(rank: Optional[int], tiers: Mapping[int, float]) -> float:
    """Get the prize for a rank. Ranks outside the table earn nothing."""
    if rank is None:
        return 0.0
    return float(tiers.get(rank, 0))


def mask_username(username: str) -> str:
    """
    Mask a username for public display: first two and last two characters
    around a fixed mask. Names of four characters or fewer are shown as is.
    """
    name = username.strip()
    if len(name) < MASK_MIN_LENGTH:
        return name
    return f"{name[:2]}{MASK}{name[-2:]}"


def current_period(now: Optional[datetime] = None) -> str:
    """Get the YYYY-MM key of the current UTC month."""
    now = now or datetime.now(timezone.utc)
    return f"{now.year:04d}-{now.month:02d}"


def parse_period(period: str, now: Optional[datetime] = None) -> Tuple[int, int]:
    """
    Parse a YYYY-MM period into (year, month).
    Months before MIN_PERIOD_YEAR or after the current UTC month are rejected.
    """
    match = _PERIOD_RE.fullmatch(period or "")
    if not match:
        raise InvalidPeriod(f"Invalid period '{period}', expected YYYY-MM")
    year, month = int(match.group(1)), int(match.group(2))
    if not 1 <= month <= 12:
        raise InvalidPeriod(f"Invalid month in period '{period}'")
    if year < MIN_PERIOD_YEAR:
        raise InvalidPeriod(f"Period '{period}' is before {MIN_PERIOD_YEAR}")
    if period > current_period(now):
        raise InvalidPeriod(f"Period '{period}' is in the future")
    return year, month


def period_bounds(period: str) -> Tuple[int, int]:
    """
    Get the UTC epoch-second bounds of a monthly period.
    The wagering API expects seconds, from the first day 00:00:00
    to the last day 23:59:59.
    """
    year, month = parse_period(period)
    last_day = calendar.monthrange(year, month)[1]
    start = datetime(year, month, 1, 0, 0, 0, tzinfo=timezone.utc)
    end = datetime(year, month, last_day, 23, 59, 59, tzinfo=timezone.utc)
    return int(start.timestamp()), int(end.timestamp())
