"""Formatting helpers for seasons, countdowns and airing times."""

from datetime import datetime, timedelta, timezone
from typing import Optional

from ..constants.config import IST_UTC_OFFSET_MINUTES

IST = timezone(timedelta(minutes=IST_UTC_OFFSET_MINUTES), name="IST")

SECONDS_PER_DAY = 86400
SECONDS_PER_HOUR = 3600
SECONDS_PER_MINUTE = 60


def format_season(season: Optional[str]) -> str:
    """Convert a season enum like 'FALL' into 'Fall'."""
    if not season:
        return ""
    return season[0].upper() + season[1:].lower()


def format_time_until_airing(total_seconds: int) -> str:
    """
    Format a number of seconds as a compact countdown.

    Larger units hide the seconds, so 90061 becomes '1d 1h 1m'. Seconds are
    only shown when every larger unit is zero.

    Args:
        total_seconds: Seconds until airing; negative once the episode aired

    Returns:
        Countdown such as '1h 2m' or '45s', or 'Already aired'
    """
    if total_seconds < 0:
        return "Already aired"

    days = total_seconds // SECONDS_PER_DAY
    hours = (total_seconds % SECONDS_PER_DAY) // SECONDS_PER_HOUR
    minutes = (total_seconds % SECONDS_PER_HOUR) // SECONDS_PER_MINUTE
    seconds = total_seconds % SECONDS_PER_MINUTE

    parts = []
    if days > 0:
        parts.append(f"{days}d")
    if hours > 0:
        parts.append(f"{hours}h")
    if minutes > 0:
        parts.append(f"{minutes}m")
    if not parts:
        parts.append(f"{seconds}s")

    return " ".join(parts) or "Soon"


def format_airing_time_ist(airing_at: int) -> str:
    """
    Format an epoch timestamp in India Standard Time.

    Uses the en-IN short layout, e.g. 'Wed, 15 Nov, 03:43 am'.
    """
    airing = datetime.fromtimestamp(airing_at, tz=IST)
    meridiem = "am" if airing.hour < 12 else "pm"
    return f"{airing:%a}, {airing.day} {airing:%b}, {airing:%I:%M} {meridiem}"
