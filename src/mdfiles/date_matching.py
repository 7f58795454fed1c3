"""Modification date extraction and entry matching."""

import os
from datetime import date, datetime

from mdfiles.models import CandidateEntry, ConfigError, SearchConfig

DATE_FORMAT = "%Y-%m-%d"
INVALID_DATE_MESSAGE = "Invalid date format. Use YYYY-MM-DD"


def parse_date(value: str) -> date:
    """Parse a YYYY-MM-DD string into a calendar date.

    Args:
        value: Date string supplied on the command line

    Returns:
        The parsed date

    Raises:
        ConfigError: If the string is not a valid YYYY-MM-DD date

    Examples:
        >>> parse_date("2025-12-25")
        datetime.date(2025, 12, 25)
    """
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError as e:
        raise ConfigError(INVALID_DATE_MESSAGE) from e


def today() -> date:
    """Current date in the local timezone."""
    return date.today()


def modification_date(timestamp: float | None) -> date | None:
    """Convert a modification timestamp into a local calendar date.

    Args:
        timestamp: POSIX timestamp as reported by stat, or None

    Returns:
        Local date of the timestamp, None if it is missing or out of range
    """
    if timestamp is None:
        return None
    try:
        return date.fromtimestamp(timestamp)
    except (OverflowError, OSError, ValueError):
        return None


def matches(entry: CandidateEntry, config: SearchConfig) -> bool:
    """Check whether an entry is a file with the wanted suffix and date.

    Examples:
        >>> cfg = SearchConfig(target_date=date(2025, 1, 1), suffix=".md")
        >>> matches(CandidateEntry("./x.md.bak", True, 0.0), cfg)
        False
    """
    if not entry.is_file:
        return False
    if not os.path.basename(entry.path).endswith(config.suffix):
        return False
    modified = modification_date(entry.modified_at)
    if modified is None:
        return False
    return modified == config.target_date
