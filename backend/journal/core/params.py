"""Query-string coercion helpers.

Every route takes its input from the query string, so values arrive as
strings (often empty). These helpers turn them into store values and raise
ValueError on anything that cannot be coerced.
"""
import math
from datetime import date

from journal.core.constants import DATE_PLACEHOLDER


# Query-string spellings of the units flag
LBS_VALUES = ("1", "true", "on", "lbs")
KGS_VALUES = ("0", "false", "off", "kgs")


def round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def is_blank(raw: str | None) -> bool:
    return raw is None or raw.strip() == ""


def parse_optional_int(raw: str | None, field: str) -> int | None:
    """
    Parse a non-negative integer, rounding decimals.
    Example: '135' -> 135, '62.5' -> 63, '' -> None
    """
    if is_blank(raw):
        return None
    try:
        value = round_half_up(float(raw.strip()))
    except (ValueError, OverflowError):
        raise ValueError(f"{field} must be a number")
    if value < 0:
        raise ValueError(f"{field} must be >= 0")
    return value


def parse_units_flag(raw: str | None) -> bool | None:
    """
    Parse the lbs/kgs indicator.

    '1', 'true', 'lbs' -> True; '0', 'false', 'kgs' -> False; '' -> None
    """
    if is_blank(raw):
        return None
    s = raw.strip().lower()
    if s in LBS_VALUES:
        return True
    if s in KGS_VALUES:
        return False
    raise ValueError("units must be 1 (lbs) or 0 (kgs)")


def parse_entry_date(raw: str | None) -> date | None:
    """Parse 'YYYY-MM-DD'. Empty strings and the date placeholder mean no date."""
    if is_blank(raw):
        return None
    s = raw.strip()
    if s == DATE_PLACEHOLDER:
        return None
    try:
        return date.fromisoformat(s)
    except ValueError:
        raise ValueError("date must be in YYYY-MM-DD format")


def parse_entry_id(raw: str | None) -> int:
    if is_blank(raw):
        raise ValueError("id is required")
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError("id must be an integer")
