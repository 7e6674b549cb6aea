"""Display rules for workout entries.

The server templates and the client sync controller both format entries
with these helpers, so a row appended by the client matches a row the
server renders on the next page load.
"""
from datetime import date

from journal.core.constants import DATE_PLACEHOLDER, PLACEHOLDER, UNITS_KGS, UNITS_LBS
from journal.core.params import LBS_VALUES


def display_count(value) -> str:
    """Reps/weight for the table: unset, empty and zero all show the placeholder."""
    if value is None or value == "" or value == 0 or value == "0":
        return PLACEHOLDER
    return str(value)


def units_label(flag) -> str:
    """Units flag -> 'lbs' / 'kgs'. Accepts bools, ints and query-string values."""
    if isinstance(flag, str):
        return UNITS_LBS if flag.strip().lower() in LBS_VALUES else UNITS_KGS
    return UNITS_LBS if flag else UNITS_KGS


def display_date(value) -> str:
    if value is None or value == "":
        return DATE_PLACEHOLDER
    if isinstance(value, date):
        return value.isoformat()
    return str(value)
