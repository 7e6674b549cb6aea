"""In-memory model of the list page's exercise table.

The sync controller works against this model instead of a browser DOM:
rows carry the same cells the server renders, in the same column order,
plus the set of controls that have a click handler attached.
"""
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional

from journal.core.display import display_count, display_date, units_label
from journal.core.params import parse_entry_date, parse_optional_int, parse_units_flag

# Column order of the rendered table
COLUMNS = ("date", "name", "weight", "units", "reps")
CONTROLS = ("edit", "delete")


@dataclass
class Row:
    id: int
    cells: dict[str, str]
    # Controls with a click handler attached
    wired: set[str] = field(default_factory=set)


@dataclass
class AddForm:
    """Raw values of the add form, as typed."""

    name: str = ""
    weight: str = ""
    units: str = "1"
    reps: str = ""
    date: str = ""


@dataclass
class EditForm:
    """Raw values of the edit form plus the id of the entry being edited."""

    id: int
    name: str = ""
    weight: str = ""
    reps: str = ""
    date: str = ""
    lbs: str = ""


def next_row_id(row_ids: Iterable[int]) -> int:
    """One more than the last row's id, or 1 for an empty table."""
    last = None
    for last in row_ids:
        pass
    return 1 if last is None else int(last) + 1


def build_row(row_id: int, form: AddForm) -> Row:
    """
    Row for a freshly inserted entry, formatted the way the server renders it.

    Values go through the same coercion as `/insert`, so "05" reps shows as
    "5" and units "lbs" as lbs. Raises ValueError for input the server rejects.
    """
    return Row(
        id=row_id,
        cells={
            "date": display_date(parse_entry_date(form.date)),
            "name": form.name,
            "weight": display_count(parse_optional_int(form.weight, "weight")),
            "units": units_label(bool(parse_units_flag(form.units))),
            "reps": display_count(parse_optional_int(form.reps, "reps")),
        },
    )


class RowTable:
    def __init__(self, rows: Optional[Iterable[Row]] = None):
        self._rows: list[Row] = list(rows or [])

    @classmethod
    def from_display_rows(cls, rows) -> "RowTable":
        """Build the table from server-side `WorkoutRow`s (what `GET /` renders)."""
        return cls(
            Row(id=r.id, cells={col: getattr(r, col) for col in COLUMNS})
            for r in rows
        )

    def __iter__(self) -> Iterator[Row]:
        return iter(list(self._rows))

    def __len__(self) -> int:
        return len(self._rows)

    def ids(self) -> list[int]:
        return [row.id for row in self._rows]

    def find(self, row_id: int) -> Optional[Row]:
        for row in self._rows:
            if row.id == row_id:
                return row
        return None

    def append(self, row: Row) -> None:
        self._rows.append(row)

    def remove(self, row_id: int) -> bool:
        row = self.find(row_id)
        if row is None:
            return False
        self._rows.remove(row)
        return True
