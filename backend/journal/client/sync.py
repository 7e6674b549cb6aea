"""Client sync controller for the list and edit pages.

Each user interaction becomes at most one request. The table is only
changed after the server acknowledges the request; failures are logged
and leave the table untouched. Edits are never merged into the table:
the controller navigates to a server-rendered page instead.
"""
import logging
from typing import Callable, Optional

from journal.client.table import AddForm, EditForm, Row, RowTable, CONTROLS, build_row, next_row_id
from journal.client.transport import Ack, Transport, TransportError
from journal.core.params import round_half_up

logger = logging.getLogger(__name__)

ADD_KEY = "add"


def row_key(row_id: int) -> str:
    return f"row-{row_id}"


class InFlightTracker:
    """Remembers which keys (rows, the add form) have a request pending."""

    def __init__(self):
        self._pending: set[str] = set()

    def is_pending(self, key: str) -> bool:
        return key in self._pending

    def acquire(self, key: str) -> bool:
        if key in self._pending:
            return False
        self._pending.add(key)
        return True

    def release(self, key: str) -> None:
        self._pending.discard(key)

    def __len__(self) -> int:
        return len(self._pending)


class Navigator:
    """Stands in for `window.location`; records every page the controller opens."""

    def __init__(self):
        self.history: list[str] = []

    def __call__(self, url: str) -> None:
        self.history.append(url)

    @property
    def location(self) -> Optional[str]:
        return self.history[-1] if self.history else None


class SyncController:
    def __init__(
        self,
        transport: Transport,
        table: Optional[RowTable] = None,
        navigate: Optional[Callable[[str], None]] = None,
        tracker: Optional[InFlightTracker] = None,
    ):
        self.transport = transport
        self.table = table if table is not None else RowTable()
        self.navigate = navigate or Navigator()
        self.tracker = tracker or InFlightTracker()
        self.add_wired = False

    def bind(self) -> None:
        """Attach edit/delete handlers to every row and the add handler to the form."""
        for row in self.table:
            self._wire(row)
        self.add_wired = True

    def _wire(self, row: Row) -> None:
        row.wired.update(CONTROLS)

    async def _request(self, key: str, path: str, params: dict[str, str]) -> Optional[Ack]:
        """Send one request; returns the ack on success and None otherwise."""
        if not self.tracker.acquire(key):
            logger.info("Request for %s already in flight; ignoring %s", key, path)
            return None
        try:
            ack = await self.transport.get(path, params)
        except TransportError as exc:
            logger.error("Error in network request: %s", exc)
            return None
        finally:
            self.tracker.release(key)

        if not ack.ok:
            logger.error("Error in network request: %s %s (%s)", ack.status_code, ack.reason, path)
            return None
        return ack

    async def delete_row(self, row_id: int) -> bool:
        """Delete the entry behind a row; the row goes away once the server confirms."""
        if self.table.find(row_id) is None:
            logger.warning("No row with id %s to delete", row_id)
            return False
        ack = await self._request(row_key(row_id), "/delete", {"id": str(row_id)})
        if ack is None:
            return False
        self.table.remove(row_id)
        return True

    async def edit_row(self, row_id: int) -> bool:
        """Check the entry can be loaded, then open its edit page."""
        params = {"id": str(row_id)}
        ack = await self._request(row_key(row_id), "/edit", params)
        if ack is None:
            return False
        self.navigate(f"/edit?id={row_id}")
        return True

    async def add_exercise(self, form: AddForm) -> Optional[Row]:
        if form.name == "":
            return None

        row_id = next_row_id(self.table.ids())
        weight = form.weight
        if weight != "":
            try:
                weight = str(round_half_up(float(weight)))
            except (ValueError, OverflowError):
                pass  # sent as typed; the server answers 400

        submitted = AddForm(
            name=form.name, weight=weight, units=form.units, reps=form.reps, date=form.date
        )
        ack = await self._request(
            ADD_KEY,
            "/insert",
            {
                "name": submitted.name,
                "weight": submitted.weight,
                "units": submitted.units,
                "reps": submitted.reps,
                "date": submitted.date,
            },
        )
        if ack is None:
            return None

        if ack.entry_id is not None:
            row_id = ack.entry_id
        row = build_row(row_id, submitted)
        self.table.append(row)
        self._wire(row)
        return row

    async def submit_edit(self, form: EditForm) -> bool:
        """Send the edit form to /safe-update and go back to the list on success."""
        ack = await self._request(
            row_key(form.id),
            "/safe-update",
            {
                "id": str(form.id),
                "name": form.name,
                "weight": form.weight,
                "reps": form.reps,
                "date": form.date,
                "lbs": form.lbs,
            },
        )
        if ack is None:
            return False
        self.navigate("/")
        return True
