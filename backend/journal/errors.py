class JournalError(Exception):
    """Base class for errors the routes map to an error page."""

    status_code = 500


class ValidationError(JournalError):
    """Request input that cannot become a valid entry (e.g. missing name)."""

    status_code = 400


class NotFound(JournalError):
    status_code = 404

    def __init__(self, entry_id: int):
        super().__init__(f"Workout entry {entry_id} not found")
        self.entry_id = entry_id


class StoreError(JournalError):
    """Any failure of the underlying database (connection, constraint, ...)."""
