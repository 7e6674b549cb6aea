"""Entry Store: the durable collection of workout entries.

All database access for the journal goes through `EntryStore`. Every
method makes a single attempt; SQLAlchemy failures are rolled back and
re-raised as `StoreError` so the routes only ever see the journal's own
error types.
"""
import logging
from datetime import date
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from journal.errors import NotFound, StoreError, ValidationError
from journal.models.workout import Workout

logger = logging.getLogger(__name__)

# Columns a caller may change through `update`
UPDATABLE_FIELDS = ("name", "reps", "weight", "date", "lbs")


class EntryStore:
    def __init__(self, db: Session):
        self.db = db

    def _fail(self, action: str, exc: SQLAlchemyError) -> StoreError:
        self.db.rollback()
        logger.error("Store %s failed: %s", action, exc)
        return StoreError(f"Could not {action} workout entries")

    def list(self) -> list[Workout]:
        """All entries in insertion order."""
        try:
            return self.db.query(Workout).order_by(Workout.id).all()
        except SQLAlchemyError as exc:
            raise self._fail("list", exc) from exc

    def get(self, entry_id: int) -> Workout:
        try:
            row = self.db.query(Workout).filter(Workout.id == entry_id).first()
        except SQLAlchemyError as exc:
            raise self._fail("read", exc) from exc
        if row is None:
            raise NotFound(entry_id)
        return row

    def insert(
        self,
        name: Optional[str],
        reps: Optional[int] = None,
        weight: Optional[int] = None,
        lbs: bool = False,
        date: Optional[date] = None,
    ) -> int:
        if name is None or name.strip() == "":
            raise ValidationError("name is required")

        row = Workout(name=name, reps=reps, weight=weight, lbs=bool(lbs), date=date)
        try:
            self.db.add(row)
            self.db.commit()
            self.db.refresh(row)
        except SQLAlchemyError as exc:
            raise self._fail("insert", exc) from exc

        logger.info("Inserted workout entry %s (%s)", row.id, row.name)
        return row.id

    def update(self, entry_id: int, **fields) -> Workout:
        """
        Overwrite the given fields of one entry.

        Fields that are not passed keep their stored value. Passing a field
        explicitly (even as None) writes it.
        """
        unknown = set(fields) - set(UPDATABLE_FIELDS)
        if unknown:
            raise ValueError(f"Cannot update fields: {', '.join(sorted(unknown))}")
        if "name" in fields and (fields["name"] is None or fields["name"].strip() == ""):
            raise ValidationError("name cannot be empty")

        row = self.get(entry_id)
        for key, value in fields.items():
            setattr(row, key, value)
        try:
            self.db.commit()
            self.db.refresh(row)
        except SQLAlchemyError as exc:
            raise self._fail("update", exc) from exc

        logger.info("Updated workout entry %s: %s", entry_id, ", ".join(sorted(fields)) or "no fields")
        return row

    def delete(self, entry_id: int) -> None:
        """Remove an entry. Removing an id that does not exist is not an error."""
        try:
            deleted = self.db.query(Workout).filter(Workout.id == entry_id).delete()
            self.db.commit()
        except SQLAlchemyError as exc:
            raise self._fail("delete", exc) from exc
        logger.info("Deleted workout entry %s (%d row(s))", entry_id, deleted)

    def reset_schema(self) -> None:
        """Drop the workouts table and recreate it empty. Ids restart at 1."""
        table = Workout.__table__
        try:
            # Release the session's connection before DDL runs on the engine
            self.db.close()
            bind = self.db.get_bind()
            table.drop(bind=bind, checkfirst=True)
            table.create(bind=bind)
        except SQLAlchemyError as exc:
            raise self._fail("reset", exc) from exc
        logger.warning("Workouts table dropped and recreated")
