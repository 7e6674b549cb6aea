import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session

from journal.core.params import (
    is_blank,
    parse_entry_date,
    parse_entry_id,
    parse_optional_int,
    parse_units_flag,
)
from journal.db import get_db
from journal.errors import NotFound, ValidationError
from journal.store import EntryStore
from journal.views import templates, to_edit_form, to_row

logger = logging.getLogger(__name__)

router = APIRouter(tags=["workouts"])

# Response header carrying the id the store assigned on insert
ENTRY_ID_HEADER = "X-Entry-Id"


def get_store(db: Session = Depends(get_db)) -> EntryStore:
    return EntryStore(db)


def _coerce(parse, *args):
    # Query-string coercion errors are client errors, not store failures
    try:
        return parse(*args)
    except ValueError as e:
        raise ValidationError(str(e))


@router.get("/")
def list_workouts(request: Request, store: EntryStore = Depends(get_store)):
    """
    Table of every entry with the add form on top.

    Unset or zero reps/weight show as a dash, the units flag as lbs/kgs.
    """
    rows = [to_row(entry) for entry in store.list()]
    return templates.TemplateResponse(
        request,
        "workout_tracker.html",
        {"exercises": rows, "script": "js/buttonScript.js", "css": "css/table.css"},
    )


@router.get("/insert")
def insert_workout(
    request: Request,
    name: Optional[str] = Query(None),
    weight: Optional[str] = Query(None),
    units: Optional[str] = Query(None),
    reps: Optional[str] = Query(None),
    date: Optional[str] = Query(None),
    store: EntryStore = Depends(get_store),
):
    entry_id = store.insert(
        name=name,
        reps=_coerce(parse_optional_int, reps, "reps"),
        weight=_coerce(parse_optional_int, weight, "weight"),
        lbs=bool(_coerce(parse_units_flag, units)),
        date=_coerce(parse_entry_date, date),
    )
    response = templates.TemplateResponse(request, "insert.html", {"id": entry_id})
    response.headers[ENTRY_ID_HEADER] = str(entry_id)
    return response


@router.get("/edit")
def edit_workout(
    request: Request,
    id: Optional[str] = Query(None),
    store: EntryStore = Depends(get_store),
):
    entry = store.get(_coerce(parse_entry_id, id))
    return templates.TemplateResponse(
        request,
        "edit.html",
        {"entry": to_edit_form(entry), "script": "js/editScript.js"},
    )


@router.get("/safe-update")
def safe_update_workout(
    request: Request,
    id: Optional[str] = Query(None),
    name: Optional[str] = Query(None),
    reps: Optional[str] = Query(None),
    weight: Optional[str] = Query(None),
    date: Optional[str] = Query(None),
    lbs: Optional[str] = Query(None),
    store: EntryStore = Depends(get_store),
):
    """
    Partial update: any empty or omitted field keeps the stored value.

    Read-then-write, not atomic. An unknown id is silently ignored.
    """
    entry_id = _coerce(parse_entry_id, id)
    try:
        current = store.get(entry_id)
    except NotFound:
        logger.info("safe-update for missing entry %s ignored", entry_id)
        return templates.TemplateResponse(request, "insert.html", {"id": entry_id})

    new_reps = _coerce(parse_optional_int, reps, "reps")
    new_weight = _coerce(parse_optional_int, weight, "weight")
    new_date = _coerce(parse_entry_date, date)
    new_lbs = _coerce(parse_units_flag, lbs)

    store.update(
        entry_id,
        name=current.name if is_blank(name) else name,
        reps=current.reps if new_reps is None else new_reps,
        weight=current.weight if new_weight is None else new_weight,
        date=current.date if new_date is None else new_date,
        lbs=current.lbs if new_lbs is None else new_lbs,
    )
    return templates.TemplateResponse(request, "insert.html", {"id": entry_id})


@router.get("/delete")
def delete_workout(
    request: Request,
    id: Optional[str] = Query(None),
    store: EntryStore = Depends(get_store),
):
    store.delete(_coerce(parse_entry_id, id))
    return templates.TemplateResponse(request, "delete.html", {})


@router.get("/reset-table")
def reset_table(store: EntryStore = Depends(get_store)):
    store.reset_schema()
    return RedirectResponse(url="/", status_code=303)


@router.get("/health")
def health():
    return {"status": "ok"}
