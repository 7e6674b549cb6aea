from datetime import date
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from journal.errors import NotFound, StoreError, ValidationError
from journal.store import EntryStore


def test_insert_assigns_increasing_ids(store):
    ids = [store.insert(name=f"Lift {i}") for i in range(5)]
    assert ids == sorted(ids)
    assert len(set(ids)) == 5


def test_ids_not_reused_after_delete(store):
    first = store.insert(name="Squat")
    second = store.insert(name="Bench Press")
    store.delete(second)
    third = store.insert(name="Deadlift")
    assert third > second > first


def test_insert_requires_name(store):
    with pytest.raises(ValidationError):
        store.insert(name="")
    with pytest.raises(ValidationError):
        store.insert(name=None)
    assert store.list() == []


def test_list_in_insertion_order(store):
    for name in ["Squat", "Bench Press", "Deadlift"]:
        store.insert(name=name)
    assert [e.name for e in store.list()] == ["Squat", "Bench Press", "Deadlift"]


def test_optional_fields_stay_unset(store):
    entry = store.get(store.insert(name="Plank"))
    assert entry.reps is None
    assert entry.weight is None
    assert entry.date is None
    assert entry.lbs is False


def test_get_missing_raises_not_found(store):
    with pytest.raises(NotFound) as exc:
        store.get(42)
    assert exc.value.entry_id == 42


def test_update_keeps_omitted_fields(store):
    entry_id = store.insert(name="Squat", reps=5, weight=100, lbs=True, date=date(2017, 1, 1))

    store.update(entry_id, reps=8)

    entry = store.get(entry_id)
    assert (entry.id, entry.name, entry.reps, entry.weight, entry.lbs, entry.date) == (
        entry_id, "Squat", 8, 100, True, date(2017, 1, 1),
    )


def test_update_explicit_none_clears_field(store):
    entry_id = store.insert(name="Squat", reps=5, weight=100)
    store.update(entry_id, weight=None)
    assert store.get(entry_id).weight is None
    assert store.get(entry_id).reps == 5


def test_update_rejects_unknown_and_empty_fields(store):
    entry_id = store.insert(name="Squat")
    with pytest.raises(ValueError):
        store.update(entry_id, id=99)
    with pytest.raises(ValidationError):
        store.update(entry_id, name="")


def test_update_missing_raises_not_found(store):
    with pytest.raises(NotFound):
        store.update(7, reps=1)


def test_delete_twice_is_fine(store):
    entry_id = store.insert(name="Squat")
    keep_id = store.insert(name="Row")
    store.delete(entry_id)
    store.delete(entry_id)
    assert [e.id for e in store.list()] == [keep_id]


def test_reset_clears_and_restarts_ids(store):
    for name in ["Squat", "Bench Press", "Deadlift"]:
        store.insert(name=name)
    store.reset_schema()
    assert store.list() == []
    assert store.insert(name="Squat") == 1


def test_database_failure_becomes_store_error():
    session = MagicMock()
    session.query.side_effect = OperationalError("SELECT", {}, Exception("db down"))
    store = EntryStore(session)

    with pytest.raises(StoreError):
        store.list()
    with pytest.raises(StoreError):
        store.delete(1)
    session.rollback.assert_called()
