from datetime import date

from fastapi.testclient import TestClient

from journal.api.workouts import get_store
from journal.errors import StoreError
from journal.main import app


def insert(client, **params):
    r = client.get("/insert", params=params)
    assert r.status_code == 200, r.text
    return int(r.headers["X-Entry-Id"])


def test_health_ok(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_list_empty(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.context["exercises"] == []
    assert 'id="exerciseTable"' in r.text


def test_insert_list_delete_round_trip(client):
    entry_id = insert(
        client, name="Bench Press", weight="135", units="1", reps="5", date="2017-08-01"
    )

    rows = client.get("/").context["exercises"]
    assert len(rows) == 1
    row = rows[0]
    assert (row.id, row.name, row.weight, row.reps, row.date, row.units) == (
        entry_id, "Bench Press", "135", "5", "2017-08-01", "lbs",
    )

    r = client.get("/delete", params={"id": entry_id})
    assert r.status_code == 200
    assert client.get("/").context["exercises"] == []


def test_list_normalizes_unset_values(client):
    insert(client, name="Plank", weight="0", units="0", reps="", date="")

    r = client.get("/")
    row = r.context["exercises"][0]
    assert row.weight == "–"
    assert row.reps == "–"
    assert row.units == "kgs"
    assert row.date == "0000-00-00"
    assert f'<tr id="{row.id}">' in r.text


def test_insert_without_name_is_rejected(client):
    r = client.get("/insert", params={"name": "", "weight": "100"})
    assert r.status_code == 400
    assert "name is required" in r.text
    assert client.get("/").context["exercises"] == []


def test_insert_with_bad_number_is_rejected(client):
    r = client.get("/insert", params={"name": "Squat", "reps": "lots"})
    assert r.status_code == 400


def test_edit_prefills_form(client):
    entry_id = insert(client, name="Squat", weight="100", units="1", reps="5")

    r = client.get("/edit", params={"id": entry_id})
    assert r.status_code == 200
    form = r.context["entry"]
    assert form.id == entry_id
    assert form.name == "Squat"
    assert form.weight == 100
    assert form.reps == 5
    assert form.date == "0000-00-00"
    assert form.is_pounds is True
    assert 'name="updateExercise"' in r.text


def test_edit_kgs_entry_is_not_pounds(client):
    entry_id = insert(client, name="Squat", units="0")
    assert client.get("/edit", params={"id": entry_id}).context["entry"].is_pounds is False


def test_edit_missing_entry_is_404(client):
    r = client.get("/edit", params={"id": 999})
    assert r.status_code == 404


def test_safe_update_changes_only_given_fields(client, store):
    entry_id = insert(
        client, name="Squat", weight="100", units="1", reps="5", date="2017-01-01"
    )

    r = client.get("/safe-update", params={"id": entry_id, "reps": "8"})
    assert r.status_code == 200

    entry = store.get(entry_id)
    assert (entry.name, entry.reps, entry.weight, entry.lbs, entry.date) == (
        "Squat", 8, 100, True, date(2017, 1, 1),
    )


def test_safe_update_empty_fields_keep_values(client, store):
    entry_id = insert(client, name="Squat", weight="100", units="1", reps="5", date="2017-01-01")

    params = {"id": entry_id, "name": "", "reps": "", "weight": "", "date": "", "lbs": ""}
    assert client.get("/safe-update", params=params).status_code == 200

    entry = store.get(entry_id)
    assert (entry.name, entry.reps, entry.weight, entry.lbs) == ("Squat", 5, 100, True)


def test_safe_update_can_switch_units(client, store):
    entry_id = insert(client, name="Squat", weight="100", units="1")
    client.get("/safe-update", params={"id": entry_id, "lbs": "0"})
    assert store.get(entry_id).lbs is False


def test_safe_update_missing_entry_is_silent(client):
    r = client.get("/safe-update", params={"id": 12345, "name": "Ghost"})
    assert r.status_code == 200
    assert client.get("/").context["exercises"] == []


def test_delete_missing_entry_ok(client):
    r = client.get("/delete", params={"id": 77})
    assert r.status_code == 200


def test_delete_without_id_is_400(client):
    assert client.get("/delete").status_code == 400


def test_reset_table_redirects_to_list(client):
    insert(client, name="Squat")
    insert(client, name="Bench Press")

    r = client.get("/reset-table", follow_redirects=False)
    assert r.status_code == 303
    assert r.headers["location"] == "/"

    assert client.get("/").context["exercises"] == []
    assert insert(client, name="Deadlift") == 1


def test_unknown_route_renders_404(client):
    r = client.get("/no-such-page")
    assert r.status_code == 404
    assert "404" in r.text


def test_store_failure_renders_500(client):
    class BrokenStore:
        def list(self):
            raise StoreError("Could not list workout entries")

    app.dependency_overrides[get_store] = lambda: BrokenStore()
    try:
        r = client.get("/")
    finally:
        app.dependency_overrides.clear()
    assert r.status_code == 500
    assert "500" in r.text


def test_static_scripts_served(client):
    r = client.get("/static/js/buttonScript.js")
    assert r.status_code == 200
    assert "addExercise" in r.text


def test_unexpected_error_renders_500():
    class ExplodingStore:
        def list(self):
            raise RuntimeError("boom")

    app.dependency_overrides[get_store] = lambda: ExplodingStore()
    try:
        with TestClient(app, raise_server_exceptions=False) as c:
            r = c.get("/")
    finally:
        app.dependency_overrides.clear()
    assert r.status_code == 500
    assert "500 - Server Error" in r.text
