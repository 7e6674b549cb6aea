import os

# Use in-memory sqlite for tests
os.environ["DATABASE_URL"] = "sqlite+pysqlite:///:memory:"
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

# Import after env is set so engine is created with sqlite
from journal.db import SessionLocal  # noqa: E402
from journal.main import app  # noqa: E402
from journal.store import EntryStore  # noqa: E402


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def store(db):
    return EntryStore(db)


@pytest.fixture(autouse=True)
def empty_table(db):
    # Every test starts from a freshly created workouts table
    EntryStore(db).reset_schema()
    yield


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
