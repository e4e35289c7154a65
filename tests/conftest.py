"""Pytest configuration and shared fixtures"""
import threading

import pytest
from fastapi.testclient import TestClient

from admindash.dashboard.http_client import ApiRequestError
from admindash.server.core.config import ServerConfig
from admindash.server.core.server import create_app
from admindash.server.models import DatabaseManager, Record


@pytest.fixture
def test_db(tmp_path):
    """Create a file-backed SQLite test database bound to the models"""
    # File-backed so every worker thread sees the same data
    manager = DatabaseManager(f"sqlite:///{tmp_path / 'test.db'}")
    assert manager.connect()

    yield manager

    manager.close()


@pytest.fixture
def sample_records(test_db):
    """Create a few records in insertion order"""
    return [
        Record.create_record("sales", 100),
        Record.create_record("marketing", 40.5),
        Record.create_record("support", 0),
    ]


@pytest.fixture
def app_config(tmp_path):
    return ServerConfig(
        database_url=f"sqlite:///{tmp_path / 'api.db'}",
        api_url="http://api.test/api/data",
        max_views=8,
    )


@pytest.fixture
def client(app_config):
    """FastAPI test client with the app lifespan (database connect/close) running"""
    app = create_app(app_config)
    with TestClient(app) as test_client:
        yield test_client


class FakeRecordsApi:
    """In-memory stand-in for RecordsApiClient"""

    def __init__(self, records=None):
        self.records = [dict(r) for r in (records or [])]
        self.calls = []
        self.fail_ids = set()
        self.fail_all = False
        self._next_id = 1
        self._lock = threading.Lock()

    def _check(self, op, record_id=None):
        self.calls.append((op, record_id))
        if self.fail_all:
            raise ApiRequestError("boom", status_code=500)
        if record_id is not None and record_id in self.fail_ids:
            raise ApiRequestError("boom", status_code=500)

    def list_records(self):
        self._check("list")
        return [dict(r) for r in self.records]

    def create_record(self, category, value):
        self._check("create")
        record = {"id": f"id-{self._next_id}", "category": category, "value": value}
        self._next_id += 1
        self.records.append(record)
        return dict(record)

    def delete_record(self, record_id):
        self._check("delete", record_id)
        with self._lock:
            before = len(self.records)
            self.records = [r for r in self.records if r["id"] != record_id]
            removed = len(self.records) != before
        if not removed:
            raise ApiRequestError("Item not found", status_code=404)
        return {"message": "Deleted successfully"}

    def delete_all(self):
        self._check("delete_all")
        self.records = []
        return {"message": "All data deleted successfully"}


@pytest.fixture
def fake_api():
    return FakeRecordsApi([
        {"id": "a1", "category": "sales", "value": 100},
        {"id": "b2", "category": "marketing", "value": 40},
        {"id": "c3", "category": "support", "value": 10},
    ])
