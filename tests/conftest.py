# tests/conftest.py

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from taskio.db import InMemoryTaskStore, SqliteTaskStore
from taskio.main import create_app
from taskio.models import Task

from .samples import make_tasks


@pytest.fixture(params=["memory", "sqlite"])
def store(request: pytest.FixtureRequest, tmp_path: Path):
    """Each store implementation, fresh per test."""
    if request.param == "memory":
        return InMemoryTaskStore()
    sqlite = SqliteTaskStore(tmp_path / "tasks.db")
    sqlite.init_db()
    return sqlite


@pytest.fixture()
def seeded(store) -> list[Task]:
    """The sample tasks saved into ``store``, in insertion order."""
    return [store.save(task) for task in make_tasks()]


@pytest.fixture()
def memory_store() -> InMemoryTaskStore:
    return InMemoryTaskStore()


@pytest.fixture()
def client(memory_store: InMemoryTaskStore):
    app = create_app(store=memory_store)
    with TestClient(app) as test_client:
        yield test_client
