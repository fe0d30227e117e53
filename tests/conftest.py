"""
Pytest configuration for to-do API tests.
"""

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from todo_api.app.core.store import ToDoStore
from todo_api.app.main import create_app
from todo_api.app.services.todo_service import ToDoService


class FakeClock:
    """Deterministic clock advancing by ``step`` on every call."""

    def __init__(self, start=None, step=timedelta(seconds=1)):
        self.now = start or datetime(2026, 10, 18, 9, 15, 0, tzinfo=timezone.utc)
        self.step = step

    def __call__(self):
        current = self.now
        self.now = self.now + self.step
        return current


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def frozen_clock():
    """Clock that returns the same instant on every call."""
    return FakeClock(step=timedelta(0))


@pytest.fixture
def store():
    return ToDoStore()


@pytest.fixture
def service(store, clock):
    return ToDoService(store=store, clock=clock)


@pytest.fixture
def client(service):
    """Test client for a fresh application backed by ``service``."""
    with TestClient(create_app(service)) as test_client:
        yield test_client
