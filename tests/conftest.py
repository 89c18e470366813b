from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from canteen.core.config import Settings
from canteen.database import EntityStore
from canteen.main import create_app


class TickingClock:
    """Deterministic clock: every call is one minute after the previous one."""

    def __init__(self, start: datetime = datetime(2024, 7, 1, 12, 0, tzinfo=timezone.utc)):
        self.current = start

    def __call__(self) -> datetime:
        value = self.current
        self.current += timedelta(minutes=1)
        return value


@pytest.fixture
def store() -> EntityStore:
    return EntityStore.seeded()


@pytest.fixture
def clock() -> TickingClock:
    return TickingClock()


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def client(store, settings):
    app = create_app(store=store, settings=settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def student(store):
    return store.insert_student("21CS001", "Rohit Gupta")
