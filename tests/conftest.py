"""Pytest configuration and fixtures."""

from collections.abc import Generator
from datetime import UTC, datetime, timedelta
from typing import Any

import pytest
from fastapi.testclient import TestClient

from lawncare.application.lawn_care.lawn_care_store import LawnCareStore
from lawncare.domain.profile.entities import Fertilizer
from lawncare.infrastructure.common.di import get_lawn_care_store
from lawncare.main import app

# Friday; the default plan puts Watering on Sunday and Fertilizing on Wednesday
START = datetime(2024, 5, 10, 9, 0, tzinfo=UTC)


class FixedClock:
    """Clock that only moves when told to."""

    def __init__(self, now: datetime = START) -> None:
        self._now = now

    def now(self) -> datetime:
        return self._now

    def advance(self, **delta: float) -> None:
        self._now += timedelta(**delta)


class SequentialIdGenerator:
    """Id generator producing predictable ids: exp-1, exp-2, inv-3, ..."""

    def __init__(self) -> None:
        self._counter = 0

    def new_id(self, prefix: str) -> str:
        self._counter += 1
        return f"{prefix}-{self._counter}"


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def store(clock: FixedClock) -> LawnCareStore:
    """Create a fresh store with the default profile, fertilizer and wages."""
    return LawnCareStore(clock, SequentialIdGenerator(), fertilizer=Fertilizer.default())


@pytest.fixture
def client(store: LawnCareStore) -> Generator[TestClient, Any, None]:
    """Create a test client bound to the fresh store."""
    app.dependency_overrides[get_lawn_care_store] = lambda: store

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
