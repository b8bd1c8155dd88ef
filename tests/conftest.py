"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
Services run on an in-memory record store with a controllable clock, so
tests never touch the filesystem unless they ask for a file store.
"""

import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import get_debate_service, get_user_service, reset_container
from modules.debates.models import (
    HOUR_MS,
    Debate,
    DebateStatus,
    VoteTally,
    VotingOptions,
)
from modules.debates.repository import DebateRepository
from modules.debates.service import DebateService
from modules.users.repository import UserRepository
from modules.users.service import UserService
from shared.config import Settings, get_settings
from shared.database import MemoryRecordStore, reset_store_cache


START_MS = 1_700_000_000_000


class FakeClock:
    """Callable clock returning a settable epoch-ms time."""

    def __init__(self, now: int = START_MS):
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Use in-memory storage and fresh singletons for every test."""
    monkeypatch.setenv("STORAGE_BACKEND", "memory")
    get_settings.cache_clear()
    reset_store_cache()
    reset_container()
    yield
    get_settings.cache_clear()
    reset_store_cache()
    reset_container()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def settings() -> Settings:
    return Settings(storage_backend="memory")


@pytest.fixture
def store() -> MemoryRecordStore:
    return MemoryRecordStore()


@pytest.fixture
def debate_repository(store) -> DebateRepository:
    return DebateRepository(store)


@pytest.fixture
def debate_service(debate_repository, settings, clock) -> DebateService:
    return DebateService(repository=debate_repository, settings=settings, clock=clock)


@pytest.fixture
def user_repository(store) -> UserRepository:
    return UserRepository(store)


@pytest.fixture
def user_service(user_repository) -> UserService:
    return UserService(repository=user_repository)


@pytest.fixture
def app(debate_service, user_service):
    """Create a fresh app wired to the test services."""
    app = create_app()
    app.dependency_overrides[get_debate_service] = lambda: debate_service
    app.dependency_overrides[get_user_service] = lambda: user_service
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def debate_payload() -> dict:
    """Request body for creating a debate."""
    return {
        "title": "X vs Y",
        "description": "Which one is better?",
        "createdBy": "alice",
        "option1": "X",
        "option2": "Y",
        "durationHours": 1,
    }


@pytest.fixture
def make_debate(clock):
    """Factory for Debate records starting at the fake clock's time."""

    def _make(
        debate_id: str = "debate-1",
        created_by: str = "alice",
        option1: str = "X",
        option2: str = "Y",
        status: DebateStatus = DebateStatus.ACTIVE,
        duration_hours: float = 1,
        tallies: dict | None = None,
        voters: list | None = None,
        created_at: int | None = None,
    ) -> Debate:
        start = clock.now if created_at is None else created_at
        return Debate(
            id=debate_id,
            title=f"{option1} vs {option2}",
            description="...",
            created_by=created_by,
            created_at=start,
            ends_at=start + int(duration_hours * HOUR_MS),
            status=status,
            voting_options=VotingOptions(option1=option1, option2=option2),
            votes=VoteTally(
                tallies=tallies if tallies is not None else {option1: 0, option2: 0},
                voters=voters or [],
            ),
        )

    return _make
