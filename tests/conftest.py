import os
import tempfile

_app_db_fd, _app_db_path = tempfile.mkstemp(suffix=".db")
os.environ["DATABASE_URL"] = f"sqlite:///{_app_db_path}"
os.environ["ADMIN_TOKEN"] = "test-admin-token"
os.environ["LEADERBOARD_BACKGROUND_REFRESH"] = "False"
os.environ["WAGER_ACCOUNTS"] = "[]"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from streamerpulse.api.deps import get_db, get_leaderboard_cache
from streamerpulse.core.database import Base
from streamerpulse.services.leaderboard_cache import LeaderboardCacheManager
from streamerpulse.services.leaderboard_types import (
    AggregationResult, LeaderboardEntry, LeaderboardSource
)
from main import app

ADMIN_HEADERS = {"Authorization": "Bearer test-admin-token"}


class FakeAggregator:
    """Stands in for the upstream pipeline and counts cycles."""

    def __init__(self, entries=None, source=LeaderboardSource.LIVE):
        self.entries = entries if entries is not None else [
            LeaderboardEntry(rank=1, username="a", totalWager=15.0, reward=3000.0, imageUrl="/img/logo.png"),
            LeaderboardEntry(rank=2, username="b", totalWager=5.0, reward=2000.0, imageUrl="/img/logo.png"),
        ]
        self.source = source
        self.calls = []

    async def run(self, period):
        self.calls.append(period)
        return AggregationResult(source=self.source, entries=list(self.entries))


@pytest.fixture(scope="session")
def test_db():
    db_fd, db_path = tempfile.mkstemp(suffix=".db")
    engine = create_engine(f"sqlite:///{db_path}", connect_args={"check_same_thread": False})
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.create_all(bind=engine)
    yield TestingSessionLocal
    engine.dispose()
    os.close(db_fd)
    os.unlink(db_path)


@pytest.fixture
def db_session(test_db):
    session = test_db()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def fake_aggregator():
    return FakeAggregator()


@pytest.fixture
def leaderboard_cache(fake_aggregator):
    return LeaderboardCacheManager(
        aggregator=fake_aggregator,
        ttl_seconds=300,
        default_period="2025-10"
    )


@pytest.fixture
def client(db_session, leaderboard_cache):
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_leaderboard_cache] = lambda: leaderboard_cache
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers():
    return dict(ADMIN_HEADERS)
