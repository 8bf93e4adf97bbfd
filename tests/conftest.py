"""Root conftest: test infrastructure for all backend tests.

Provides:
- In-memory SQLite engine and db_session fixture (fresh schema per test)
- Fake AI backend served through httpx.MockTransport
- API client with dependency overrides
"""

from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.core.database import enable_sqlite_foreign_keys, init_db
from app.services.sentiment import ProviderClient, ProviderKind, SentimentOrchestrator
from app.services.sentiment.http_client import build_ai_http_client

AI_BASE_URL = "http://ai.test/models/sentiment"


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "integration: DB integration tests (in-memory SQLite)")


# ─────────────────────────────────────────────────────────────────────────────
# Database
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
async def test_engine():
    """A private in-memory database with the full schema."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    await init_db(engine)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
async def db_session(test_engine):
    """Database session on the per-test in-memory database.

    Application code may commit freely; the database is discarded afterwards.
    """
    session_maker = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)
    async with session_maker() as session:
        yield session


@pytest.fixture
async def test_user(db_session: AsyncSession):
    """A stored user with nickname 'alice'."""
    from app.domain.user_operations import user_ops

    user = await user_ops.resolve(db_session, "Alice")
    await db_session.commit()
    return user


# ─────────────────────────────────────────────────────────────────────────────
# Fake AI backend
# ─────────────────────────────────────────────────────────────────────────────


class FakeAIBackend:
    """Records requests and answers them with a swappable handler."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.handler: Callable[[httpx.Request], httpx.Response] = lambda _req: httpx.Response(
            200, json=[{"label": "positive", "score": 0.98}]
        )

    def respond_with(self, status_code: int = 200, **kwargs) -> None:
        self.handler = lambda _req: httpx.Response(status_code, **kwargs)

    def refuse_connections(self) -> None:
        def _refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Connection refused", request=request)

        self.handler = _refuse

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)


@pytest.fixture
def ai_backend() -> FakeAIBackend:
    return FakeAIBackend()


@pytest.fixture
async def ai_http_client(ai_backend: FakeAIBackend):
    async with build_ai_http_client(transport=httpx.MockTransport(ai_backend)) as client:
        yield client


@pytest.fixture
def make_orchestrator(ai_http_client: httpx.AsyncClient):
    """Factory for orchestrators talking to the fake backend."""

    def _make(
        provider: ProviderKind = ProviderKind.HUGGINGFACE,
        base_url: str = AI_BASE_URL,
        analyze_path: str | None = None,
        token: str | None = None,
    ) -> SentimentOrchestrator:
        return SentimentOrchestrator(
            client=ProviderClient(ai_http_client, token=token),
            provider=provider,
            base_url=base_url,
            analyze_path=analyze_path,
        )

    return _make


# ─────────────────────────────────────────────────────────────────────────────
# API Client
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
async def api_client(db_session: AsyncSession, make_orchestrator):
    """HTTP client bound to the test database and the fake AI backend.

    Overrides: get_db, get_sentiment_orchestrator
    """
    from app.api.deps import get_sentiment_orchestrator
    from app.core.database import get_db
    from app.main import app

    async def override_db():
        yield db_session

    app.dependency_overrides[get_db] = override_db
    app.dependency_overrides[get_sentiment_orchestrator] = lambda: make_orchestrator()

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
