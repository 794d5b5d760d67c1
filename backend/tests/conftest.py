"""
Pytest fixtures for testing.

Tests run against a fresh in-memory SQLite database per test by default.
Set TEST_POSTGRES=1 to run the same suite against a PostgreSQL 16 container.
"""
import os
from collections.abc import AsyncGenerator, Awaitable, Callable, Generator

# Settings are validated on first import of db.session; point it somewhere harmless.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET", "test-jwt-secret")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from models.base import Base  # noqa: E402
from models.bookmark import Bookmark  # noqa: E402
from models.user import User  # noqa: E402


@pytest.fixture(scope="session")
def database_url() -> Generator[str]:
    """Database URL for the test session (SQLite, or a Postgres container)."""
    if os.environ.get("TEST_POSTGRES") == "1":
        from testcontainers.postgres import PostgresContainer

        with PostgresContainer("postgres:16", driver="asyncpg") as postgres:
            yield postgres.get_connection_url()
    else:
        yield "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def async_engine(database_url: str) -> AsyncGenerator[AsyncEngine]:
    """Create an engine with all tables; dropped again after the test."""
    if database_url.startswith("sqlite"):
        # One shared connection, so the in-memory database lives for the whole test
        engine = create_async_engine(database_url, poolclass=StaticPool)
    else:
        engine = create_async_engine(database_url)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def db_session(async_engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """
    Session used by both the test and (via override) the app.

    Nothing is committed: services only flush, and the session is closed
    (rolled back) at the end of the test.
    """
    session_factory = async_sessionmaker(
        bind=async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient]:
    """Create an unauthenticated test client with database session override."""
    from api.main import app
    from db.session import get_async_session

    async def override_get_async_session() -> AsyncGenerator[AsyncSession]:
        yield db_session

    app.dependency_overrides[get_async_session] = override_get_async_session

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def signup(client: AsyncClient) -> Callable[[str, str], Awaitable[dict[str, str]]]:
    """
    Factory fixture that registers a user through the API.

    Usage:
        headers = await signup("bob@example.com", "password")
        response = await client.get("/bookmarks/", headers=headers)
    """
    async def _signup(email: str, password: str) -> dict[str, str]:
        response = await client.post(
            "/auth/signup", json={"email": email, "password": password},
        )
        assert response.status_code == 201, response.text
        return {"Authorization": f"Bearer {response.json()['access_token']}"}

    return _signup


@pytest.fixture
async def auth_headers(
    signup: Callable[[str, str], Awaitable[dict[str, str]]],
) -> dict[str, str]:
    """Authorization header for a freshly registered user."""
    return await signup("alice@example.com", "alice-password")


@pytest.fixture
async def test_user(db_session: AsyncSession) -> User:
    """Create a test user directly in the database."""
    user = User(email="test@example.com", hash="not-a-real-hash")
    db_session.add(user)
    await db_session.flush()
    await db_session.refresh(user)
    return user


@pytest.fixture
async def other_user(db_session: AsyncSession) -> User:
    """Create a second user that owns nothing the first user can touch."""
    user = User(email="other@example.com", hash="not-a-real-hash")
    db_session.add(user)
    await db_session.flush()
    await db_session.refresh(user)
    return user


@pytest.fixture
async def test_bookmark(db_session: AsyncSession, test_user: User) -> Bookmark:
    """Create a bookmark owned by test_user."""
    bookmark = Bookmark(
        user_id=test_user.id,
        title="Example",
        description="An example site",
        link="https://example.com/",
    )
    db_session.add(bookmark)
    await db_session.flush()
    await db_session.refresh(bookmark)
    return bookmark
