"""
Pytest fixtures for test database, client, and seeded data.

Each test gets a fresh SQLite database file, so the root loader's concurrent
sessions each open their own connection.
"""

from datetime import datetime, timezone, timedelta
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from planit.main import app
from planit.db.base import Base
from planit.db.session import get_session_factory
from planit.core.config import get_settings
from planit.core.security import hash_password, sign_session_token
from planit.models import User, Password, Group, Event

TEST_PASSWORD = "testpassword123"


@pytest_asyncio.fixture(scope="function")
async def session_factory(tmp_path) -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    """Create tables in a per-test database, yield a session factory, dispose after."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", poolclass=NullPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


def _build_client(session_factory, raise_app_exceptions: bool = True) -> AsyncClient:
    app.dependency_overrides[get_session_factory] = lambda: session_factory
    transport = ASGITransport(app=app, raise_app_exceptions=raise_app_exceptions)
    return AsyncClient(transport=transport, base_url="http://test")


@pytest_asyncio.fixture(scope="function")
async def client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client whose database sessions come from the test database."""
    async with _build_client(session_factory) as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest_asyncio.fixture(scope="function")
async def lenient_client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """Like `client`, but unhandled errors come back as 500 pages instead of raising."""
    async with _build_client(session_factory, raise_app_exceptions=False) as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def test_user(db_session: AsyncSession) -> User:
    """A user with a password on file."""
    user = User(email="user@example.com", name="Test User")
    user.password = Password(hash=hash_password(TEST_PASSWORD))
    db_session.add(user)
    await db_session.commit()
    await db_session.refresh(user)
    return user


@pytest_asyncio.fixture
async def passwordless_user(db_session: AsyncSession) -> User:
    """A user with no password record, e.g. one created through OAuth."""
    user = User(email="oauth@example.com")
    db_session.add(user)
    await db_session.commit()
    await db_session.refresh(user)
    return user


@pytest.fixture
def session_cookie(test_user: User) -> dict:
    """Cookie header carrying a valid session for the test user."""
    name = get_settings().SESSION_COOKIE_NAME
    return {"Cookie": f"{name}={sign_session_token(test_user.id)}"}


@pytest_asyncio.fixture
async def test_group(db_session: AsyncSession) -> Group:
    group = Group(name="Trail Runners", description="Weekend runs around the lake")
    db_session.add(group)
    await db_session.commit()
    await db_session.refresh(group)
    return group


@pytest_asyncio.fixture
async def test_event(db_session: AsyncSession, test_group: Group, test_user: User) -> Event:
    event = Event(
        title="Sunrise 10k",
        description="Meet at the north gate",
        date=datetime.now(timezone.utc) + timedelta(days=7),
        location="North Gate",
        group_id=test_group.id,
        owner_id=test_user.id,
    )
    db_session.add(event)
    await db_session.commit()
    await db_session.refresh(event)
    return event
