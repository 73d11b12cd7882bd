"""Global pytest fixtures for testing."""

import contextlib
import os
from collections.abc import AsyncGenerator
from datetime import UTC, datetime
from types import SimpleNamespace

import dotenv
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool, StaticPool

from tally_api.main import app
from tally_database import Base
from tally_database.models import Category, Entry, EntryStatus, Feed, User
from tally_database.session import get_session

with contextlib.suppress(OSError):
    dotenv.load_dotenv()

# Test database URL - in-memory SQLite unless TEST_DATABASE_URL is set
TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")

# Safety check: ensure tests only run on a test database
if (
    ":memory:" not in TEST_DATABASE_URL
    and "_test" not in TEST_DATABASE_URL
    and "/test" not in TEST_DATABASE_URL
):
    raise RuntimeError(
        f"Safety check failed: TEST_DATABASE_URL must point to a test database "
        f"(name should contain 'test'). Current: {TEST_DATABASE_URL}"
    )


@pytest_asyncio.fixture
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create a test database engine with a fresh schema."""
    if ":memory:" in TEST_DATABASE_URL:
        # Share the single in-memory connection across sessions
        engine = create_async_engine(
            TEST_DATABASE_URL,
            echo=False,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
    else:
        engine = create_async_engine(TEST_DATABASE_URL, echo=False, poolclass=NullPool)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(test_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Create a database session for one test."""
    async_session = async_sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session


@pytest_asyncio.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create test HTTP client with a database override."""

    async def override_get_session():
        yield db_session

    app.dependency_overrides[get_session] = override_get_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def test_user(db_session: AsyncSession) -> User:
    """Create a test user."""
    user = User(email="test@example.com", name="Test User", is_active=True)
    db_session.add(user)
    await db_session.commit()
    await db_session.refresh(user)
    return user


@pytest_asyncio.fixture
async def other_user(db_session: AsyncSession) -> User:
    """Create a second user whose data must never leak into test_user's views."""
    user = User(email="other@example.com", name="Other User", is_active=True)
    db_session.add(user)
    await db_session.commit()
    await db_session.refresh(user)
    return user


@pytest_asyncio.fixture
async def auth_headers(test_user: User) -> dict[str, str]:
    """Generate auth headers for test user."""
    from tally_api.dependencies import get_jwt_config
    from tally_core.auth import create_access_token

    access_token = create_access_token(str(test_user.id), get_jwt_config())
    return {"Authorization": f"Bearer {access_token}"}


def _ts(day: int, hour: int = 12) -> datetime:
    return datetime(2026, 10, day, hour, 0, tzinfo=UTC)


@pytest_asyncio.fixture
async def reading_list(db_session: AsyncSession, test_user: User, other_user: User):
    """
    Seed the reading list used across unread statistics tests.

    - News (visible): Daily (visible) with 2 unread + 1 read + 1 removed,
      Noisy (hidden) with 3 unread.
    - Tech (visible): Blog (visible) with 1 unread.
    - Muted (hidden): Quiet (visible) with 5 unread.
    - other_user: Elsewhere category/feed with 4 unread.
    """
    news = Category(user_id=test_user.id, title="News")
    tech = Category(user_id=test_user.id, title="Tech")
    muted = Category(user_id=test_user.id, title="Muted", hide_globally=True)
    elsewhere = Category(user_id=other_user.id, title="Elsewhere")
    db_session.add_all([news, tech, muted, elsewhere])
    await db_session.flush()

    daily = Feed(
        user_id=test_user.id, category_id=news.id, title="Daily", feed_url="https://daily.example.com/rss"
    )
    noisy = Feed(
        user_id=test_user.id,
        category_id=news.id,
        title="Noisy",
        feed_url="https://noisy.example.com/rss",
        hide_globally=True,
    )
    blog = Feed(
        user_id=test_user.id, category_id=tech.id, title="Blog", feed_url="https://blog.example.com/atom"
    )
    quiet = Feed(
        user_id=test_user.id, category_id=muted.id, title="Quiet", feed_url="https://quiet.example.com/rss"
    )
    foreign = Feed(
        user_id=other_user.id,
        category_id=elsewhere.id,
        title="Foreign",
        feed_url="https://foreign.example.com/rss",
    )
    db_session.add_all([daily, noisy, blog, quiet, foreign])
    await db_session.flush()

    def entry(feed: Feed, published_at: datetime, status: EntryStatus = EntryStatus.UNREAD) -> Entry:
        return Entry(
            user_id=feed.user_id,
            feed_id=feed.id,
            title=f"{feed.title} {published_at.isoformat()}",
            status=status.value,
            published_at=published_at,
        )

    db_session.add_all(
        [
            entry(daily, _ts(1)),
            entry(daily, _ts(3)),
            entry(daily, _ts(9), EntryStatus.READ),
            entry(daily, _ts(10), EntryStatus.REMOVED),
            *(entry(noisy, _ts(11, hour)) for hour in (1, 2, 3)),
            entry(blog, _ts(2)),
            *(entry(quiet, _ts(12, hour)) for hour in (1, 2, 3, 4, 5)),
            *(entry(foreign, _ts(13, hour)) for hour in (1, 2, 3, 4)),
        ]
    )
    await db_session.commit()

    return SimpleNamespace(
        user=test_user,
        other_user=other_user,
        news=news,
        tech=tech,
        muted=muted,
        daily=daily,
        noisy=noisy,
        blog=blog,
        quiet=quiet,
        foreign=foreign,
        daily_newest=_ts(3),
        blog_newest=_ts(2),
    )
