"""Test infrastructure: in-memory SQLite DB, session, and httpx client fixtures.

Every test gets a fresh in-memory database (aiosqlite + StaticPool so all
connections share it). The app's get_db dependency is overridden to hand
out the same session the fixtures use.
"""

from collections.abc import AsyncGenerator
from datetime import datetime

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from shifts_logger.database import Base, get_db
from shifts_logger.main import app
from shifts_logger.models import *  # noqa: F401,F403 (register all models with metadata)
from shifts_logger.models import Location, Shift, Worker
from shifts_logger.utils.validation import duration_minutes

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


# ---------------------------------------------------------------------------
# Function-scoped: engine, session, client
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Async engine over a brand-new in-memory database with the schema applied."""
    eng = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Session shared by the fixtures and the app under test."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI test client with the DB session overridden."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Helper fixtures: test data
# ---------------------------------------------------------------------------
async def make_worker(
    db: AsyncSession,
    name: str = "John Smith",
    email: str | None = "john.smith@company.com",
    phone_number: str | None = "+44 7911 123456",
) -> Worker:
    w = Worker(name=name, email=email, phone_number=phone_number)
    db.add(w)
    await db.flush()
    await db.refresh(w)
    return w


async def make_location(
    db: AsyncSession,
    name: str = "London Office",
    town: str = "London",
    county: str = "Greater London",
    country: str = "UK",
    post_code: str = "E14 5AB",
    address: str = "1 Canary Wharf",
) -> Location:
    loc = Location(
        name=name,
        address=address,
        town=town,
        county=county,
        post_code=post_code,
        country=country,
    )
    db.add(loc)
    await db.flush()
    await db.refresh(loc)
    return loc


async def make_shift(
    db: AsyncSession,
    worker: Worker,
    location: Location,
    start_time: datetime,
    end_time: datetime,
) -> Shift:
    s = Shift(
        worker_id=worker.id,
        location_id=location.id,
        start_time=start_time,
        end_time=end_time,
        duration_minutes=duration_minutes(start_time, end_time),
    )
    db.add(s)
    await db.flush()
    await db.refresh(s)
    return s


@pytest_asyncio.fixture
async def worker(db: AsyncSession) -> Worker:
    """Test worker "John Smith" with email and phone."""
    return await make_worker(db)


@pytest_asyncio.fixture
async def location(db: AsyncSession) -> Location:
    """Test location "London Office"."""
    return await make_location(db)


@pytest_asyncio.fixture
async def shift(db: AsyncSession, worker: Worker, location: Location) -> Shift:
    """09:00-17:00 shift on 2025-01-15 for the test worker at the test location."""
    return await make_shift(
        db, worker, location, datetime(2025, 1, 15, 9, 0), datetime(2025, 1, 15, 17, 0)
    )
