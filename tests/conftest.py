import pytest
from typing import AsyncGenerator
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession
from hrms.core.database import Database
from hrms.db.init_db import init_db
from hrms.main import create_app

# Each test gets its own in-memory store
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

@pytest.fixture
async def database() -> AsyncGenerator[Database, None]:
    """Empty store with all tables created"""
    db = Database(TEST_DATABASE_URL, echo=False)
    await init_db(db, seed=False)
    yield db
    await db.dispose()

@pytest.fixture
async def seeded_database() -> AsyncGenerator[Database, None]:
    """Store loaded with the sample organization"""
    db = Database(TEST_DATABASE_URL, echo=False)
    await init_db(db, seed=True)
    yield db
    await db.dispose()

@pytest.fixture
async def session(database: Database) -> AsyncGenerator[AsyncSession, None]:
    async with database.session() as s:
        yield s

@pytest.fixture
async def seeded_session(seeded_database: Database) -> AsyncGenerator[AsyncSession, None]:
    async with seeded_database.session() as s:
        yield s

# The client and session fixtures share the store lock; never request both in one test

@pytest.fixture
async def client(database: Database) -> AsyncGenerator[AsyncClient, None]:
    """Test client over an empty store"""
    app = create_app(database=database, seed_sample_data=False)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

@pytest.fixture
async def seeded_client(seeded_database: Database) -> AsyncGenerator[AsyncClient, None]:
    """Test client over the sample organization"""
    app = create_app(database=seeded_database, seed_sample_data=False)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
