# hrms/core/database.py
import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional
from fastapi import Request
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.pool import StaticPool
from hrms.core.config import settings
from hrms.db.base import Base


class Database:
    """In-memory relational store owned by the running process.

    Every unit of work goes through ``session()``, which holds the store-wide
    lock until the session closes. The SQLite connection is shared by all
    sessions, so two sessions must never interleave.
    """

    def __init__(self, url: Optional[str] = None, echo: Optional[bool] = None):
        self.url = url or settings.DATABASE_URL
        engine_options = {"echo": settings.DATABASE_ECHO if echo is None else echo}
        if self.url.startswith("sqlite"):
            # One connection for the whole process, otherwise each
            # checkout would open a fresh empty :memory: database
            engine_options.update(
                poolclass=StaticPool,
                connect_args={"check_same_thread": False},
            )
        self.engine = create_async_engine(self.url, **engine_options)
        self.session_maker = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        self._lock = asyncio.Lock()

    async def create_tables(self) -> None:
        import hrms.models  # noqa: F401  registers every table on Base.metadata

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        await self.engine.dispose()

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        async with self._lock:
            async with self.session_maker() as session:
                yield session


async def get_async_session(request: Request) -> AsyncIterator[AsyncSession]:
    database: Database = request.app.state.database
    async with database.session() as session:
        yield session
