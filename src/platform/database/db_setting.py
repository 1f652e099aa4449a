"""
SQLAlchemy async engine and session management

- Base: declarative base shared by every ORM model
- Database: owns one engine and its session factory, constructed by the DI container

PostgreSQL (asyncpg) is the production backend. SQLite (aiosqlite) is accepted through
DATABASE_URL for local runs and tests; foreign keys are switched on per connection so
ON DELETE CASCADE behaves the same on both.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Optional

import orjson
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from src.platform.config.core_setting import settings
from src.platform.logging.loguru_io import Logger


class Base(DeclarativeBase):
    pass


def _orjson_serializer(obj: Any) -> str:
    return orjson.dumps(obj).decode()


def _enable_sqlite_foreign_keys(dbapi_connection: Any, _connection_record: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute('PRAGMA foreign_keys=ON')
    cursor.close()


class Database:
    def __init__(self, db_url: Optional[str] = None, *, echo: Optional[bool] = None) -> None:
        self.db_url = db_url or settings.DATABASE_URL_ASYNC
        self._engine = self._create_engine(echo=settings.DB_ECHO if echo is None else echo)
        self._session_factory = async_sessionmaker(
            self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    @property
    def is_sqlite(self) -> bool:
        return self.db_url.startswith('sqlite')

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        return self._session_factory

    def _create_engine(self, *, echo: bool) -> AsyncEngine:
        engine_kwargs: dict[str, Any] = {
            'echo': echo,
            'json_serializer': _orjson_serializer,
            'json_deserializer': orjson.loads,
        }
        if not self.is_sqlite:
            engine_kwargs |= {
                'pool_size': settings.DB_POOL_SIZE,
                'max_overflow': settings.DB_POOL_MAX_OVERFLOW,
                'pool_timeout': settings.DB_POOL_TIMEOUT,
                'pool_recycle': settings.DB_POOL_RECYCLE,
                'pool_pre_ping': settings.DB_POOL_PRE_PING,
            }
        engine = create_async_engine(self.db_url, **engine_kwargs)
        if self.is_sqlite:
            event.listen(engine.sync_engine, 'connect', _enable_sqlite_foreign_keys)
        return engine

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Context manager for read sessions used by query repos

        Note: Automatically rolls back on exception and closes on exit
        """
        async with self._session_factory() as session:
            yield session

    async def create_tables(self) -> None:
        """Create tables from ORM metadata (local runs and tests; deployments use alembic)"""
        # Make sure every model is registered on Base.metadata
        import src.service.fleet.driven_adapter.model  # noqa: F401

        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all, checkfirst=True)
        Logger.base.info('🗄️ [DB] Tables ensured')

    async def drop_tables(self) -> None:
        import src.service.fleet.driven_adapter.model  # noqa: F401

        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    async def dispose(self) -> None:
        await self._engine.dispose()
        Logger.base.info('🔌 [DB] Engine disposed')
