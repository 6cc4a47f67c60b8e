# database/database.py
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine,
)
from sqlalchemy.orm import declarative_base

from config import DB_PATH, ECHO_SQL
from database.schema import metadata

# 1. Base on the shared metadata (tables are already declared in schema.py)
Base = declarative_base(metadata=metadata)


def _sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    # SQLite ignores FOREIGN KEY / ON DELETE CASCADE unless asked per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


# 2. Engine + session factory, built explicitly by whoever owns the process
def make_engine(url: str | None = None, echo: bool = ECHO_SQL) -> AsyncEngine:
    engine = create_async_engine(url or DB_PATH, echo=echo)
    if engine.dialect.name == "sqlite":
        event.listen(engine.sync_engine, "connect", _sqlite_foreign_keys)
    return engine


def make_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)


async def init_db(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


@asynccontextmanager
async def lifespan(url: str | None = None) -> AsyncIterator[async_sessionmaker[AsyncSession]]:
    """Open the engine, create tables, hand out the session factory, dispose on exit."""
    engine = make_engine(url)
    logging.info("Opening database %s", engine.url.render_as_string(hide_password=True))
    try:
        await init_db(engine)
        yield make_sessionmaker(engine)
    finally:
        await engine.dispose()
        logging.info("Database engine disposed")


# 3. Import the mapped classes AFTER Base exists
from database import user, post, like   # noqa: E402,F401
