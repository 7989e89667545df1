"""
Database Engine and Session Management

This module builds async engines and session factories for the link store.
Uses a database abstraction layer to support different database backends.

Key Features:
- Database abstraction: engine configuration comes from the adapter
- No module-level engine: the store owns the engine it is opened with,
  so tests and tools can open stores at arbitrary paths
- Schema bootstrap: tables are created on open if missing
"""

import logging
from pathlib import Path
from typing import Optional

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession as SQLModelAsyncSession

from sharelink.db import models  # noqa: F401  (registers tables on SQLModel.metadata)
from sharelink.db.interface import DatabaseAdapter
from sharelink.db.sqlite_adapter import get_database_adapter

logger = logging.getLogger(__name__)


def ensure_database_directory(database_url: str) -> None:
    """Create the parent directory of a file-based SQLite database."""
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite":
        return
    if not url.database or url.database == ":memory:":
        return
    Path(url.database).parent.mkdir(parents=True, exist_ok=True)


def create_engine(
    database_url: str,
    adapter: Optional[DatabaseAdapter] = None,
) -> AsyncEngine:
    """
    Create the async engine for ``database_url`` through the adapter.

    Args:
        database_url: Connection string (sqlite+aiosqlite:///... by default)
        adapter: Database adapter; SQLite when omitted
    """
    adapter = adapter or get_database_adapter()
    ensure_database_directory(database_url)
    return adapter.create_engine(database_url)


def create_session_maker(engine: AsyncEngine) -> async_sessionmaker:
    """
    Create the async session factory bound to ``engine``.

    Sessions are configured for explicit commits; each store operation
    opens one session and commits before reporting success.
    """
    return async_sessionmaker(
        engine,
        class_=SQLModelAsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


async def init_models(engine: AsyncEngine) -> None:
    """Create all tables that do not exist yet."""
    async with engine.begin() as connection:
        await connection.run_sync(SQLModel.metadata.create_all)
    logger.debug("Database schema ensured")
