"""
SQLite Database Adapter

This module implements the DatabaseAdapter interface for SQLite.
All SQLite-specific configuration and behavior is encapsulated here.

SQLite is the embedded key-value engine behind the link store:
- File-based (single .sqlite3 file inside DB_PATH)
- No server required
- Atomic single-row writes; WAL lets readers run during a write
- synchronous=FULL so a committed write survives a crash
"""

from typing import Any

from sqlalchemy import event
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import NullPool
from sqlalchemy.sql import Executable
from sqlmodel import SQLModel

from sharelink.db.interface import DatabaseAdapter

SQLITE_PRAGMAS = (
    "PRAGMA busy_timeout=5000",
    "PRAGMA journal_mode=WAL",
    "PRAGMA synchronous=FULL",
)


def _apply_pragmas(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    try:
        for pragma in SQLITE_PRAGMAS:
            cursor.execute(pragma)
    finally:
        cursor.close()


class SQLiteAdapter(DatabaseAdapter):
    """
    SQLite database adapter implementation.

    This adapter handles all SQLite-specific configuration and operations.
    """

    def create_engine(self, database_url: str, **kwargs) -> AsyncEngine:
        """
        Create SQLite async engine with appropriate configuration.

        SQLite-specific configuration:
        - NullPool: one connection per session (file-based, no pooling needed)
        - check_same_thread=False: Required for async SQLite operations
        - Durability pragmas applied on every new connection

        Args:
            database_url: SQLite connection string (sqlite+aiosqlite:///...)
            **kwargs: Additional engine options (merged with SQLite defaults)

        Returns:
            Configured AsyncEngine for SQLite
        """
        engine_kwargs = self.get_engine_kwargs()
        engine_kwargs.update(kwargs)

        engine = create_async_engine(
            database_url,
            poolclass=self.get_pool_class(),
            connect_args=self.get_connect_args(),
            **engine_kwargs
        )
        event.listen(engine.sync_engine, "connect", _apply_pragmas)
        return engine

    def get_pool_class(self) -> type[NullPool]:
        """
        Get the connection pool class for SQLite.

        Returns:
            NullPool class
        """
        return NullPool

    def get_connect_args(self) -> dict[str, Any]:
        return {
            "check_same_thread": False
        }

    def get_engine_kwargs(self) -> dict[str, Any]:
        return {
            "echo": False  # Set to True only for SQL debugging in development
        }

    def build_upsert(
        self,
        model: type[SQLModel],
        values: dict[str, Any],
        key_column: str,
    ) -> Executable:
        """
        INSERT ... ON CONFLICT(key) DO UPDATE for SQLite.

        The whole row is replaced in one statement, so concurrent writers
        to the same key never observe a partial value.
        """
        statement = sqlite_insert(model).values(**values)
        return statement.on_conflict_do_update(
            index_elements=[key_column],
            set_={
                name: statement.excluded[name]
                for name in values
                if name != key_column
            },
        )

    def get_dialect_name(self) -> str:
        return "sqlite"


def get_database_adapter() -> DatabaseAdapter:
    """
    Factory function to get the database adapter.

    Returns SQLiteAdapter by default. To switch to PostgreSQL, create a
    PostgreSQLAdapter class and update this function.

    Returns:
        DatabaseAdapter instance
    """
    return SQLiteAdapter()
