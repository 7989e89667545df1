"""
Link Store

Durable key-value persistence for link records.

- put: canonicalize the record and write it under the short id,
  overwriting any previous value (no uniqueness check)
- get: read the bytes under the short id and decode them; a miss and an
  unreadable value are reported as different errors

Implementations:
- SQLLinkStore: embedded SQLite through SQLAlchemy's async engine
- InMemoryLinkStore: dict-backed, for tests and tooling

Each operation touches exactly one key and needs no cross-key coordination,
so no locking is added on top of the engine's own.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker

from sharelink.core.exceptions import CorruptRecordError, LinkNotFoundError, StoreError
from sharelink.db.interface import DatabaseAdapter
from sharelink.db.models import LinkEntry, LinkRecord
from sharelink.db.session import create_engine, create_session_maker, init_models
from sharelink.db.sqlite_adapter import get_database_adapter
from sharelink.services.record_codec import canonicalize, decode_record

logger = logging.getLogger(__name__)


class LinkStore(ABC):
    """
    Contract shared by all link store backends.

    Backends implement the raw byte operations; record serialization lives
    here so every backend stores the same canonical bytes.
    """

    @abstractmethod
    async def get_bytes(self, key: str) -> Optional[bytes]:
        """Return the value stored under ``key``, or None if absent."""
        raise NotImplementedError

    @abstractmethod
    async def put_bytes(self, key: str, value: bytes) -> None:
        """Durably write ``value`` under ``key``, replacing any existing value."""
        raise NotImplementedError

    async def close(self) -> None:
        """Release backend resources."""

    async def put(self, short_id: str, record: LinkRecord) -> None:
        """
        Store ``record`` under ``short_id``.

        Raises:
            StoreError: if the write fails
        """
        await self.put_bytes(short_id, canonicalize(record))

    async def get(self, short_id: str) -> LinkRecord:
        """
        Load the record stored under ``short_id``.

        Raises:
            LinkNotFoundError: nothing stored under the id
            CorruptRecordError: stored bytes do not decode to a record
            StoreError: if the read fails
        """
        data = await self.get_bytes(short_id)
        if data is None:
            raise LinkNotFoundError(short_id)
        try:
            return decode_record(data, short_id=short_id)
        except CorruptRecordError as e:
            logger.error(f"Corrupt record under '{short_id}': {e.reason}")
            raise


class SQLLinkStore(LinkStore):
    """
    Link store backed by a SQL table of (key, value) rows.

    Use ``await SQLLinkStore.open(url)`` to create the engine and ensure the
    schema; call ``close()`` at shutdown to dispose of the engine.
    """

    def __init__(
        self,
        engine: AsyncEngine,
        session_maker: async_sessionmaker,
        adapter: Optional[DatabaseAdapter] = None,
    ):
        self.engine = engine
        self.session_maker = session_maker
        self.adapter = adapter or get_database_adapter()

    @classmethod
    async def open(
        cls,
        database_url: str,
        adapter: Optional[DatabaseAdapter] = None,
    ) -> "SQLLinkStore":
        """
        Open a store at ``database_url`` and create its table if missing.

        Raises:
            StoreError: if the database cannot be opened
        """
        adapter = adapter or get_database_adapter()
        try:
            engine = create_engine(database_url, adapter=adapter)
            await init_models(engine)
        except (SQLAlchemyError, OSError) as e:
            raise StoreError(f"Failed to open link store: {str(e)}", original_error=e) from e

        logger.info(f"Link store opened ({adapter.get_dialect_name()})")
        return cls(engine, create_session_maker(engine), adapter=adapter)

    async def get_bytes(self, key: str) -> Optional[bytes]:
        try:
            async with self.session_maker() as session:
                entry = await session.get(LinkEntry, key)
                return None if entry is None else bytes(entry.value)
        except (SQLAlchemyError, OSError) as e:
            logger.error(f"Failed to read '{key}': {str(e)}")
            raise StoreError(f"Failed to read '{key}': {str(e)}", original_error=e) from e

    async def put_bytes(self, key: str, value: bytes) -> None:
        statement = self.adapter.build_upsert(
            LinkEntry, {"key": key, "value": value}, key_column="key"
        )
        try:
            async with self.session_maker() as session:
                try:
                    await session.execute(statement)
                    await session.commit()
                except Exception:
                    await session.rollback()
                    raise
        except (SQLAlchemyError, OSError) as e:
            logger.error(f"Failed to write '{key}': {str(e)}")
            raise StoreError(f"Failed to write '{key}': {str(e)}", original_error=e) from e

    async def close(self) -> None:
        await self.engine.dispose()
        logger.info("Link store closed")


class InMemoryLinkStore(LinkStore):
    """Dict-backed link store with the same contract, for tests."""

    def __init__(self):
        self.data: dict[str, bytes] = {}

    async def get_bytes(self, key: str) -> Optional[bytes]:
        return self.data.get(key)

    async def put_bytes(self, key: str, value: bytes) -> None:
        self.data[key] = bytes(value)
