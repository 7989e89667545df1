"""
Tests for the link store contract, run against both the SQLite and the
in-memory backends.
"""

import asyncio

import pytest
import pytest_asyncio
from sqlalchemy.exc import OperationalError

from sharelink.core.exceptions import CorruptRecordError, LinkNotFoundError, StoreError
from sharelink.db.models import LinkRecord
from sharelink.services.link_store import InMemoryLinkStore, SQLLinkStore
from sharelink.services.record_codec import canonicalize

RECORD = LinkRecord(
    title="Tag: Item for 5 SWT",
    description="Reply for 5 SWT on Tag",
    redirectUrl="https://swarm.city/detail/0xABC/0xDEF",
)


@pytest_asyncio.fixture(params=["memory", "sqlite"])
async def store(request, sqlite_url):
    if request.param == "memory":
        yield InMemoryLinkStore()
        return
    sql_store = await SQLLinkStore.open(sqlite_url)
    yield sql_store
    await sql_store.close()


class TestLinkStoreContract:

    @pytest.mark.asyncio
    async def test_put_then_get_round_trip(self, store):
        await store.put("abc", RECORD)
        assert await store.get("abc") == RECORD

    @pytest.mark.asyncio
    async def test_stores_canonical_bytes(self, store):
        await store.put("abc", RECORD)
        assert await store.get_bytes("abc") == canonicalize(RECORD)

    @pytest.mark.asyncio
    async def test_get_missing_is_not_found(self, store):
        with pytest.raises(LinkNotFoundError) as excinfo:
            await store.get("nonexistent-id")
        assert excinfo.value.short_id == "nonexistent-id"

    @pytest.mark.asyncio
    async def test_get_bytes_missing_is_none(self, store):
        assert await store.get_bytes("missing") is None

    @pytest.mark.asyncio
    async def test_unparseable_bytes_are_corrupt(self, store):
        await store.put_bytes("bad1", b"\x00not a record")
        with pytest.raises(CorruptRecordError) as excinfo:
            await store.get("bad1")
        assert not isinstance(excinfo.value, LinkNotFoundError)

    @pytest.mark.asyncio
    async def test_put_overwrites(self, store):
        other = LinkRecord(title="other", description="other", redirectUrl="https://other.example")
        await store.put("abc", RECORD)
        await store.put("abc", other)
        assert await store.get("abc") == other

    @pytest.mark.asyncio
    async def test_put_identical_twice(self, store):
        await store.put("abc", RECORD)
        await store.put("abc", RECORD)
        assert await store.get("abc") == RECORD

    @pytest.mark.asyncio
    async def test_concurrent_writes_to_different_keys(self, store):
        records = {
            f"key{i}": LinkRecord(title=f"t{i}", description=f"d{i}", redirectUrl=f"https://x/{i}")
            for i in range(10)
        }
        await asyncio.gather(*(store.put(key, record) for key, record in records.items()))
        results = await asyncio.gather(*(store.get(key) for key in records))
        assert list(results) == list(records.values())


class TestSQLLinkStore:

    @pytest.mark.asyncio
    async def test_creates_database_directory(self, tmp_path):
        db_file = tmp_path / "nested" / "dir" / "links.sqlite3"
        store = await SQLLinkStore.open(f"sqlite+aiosqlite:///{db_file}")
        try:
            await store.put("abc", RECORD)
        finally:
            await store.close()
        assert db_file.exists()

    @pytest.mark.asyncio
    async def test_records_survive_reopen(self, sqlite_url):
        store = await SQLLinkStore.open(sqlite_url)
        await store.put("abc", RECORD)
        await store.close()

        reopened = await SQLLinkStore.open(sqlite_url)
        try:
            assert await reopened.get("abc") == RECORD
        finally:
            await reopened.close()

    @pytest.mark.asyncio
    async def test_engine_failure_is_store_error(self, sqlite_store, monkeypatch):
        def failing_session_maker():
            raise OperationalError("SELECT 1", {}, Exception("disk I/O error"))

        monkeypatch.setattr(sqlite_store, "session_maker", failing_session_maker)

        with pytest.raises(StoreError):
            await sqlite_store.get("abc")
        with pytest.raises(StoreError):
            await sqlite_store.put("abc", RECORD)

    @pytest.mark.asyncio
    async def test_open_failure_is_store_error(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        with pytest.raises(StoreError):
            await SQLLinkStore.open(f"sqlite+aiosqlite:///{blocker / 'links.sqlite3'}")


class TestInMemoryLinkStore:

    @pytest.mark.asyncio
    async def test_close_is_noop(self):
        store = InMemoryLinkStore()
        await store.put("abc", RECORD)
        await store.close()
        assert await store.get("abc") == RECORD
