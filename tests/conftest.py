"""
Shared fixtures: in-memory and SQLite-backed link stores, and an HTTP client
whose link store dependency is overridden.
"""

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from sharelink.core.store_manager import get_link_store
from sharelink.main import app
from sharelink.services.link_service import LinkService
from sharelink.services.link_store import InMemoryLinkStore, SQLLinkStore

SAMPLE_PAYLOAD = {
    "title": "Tag: Item for 5 SWT",
    "description": "Reply for 5 SWT on Tag",
    "redirectUrl": "https://swarm.city/detail/0xABC/0xDEF",
}


@pytest.fixture
def sample_payload():
    return dict(SAMPLE_PAYLOAD)


@pytest.fixture
def memory_store():
    return InMemoryLinkStore()


@pytest.fixture
def sqlite_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'db' / 'links.sqlite3'}"


@pytest_asyncio.fixture
async def sqlite_store(sqlite_url):
    store = await SQLLinkStore.open(sqlite_url)
    yield store
    await store.close()


@pytest.fixture
def link_service(memory_store):
    return LinkService(memory_store)


@pytest.fixture
def client(memory_store):
    app.dependency_overrides[get_link_store] = lambda: memory_store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
