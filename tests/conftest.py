"""Root conftest: shared fixtures for store and API tests.

Invariants:
    - Every test gets a fresh temporary-file SQLite store
    - The API client gets that store injected through create_app(store=...)
    - httpx ASGITransport does not run the lifespan, so the injected store is
      the only one the app sees
"""

import os

import pytest
from httpx import ASGITransport, AsyncClient

# Ensure tests never open the real data file
os.environ.setdefault("DATABASE_PATH", ":memory:")
os.environ.setdefault("LOG_FORMAT", "text")

from listkeeper.config import Settings  # noqa: E402
from listkeeper.infrastructure.item_store import SqlItemStore  # noqa: E402
from listkeeper.main import create_app  # noqa: E402


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "items.sqlite")


@pytest.fixture
async def store(db_path):
    store = await SqlItemStore.open(db_path)
    yield store
    await store.close()


@pytest.fixture
def make_client():
    """Build an API client around any store, or none at all."""
    def _make(store) -> AsyncClient:
        app = create_app(settings=Settings(), store=store)
        return AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test",
        )
    return _make


@pytest.fixture
async def client(store, make_client):
    """API client bound to the per-test store."""
    async with make_client(store) as c:
        yield c
