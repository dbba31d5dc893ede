"""SQL Item Store: the ItemStore implementation over SQLAlchemy + aiosqlite.

Invariants:
    - init() is idempotent: CREATE TABLE only when the table is missing
    - insert/delete_by_id are serialized by one lock per store handle, so
      id assignment and delete counts are exact under concurrent requests
    - Each call commits before returning; a later read sees the write
    - Store failures surface as DatabaseError, never as SQLAlchemy exceptions
"""

import asyncio
import logging
from pathlib import Path

from sqlalchemy import delete, select

from listkeeper.core.errors import DatabaseError
from listkeeper.infrastructure.database import DatabaseSessionManager, sqlite_url
from listkeeper.models.item import Item

logger = logging.getLogger(__name__)


class SqlItemStore:
    """Durable item collection backed by a single SQLite table."""

    def __init__(self, db: DatabaseSessionManager):
        self._db = db
        self._write_lock = asyncio.Lock()

    @classmethod
    async def open(cls, database_path: str) -> "SqlItemStore":
        """Open the data file at database_path and make sure the table exists."""
        if database_path != ":memory:":
            try:
                Path(database_path).parent.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise DatabaseError(str(e), "open") from e
        store = cls(DatabaseSessionManager(sqlite_url(database_path)))
        try:
            await store.init()
        except DatabaseError:
            await store.close()
            raise
        return store

    async def init(self) -> None:
        await self._db.create_all()

    async def list(self) -> list[Item]:
        """All items in id order."""
        async with self._db.session() as session:
            result = await session.execute(select(Item).order_by(Item.id))
            return list(result.scalars().all())

    async def insert(self, text: str) -> int:
        """Persist a new item and return the id SQLite assigned to it."""
        async with self._write_lock:
            async with self._db.session() as session:
                item = Item(text=text)
                session.add(item)
                await session.commit()
                logger.debug("Item inserted", extra={"item_id": item.id})
                return item.id

    async def delete_by_id(self, item_id: int) -> int:
        """Remove the item with item_id. Returns rows removed (0 or 1)."""
        async with self._write_lock:
            async with self._db.session() as session:
                result = await session.execute(
                    delete(Item).where(Item.id == item_id),
                )
                await session.commit()
                return result.rowcount

    async def close(self) -> None:
        await self._db.close()
