"""Database Session Manager: async SQLite engine with automatic rollback.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - All SQLAlchemy exceptions mapped to DatabaseError carrying the driver message
    - Every connection runs in WAL mode so readers never wait on the writer

Design Decisions:
    - One manager per store handle; the store owns its lifetime
    - expire_on_commit=False: rows stay readable after commit in async context
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import event
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

from listkeeper.core.errors import DatabaseError
from listkeeper.db.base import Base

logger = logging.getLogger(__name__)


def sqlite_url(database_path: str) -> str:
    return f"sqlite+aiosqlite:///{database_path}"


def _driver_message(exc: SQLAlchemyError) -> str:
    """Underlying driver message, without SQLAlchemy's statement dump."""
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


def _set_sqlite_pragmas(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.execute("PRAGMA synchronous=NORMAL")
    cursor.close()


class DatabaseSessionManager:
    """Manages async database sessions with rollback and error mapping."""

    def __init__(self, database_url: str):
        self.engine = create_async_engine(database_url)
        event.listen(self.engine.sync_engine, "connect", _set_sqlite_pragmas)
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except IntegrityError as e:
            await session.rollback()
            logger.error(f"DB integrity error: {e}")
            raise DatabaseError(_driver_message(e), "commit") from e
        except OperationalError as e:
            await session.rollback()
            logger.error(f"DB operational error: {e}")
            raise DatabaseError(_driver_message(e), "execute") from e
        except DBAPIError as e:
            await session.rollback()
            logger.error(f"DB driver error: {e}")
            raise DatabaseError(_driver_message(e), "query") from e
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"SQLAlchemy error: {e}")
            raise DatabaseError(_driver_message(e), "unknown") from e
        finally:
            await session.close()

    async def create_all(self) -> None:
        """Create missing tables. Existing tables are left untouched."""
        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except SQLAlchemyError as e:
            logger.error(f"DB schema init failed: {e}")
            raise DatabaseError(_driver_message(e), "init") from e

    async def close(self) -> None:
        """Dispose the pool, closing every connection to the data file."""
        await self.engine.dispose()
