"""Item ORM: the single persisted entity.

Invariants:
    - id is an integer primary key assigned by SQLite
    - ids are never reused after deletion (sqlite_autoincrement)
    - text is nullable at schema level; the API rejects empty text on write
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from listkeeper.db.base import Base


class Item(Base):
    """A short text item in the list."""
    __tablename__ = "items"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    text: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"Item(id={self.id!r}, text={self.text!r})"
