"""Boundary Protocols: the contract between the API layer and the item store.

Invariants:
    - Routes depend on ItemStore, never on SQLAlchemy
    - insert() returns the id the store assigned
    - delete_by_id() returns the number of rows removed (0 or 1)

Design Decisions:
    - Protocol over ABC: structural subtyping, so tests can hand the app any
      object with these methods
"""

from typing import Protocol


class ItemLike(Protocol):
    """Structural contract for items returned by a store.

    SqlItemStore returns Item rows; any object with id and text satisfies it.
    """
    id: int
    text: str | None


class ItemStore(Protocol):
    """Contract for item persistence, implemented by infrastructure."""
    async def list(self) -> list[ItemLike]: ...
    async def insert(self, text: str) -> int: ...
    async def delete_by_id(self, item_id: int) -> int: ...
