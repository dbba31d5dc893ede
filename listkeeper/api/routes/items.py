"""Items: list, create and delete items in the shared store.

Invariants:
    - The store is reached only through get_item_store (app.state.item_store)
    - Create never writes when text is missing or empty
    - The id in a create response is the one the store assigned
    - Deleting an absent id is not an error: {"deleted": 0}
    - Store errors propagate as ListKeeperError to the global handlers

Design Decisions:
    - Delete takes the raw path segment: a value that is not a plain decimal
      integer in SQLite INTEGER range matches no row, so it answers
      {"deleted": 0} without a store call
"""

import logging
import re

from fastapi import APIRouter, Body, Depends, Request

from listkeeper.core.errors import ItemValidationError, StoreUnavailableError
from listkeeper.core.repository_protocols import ItemStore
from listkeeper.schemas.item import DeleteResponse, ItemCreate, ItemResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/items", tags=["items"])

_ITEM_ID_PATTERN = re.compile(r"-?[0-9]+")
SQLITE_INTEGER_MIN = -(2**63)
SQLITE_INTEGER_MAX = 2**63 - 1


def get_item_store(request: Request) -> ItemStore:
    """FastAPI dependency for the process-wide store handle."""
    store = getattr(request.app.state, "item_store", None)
    if store is None:
        raise StoreUnavailableError()
    return store


def _parse_item_id(raw: str) -> int | None:
    """Decimal ASCII ids within SQLite INTEGER range; anything else is None."""
    if not _ITEM_ID_PATTERN.fullmatch(raw):
        return None
    value = int(raw)
    if not SQLITE_INTEGER_MIN <= value <= SQLITE_INTEGER_MAX:
        return None
    return value


@router.get("", response_model=list[ItemResponse])
async def list_items(store: ItemStore = Depends(get_item_store)):
    """List every item."""
    items = await store.list()
    return [ItemResponse.model_validate(item) for item in items]


@router.post("", response_model=ItemResponse)
async def create_item(
    body: ItemCreate | None = Body(None),
    store: ItemStore = Depends(get_item_store),
):
    """Create an item; the store assigns its id."""
    if body is None or not body.text:
        raise ItemValidationError("Text is required", "text")
    item_id = await store.insert(body.text)
    logger.info("Item created", extra={"item_id": item_id})
    return ItemResponse(id=item_id, text=body.text)


@router.delete("/{item_id}", response_model=DeleteResponse)
async def delete_item(
    item_id: str, store: ItemStore = Depends(get_item_store),
):
    """Delete an item by id and report how many rows were removed."""
    parsed = _parse_item_id(item_id)
    if parsed is None:
        return DeleteResponse(deleted=0)
    deleted = await store.delete_by_id(parsed)
    logger.info(f"Item delete removed {deleted} row(s)", extra={"item_id": parsed})
    return DeleteResponse(deleted=deleted)
