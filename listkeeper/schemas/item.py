"""Item Schemas: Pydantic models for the items and health endpoints.

Invariants:
    - ItemCreate.text may be absent or null here; emptiness is rejected by the
      route so the error body stays {"error": "Text is required"}
    - Unknown fields (including a client-supplied id) are ignored

Design Decisions:
    - from_attributes on ItemResponse: built straight from ORM rows
"""

from pydantic import BaseModel, ConfigDict


class ItemCreate(BaseModel):
    """Item creation payload."""
    text: str | None = None


class ItemResponse(BaseModel):
    """Public-facing item."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    text: str | None


class DeleteResponse(BaseModel):
    """Number of rows a delete actually removed."""
    deleted: int


class HealthResponse(BaseModel):
    status: str
    timestamp: str
