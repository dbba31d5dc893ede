"""Health Probe: liveness endpoint for container orchestration.

Invariants:
    - GET /health always returns 200 while the process is up
    - Never touches the store
    - timestamp is UTC ISO-8601 with fixed millisecond width, so later
      timestamps also compare greater as strings
"""

from datetime import datetime, timezone

from fastapi import APIRouter, status

from listkeeper.schemas.item import HealthResponse

router = APIRouter(tags=["health"])


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds")


@router.get("/health", response_model=HealthResponse, status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe."""
    return HealthResponse(status="ok", timestamp=utc_timestamp())
