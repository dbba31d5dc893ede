"""Error Handling: verifies every failure becomes a JSON {"error": ...} body.

Invariants:
    - No store → 500 {"error": "Database not available"} on item routes
    - A failing store call → 500 with the driver's message, server keeps serving
    - Unknown routes and wrong methods answer JSON, not the framework default
    - Malformed JSON → 400 with field details
"""

from sqlalchemy import text

from listkeeper.core.errors import DatabaseError


class _BrokenStore:
    """Store whose every call fails like a dead disk."""

    async def list(self):
        raise DatabaseError("disk I/O error", "execute")

    async def insert(self, text):
        raise DatabaseError("disk I/O error", "execute")

    async def delete_by_id(self, item_id):
        raise DatabaseError("disk I/O error", "execute")


async def test_item_routes_without_store_return_500(make_client):
    async with make_client(None) as c:
        listed = await c.get("/api/items")
        created = await c.post("/api/items", json={"text": "x"})
        deleted = await c.delete("/api/items/1")

    for res in (listed, created, deleted):
        assert res.status_code == 500
        assert res.json() == {"error": "Database not available"}


async def test_failing_store_returns_underlying_message(make_client):
    async with make_client(_BrokenStore()) as c:
        listed = await c.get("/api/items")
        created = await c.post("/api/items", json={"text": "x"})
        deleted = await c.delete("/api/items/1")
        health = await c.get("/health")

    for res in (listed, created, deleted):
        assert res.status_code == 500
        assert res.json() == {"error": "disk I/O error"}
    assert health.status_code == 200


async def test_validation_checked_before_store_call(make_client):
    async with make_client(_BrokenStore()) as c:
        res = await c.post("/api/items", json={"text": ""})

    assert res.status_code == 400
    assert res.json() == {"error": "Text is required"}


async def test_real_store_failure_then_recovery(client, store):
    async with store._db.engine.begin() as conn:
        await conn.execute(text("DROP TABLE items"))

    failed = await client.get("/api/items")
    assert failed.status_code == 500
    assert "no such table" in failed.json()["error"]

    await store.init()
    recovered = await client.post("/api/items", json={"text": "back"})
    assert recovered.status_code == 200


async def test_unknown_route_is_json_404(client):
    res = await client.get("/api/nope")

    assert res.status_code == 404
    assert res.json() == {"error": "Not Found"}


async def test_wrong_method_is_json_405(client):
    res = await client.put("/api/items", json={"text": "x"})

    assert res.status_code == 405
    assert "error" in res.json()


async def test_malformed_json_is_400(client):
    res = await client.post(
        "/api/items",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )

    assert res.status_code == 400
    body = res.json()
    assert body["error"] == "Invalid request data"
    assert body["details"]
