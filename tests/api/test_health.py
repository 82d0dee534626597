"""Health & degraded mode — readiness flag gates store-backed routes.

Invariants:
    - Liveness is always 200
    - Readiness re-checks the store and refreshes the flag
    - With the flag down, well-formed resource requests answer 503 STORE_UNAVAILABLE
    - Malformed requests are still 400 while the flag is down
"""

from uuid import uuid4

from httpx import ASGITransport, AsyncClient

import taskapi.infrastructure.database as db_module
from taskapi.main import app


async def test_liveness(client):
    res = await client.get("/api/health")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_ok_and_sets_flag(client, fake_manager):
    fake_manager.ready = False

    res = await client.get("/api/health/ready")

    assert res.status_code == 200
    assert res.json()["status"] == "ready"
    assert fake_manager.ready is True


async def test_readiness_without_manager_is_503(monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        res = await c.get("/api/health/ready")

    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"


async def test_store_routes_answer_503_when_not_ready(fake_manager, monkeypatch):
    """No dependency override: the real get_db checks the readiness flag."""
    fake_manager.ready = False
    monkeypatch.setattr(db_module, "db_manager", fake_manager)

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        res = await c.post("/api/users", json={"username": "erin"})

    assert res.status_code == 503
    body = res.json()
    assert body["message"] == "failure"
    assert body["payload"]["code"] == "STORE_UNAVAILABLE"


async def test_store_routes_work_through_real_get_db(fake_manager, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", fake_manager)

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        res = await c.post("/api/users", json={"username": "frank"})

    assert res.status_code == 200
    assert res.json()["payload"]["username"] == "frank"


async def test_malformed_requests_get_400_while_store_is_down(fake_manager, monkeypatch):
    """Validation runs before the readiness gate."""
    fake_manager.ready = False
    monkeypatch.setattr(db_module, "db_manager", fake_manager)

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        bad_user = await c.post("/api/users", json={})
        bad_task = await c.post("/api/tasks", json={"title": "x", "user": "nope"})
        bad_lookup = await c.get("/api/tasks/user/12345")

    for res in (bad_user, bad_task, bad_lookup):
        assert res.status_code == 400
        assert res.json()["message"] == "validation failure"


async def test_wellformed_lookup_gets_503_while_store_is_down(fake_manager, monkeypatch):
    fake_manager.ready = False
    monkeypatch.setattr(db_module, "db_manager", fake_manager)

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        res = await c.get(f"/api/tasks/user/{uuid4()}")

    assert res.status_code == 503
    assert res.json()["payload"]["code"] == "STORE_UNAVAILABLE"
