"""Database Failures over HTTP — the real get_db path maps SQLAlchemy errors to 503.

Invariants:
    - No get_db override: requests go through DatabaseSessionManager.session()
    - A failing query is rolled back and surfaces as DATABASE_ERROR with status 503

Design Decisions:
    - Schema never created: every query fails with "no such table", an OperationalError
"""

import pytest
from httpx import ASGITransport, AsyncClient

import employee_api.infrastructure.database as db_module
from employee_api.main import app

BASE = "/api/v1/employees"


@pytest.fixture
async def client_without_schema(monkeypatch):
    app.dependency_overrides.clear()
    manager = db_module.DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    monkeypatch.setattr(db_module, "db_manager", manager)
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    await manager.dispose()


async def test_list_without_table_returns_503(client_without_schema):
    res = await client_without_schema.get(BASE)
    assert res.status_code == 503
    body = res.json()
    assert body["error"]["code"] == "DATABASE_ERROR"
    assert body["error"]["category"] == "database"
    assert body["message"] == (
        "Database execute failed: Connection or operational error"
    )


async def test_create_without_table_returns_503(client_without_schema):
    res = await client_without_schema.post(
        BASE, json={"firstName": "Ann", "lastName": "Lee", "emailId": "a@x.com"},
    )
    assert res.status_code == 503
    assert res.json()["error"]["code"] == "DATABASE_ERROR"


async def test_readiness_without_table_still_ready(client_without_schema):
    """SELECT 1 needs no table: readiness tracks connectivity, not schema."""
    res = await client_without_schema.get("/api/v1/health/ready")
    assert res.status_code == 200
