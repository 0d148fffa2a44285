"""Route test fixtures — FastAPI test client over the test database.

Invariants:
    - get_db dependency overridden to use the test DB session
    - db_manager patched so the readiness probe sees the test engine
"""

import pytest
from httpx import ASGITransport, AsyncClient

from employee_api.infrastructure.database import get_db, DatabaseSessionManager
from employee_api.models.employee import Employee
import employee_api.infrastructure.database as db_module
from employee_api.main import app


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def seed_employee(test_db):
    """Insert one employee directly into the test DB."""
    employee = Employee(first_name="Ann", last_name="Lee", email_id="a@x.com")
    test_db.add(employee)
    await test_db.commit()
    await test_db.refresh(employee)
    return employee
