"""Database Session Manager — rollback mapping and health check."""

import pytest
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError

from employee_api.core.errors import DatabaseError
from employee_api.infrastructure.database import DatabaseSessionManager


async def test_health_check_true_for_reachable_database():
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    assert await manager.health_check() is True
    await manager.dispose()


async def test_integrity_error_mapped_to_database_error():
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    with pytest.raises(DatabaseError) as exc_info:
        async with manager.session() as db:
            await db.execute(text("SELECT 1"))
            raise IntegrityError("INSERT", {}, Exception("duplicate"))
    assert exc_info.value.operation == "commit"
    assert exc_info.value.http_status == 503
    await manager.dispose()
