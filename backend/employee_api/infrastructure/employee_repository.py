"""Employee Repository — SQLAlchemy implementation of the EmployeeRepository protocol.

Invariants:
    - Only four operations: find_all, save, find_by_id, delete
    - save() and delete() commit; each call mutates storage exactly once
    - find_all() returns rows ordered by id (insertion order for autoincrement keys)

Design Decisions:
    - Wraps the request-scoped AsyncSession: transaction boundaries follow the request
    - save() is insert-or-update: session.add() on a persistent instance is a no-op,
      on a transient one it schedules an INSERT and the database assigns id
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from employee_api.core.domain_types import EmployeeId
from employee_api.models.employee import Employee


class SqlAlchemyEmployeeRepository:
    """Employee persistence over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_all(self) -> Sequence[Employee]:
        result = await self.db.execute(select(Employee).order_by(Employee.id))
        return result.scalars().all()

    async def save(self, employee: Employee) -> Employee:
        self.db.add(employee)
        await self.db.commit()
        await self.db.refresh(employee)
        return employee

    async def find_by_id(self, employee_id: EmployeeId) -> Employee | None:
        return await self.db.get(Employee, employee_id)

    async def delete(self, employee: Employee) -> None:
        await self.db.delete(employee)
        await self.db.commit()
