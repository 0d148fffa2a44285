"""Handler test fixtures — in-memory repository passed through the constructor.

Invariants:
    - FakeEmployeeRepository satisfies EmployeeRepository structurally
    - Ids assigned sequentially from 1, never reused
    - Every mutating call recorded in `calls` so tests can assert "exactly once"
"""

import pytest

from employee_api.services.employee_handlers import EmployeeHandlers


class FakeEmployeeRepository:
    def __init__(self):
        self.rows: dict[int, object] = {}
        self.calls: list[tuple[str, int | None]] = []
        self._next_id = 1

    async def find_all(self):
        return [self.rows[k] for k in sorted(self.rows)]

    async def save(self, employee):
        if employee.id is None:
            employee.id = self._next_id
            self._next_id += 1
        self.rows[employee.id] = employee
        self.calls.append(("save", employee.id))
        return employee

    async def find_by_id(self, employee_id):
        return self.rows.get(employee_id)

    async def delete(self, employee):
        del self.rows[employee.id]
        self.calls.append(("delete", employee.id))


@pytest.fixture
def repository():
    return FakeEmployeeRepository()


@pytest.fixture
def handlers(repository):
    return EmployeeHandlers(repository)
