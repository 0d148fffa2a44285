"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations passed to handlers through their constructor

Design Decisions:
    - Protocol over ABC: structural subtyping, in-memory fakes in tests need no base class
    - EmployeeLike instead of the ORM class: repositories accept and return any object
      with these attributes, so test fakes can store transient records; handlers still
      construct new records from the ORM model
"""

from typing import Protocol, Sequence

from employee_api.core.domain_types import EmployeeId


class EmployeeLike(Protocol):
    """Structural contract for Employee records passed through the handler."""
    id: int | None
    first_name: str
    last_name: str
    email_id: str


class EmployeeRepository(Protocol):
    """Contract for employee persistence — implemented by shell."""
    async def find_all(self) -> Sequence[EmployeeLike]: ...
    async def save(self, employee: EmployeeLike) -> EmployeeLike: ...
    async def find_by_id(self, employee_id: EmployeeId) -> EmployeeLike | None: ...
    async def delete(self, employee: EmployeeLike) -> None: ...
