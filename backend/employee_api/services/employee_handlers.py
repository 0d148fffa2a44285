"""Employee Handlers — list, create, get, update, delete over an injected repository.

Invariants:
    - Stateless: the only attribute is the repository passed to the constructor
    - Lookups by id return the Employee or a ResourceNotFoundError value (never raised)
    - update overwrites exactly first_name, last_name, email_id; id is preserved
    - create always inserts: any client id was already dropped by the payload schema
    - Persistence errors propagate unchanged (no retries)

Design Decisions:
    - Constructor injection over a module-level repository: routes build one handler per
      request around the request's session, tests pass an in-memory fake
    - Not-found as a returned value: the router decides the status code, the handler
      stays free of HTTP concerns
"""

import logging
from typing import Sequence

from employee_api.core.domain_types import EMPLOYEE_MUTABLE_FIELDS, EmployeeId
from employee_api.core.errors import ResourceNotFoundError
from employee_api.core.repository_protocols import EmployeeLike, EmployeeRepository
from employee_api.models.employee import Employee
from employee_api.schemas.employee import EmployeePayload

logger = logging.getLogger(__name__)

EMPLOYEE_RESOURCE = "Employee"


class EmployeeHandlers:
    """CRUD operations on employee records."""

    def __init__(self, repository: EmployeeRepository):
        self.repository = repository

    async def list_employees(self) -> Sequence[EmployeeLike]:
        return await self.repository.find_all()

    async def create_employee(self, payload: EmployeePayload) -> EmployeeLike:
        employee = Employee(**payload.model_dump(include=set(EMPLOYEE_MUTABLE_FIELDS)))
        saved = await self.repository.save(employee)
        logger.info("Employee created", extra={"employee_id": saved.id})
        return saved

    async def get_employee(
        self, employee_id: EmployeeId,
    ) -> EmployeeLike | ResourceNotFoundError:
        return await self._find_or_not_found(employee_id)

    async def update_employee(
        self, employee_id: EmployeeId, payload: EmployeePayload,
    ) -> EmployeeLike | ResourceNotFoundError:
        employee = await self._find_or_not_found(employee_id)
        if isinstance(employee, ResourceNotFoundError):
            return employee
        for name in EMPLOYEE_MUTABLE_FIELDS:
            setattr(employee, name, getattr(payload, name))
        updated = await self.repository.save(employee)
        logger.info("Employee updated", extra={"employee_id": updated.id})
        return updated

    async def delete_employee(
        self, employee_id: EmployeeId,
    ) -> dict[str, bool] | ResourceNotFoundError:
        employee = await self._find_or_not_found(employee_id)
        if isinstance(employee, ResourceNotFoundError):
            return employee
        await self.repository.delete(employee)
        logger.info("Employee deleted", extra={"employee_id": employee_id})
        return {"deleted": True}

    async def _find_or_not_found(
        self, employee_id: EmployeeId,
    ) -> EmployeeLike | ResourceNotFoundError:
        employee = await self.repository.find_by_id(employee_id)
        if employee is None:
            logger.warning(
                f"Employee {employee_id} not found",
                extra={"employee_id": employee_id},
            )
            return ResourceNotFoundError(EMPLOYEE_RESOURCE, employee_id)
        return employee
