"""Employee Routes — HTTP surface for the employee CRUD handlers under /api/v1/employees.

Invariants:
    - Request bodies validated by Pydantic before reaching the handler (400 on failure)
    - Path ids must be integers in the signed 64-bit range (400 otherwise), so the
      database never sees a value it cannot bind
    - A ResourceNotFoundError returned by the handler is rendered by error_response (404)
    - Responses serialized with camelCase field names

Design Decisions:
    - One EmployeeHandlers per request, built around the request's DB session
      (constructor injection via a FastAPI dependency)
    - POST returns 201 Created
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from employee_api.api.error_handlers import error_response
from employee_api.core.domain_types import EMPLOYEE_ID_MAX, EMPLOYEE_ID_MIN, EmployeeId
from employee_api.core.errors import ResourceNotFoundError
from employee_api.infrastructure.database import get_db
from employee_api.infrastructure.employee_repository import SqlAlchemyEmployeeRepository
from employee_api.schemas.employee import (
    DeleteResponse, EmployeePayload, EmployeeResponse,
)
from employee_api.services.employee_handlers import EmployeeHandlers

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/employees", tags=["employees"])

EmployeeIdPath = Annotated[int, Path(ge=EMPLOYEE_ID_MIN, le=EMPLOYEE_ID_MAX)]

_NOT_FOUND_DOC = {
    status.HTTP_404_NOT_FOUND: {"description": "Employee not exist with id :<id>"},
}


def get_employee_handlers(
    db: AsyncSession = Depends(get_db),
) -> EmployeeHandlers:
    """FastAPI dependency: handlers wired to a repository over the request session."""
    return EmployeeHandlers(SqlAlchemyEmployeeRepository(db))


@router.get("", response_model=list[EmployeeResponse])
async def list_employees(
    handlers: EmployeeHandlers = Depends(get_employee_handlers),
):
    """List all employees ordered by id."""
    return await handlers.list_employees()


@router.post(
    "", response_model=EmployeeResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_employee(
    body: EmployeePayload,
    handlers: EmployeeHandlers = Depends(get_employee_handlers),
):
    """Create an employee. Any id in the body is ignored."""
    return await handlers.create_employee(body)


@router.get(
    "/{employee_id}", response_model=EmployeeResponse, responses=_NOT_FOUND_DOC,
)
async def get_employee(
    employee_id: EmployeeIdPath,
    request: Request,
    handlers: EmployeeHandlers = Depends(get_employee_handlers),
):
    """Get one employee by id."""
    result = await handlers.get_employee(EmployeeId(employee_id))
    if isinstance(result, ResourceNotFoundError):
        return error_response(result, request)
    return result


@router.put(
    "/{employee_id}", response_model=EmployeeResponse, responses=_NOT_FOUND_DOC,
)
async def update_employee(
    employee_id: EmployeeIdPath,
    body: EmployeePayload,
    request: Request,
    handlers: EmployeeHandlers = Depends(get_employee_handlers),
):
    """Overwrite firstName, lastName and emailId of an employee."""
    result = await handlers.update_employee(EmployeeId(employee_id), body)
    if isinstance(result, ResourceNotFoundError):
        return error_response(result, request)
    return result


@router.delete(
    "/{employee_id}", response_model=DeleteResponse, responses=_NOT_FOUND_DOC,
)
async def delete_employee(
    employee_id: EmployeeIdPath,
    request: Request,
    handlers: EmployeeHandlers = Depends(get_employee_handlers),
):
    """Delete an employee."""
    result = await handlers.delete_employee(EmployeeId(employee_id))
    if isinstance(result, ResourceNotFoundError):
        return error_response(result, request)
    return result
