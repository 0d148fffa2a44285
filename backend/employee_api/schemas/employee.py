"""Employee Schemas — Pydantic models with camelCase JSON at the API boundary.

Invariants:
    - JSON field names are camelCase (firstName, lastName, emailId); attributes are snake_case
    - EmployeePayload has no id: a client-supplied id is dropped with the other unknown fields
    - firstName, lastName, emailId are required strings of at most 255 characters

Design Decisions:
    - alias_generator=to_camel + populate_by_name: one set of names in Python, the
      other on the wire, FastAPI serializes response_model by alias
    - Same payload schema for create and update: both accept the three mutable fields
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore",
    )


class EmployeePayload(_CamelModel):
    """Create/update body: the client-writable employee fields."""
    first_name: str = Field(max_length=255)
    last_name: str = Field(max_length=255)
    email_id: str = Field(max_length=255)


class EmployeeResponse(_CamelModel):
    """Employee as returned to clients, id included."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    first_name: str
    last_name: str
    email_id: str


class DeleteResponse(BaseModel):
    """Confirmation body for DELETE."""
    deleted: bool = True
