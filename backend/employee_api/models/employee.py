"""Employee ORM — persists employee records.

Invariants:
    - id is an autoincrement integer primary key, assigned by the database on insert
    - first_name, last_name, email_id are non-nullable strings
    - id never changes after insert; updates touch only the three name/email columns

Design Decisions:
    - BigInteger with an Integer variant on SQLite: SQLite only autoincrements
      INTEGER PRIMARY KEY columns, and tests run on aiosqlite
    - snake_case columns; the camelCase JSON names live in schemas/employee.py
"""

from sqlalchemy import BigInteger, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from employee_api.db.base import Base


class Employee(Base):
    """Employee record."""
    __tablename__ = "employees"

    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True, autoincrement=True,
    )
    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)
    email_id: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"Employee(id={self.id!r}, email_id={self.email_id!r})"
