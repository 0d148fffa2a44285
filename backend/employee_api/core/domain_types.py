"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - EmployeeId wraps int: server-assigned, immutable once set
    - EMPLOYEE_MUTABLE_FIELDS lists the only attributes a client may overwrite
    - Ids outside the signed 64-bit range can never exist in the table

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
"""

from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

EmployeeId = NewType("EmployeeId", int)


# ─── Mutable Fields ──────────────────────────────────────────────

EMPLOYEE_MUTABLE_FIELDS: tuple[str, ...] = ("first_name", "last_name", "email_id")


# ─── Bounds ──────────────────────────────────────────────────────

# Signed 64-bit, the range of the BIGINT id column
EMPLOYEE_ID_MIN = -(2**63)
EMPLOYEE_ID_MAX = 2**63 - 1
