"""
Employee Directory Backend: Pydantic Request/Response Schemas
==============================================================

What:  Pydantic models defining the JSON contract of the API.
How:   FastAPI validates request bodies against the request models and
       serializes responses through the response models (by alias, so the
       wire format is camelCase: departmentId, createdAt, ...).

Request models deliberately make every field optional: required-field
checks are business rules raised as ValidationError (400) by the service,
not schema errors (422).
"""

from datetime import datetime
from enum import Enum
from typing import ClassVar, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for every schema: camelCase aliases, snake_case attributes."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class DepartmentRead(CamelModel):
    id: int
    name: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class RoleRead(CamelModel):
    id: int
    title: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class EmployeeDetails(CamelModel):
    """
    What:  An employee merged with its resolved department and role.
    Who:   Returned by every endpoint that returns employees.

    department/role are null when the employee has no resolvable link.
    """
    id: int = Field(description="Employee id")
    name: Optional[str] = Field(default=None, description="Full name")
    email: Optional[str] = Field(default=None, description="Email address")
    created_at: Optional[datetime] = Field(default=None, description="Row creation time (UTC)")
    updated_at: Optional[datetime] = Field(default=None, description="Last update time (UTC)")
    department: Optional[DepartmentRead] = Field(
        default=None, description="Resolved department, null when none"
    )
    role: Optional[RoleRead] = Field(default=None, description="Resolved role, null when none")


class EmployeeListResponse(CamelModel):
    """Wrapper returned by the listing endpoints: {"employees": [...]}."""
    employees: List[EmployeeDetails]


class EmployeeDetailResponse(CamelModel):
    """Wrapper returned by GET /employees/details/{id}: {"employee": {...}}."""
    employee: EmployeeDetails


class MessageResponse(CamelModel):
    message: str


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class EmployeeCreate(CamelModel):
    """
    Body of POST /employees/new.

    name and email are checked for presence by the service.
    """
    name: Optional[str] = None
    email: Optional[str] = None
    department_id: Optional[int] = None
    role_id: Optional[int] = None


class EmployeeUpdate(CamelModel):
    """
    Body of POST /employees/update/{id}.

    Only scalar fields that are present in the body are overwritten
    (model_fields_set). department_id/role_id are used for the join-row
    rewrite; an absent value is stored as NULL when a rewrite happens.
    """
    name: Optional[str] = None
    email: Optional[str] = None
    department_id: Optional[int] = None
    role_id: Optional[int] = None

    SCALAR_FIELDS: ClassVar[Tuple[str, ...]] = ("name", "email")

    def scalar_overrides(self) -> dict:
        """Scalar columns explicitly supplied in the request body."""
        return {
            field: getattr(self, field)
            for field in self.SCALAR_FIELDS
            if field in self.model_fields_set
        }


class EmployeeDeleteRequest(CamelModel):
    """Body of POST /employees/delete."""
    id: int


class SortOrder(str, Enum):
    """Direction accepted by GET /employees/sort-by-name."""
    ASC = "ASC"
    DESC = "DESC"


# ══════════════════════════════════════════════════════════════════════════
# Error / Health Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    Error format shared by all exception handlers.

    Example:
        {
            "error": "validation_error",
            "message": "Name and email are required",
            "details": {"field": "email"},
            "request_id": "1a2b3c4d"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
