"""Session models for authenticated platform operators.

These mirror the records the identity backend returns at login and that
are persisted for session restore. Field aliases match the wire names
(`_id`, `isActive`, `sessionId`) so persisted payloads validate as-is.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class RoleAssignment(BaseModel):
    """An RBAC role attached to a platform operator."""

    model_config = ConfigDict(populate_by_name=True)

    id: str | None = Field(None, alias="_id")
    name: str = ""
    slug: str = ""
    description: str | None = None
    color: str | None = None
    permissions: dict[str, Any] | None = None


class PlatformUser(BaseModel):
    """Authenticated SuperAdmin portal operator."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
    name: str | None = None
    email: EmailStr | None = None

    # Legacy single-role field, used when no RBAC roles are attached
    role: str | None = None
    roles: list[RoleAssignment] = Field(default_factory=list)

    # Module -> action -> grant. Values are kept raw: only a literal True
    # grants, so coercing "true" or 1 here would widen access.
    permissions: dict[str, Any] = Field(default_factory=dict)

    is_active: bool = Field(True, alias="isActive")
    designation: str | None = None

    @field_validator("email", mode="before")
    @classmethod
    def blank_email_is_none(cls, value: Any) -> Any:
        """Records created before email was required store an empty string."""
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("permissions", mode="before")
    @classmethod
    def null_permissions_is_empty(cls, value: Any) -> Any:
        # a null grant structure denies everything, same as an empty one
        return {} if value is None else value

    @field_validator("roles", mode="before")
    @classmethod
    def null_roles_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @property
    def primary_role(self) -> RoleAssignment | None:
        """First RBAC role, which decides classification and visibility."""
        return self.roles[0] if self.roles else None


class SessionInfo(BaseModel):
    """Server-side session metadata returned alongside the token."""

    model_config = ConfigDict(populate_by_name=True)

    session_id: str = Field(..., alias="sessionId")
    expires_at: datetime | None = Field(None, alias="expiresAt")
    is_suspicious: bool | None = Field(None, alias="isSuspicious")
    location: dict[str, str] | None = None
