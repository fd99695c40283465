"""Error types for the SuperAdmin RBAC subsystem."""

from src.superadmin.errors.rbac_errors import (
    InvalidActionError,
    PermissionDeniedError,
    PersistedStateError,
)

__all__ = [
    "InvalidActionError",
    "PermissionDeniedError",
    "PersistedStateError",
]
