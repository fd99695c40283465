"""Client session state consumed by permission checks."""

from src.superadmin.session.models import PlatformUser, RoleAssignment, SessionInfo
from src.superadmin.session.state import (
    SessionState,
    classify_user_type,
    primary_role_name,
)
from src.superadmin.session.store import SessionStore

__all__ = [
    "PlatformUser",
    "RoleAssignment",
    "SessionInfo",
    "SessionState",
    "SessionStore",
    "classify_user_type",
    "primary_role_name",
]
