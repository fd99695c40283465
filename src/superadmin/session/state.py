"""Immutable session snapshot and operator classification.

SessionState is the value the permission evaluator reads. It is produced
by SessionStore and passed in explicitly, so permission checks are pure
functions of (state, module, action).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from src.lib.logging_utils import sanitize_for_log
from src.superadmin.rbac.enums import UserType
from src.superadmin.session.models import PlatformUser, SessionInfo

logger = logging.getLogger(__name__)

_EMPTY_GRANTS: Mapping[str, Any] = MappingProxyType({})

_LEGACY_ROLE_TYPES: dict[str, UserType] = {
    "superadmin": UserType.SUPERADMIN,
    "support": UserType.SUPPORT,
    "auditor": UserType.AUDITOR,
    "finance": UserType.FINANCE,
    "sales_admin": UserType.SALES,
}

_USER_TYPE_DISPLAY_NAMES: dict[UserType, str] = {
    UserType.SUPERADMIN: "Super Admin",
    UserType.FINANCE: "Finance Admin",
    UserType.SUPPORT: "Support Agent",
    UserType.AUDITOR: "Platform Auditor",
}


@dataclass(frozen=True)
class SessionState:
    """Read-only view of the client session at one point in time.

    Attributes:
        user: Authenticated operator, or None when signed out
        hydrated: True once persisted state restoration has finished
        token: Opaque bearer token, never inspected here
        session: Server session metadata
        user_type: Coarse classification computed when the user was set
    """

    user: PlatformUser | None = None
    hydrated: bool = False
    token: str | None = None
    session: SessionInfo | None = None
    user_type: UserType | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    @property
    def permissions(self) -> Mapping[str, Any]:
        """The user's grant structure, or an empty mapping."""
        if self.user is None:
            return _EMPTY_GRANTS
        return self.user.permissions

    @property
    def role_slug(self) -> str | None:
        """Slug of the primary RBAC role, or None if no role is known."""
        if self.user is None or self.user.primary_role is None:
            return None
        return self.user.primary_role.slug or None


def classify_user_type(user: PlatformUser) -> UserType:
    """Classify an operator from their primary RBAC role or legacy role.

    The first RBAC role wins. Its slug (lower-cased, '-' -> '_') and name
    are checked in order: support, auditor, finance, super admin. Without
    RBAC roles the legacy `role` field is mapped directly.

    Unrecognized input classifies as SUPERADMIN, matching the
    default-to-broad policy of the role-module map.
    """
    primary = user.primary_role
    if primary is not None:
        slug = (primary.slug or "").lower().replace("-", "_")
        name = (primary.name or "").lower()

        if "support" in slug or "support" in name:
            user_type = UserType.SUPPORT
        elif "auditor" in slug or "auditor" in name:
            user_type = UserType.AUDITOR
        elif "finance" in slug or "finance" in name:
            user_type = UserType.FINANCE
        else:
            # super_admin, superadmin, "super admin" and anything unmatched
            user_type = UserType.SUPERADMIN

        logger.debug(
            "Classified user from RBAC role",
            extra={"role_slug": sanitize_for_log(slug), "user_type": user_type.value},
        )
        return user_type

    user_type = _LEGACY_ROLE_TYPES.get(user.role or "")
    if user_type is None:
        logger.debug(
            "Unknown legacy role, defaulting to superadmin",
            extra={"legacy_role": sanitize_for_log(user.role)},
        )
        return UserType.SUPERADMIN

    logger.debug(
        "Classified user from legacy role",
        extra={"legacy_role": user.role, "user_type": user_type.value},
    )
    return user_type


def primary_role_name(state: SessionState) -> str:
    """Display name for the operator's role."""
    user = state.user
    if user is not None and user.primary_role is not None:
        return user.primary_role.name

    if state.user_type is UserType.SALES:
        return (user.designation if user else None) or "Sales Agent"
    if state.user_type is not None:
        return _USER_TYPE_DISPLAY_NAMES[state.user_type]
    return "User"
