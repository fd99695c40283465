"""Canonical enum definitions for SuperAdmin RBAC.

Actions and role slugs are compared against plain strings throughout
the subsystem; StrEnum members compare equal to their values, so the
enums can be used interchangeably with raw strings from the identity
backend.
"""

from __future__ import annotations

from enum import StrEnum


class Action(StrEnum):
    """Operation classes that can be granted within a module."""

    VIEW = "view"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    ASSIGN = "assign"
    CANCEL = "cancel"
    REFUND = "refund"
    APPROVE = "approve"
    EXPORT = "export"


class PlatformRole(StrEnum):
    """Platform operator role slugs known to the role-module map."""

    SUPER_ADMIN = "super-admin"
    PLATFORM_SALES = "platform-sales"
    PLATFORM_SALES_JUNIOR = "platform-sales-junior"
    PLATFORM_SALES_SENIOR = "platform-sales-senior"
    PLATFORM_FINANCE_ADMIN = "platform-finance-admin"
    PLATFORM_SUPPORT = "platform-support"
    PLATFORM_AUDITOR = "platform-auditor"


class UserType(StrEnum):
    """Coarse client-side classification of an authenticated operator."""

    SUPERADMIN = "superadmin"
    SALES = "sales"
    SUPPORT = "support"
    AUDITOR = "auditor"
    FINANCE = "finance"


# Unknown role slugs resolve to this role's module set
FALLBACK_ROLE: PlatformRole = PlatformRole.SUPER_ADMIN

VALID_ACTIONS: frozenset[str] = frozenset(action.value for action in Action)
VALID_ROLES: frozenset[str] = frozenset(role.value for role in PlatformRole)
