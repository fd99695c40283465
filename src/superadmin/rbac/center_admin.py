"""Permission evaluator for branch-level center admins.

Center admins without any explicit grants get full operational access to
their branch through DEFAULT_CENTER_ADMIN_PERMISSIONS. As soon as a super
admin sets any grant for them, the explicit grant structure is used
exclusively; defaults are never merged in.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from src.superadmin.rbac.evaluator import PermissionEvaluator

DEFAULT_CENTER_ADMIN_PERMISSIONS: Mapping[str, Mapping[str, bool]] = MappingProxyType(
    {
        "orders": MappingProxyType(
            {
                "view": True,
                "create": True,
                "update": True,
                "delete": False,
                "assign": True,
                "cancel": True,
            }
        ),
        "services": MappingProxyType(
            {"view": True, "create": True, "update": True, "delete": True}
        ),
        "staff": MappingProxyType(
            {"view": True, "create": True, "update": True, "delete": True}
        ),
        "inventory": MappingProxyType(
            {"view": True, "create": True, "update": True, "delete": True}
        ),
        "performance": MappingProxyType({"view": True, "export": True}),
        "settings": MappingProxyType({"view": True, "update": True}),
    }
)


class CenterAdminEvaluator(PermissionEvaluator):
    """PermissionEvaluator that falls back to branch defaults for empty grants."""

    @property
    def uses_default_permissions(self) -> bool:
        return not self._session.permissions

    @property
    def permissions(self) -> Mapping[str, Any]:
        """The signed-in user's own grants; branch defaults only when signed out."""
        if self._session.user is not None:
            return self._session.permissions
        return DEFAULT_CENTER_ADMIN_PERMISSIONS

    def _grants(self) -> Mapping[str, Any]:
        if self.uses_default_permissions:
            return DEFAULT_CENTER_ADMIN_PERMISSIONS
        return self._session.permissions
