"""RBAC tables and permission checks for the SuperAdmin portal.

Only the dependency-free tables are re-exported here. Import the
evaluator, guards and center-admin checks from their modules.
"""

from src.superadmin.rbac.enums import (
    FALLBACK_ROLE,
    VALID_ACTIONS,
    VALID_ROLES,
    Action,
    PlatformRole,
    UserType,
)
from src.superadmin.rbac.modules import (
    ALL_MODULE_DEFINITIONS,
    MODULE_LABELS,
    ModuleDefinition,
    definition_for,
    label_for,
    list_modules,
)
from src.superadmin.rbac.role_modules import (
    ROLE_MODULE_MAPPING,
    is_module_visible_for_role,
    modules_for_role,
    ordered_modules_for_role,
)

__all__ = [
    "ALL_MODULE_DEFINITIONS",
    "FALLBACK_ROLE",
    "MODULE_LABELS",
    "ROLE_MODULE_MAPPING",
    "VALID_ACTIONS",
    "VALID_ROLES",
    "Action",
    "ModuleDefinition",
    "PlatformRole",
    "UserType",
    "definition_for",
    "is_module_visible_for_role",
    "label_for",
    "list_modules",
    "modules_for_role",
    "ordered_modules_for_role",
]
