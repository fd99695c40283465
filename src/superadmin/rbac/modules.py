"""Module registry: the single source of truth for permission-able modules.

The registry is a process-wide constant. Lookups never fail: an
unregistered id is its own label, and definition_for() returns None
rather than a placeholder definition.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class ModuleDefinition:
    """A protectable feature area.

    Attributes:
        id: Stable identifier used as the key in role maps and grant structures
        label: Human-readable display name
    """

    id: str
    label: str


ALL_MODULE_DEFINITIONS: tuple[ModuleDefinition, ...] = (
    ModuleDefinition("platform_settings", "Platform Settings"),
    ModuleDefinition("tenant_crud", "Tenant Management"),
    ModuleDefinition("subscription_plans", "Subscription Plans"),
    ModuleDefinition("payments_revenue", "Payments & Revenue"),
    ModuleDefinition("refunds", "Refunds"),
    ModuleDefinition("marketplace_control", "Marketplace Control"),
    ModuleDefinition("platform_coupons", "Platform Coupons"),
    ModuleDefinition("rule_engine_global", "Global Rule Engine"),
    ModuleDefinition("view_all_orders", "View All Orders"),
    ModuleDefinition("audit_logs", "Audit Logs"),
    ModuleDefinition("leads", "Platform Leads"),
    ModuleDefinition("user_impersonation", "User Impersonation"),
)

_DEFINITIONS_BY_ID: MappingProxyType[str, ModuleDefinition] = MappingProxyType(
    {module.id: module for module in ALL_MODULE_DEFINITIONS}
)

MODULE_LABELS: MappingProxyType[str, str] = MappingProxyType(
    {module.id: module.label for module in ALL_MODULE_DEFINITIONS}
)


def list_modules() -> tuple[ModuleDefinition, ...]:
    """Return every registered module in registry order."""
    return ALL_MODULE_DEFINITIONS


def label_for(module_id: str) -> str:
    """Return the display label for module_id, or module_id itself if unregistered."""
    return MODULE_LABELS.get(module_id, module_id)


def definition_for(module_id: str) -> ModuleDefinition | None:
    """Return the registered definition for module_id, or None."""
    return _DEFINITIONS_BY_ID.get(module_id)


def is_registered(module_id: str) -> bool:
    return module_id in _DEFINITIONS_BY_ID
