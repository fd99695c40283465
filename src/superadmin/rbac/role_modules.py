"""Role-to-module visibility mapping.

Visibility is a navigation-level filter: it decides whether a module's
section appears at all for a role. It grants nothing. Whether an action
may be performed inside a visible module is decided by the permission
evaluator against the user's grant structure.

Unknown role slugs (including None and the empty string, which is what
the UI has before a role is known) resolve to the super-admin module set.
"""

from __future__ import annotations

import logging
from types import MappingProxyType

from src.lib.logging_utils import sanitize_for_log
from src.superadmin.rbac.enums import FALLBACK_ROLE, PlatformRole

logger = logging.getLogger(__name__)

# Display order per role; membership is what the checks below use
ROLE_MODULE_ORDER: MappingProxyType[str, tuple[str, ...]] = MappingProxyType(
    {
        PlatformRole.SUPER_ADMIN.value: (
            "platform_settings",
            "tenant_crud",
            # not in the registry; label_for() falls back to the id
            "tenant_suspend",
            "subscription_plans",
            "payments_revenue",
            "refunds",
            "marketplace_control",
            "platform_coupons",
            "rule_engine_global",
            "view_all_orders",
            "audit_logs",
            "leads",
            "user_impersonation",
        ),
        PlatformRole.PLATFORM_SALES.value: (
            "leads",
            "subscription_plans",
            "payments_revenue",
        ),
        PlatformRole.PLATFORM_SALES_JUNIOR.value: (
            "leads",
            "subscription_plans",
        ),
        PlatformRole.PLATFORM_SALES_SENIOR.value: (
            "leads",
            "subscription_plans",
            "payments_revenue",
            "audit_logs",
            "tenant_crud",
        ),
        PlatformRole.PLATFORM_FINANCE_ADMIN.value: (
            "payments_revenue",
            "refunds",
            "subscription_plans",
            "view_all_orders",
            "audit_logs",
            "leads",
        ),
        PlatformRole.PLATFORM_SUPPORT.value: (
            "tenant_crud",
            "view_all_orders",
            "audit_logs",
            "leads",
            "user_impersonation",
            "marketplace_control",
        ),
        PlatformRole.PLATFORM_AUDITOR.value: (
            "payments_revenue",
            "view_all_orders",
            "audit_logs",
            "leads",
        ),
    }
)

ROLE_MODULE_MAPPING: MappingProxyType[str, frozenset[str]] = MappingProxyType(
    {role: frozenset(modules) for role, modules in ROLE_MODULE_ORDER.items()}
)


def _resolve_role(role_slug: str | None) -> str:
    if role_slug and role_slug in ROLE_MODULE_ORDER:
        return role_slug
    # NOTE: unknown roles get the broadest set, not an empty one
    logger.debug(
        "Unmapped role slug, using fallback role",
        extra={
            "role_slug": sanitize_for_log(role_slug),
            "fallback_role": FALLBACK_ROLE.value,
        },
    )
    return FALLBACK_ROLE.value


def modules_for_role(role_slug: str | None) -> frozenset[str]:
    """Return the module ids visible to role_slug.

    Args:
        role_slug: Platform role slug, or None when no role is known yet

    Returns:
        Non-empty frozenset of module ids. Unmapped slugs get the
        super-admin set.
    """
    return ROLE_MODULE_MAPPING[_resolve_role(role_slug)]


def ordered_modules_for_role(role_slug: str | None) -> tuple[str, ...]:
    """Same membership as modules_for_role(), in navigation display order."""
    return ROLE_MODULE_ORDER[_resolve_role(role_slug)]


def is_module_visible_for_role(module_id: str, role_slug: str | None) -> bool:
    """Return True if module_id belongs to modules_for_role(role_slug)."""
    return module_id in modules_for_role(role_slug)
