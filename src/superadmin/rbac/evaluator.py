"""Permission evaluator: the authoritative allow/deny decision.

A decision is a pure function of (session state, module, action). Every
uncertain input resolves to deny:

- the session has not finished hydrating
- no user is signed in
- the grant structure has no entry for the module
- the module entry has no entry for the action
- the stored value is anything other than the literal boolean True

Nothing here raises. Callers that need an exception on denial use
require_permission from src.superadmin.rbac.decorators.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from src.lib.logging_utils import sanitize_for_log
from src.superadmin.config import get_settings
from src.superadmin.rbac.enums import Action

if TYPE_CHECKING:
    from src.superadmin.session.state import SessionState

logger = logging.getLogger(__name__)


def is_granted(grants: Mapping[str, Any], module: str, action: str) -> bool:
    """Look up grants[module][action] with strict literal-True semantics."""
    module_grants = grants.get(module)
    if not isinstance(module_grants, Mapping):
        return False
    # `is True` rejects 1, "true" and other truthy non-booleans
    return module_grants.get(action) is True


def has_permission(
    session: SessionState,
    module: str,
    action: str,
    grants: Mapping[str, Any] | None = None,
) -> bool:
    """Return True iff the hydrated, signed-in user is granted action on module.

    Args:
        session: Current session snapshot
        module: Module id
        action: Action name
        grants: Grant structure to consult instead of the user's own,
            still subject to the hydration and signed-in gates
    """
    if not session.hydrated:
        return False
    if session.user is None:
        return False
    return is_granted(
        session.user.permissions if grants is None else grants, module, action
    )


class PermissionEvaluator:
    """Permission checks bound to one session snapshot.

    An optional default module enables the bound form,
    has_permission_for_action(action), for screens that only deal with
    one module. The unbound form, has_permission_for_module_action(),
    always takes the module explicitly.

    Example:
        >>> evaluator = PermissionEvaluator(store.snapshot(), default_module="refunds")
        >>> evaluator.has_permission_for_action("refund")
        True
        >>> evaluator.has_permission_for_module_action("leads", "export")
        False
    """

    def __init__(
        self,
        session: SessionState,
        default_module: str | None = None,
        audit: bool | None = None,
    ) -> None:
        self._session = session
        self.default_module = default_module
        self._audit = get_settings().audit_permission_checks if audit is None else audit
        self._warned_unbound = False

    @property
    def is_hydrated(self) -> bool:
        return self._session.hydrated

    @property
    def permissions(self) -> Mapping[str, Any]:
        """The grant structure this evaluator reads, empty when signed out."""
        return self._session.permissions

    def has_permission(self, module: str, action: str) -> bool:
        allowed = self._evaluate(module, action)
        if self._audit:
            logger.debug(
                "Permission check",
                extra={
                    "module_id": sanitize_for_log(module),
                    "action": sanitize_for_log(action),
                    "allowed": allowed,
                    "hydrated": self._session.hydrated,
                },
            )
        return allowed

    def has_permission_for_module_action(self, module: str, action: str) -> bool:
        """Unbound form: explicit module and action."""
        return self.has_permission(module, action)

    def has_permission_for_action(self, action: str) -> bool:
        """Bound form: action on the default module.

        Denies without a module lookup while the session is not hydrated,
        and always denies when no default module was given.
        """
        if not self._session.hydrated:
            return False
        if self.default_module is None:
            # once per evaluator; can_* may run on every render
            if not self._warned_unbound:
                self._warned_unbound = True
                logger.warning(
                    "has_permission_for_action called without a default module",
                    extra={"action": sanitize_for_log(action)},
                )
            return False
        return self.has_permission(self.default_module, action)

    def allowed_actions(self, module: str | None = None) -> frozenset[Action]:
        """Every known action granted on module (default module if omitted)."""
        target = module if module is not None else self.default_module
        if target is None:
            return frozenset()
        return frozenset(
            action for action in Action if self.has_permission(target, action)
        )

    # Convenience predicates for the default module

    def can_view(self) -> bool:
        return self.has_permission_for_action(Action.VIEW)

    def can_create(self) -> bool:
        return self.has_permission_for_action(Action.CREATE)

    def can_update(self) -> bool:
        return self.has_permission_for_action(Action.UPDATE)

    def can_delete(self) -> bool:
        return self.has_permission_for_action(Action.DELETE)

    def can_assign(self) -> bool:
        return self.has_permission_for_action(Action.ASSIGN)

    def can_cancel(self) -> bool:
        return self.has_permission_for_action(Action.CANCEL)

    def can_refund(self) -> bool:
        return self.has_permission_for_action(Action.REFUND)

    def can_approve(self) -> bool:
        return self.has_permission_for_action(Action.APPROVE)

    def can_export(self) -> bool:
        return self.has_permission_for_action(Action.EXPORT)

    def _grants(self) -> Mapping[str, Any]:
        return self._session.permissions

    def _evaluate(self, module: str, action: str) -> bool:
        return has_permission(self._session, module, action, grants=self._grants())
