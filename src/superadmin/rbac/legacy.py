"""Operator permission check for legacy grant formats.

Older operator accounts carry grants in mixed shapes: a compact string of
short codes per module ("rc" = view + create), a mapping keyed by either
action names or short codes, or a bare boolean. Super admins bypass the
grant structure entirely.

Unlike the strict evaluator, this check understands all three shapes.
It keeps the evaluator's hydration and signed-out gates.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

from src.lib.logging_utils import sanitize_for_log
from src.superadmin.rbac.enums import Action, UserType

if TYPE_CHECKING:
    from src.superadmin.session.state import SessionState

logger = logging.getLogger(__name__)

SHORT_CODES: Mapping[str, str] = {
    Action.VIEW.value: "r",
    Action.CREATE.value: "c",
    Action.UPDATE.value: "u",
    Action.DELETE.value: "d",
    Action.EXPORT.value: "e",
}


def is_superadmin(session: SessionState) -> bool:
    if session.user_type is UserType.SUPERADMIN:
        return True
    return session.user is not None and session.user.role == "superadmin"


def has_operator_permission(
    session: SessionState, module: str, action: str = Action.VIEW.value
) -> bool:
    """Check module/action for an operator, accepting legacy grant shapes.

    Args:
        session: Current session snapshot
        module: Module id
        action: Action name (default: view)

    Returns:
        True if the action is granted, always True for super admins
        once hydrated
    """
    if not session.hydrated or session.user is None:
        return False

    if is_superadmin(session):
        return True

    grant = session.user.permissions.get(module)
    logger.debug(
        "Operator permission check",
        extra={
            "module_id": sanitize_for_log(module),
            "action": sanitize_for_log(action),
            "grant_shape": type(grant).__name__,
        },
    )

    if grant is None:
        return False

    if isinstance(grant, str):
        code = SHORT_CODES.get(action)
        return code is not None and code in grant

    if isinstance(grant, Mapping):
        if grant.get(action) is True:
            return True
        return action == Action.VIEW and grant.get(SHORT_CODES[Action.VIEW]) is True

    return grant is True
