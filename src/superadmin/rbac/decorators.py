"""Permission guard decorator for in-process handlers.

Usage:
    from src.superadmin.rbac.decorators import require_permission

    @require_permission("refunds", "refund")
    def issue_refund(session: SessionState, refund_id: str) -> RefundResult:
        ...

The guarded callable receives the SessionState either as the `session`
keyword or as any positional argument. Action names are validated at
decoration time so a typo fails at import, not at the first click.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from typing import Any, TypeVar

from src.lib.logging_utils import sanitize_for_log
from src.superadmin.errors.rbac_errors import InvalidActionError, PermissionDeniedError
from src.superadmin.rbac.enums import VALID_ACTIONS
from src.superadmin.rbac.evaluator import has_permission
from src.superadmin.rbac.modules import is_registered
from src.superadmin.session.state import SessionState

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def _find_session(args: tuple[Any, ...], kwargs: dict[str, Any]) -> SessionState | None:
    candidate = kwargs.get("session")
    if isinstance(candidate, SessionState):
        return candidate
    for arg in args:
        if isinstance(arg, SessionState):
            return arg
    return None


def require_permission(module: str, action: str) -> Callable[[F], F]:
    """Decorator factory that guards a handler with a module/action check.

    Args:
        module: Module id the handler operates on
        action: Required action, one of VALID_ACTIONS

    Raises:
        InvalidActionError: At decoration time if action is not valid.
        PermissionDeniedError: At call time if no SessionState is passed
            or the session does not grant the action.
    """
    if action not in VALID_ACTIONS:
        raise InvalidActionError(action, VALID_ACTIONS)

    if not is_registered(module):
        logger.warning(
            "require_permission on unregistered module",
            extra={"module_id": sanitize_for_log(module)},
        )

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            session = _find_session(args, kwargs)
            if session is None:
                logger.error(
                    "require_permission: no SessionState in handler args",
                    extra={"handler": func.__qualname__},
                )
                raise PermissionDeniedError()

            if not has_permission(session, module, action):
                logger.debug(
                    "require_permission denied",
                    extra={
                        "handler": func.__qualname__,
                        "module_id": module,
                        "action": action,
                        "hydrated": session.hydrated,
                    },
                )
                raise PermissionDeniedError()

            return func(*args, **kwargs)

        return wrapper  # type: ignore[return-value]

    return decorator
