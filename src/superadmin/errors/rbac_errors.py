"""RBAC error types.

Permission evaluation itself never raises: every uncertain input resolves
to deny. These exceptions exist only at the edges:

- InvalidActionError is raised at decoration time by require_permission
  and indicates a programming mistake (typo in an action name).
- PermissionDeniedError is raised by require_permission when a guarded
  handler is called without the grant it needs.
- PersistedStateError wraps unreadable persisted session state and is
  caught by SessionStore.hydrate.
"""

from __future__ import annotations

# Generic on purpose: callers may surface this message to the UI
PERMISSION_DENIED_MESSAGE = "Access denied"


class InvalidActionError(ValueError):
    """Raised at decoration time for an unknown action name."""

    def __init__(self, action: str, valid_actions: frozenset[str]) -> None:
        self.action = action
        self.valid_actions = valid_actions
        super().__init__(
            f"Invalid action '{action}'. Valid actions: {sorted(valid_actions)}"
        )


class PermissionDeniedError(Exception):
    """Raised when a guarded handler is invoked without the required grant.

    The message never names the module or action, so the UI cannot be
    used to enumerate which grants exist.
    """

    def __init__(self, message: str = PERMISSION_DENIED_MESSAGE) -> None:
        self.message = message
        super().__init__(message)


class PersistedStateError(Exception):
    """Raised when persisted session state cannot be decoded or validated."""

    def __init__(self, storage_key: str, reason: str) -> None:
        self.storage_key = storage_key
        self.reason = reason
        super().__init__(f"Unreadable persisted state under '{storage_key}': {reason}")
