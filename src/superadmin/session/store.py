"""Mutable session store and the hydration lifecycle.

SessionStore owns the client session and hands out immutable SessionState
snapshots. The hydration flag starts False, becomes True exactly once when
hydrate() finishes (whether or not anything usable was restored), and is
never reset by logout.

Persisted state is read from a key/value mapping of JSON strings, the
shape browser storage has. Both the wrapped form written by to_persisted()
({"state": {...}, "version": 0}) and a flat payload are accepted.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import replace
from typing import Any

from pydantic import ValidationError

from src.lib.logging_utils import (
    get_safe_error_info,
    redact_sensitive_fields,
    sanitize_for_log,
)
from src.superadmin.config import RbacSettings, get_settings
from src.superadmin.errors.rbac_errors import PersistedStateError
from src.superadmin.rbac.enums import UserType
from src.superadmin.session.models import PlatformUser, SessionInfo
from src.superadmin.session.state import SessionState, classify_user_type

logger = logging.getLogger(__name__)

PERSIST_VERSION = 0


class SessionStore:
    """Holds the current session and produces SessionState snapshots."""

    def __init__(self, settings: RbacSettings | None = None) -> None:
        self._settings = settings or get_settings()
        self._state = SessionState()

    @property
    def settings(self) -> RbacSettings:
        return self._settings

    def snapshot(self) -> SessionState:
        return self._state

    @property
    def hydrated(self) -> bool:
        return self._state.hydrated

    def set_user(self, user: PlatformUser) -> SessionState:
        """Install an authenticated user (login, restore or token refresh).

        The grant structure is replaced wholesale, never merged with the
        previous user's.
        """
        user_type = classify_user_type(user)
        self._state = replace(self._state, user=user, user_type=user_type)
        logger.info(
            "Session user set",
            extra={
                "user_type": user_type.value,
                "roles_count": len(user.roles),
                "module_grants": len(user.permissions),
            },
        )
        return self._state

    def set_token(self, token: str) -> SessionState:
        self._state = replace(self._state, token=token)
        return self._state

    def set_session(self, session: SessionInfo) -> SessionState:
        self._state = replace(self._state, session=session)
        return self._state

    def logout(self) -> SessionState:
        """Drop user, token and session. The hydration flag is kept."""
        self._state = SessionState(hydrated=self._state.hydrated)
        logger.info("Session cleared")
        return self._state

    def clear_all(self) -> SessionState:
        return self.logout()

    def hydrate(self, storage: Mapping[str, str | None] | None) -> SessionState:
        """Restore persisted state and mark the store hydrated.

        Args:
            storage: Key/value mapping of JSON strings, or None when no
                persisted storage is available

        Returns:
            The hydrated SessionState. Unreadable state restores as
            signed out; it never raises.
        """
        if self._state.hydrated:
            logger.warning("Session store already hydrated, ignoring hydrate()")
            return self._state

        restored = SessionState()
        for key in (self._settings.storage_key, self._settings.legacy_storage_key):
            raw = storage.get(key) if storage is not None else None
            if not raw:
                continue
            try:
                restored = self._restore(key, raw)
            except PersistedStateError as e:
                logger.error(
                    "Discarding unreadable persisted session state",
                    extra={
                        "storage_key": sanitize_for_log(key),
                        "reason": e.reason,
                        **get_safe_error_info(e.__cause__ or e),
                    },
                )
                continue
            if restored.is_authenticated or restored.token:
                break

        self._state = replace(restored, hydrated=True)
        logger.info(
            "Session hydrated",
            extra={
                "authenticated": self._state.is_authenticated,
                "user_type": self._state.user_type.value
                if self._state.user_type
                else None,
            },
        )
        return self._state

    def to_persisted(self) -> dict[str, Any]:
        """Payload for persisting the current session under the storage key."""
        state = self._state
        return {
            "state": {
                "user": state.user.model_dump(mode="json", by_alias=True)
                if state.user
                else None,
                "token": state.token,
                "session": state.session.model_dump(
                    mode="json", by_alias=True, exclude_none=True
                )
                if state.session
                else None,
                "isAuthenticated": state.is_authenticated,
                "userType": state.user_type.value if state.user_type else None,
            },
            "version": PERSIST_VERSION,
        }

    def _restore(self, key: str, raw: str) -> SessionState:
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as e:
            raise PersistedStateError(key, "invalid JSON") from e

        if not isinstance(payload, dict):
            raise PersistedStateError(key, "payload is not an object")

        data = payload.get("state", payload)
        if not isinstance(data, dict):
            raise PersistedStateError(key, "state is not an object")

        logger.debug(
            "Restoring persisted session",
            extra={"storage_key": key, "payload": redact_sensitive_fields(data)},
        )

        try:
            user = (
                PlatformUser.model_validate(data["user"]) if data.get("user") else None
            )
            session = (
                SessionInfo.model_validate(data["session"])
                if data.get("session")
                else None
            )
        except ValidationError as e:
            raise PersistedStateError(key, "schema validation failed") from e

        token = data.get("token")
        if token is not None and not isinstance(token, str):
            raise PersistedStateError(key, "token is not a string")

        user_type: UserType | None = None
        if user is not None:
            # Reclassify instead of trusting the persisted userType
            user_type = classify_user_type(user)

        return SessionState(
            user=user,
            token=token,
            session=session,
            user_type=user_type,
        )
