"""Runtime settings for the RBAC subsystem.

Settings are read from the environment once per call to get_settings().
The static module registry, role-module map and fallback role are not
configurable; only logging and persisted-state lookup are.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_STORAGE_KEY = "auth-storage"
DEFAULT_LEGACY_STORAGE_KEY = "superadmin-storage"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class RbacSettings:
    """Settings for permission evaluation and session hydration.

    Attributes:
        audit_permission_checks: Log every permission decision at DEBUG
        storage_key: Persisted-state key read first during hydration
        legacy_storage_key: Key read when storage_key holds nothing usable
    """

    audit_permission_checks: bool = False
    storage_key: str = DEFAULT_STORAGE_KEY
    legacy_storage_key: str = DEFAULT_LEGACY_STORAGE_KEY


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


def get_settings() -> RbacSettings:
    """Load RbacSettings from environment.

    Environment:
        RBAC_AUDIT_PERMISSION_CHECKS: "true"/"1"/"yes"/"on" enables audit logging
        RBAC_STORAGE_KEY: Primary persisted-state key (default: auth-storage)
        RBAC_LEGACY_STORAGE_KEY: Fallback key (default: superadmin-storage)
    """
    return RbacSettings(
        audit_permission_checks=_env_flag("RBAC_AUDIT_PERMISSION_CHECKS"),
        storage_key=os.environ.get("RBAC_STORAGE_KEY") or DEFAULT_STORAGE_KEY,
        legacy_storage_key=os.environ.get("RBAC_LEGACY_STORAGE_KEY")
        or DEFAULT_LEGACY_STORAGE_KEY,
    )
