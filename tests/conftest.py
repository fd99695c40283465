"""
Pytest Configuration and Shared Fixtures
=========================================

Common fixtures used across all test modules.

For Developers:
    - Import fixtures by name in test files (pytest auto-discovers conftest.py)
    - Build sessions with make_user()/make_session(); they never touch
      real persisted storage
    - Assert on expected logs with assert_warning_logged/assert_error_logged
"""

import logging
import os
from typing import Any

import pytest

from src.superadmin.session.models import PlatformUser, RoleAssignment
from src.superadmin.session.state import SessionState, classify_user_type

# =============================================================================
# Pytest Marker Registration
# =============================================================================


def pytest_configure(config):
    """Register custom markers to avoid warnings."""
    config.addinivalue_line(
        "markers",
        "expect_errors(pattern): marks tests that expect ERROR logs matching pattern",
    )


# Tests must not inherit RBAC settings from the developer's shell
for _name in (
    "RBAC_AUDIT_PERMISSION_CHECKS",
    "RBAC_STORAGE_KEY",
    "RBAC_LEGACY_STORAGE_KEY",
):
    os.environ.pop(_name, None)


@pytest.fixture(autouse=True)
def reset_env_vars():
    """
    Reset environment variables after each test.

    Ensures tests don't pollute each other's environment.
    """
    original_env = os.environ.copy()

    yield

    os.environ.clear()
    os.environ.update(original_env)


# =============================================================================
# Session Builders
# =============================================================================


def make_user(
    permissions: dict[str, Any] | None = None,
    role_slug: str | None = None,
    role_name: str | None = None,
    legacy_role: str | None = None,
    **overrides: Any,
) -> PlatformUser:
    """Build a PlatformUser with an optional primary RBAC role."""
    roles = []
    if role_slug is not None or role_name is not None:
        roles.append(
            RoleAssignment(
                name=role_name if role_name is not None else (role_slug or ""),
                slug=role_slug or "",
            )
        )
    data: dict[str, Any] = {
        "_id": "op-123",
        "name": "Test Operator",
        "email": "operator@example.com",
        "role": legacy_role,
        "roles": roles,
        "permissions": permissions if permissions is not None else {},
    }
    data.update(overrides)
    return PlatformUser.model_validate(data)


def make_session(
    permissions: dict[str, Any] | None = None,
    role_slug: str | None = None,
    hydrated: bool = True,
    signed_in: bool = True,
    **user_kwargs: Any,
) -> SessionState:
    """Build a SessionState the way SessionStore would after set_user()."""
    if not signed_in:
        return SessionState(hydrated=hydrated)
    user = make_user(permissions=permissions, role_slug=role_slug, **user_kwargs)
    return SessionState(
        user=user,
        hydrated=hydrated,
        user_type=classify_user_type(user),
    )


@pytest.fixture
def sales_junior_session() -> SessionState:
    """Hydrated junior sales operator who may only view leads."""
    return make_session(
        permissions={"leads": {"view": True}},
        role_slug="platform-sales-junior",
    )


@pytest.fixture
def finance_session() -> SessionState:
    """Hydrated finance admin with refund and payments grants."""
    return make_session(
        permissions={
            "refunds": {"view": True, "refund": True, "approve": True},
            "payments_revenue": {"view": True, "export": True},
        },
        role_slug="platform-finance-admin",
    )


# =============================================================================
# Log Validation Helpers
# =============================================================================


def assert_error_logged(caplog, pattern: str):
    """
    Helper to assert an ERROR log was captured.

    Raises:
        AssertionError: If no ERROR log matches the pattern
    """
    assert any(
        pattern in record.message
        for record in caplog.records
        if record.levelno >= logging.ERROR
    ), f"Expected ERROR log matching '{pattern}' not found"


def assert_warning_logged(caplog, pattern: str):
    """
    Helper to assert a WARNING log was captured.

    Raises:
        AssertionError: If no WARNING log matches the pattern
    """
    assert any(
        pattern in record.message
        for record in caplog.records
        if record.levelno == logging.WARNING
    ), f"Expected WARNING log matching '{pattern}' not found"
