"""Hypothesis strategies for RBAC property testing.

Provides reusable composite strategies for generating sessions and grant
structures that look like what the identity backend sends, including
malformed grant values.
"""

from hypothesis import strategies as st

from src.superadmin.rbac.enums import VALID_ACTIONS
from src.superadmin.rbac.modules import MODULE_LABELS
from src.superadmin.rbac.role_modules import ROLE_MODULE_MAPPING
from src.superadmin.session.models import PlatformUser, RoleAssignment
from src.superadmin.session.state import SessionState

KNOWN_MODULES = sorted(MODULE_LABELS) + ["tenant_suspend"]
KNOWN_ACTIONS = sorted(VALID_ACTIONS)
KNOWN_ROLES = sorted(ROLE_MODULE_MAPPING)

module_ids = st.one_of(st.sampled_from(KNOWN_MODULES), st.text(max_size=30))
action_names = st.one_of(st.sampled_from(KNOWN_ACTIONS), st.text(max_size=15))
role_slugs = st.one_of(st.sampled_from(KNOWN_ROLES), st.text(max_size=30))

# Values an untyped backend might store for an action
grant_values = st.one_of(
    st.booleans(),
    st.none(),
    st.integers(min_value=-2, max_value=2),
    st.sampled_from(["true", "false", "yes", "1", ""]),
    st.lists(st.booleans(), max_size=2),
)


@st.composite
def grant_structure(draw, values=grant_values):
    """Generate a module -> action -> value grant structure.

    Returns:
        dict: Grant structure, possibly empty, with arbitrary values
    """
    return draw(
        st.dictionaries(
            keys=module_ids,
            values=st.dictionaries(keys=action_names, values=values, max_size=6),
            max_size=6,
        )
    )


@st.composite
def session_state(draw, hydrated=None, signed_in=None):
    """Generate a SessionState with a random grant structure.

    Args:
        hydrated: Force the hydration flag, random if None
        signed_in: Force a signed-in user, random if None
    """
    if hydrated is None:
        hydrated = draw(st.booleans())
    if signed_in is None:
        signed_in = draw(st.booleans())
    if not signed_in:
        return SessionState(hydrated=hydrated)

    slug = draw(role_slugs)
    user = PlatformUser(
        _id=draw(st.uuids().map(str)),
        roles=[RoleAssignment(name=slug, slug=slug)],
        permissions=draw(grant_structure()),
    )
    return SessionState(user=user, hydrated=hydrated)
