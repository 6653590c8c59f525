"""Role-based authorization checks for verified identities."""

import logging
from collections.abc import Collection

from storefront.core.errors import ForbiddenError
from storefront.models.user import Identity, Role

logger = logging.getLogger(__name__)

ADMIN_ROLES: frozenset[Role] = frozenset({Role.ADMIN})
CUSTOMER_ROLES: frozenset[Role] = frozenset({Role.USER})


def authorize(identity: Identity, required_roles: Collection[Role]) -> bool:
    """True when the identity's role is one of required_roles."""
    return identity.role in required_roles


def ensure_role(identity: Identity, required_roles: Collection[Role]) -> Identity:
    """Return identity unchanged, or raise ForbiddenError if its role is not allowed."""
    if not authorize(identity, required_roles):
        logger.warning(
            "Forbidden: role %s not in %s",
            identity.role.value,
            sorted(r.value for r in required_roles),
            extra={"user_id": identity.subject_id},
        )
        raise ForbiddenError()
    return identity
