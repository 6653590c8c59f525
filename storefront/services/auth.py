"""Login flow: exchange email and password for the caller identity."""

import logging

from storefront.core.errors import InvalidInputError, LoginFailedError
from storefront.models.user import Identity
from storefront.stores.users import CredentialStore

logger = logging.getLogger(__name__)


def login(store: CredentialStore, email: str | None, password: str | None) -> Identity:
    """
    Return the identity of the user matching (email, password).

    Raises InvalidInputError if either field is missing or empty, and
    LoginFailedError if no user matches. The failure does not say whether the
    email or the password was wrong. Token issuance is left to the caller.
    """
    if not email or not password:
        raise InvalidInputError()
    user = store.find_by_credentials(email, password)
    if user is None:
        logger.info("Login failed")
        raise LoginFailedError()
    logger.info("Login succeeded", extra={"user_id": user.id})
    return Identity(subject_id=user.id, role=user.role)
