"""JWT creation and verification for bearer authentication."""

import logging
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any

import jwt

from storefront.models.user import Identity, Role

if TYPE_CHECKING:
    from storefront.core.config import Settings

logger = logging.getLogger(__name__)


def create_access_token(
    subject_id: int,
    role: Role | str,
    settings: "Settings",
    *,
    now: datetime | None = None,
) -> str:
    """Create a signed JWT carrying id, role, iat, and exp (JWT_EXPIRE_MINUTES ahead)."""
    issued_at = now or datetime.now(UTC)
    expire = issued_at + timedelta(minutes=settings.JWT_EXPIRE_MINUTES)
    payload: dict[str, Any] = {
        "id": subject_id,
        "role": Role(role).value,
        "iat": issued_at,
        "exp": expire,
    }
    secret = settings.JWT_SECRET.get_secret_value()
    return jwt.encode(
        payload,
        secret,
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_access_token(token: str, settings: "Settings") -> dict[str, Any]:
    """
    Decode and validate JWT; return payload (id, role, iat, exp).
    Raises jwt.PyJWTError on invalid or expired token.
    """
    secret = settings.JWT_SECRET.get_secret_value()
    return jwt.decode(
        token,
        secret,
        algorithms=[settings.JWT_ALGORITHM],
        options={"require": ["exp", "iat"]},
    )


def verify_access_token(token: str, settings: "Settings") -> Identity | None:
    """
    Return the caller identity for a valid token, or None.

    None covers a bad signature, a malformed or expired token, and a payload
    whose id or role has the wrong shape. Never raises for caller input.
    """
    if not token:
        return None
    try:
        payload = decode_access_token(token, settings)
    except jwt.PyJWTError as e:
        logger.debug("Token rejected: %s", type(e).__name__)
        return None

    subject_id = payload.get("id")
    # bool is an int subclass; a token claiming id=true is malformed
    if not isinstance(subject_id, int) or isinstance(subject_id, bool):
        return None
    try:
        role = Role(payload.get("role"))
    except (TypeError, ValueError):
        return None
    return Identity(subject_id=subject_id, role=role)
