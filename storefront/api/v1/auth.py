"""JWT login and auth dependencies (get_current_identity, require_admin, require_customer)."""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from storefront.core.config import Settings
from storefront.core.errors import UnauthenticatedError
from storefront.core.security import create_access_token, verify_access_token
from storefront.core.state import AppState, get_app_settings, get_state
from storefront.models.user import Identity
from storefront.schemas.auth import LoginRequest, TokenResponse
from storefront.schemas.error import ErrorResponse
from storefront.services import auth as auth_service
from storefront.services.authorization import ADMIN_ROLES, CUSTOMER_ROLES, ensure_role

router = APIRouter()
security = HTTPBearer(auto_error=False)

AUTH_ERROR_RESPONSES = {
    401: {"model": ErrorResponse, "description": "Missing, invalid, or expired token"},
    403: {"model": ErrorResponse, "description": "Role not allowed"},
}


@router.post(
    "/login",
    response_model=TokenResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Missing email or password"},
        401: {"model": ErrorResponse, "description": "Bad credentials"},
    },
)
def login(
    body: LoginRequest,
    state: Annotated[AppState, Depends(get_state)],
) -> TokenResponse:
    """
    Authenticate with email and password; returns a JWT valid for one hour.
    Include the token in the Authorization header as: Bearer <token>
    """
    identity = auth_service.login(state.users, body.email, body.password)
    token = create_access_token(identity.subject_id, identity.role, state.settings)
    return TokenResponse(token=token)


def get_current_identity(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> Identity:
    """Dependency: require a valid Bearer JWT and return the caller. Raises 401 if missing or invalid."""
    if credentials is None:
        raise UnauthenticatedError("No token")
    identity = verify_access_token(credentials.credentials, settings)
    if identity is None:
        raise UnauthenticatedError("Invalid token")
    return identity


def require_admin(
    identity: Annotated[Identity, Depends(get_current_identity)],
) -> Identity:
    """Dependency: require role 'admin'. Raises 403 otherwise."""
    return ensure_role(identity, ADMIN_ROLES)


def require_customer(
    identity: Annotated[Identity, Depends(get_current_identity)],
) -> Identity:
    """Dependency: require role 'user'. Raises 403 otherwise (admins cannot place orders)."""
    return ensure_role(identity, CUSTOMER_ROLES)
