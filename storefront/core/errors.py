"""Error hierarchy for every failure the API reports to callers.

Each error carries the HTTP status and the caller-facing message; the global
handlers in storefront.api.error_handlers turn them into ``{"message": ...}``
responses. Messages never contain internal details.
"""


class StorefrontError(Exception):
    """Base exception for all storefront errors."""

    code = "INTERNAL_ERROR"
    http_status = 500
    default_message = "Internal Server Error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_response(self) -> dict[str, str]:
        """Convert to the JSON error body."""
        return {"message": self.message}


class InvalidInputError(StorefrontError):
    """Malformed or missing request fields."""

    code = "INVALID_INPUT"
    http_status = 400
    default_message = "Invalid input"


class MissingIdempotencyKeyError(InvalidInputError):
    """Order request sent without an Idempotency-Key header."""

    code = "MISSING_IDEMPOTENCY_KEY"
    default_message = "Missing Idempotency-Key"


class InvalidOrderError(InvalidInputError):
    """Order body has no product id or a non-positive quantity."""

    code = "INVALID_ORDER"
    default_message = "Invalid order"


class UnauthenticatedError(StorefrontError):
    """Missing, malformed, or expired bearer token."""

    code = "UNAUTHENTICATED"
    http_status = 401
    default_message = "Invalid token"


class LoginFailedError(StorefrontError):
    """No user matches the supplied credentials."""

    code = "LOGIN_FAILED"
    http_status = 401
    default_message = "Login failed"


class ForbiddenError(StorefrontError):
    """Authenticated caller lacks the role required by the route."""

    code = "FORBIDDEN"
    http_status = 403
    default_message = "Forbidden"


class DuplicateRequestError(StorefrontError):
    """Idempotency key was already presented."""

    code = "DUPLICATE_REQUEST"
    http_status = 409
    default_message = "Duplicate request"


class RateLimitedError(StorefrontError):
    """Client exceeded the per-IP request budget for the current window."""

    code = "RATE_LIMITED"
    http_status = 429
    default_message = "Too many requests, please try again later."

    def __init__(self, retry_after: int, message: str | None = None) -> None:
        self.retry_after = retry_after
        super().__init__(message)
