"""Shared builders for tests."""

from pydantic import SecretStr

from storefront.core.config import Settings


def make_settings(**overrides: object) -> Settings:
    """Settings isolated from the environment defaults that matter to tests."""
    values: dict[str, object] = {
        "APP_ENV": "dev",
        "JWT_SECRET": SecretStr("storefront-test-secret-0123456789abcdef"),
        "JWT_ALGORITHM": "HS256",
        "JWT_EXPIRE_MINUTES": 60,
        "RATE_LIMIT_ENABLED": False,
        "IDEMPOTENCY_CONSUME_ON_INVALID": True,
        "LOG_LEVEL": "WARNING",
    }
    values.update(overrides)
    return Settings(**values)
