"""FastAPI application entrypoint. No business logic; only wiring and middleware."""

from dotenv import load_dotenv

load_dotenv()

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storefront import __version__
from storefront.api.error_handlers import register_error_handlers
from storefront.api.v1 import router as v1_router
from storefront.core.config import Settings, get_settings
from storefront.core.logging import setup_logging
from storefront.core.middleware import (
    AccessLogMiddleware,
    RateLimitMiddleware,
    SecurityHeadersMiddleware,
)
from storefront.core.rate_limit import FixedWindowRateLimiter
from storefront.core.state import AppState
from storefront.stores.users import CredentialStore

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    users: CredentialStore | None = None,
) -> FastAPI:
    """Build an application with its own, empty stores."""
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)

    app = FastAPI(
        title="Storefront API",
        version=__version__,
        docs_url="/api-docs",
        redoc_url="/redoc",
        debug=settings.DEBUG,
    )
    app.state.storefront = AppState.build(settings, users=users)

    # Last added runs first: access log wraps CORS, headers, and throttling.
    if settings.RATE_LIMIT_ENABLED:
        app.add_middleware(
            RateLimitMiddleware,
            limiter=FixedWindowRateLimiter(
                max_requests=settings.RATE_LIMIT_MAX_REQUESTS,
                window_seconds=settings.RATE_LIMIT_WINDOW_SEC,
            ),
        )
    app.add_middleware(SecurityHeadersMiddleware, hsts=settings.APP_ENV == "prod")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(AccessLogMiddleware)

    register_error_handlers(app)
    app.include_router(v1_router, prefix=settings.API_V1_PREFIX)

    @app.get("/", include_in_schema=False)
    def root() -> dict[str, str]:
        """Root route; minimal payload for discovery."""
        return {"message": "Storefront API", "docs": "/api-docs"}

    logger.info(
        "Storefront API configured (env=%s, rate_limit=%s)",
        settings.APP_ENV,
        settings.RATE_LIMIT_ENABLED,
    )
    return app


app = create_app()
