"""
Run the API server:

  python -m storefront

Host and port come from HOST and PORT (default 0.0.0.0:3000).
"""

import sys

import uvicorn

from storefront.core.config import get_settings


def main() -> int:
    settings = get_settings()
    uvicorn.run(
        "storefront.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
