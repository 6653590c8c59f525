"""Core app configuration, security, and error types."""

from storefront.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
