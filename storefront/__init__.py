"""Storefront: minimal e-commerce API with idempotent order placement."""

__version__ = "0.1.0"
