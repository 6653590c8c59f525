"""Pydantic request/response schemas."""

from storefront.schemas.auth import LoginRequest, TokenResponse
from storefront.schemas.error import ErrorResponse
from storefront.schemas.health import HealthResponse
from storefront.schemas.order import OrderCreate, OrderOut
from storefront.schemas.product import ProductCreate, ProductOut

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "LoginRequest",
    "OrderCreate",
    "OrderOut",
    "ProductCreate",
    "ProductOut",
    "TokenResponse",
]
