"""Domain records held by the in-memory stores."""

from storefront.models.order import Order, OrderStatus
from storefront.models.product import Product
from storefront.models.user import Identity, Role, User

__all__ = ["Identity", "Order", "OrderStatus", "Product", "Role", "User"]
