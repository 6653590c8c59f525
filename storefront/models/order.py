"""Order record; immutable once created."""

from dataclasses import dataclass
from enum import Enum


class OrderStatus(str, Enum):
    PAID = "PAID"


@dataclass(frozen=True)
class Order:
    """An accepted order. user_id is always the verified caller, never client input."""

    id: str
    user_id: int
    product_id: str
    quantity: int
    status: OrderStatus = OrderStatus.PAID
