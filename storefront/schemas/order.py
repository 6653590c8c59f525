"""Request/response schemas for orders. Wire names are camelCase."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from storefront.models.order import Order, OrderStatus


class OrderCreate(BaseModel):
    """
    Documented body for POST /orders; the owner always comes from the bearer token.

    The route reads the body itself and leaves validation to the order service.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    product_id: str | None = Field(default=None, description="Product to order")
    quantity: int | None = Field(default=None, description="Units; must be > 0")


class OrderOut(BaseModel):
    """Created order as returned to the caller."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: str
    user_id: int
    product_id: str
    quantity: int
    status: OrderStatus

    @classmethod
    def from_order(cls, order: Order) -> "OrderOut":
        return cls(
            id=order.id,
            user_id=order.user_id,
            product_id=order.product_id,
            quantity=order.quantity,
            status=order.status,
        )
