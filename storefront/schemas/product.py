"""Request/response schemas for the product catalog."""

from pydantic import BaseModel, Field

from storefront.models.product import Product


class ProductCreate(BaseModel):
    """Body for POST /products. Missing or non-positive values are rejected with 400."""

    name: str | None = Field(default=None, description="Display name; must be non-empty")
    price: int | float | None = Field(default=None, description="Unit price; must be > 0")


class ProductOut(BaseModel):
    id: str
    name: str
    price: int | float

    @classmethod
    def from_product(cls, product: Product) -> "ProductOut":
        return cls(id=product.id, name=product.name, price=product.price)
