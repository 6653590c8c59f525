"""Catalog store: append-only product list in creation order."""

import math
import threading
import uuid

from storefront.core.errors import InvalidInputError
from storefront.models.product import Product


class CatalogStore:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._products: list[Product] = []

    def list(self) -> list[Product]:
        """Snapshot of all products, oldest first."""
        with self._lock:
            return list(self._products)

    def create(self, name: str | None, price: int | float | None) -> Product:
        """
        Validate and append a new product; visible to every later list() call.

        Raises InvalidInputError when name is missing/empty or price is missing,
        non-finite, or not strictly positive.
        """
        if not name or price is None or not math.isfinite(price) or price <= 0:
            raise InvalidInputError("Invalid product")
        product = Product(id=str(uuid.uuid4()), name=name, price=price)
        with self._lock:
            self._products.append(product)
        return product

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)
