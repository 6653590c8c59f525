"""Order storage: append-only list of accepted orders."""

import threading

from storefront.models.order import Order


class OrderStore:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._orders: list[Order] = []

    def add(self, order: Order) -> None:
        with self._lock:
            self._orders.append(order)

    def list(self) -> list[Order]:
        with self._lock:
            return list(self._orders)

    def __len__(self) -> int:
        with self._lock:
            return len(self._orders)
