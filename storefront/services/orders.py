"""Idempotent order placement."""

import logging
import uuid
from typing import Any

from storefront.core.errors import (
    DuplicateRequestError,
    InvalidOrderError,
    MissingIdempotencyKeyError,
)
from storefront.models.order import Order, OrderStatus
from storefront.models.user import Identity
from storefront.stores.idempotency import IdempotencyLedger
from storefront.stores.orders import OrderStore

logger = logging.getLogger(__name__)


def validate_order(product_id: Any, quantity: Any) -> None:
    """
    Raise InvalidOrderError unless product_id is a non-empty string and
    quantity is a positive integer.

    Values arrive straight from the request body, so any JSON type may show up.
    """
    if not isinstance(product_id, str) or not product_id:
        raise InvalidOrderError()
    # bool is an int subclass; true is not a quantity
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
        raise InvalidOrderError()


class OrderService:
    """
    Places orders at most once per idempotency key.

    Keys are global: the same key sent by two different users counts as a
    duplicate. A consumed key is never released, even when the request that
    consumed it is rejected afterwards or order creation fails.

    consume_key_on_invalid selects when the key is consumed:

    - True: the key is claimed before the body is validated, so an invalid
      request burns it and a corrected retry with the same key gets 409.
    - False: a key already seen is still rejected first, but an invalid body
      is rejected without claiming the key; only valid requests claim it.
    """

    def __init__(
        self,
        ledger: IdempotencyLedger,
        orders: OrderStore,
        *,
        consume_key_on_invalid: bool = True,
    ) -> None:
        self.ledger = ledger
        self.orders = orders
        self.consume_key_on_invalid = consume_key_on_invalid

    def place_order(
        self,
        identity: Identity,
        idempotency_key: str | None,
        product_id: Any,
        quantity: Any,
    ) -> Order:
        """
        Create and store an order owned by identity.subject_id.

        Raises MissingIdempotencyKeyError, DuplicateRequestError, or
        InvalidOrderError; see the class docstring for their ordering.
        """
        if not idempotency_key:
            raise MissingIdempotencyKeyError()

        self._claim_key(idempotency_key, product_id, quantity)

        order = Order(
            id=str(uuid.uuid4()),
            user_id=identity.subject_id,
            product_id=product_id,
            quantity=quantity,
            status=OrderStatus.PAID,
        )
        self.orders.add(order)
        logger.info(
            "Order created",
            extra={
                "order_id": order.id,
                "user_id": order.user_id,
                "product_id": order.product_id,
            },
        )
        return order

    def _claim_key(
        self,
        idempotency_key: str,
        product_id: Any,
        quantity: Any,
    ) -> None:
        """Validate the body and claim the key in the order the policy requires."""
        if self.consume_key_on_invalid:
            self._check_and_mark(idempotency_key)
            validate_order(product_id, quantity)
            return

        if self.ledger.has_seen(idempotency_key):
            self._reject_duplicate(idempotency_key)
        validate_order(product_id, quantity)
        # A concurrent request may have claimed the key since has_seen().
        self._check_and_mark(idempotency_key)

    def _check_and_mark(self, idempotency_key: str) -> None:
        if not self.ledger.check_and_mark(idempotency_key):
            self._reject_duplicate(idempotency_key)

    def _reject_duplicate(self, idempotency_key: str) -> None:
        logger.info("Duplicate idempotency key rejected: %s", idempotency_key)
        raise DuplicateRequestError()
