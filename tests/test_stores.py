"""Unit tests for the in-memory catalog, order storage, and idempotency ledger."""

import math
import threading
import unittest

from storefront.core.errors import InvalidInputError
from storefront.models.order import Order
from storefront.stores.catalog import CatalogStore
from storefront.stores.idempotency import IdempotencyLedger
from storefront.stores.orders import OrderStore


class TestCatalogStore(unittest.TestCase):
    """Products are listed in creation order; invalid input is never stored."""

    def setUp(self) -> None:
        self.catalog = CatalogStore()

    def test_empty_catalog(self) -> None:
        self.assertEqual(self.catalog.list(), [])

    def test_list_preserves_creation_order(self) -> None:
        created = [self.catalog.create(f"Item {i}", i + 1) for i in range(5)]
        self.assertEqual(self.catalog.list(), created)
        self.assertEqual(len({p.id for p in created}), 5)

    def test_duplicate_names_allowed(self) -> None:
        a = self.catalog.create("Widget", 10)
        b = self.catalog.create("Widget", 12)
        self.assertNotEqual(a.id, b.id)
        self.assertEqual(len(self.catalog), 2)

    def test_invalid_products_rejected_and_not_listed(self) -> None:
        self.catalog.create("Widget", 10)
        for name, price in (
            ("", 10),
            (None, 10),
            ("Widget", 0),
            ("Widget", -1),
            ("Widget", None),
            ("Widget", math.nan),
            ("Widget", math.inf),
        ):
            with self.subTest(name=name, price=price):
                with self.assertRaises(InvalidInputError):
                    self.catalog.create(name, price)
        self.assertEqual(len(self.catalog.list()), 1)

    def test_list_is_a_snapshot(self) -> None:
        snapshot = self.catalog.list()
        self.catalog.create("Widget", 1)
        self.assertEqual(snapshot, [])


class TestOrderStore(unittest.TestCase):
    def test_add_and_list(self) -> None:
        store = OrderStore()
        order = Order(id="o1", user_id=2, product_id="p1", quantity=1)
        store.add(order)
        self.assertEqual(store.list(), [order])
        self.assertEqual(len(store), 1)


class TestIdempotencyLedger(unittest.TestCase):
    """check_and_mark admits exactly one caller per key."""

    def test_has_seen_and_mark_seen(self) -> None:
        ledger = IdempotencyLedger()
        self.assertFalse(ledger.has_seen("k1"))
        ledger.mark_seen("k1")
        self.assertTrue(ledger.has_seen("k1"))
        self.assertFalse(ledger.has_seen("k2"))

    def test_check_and_mark_first_caller_wins(self) -> None:
        ledger = IdempotencyLedger()
        self.assertTrue(ledger.check_and_mark("k1"))
        self.assertFalse(ledger.check_and_mark("k1"))
        self.assertTrue(ledger.check_and_mark("k2"))
        self.assertEqual(len(ledger), 2)

    def test_concurrent_claims_admit_one(self) -> None:
        ledger = IdempotencyLedger()
        workers = 32
        barrier = threading.Barrier(workers)
        results: list[bool] = []
        results_lock = threading.Lock()

        def claim() -> None:
            barrier.wait()
            won = ledger.check_and_mark("shared")
            with results_lock:
                results.append(won)

        threads = [threading.Thread(target=claim) for _ in range(workers)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        self.assertEqual(results.count(True), 1)
        self.assertEqual(results.count(False), workers - 1)


if __name__ == "__main__":
    unittest.main()
