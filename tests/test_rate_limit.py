"""Unit tests for storefront.core.rate_limit and the rate limiting middleware."""

import unittest

from fastapi.testclient import TestClient

from storefront.core.rate_limit import FixedWindowRateLimiter
from storefront.main import create_app
from tests.helpers import make_settings


class FakeClock:
    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


class TestFixedWindowRateLimiter(unittest.TestCase):
    """Each key may make max_requests per window."""

    def setUp(self) -> None:
        self.clock = FakeClock()
        self.limiter = FixedWindowRateLimiter(3, 60, clock=self.clock)

    def test_allows_up_to_limit_then_blocks(self) -> None:
        results = [self.limiter.hit("1.2.3.4") for _ in range(4)]
        self.assertEqual([r.allowed for r in results], [True, True, True, False])
        self.assertEqual([r.remaining for r in results], [2, 1, 0, 0])
        self.assertEqual(results[-1].limit, 3)

    def test_keys_are_independent(self) -> None:
        for _ in range(3):
            self.limiter.hit("a")
        self.assertFalse(self.limiter.hit("a").allowed)
        self.assertTrue(self.limiter.hit("b").allowed)

    def test_window_resets(self) -> None:
        for _ in range(4):
            self.limiter.hit("a")
        self.clock.now += 30
        blocked = self.limiter.hit("a")
        self.assertFalse(blocked.allowed)
        self.assertEqual(blocked.reset_after, 30)
        self.clock.now += 30
        self.assertTrue(self.limiter.hit("a").allowed)

    def test_expired_windows_are_pruned(self) -> None:
        self.limiter.hit("a")
        self.clock.now += 61
        self.limiter.hit("b")
        self.assertEqual(set(self.limiter._windows), {"b"})

    def test_rejects_non_positive_configuration(self) -> None:
        with self.assertRaises(ValueError):
            FixedWindowRateLimiter(0, 60)
        with self.assertRaises(ValueError):
            FixedWindowRateLimiter(10, 0)


class TestRateLimitMiddleware(unittest.TestCase):
    """Requests past the budget get 429 with the common error body."""

    def test_blocks_after_limit(self) -> None:
        settings = make_settings(
            RATE_LIMIT_ENABLED=True,
            RATE_LIMIT_MAX_REQUESTS=2,
            RATE_LIMIT_WINDOW_SEC=60,
        )
        client = TestClient(create_app(settings))
        first = client.get("/api/v1/products")
        second = client.get("/api/v1/products")
        third = client.get("/api/v1/products")
        self.assertEqual(first.status_code, 200)
        self.assertEqual(first.headers["X-RateLimit-Limit"], "2")
        self.assertEqual(first.headers["X-RateLimit-Remaining"], "1")
        self.assertEqual(second.status_code, 200)
        self.assertEqual(third.status_code, 429)
        self.assertEqual(
            third.json(), {"message": "Too many requests, please try again later."}
        )
        self.assertIn("Retry-After", third.headers)
        self.assertEqual(third.headers["X-Content-Type-Options"], "nosniff")

    def test_disabled_limiter_adds_no_headers(self) -> None:
        client = TestClient(create_app(make_settings(RATE_LIMIT_ENABLED=False)))
        response = client.get("/api/v1/products")
        self.assertEqual(response.status_code, 200)
        self.assertNotIn("X-RateLimit-Limit", response.headers)


if __name__ == "__main__":
    unittest.main()
