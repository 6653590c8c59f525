"""Fixed-window request counter keyed by client address."""

import threading
import time
from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class RateLimitResult:
    allowed: bool
    limit: int
    remaining: int
    reset_after: int  # whole seconds until the current window closes


class FixedWindowRateLimiter:
    """
    Allows max_requests per key in each window_seconds window.

    A key's window opens on its first request; expired windows are pruned at
    most once per window to bound memory.
    """

    def __init__(
        self,
        max_requests: int,
        window_seconds: int,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_requests < 1 or window_seconds < 1:
            raise ValueError("max_requests and window_seconds must be positive")
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        self._lock = threading.Lock()
        self._windows: dict[str, tuple[float, int]] = {}
        self._last_prune = clock()

    def hit(self, key: str) -> RateLimitResult:
        """Count one request for key and report whether it is within the limit."""
        now = self._clock()
        with self._lock:
            self._prune(now)
            start, count = self._windows.get(key, (now, 0))
            if now - start >= self.window_seconds:
                start, count = now, 0
            count += 1
            self._windows[key] = (start, count)

        reset_after = max(1, int(start + self.window_seconds - now + 0.999))
        return RateLimitResult(
            allowed=count <= self.max_requests,
            limit=self.max_requests,
            remaining=max(0, self.max_requests - count),
            reset_after=reset_after,
        )

    def _prune(self, now: float) -> None:
        if now - self._last_prune < self.window_seconds:
            return
        self._windows = {
            k: (start, count)
            for k, (start, count) in self._windows.items()
            if now - start < self.window_seconds
        }
        self._last_prune = now
