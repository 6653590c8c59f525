"""Idempotency ledger: every key ever accepted, kept for the life of the process."""

import threading


class IdempotencyLedger:
    """
    Set of seen idempotency keys.

    check_and_mark() is the only safe way to claim a key when requests run
    concurrently; has_seen() followed by mark_seen() leaves a window where two
    callers both observe the key as new.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._keys: set[str] = set()

    def has_seen(self, key: str) -> bool:
        with self._lock:
            return key in self._keys

    def mark_seen(self, key: str) -> None:
        with self._lock:
            self._keys.add(key)

    def check_and_mark(self, key: str) -> bool:
        """Record key; return True if this call was the first to present it."""
        with self._lock:
            if key in self._keys:
                return False
            self._keys.add(key)
            return True

    def __len__(self) -> int:
        with self._lock:
            return len(self._keys)
