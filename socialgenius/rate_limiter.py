"""
Per-client sliding-window rate limiting for the generation endpoint.
"""

import threading
import time
from collections import deque
from typing import Callable, Deque, Dict

from socialgenius.exceptions import RateLimitExceededError
from socialgenius.utils.constants import RATE_LIMIT_WINDOW_SECONDS
from socialgenius.utils.logger import logger


class RateLimiter:
    """
    Tracks recent request timestamps per client address.

    The store is swept only when the number of tracked keys exceeds
    max_keys, so memory use is bounded approximately, not strictly.
    """

    def __init__(
        self,
        requests_per_window: int,
        window_seconds: float = RATE_LIMIT_WINDOW_SECONDS,
        max_keys: int = 1000,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.requests_per_window = requests_per_window
        self.window_seconds = window_seconds
        self.max_keys = max_keys
        self._clock = clock
        self._store: Dict[str, Deque[float]] = {}
        self._lock = threading.Lock()

    def _prune(self, timestamps: Deque[float], now: float):
        while timestamps and now - timestamps[0] >= self.window_seconds:
            timestamps.popleft()

    def hit(self, key: str):
        """
        Record a request for key.

        Raises:
            RateLimitExceededError: if key already used its budget in the window
        """
        now = self._clock()
        with self._lock:
            timestamps = self._store.setdefault(key, deque())
            self._prune(timestamps, now)

            if len(timestamps) >= self.requests_per_window:
                retry_after = max(1, int(self.window_seconds - (now - timestamps[0])) + 1)
                logger.warning(f"Rate limit exceeded for IP: {key}")
                raise RateLimitExceededError(self.requests_per_window, retry_after)

            timestamps.append(now)

            if len(self._store) > self.max_keys:
                self._sweep(now)

    def _sweep(self, now: float):
        stale = []
        for key, timestamps in self._store.items():
            self._prune(timestamps, now)
            if not timestamps:
                stale.append(key)
        for key in stale:
            del self._store[key]
        logger.debug(f"Rate limiter sweep removed {len(stale)} stale keys")

    def tracked_keys(self) -> int:
        with self._lock:
            return len(self._store)

    def reset(self):
        with self._lock:
            self._store.clear()
