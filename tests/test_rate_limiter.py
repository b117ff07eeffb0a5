"""
Tests for the sliding-window rate limiter.
"""

import threading
import pytest

from socialgenius.exceptions import RateLimitExceededError
from socialgenius.rate_limiter import RateLimiter


class FakeClock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


class TestRateLimiter:

    def test_allows_requests_up_to_limit(self, clock):
        limiter = RateLimiter(requests_per_window=3, clock=clock)

        for _ in range(3):
            limiter.hit("1.2.3.4")

        with pytest.raises(RateLimitExceededError) as exc_info:
            limiter.hit("1.2.3.4")

        assert exc_info.value.limit == 3
        assert 1 <= exc_info.value.retry_after <= 61

    def test_keys_are_independent(self, clock):
        limiter = RateLimiter(requests_per_window=1, clock=clock)

        limiter.hit("1.1.1.1")
        limiter.hit("2.2.2.2")

        with pytest.raises(RateLimitExceededError):
            limiter.hit("1.1.1.1")

    def test_window_slides(self, clock):
        limiter = RateLimiter(requests_per_window=2, window_seconds=60, clock=clock)

        limiter.hit("ip")
        clock.now += 30
        limiter.hit("ip")
        clock.now += 31

        # The first request is now outside the window
        limiter.hit("ip")

        with pytest.raises(RateLimitExceededError):
            limiter.hit("ip")

    def test_rejected_request_is_not_recorded(self, clock):
        limiter = RateLimiter(requests_per_window=1, window_seconds=60, clock=clock)

        limiter.hit("ip")
        clock.now += 59
        with pytest.raises(RateLimitExceededError):
            limiter.hit("ip")
        clock.now += 2

        limiter.hit("ip")

    def test_sweep_drops_stale_keys(self, clock):
        limiter = RateLimiter(requests_per_window=5, window_seconds=60, max_keys=3, clock=clock)

        for key in ("a", "b", "c"):
            limiter.hit(key)
        clock.now += 61
        limiter.hit("d")

        assert limiter.tracked_keys() == 1

    def test_sweep_keeps_active_keys(self, clock):
        limiter = RateLimiter(requests_per_window=5, window_seconds=60, max_keys=2, clock=clock)

        limiter.hit("a")
        limiter.hit("b")
        limiter.hit("c")

        assert limiter.tracked_keys() == 3

    def test_concurrent_hits_are_all_recorded(self):
        limiter = RateLimiter(requests_per_window=1000)

        threads = [threading.Thread(target=limiter.hit, args=("ip",)) for _ in range(50)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(limiter._store["ip"]) == 50

    def test_reset(self, clock):
        limiter = RateLimiter(requests_per_window=1, clock=clock)
        limiter.hit("ip")

        limiter.reset()

        limiter.hit("ip")
        assert limiter.tracked_keys() == 1
