from datetime import datetime, timezone

import pytest

from usage import InMemoryUsageStore, UsageLimiter, UsageLimitExceeded


class FakeClock:
    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now


def test_store_entries_expire():
    clock = FakeClock()
    store = InMemoryUsageStore(clock=clock)
    store.set("k", 3, ttl_seconds=10)
    assert store.get("k") == 3

    clock.now += 10
    assert store.get("k") is None
    assert len(store) == 0


def test_store_missing_key():
    assert InMemoryUsageStore().get("nothing") is None


def test_consume_counts_down_then_raises():
    limiter = UsageLimiter(InMemoryUsageStore(), daily_limit=2)
    assert limiter.remaining("1.2.3.4") == 2
    assert limiter.consume("1.2.3.4") == 1
    assert limiter.consume("1.2.3.4") == 0

    with pytest.raises(UsageLimitExceeded) as exc:
        limiter.consume("1.2.3.4")
    assert exc.value.limit == 2
    assert limiter.remaining("1.2.3.4") == 0


def test_clients_are_counted_separately():
    limiter = UsageLimiter(InMemoryUsageStore(), daily_limit=1)
    limiter.consume("a")
    assert limiter.remaining("b") == 1


def test_allowance_resets_on_new_utc_day():
    day = {"now": datetime(2024, 3, 1, 23, 59, tzinfo=timezone.utc)}
    limiter = UsageLimiter(InMemoryUsageStore(), daily_limit=1, clock=lambda: day["now"])
    limiter.consume("a")
    assert limiter.remaining("a") == 0

    day["now"] = datetime(2024, 3, 2, 0, 1, tzinfo=timezone.utc)
    assert limiter.remaining("a") == 1


def test_ttl_runs_to_next_midnight():
    now = datetime(2024, 3, 1, 18, 0, tzinfo=timezone.utc)
    assert UsageLimiter._seconds_until_midnight(now) == 6 * 3600


def test_store_ttl_applied_on_consume():
    store_clock = FakeClock(0.0)
    store = InMemoryUsageStore(clock=store_clock)
    now = datetime(2024, 3, 1, 23, 0, tzinfo=timezone.utc)
    limiter = UsageLimiter(store, daily_limit=5, clock=lambda: now)
    limiter.consume("a")

    store_clock.now = 3599
    assert store.get("usage:2024-03-01:a") == 1
    store_clock.now = 3600
    assert store.get("usage:2024-03-01:a") is None
