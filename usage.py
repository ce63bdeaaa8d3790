"""
usage.py: Per-client daily allowance for the free tier.

The limiter never owns its storage: a UsageStore (anything with get/set
plus expiry) is handed in, so the web layer can swap the in-memory store
for a shared one and tests can drive the clock.
"""

import logging
import threading
import time
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, Optional, Protocol, Tuple

logger = logging.getLogger(__name__)


class UsageLimitExceeded(Exception):
    """Raised when a client has used up today's allowance."""

    def __init__(self, client_id: str, limit: int):
        super().__init__(f"Daily limit of {limit} analyses reached.")
        self.client_id = client_id
        self.limit = limit


class UsageStore(Protocol):
    def get(self, key: str) -> Optional[int]:
        ...

    def set(self, key: str, value: int, ttl_seconds: float) -> None:
        ...


class InMemoryUsageStore:
    """Dict-backed store; entries vanish once their TTL has passed."""

    def __init__(self, clock: Callable[[], float] = time.time):
        self._entries: Dict[str, Tuple[int, float]] = {}   # key -> (value, expires_at)
        self._clock = clock
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[int]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            value, expires_at = entry
            if expires_at <= self._clock():
                del self._entries[key]
                return None
            return value

    def set(self, key: str, value: int, ttl_seconds: float) -> None:
        with self._lock:
            self._entries[key] = (value, self._clock() + ttl_seconds)

    def __len__(self) -> int:
        return len(self._entries)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class UsageLimiter:
    def __init__(self, store: UsageStore, daily_limit: int,
                 clock: Callable[[], datetime] = _utc_now):
        self.store = store
        self.daily_limit = daily_limit
        self._clock = clock
        self._lock = threading.Lock()

    def _key(self, client_id: str, now: datetime) -> str:
        return f"usage:{now.strftime('%Y-%m-%d')}:{client_id}"

    @staticmethod
    def _seconds_until_midnight(now: datetime) -> float:
        tomorrow = (now + timedelta(days=1)).replace(hour=0, minute=0, second=0, microsecond=0)
        return (tomorrow - now).total_seconds()

    def remaining(self, client_id: str) -> int:
        used = self.store.get(self._key(client_id, self._clock())) or 0
        return max(0, self.daily_limit - used)

    def consume(self, client_id: str) -> int:
        """Use one unit of today's allowance. Returns what is left afterwards."""
        with self._lock:
            now = self._clock()
            key = self._key(client_id, now)
            used = self.store.get(key) or 0
            if used >= self.daily_limit:
                logger.info("usage limit reached for %s (%d/%d)", client_id, used, self.daily_limit)
                raise UsageLimitExceeded(client_id, self.daily_limit)
            used += 1
            self.store.set(key, used, self._seconds_until_midnight(now))
            return self.daily_limit - used
