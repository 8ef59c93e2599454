"""Per-IP request counting over one-second buckets."""

from __future__ import annotations

import threading
import time
from collections.abc import Callable

KEY_TTL_SECONDS = 60.0


class RateLimitExceeded(Exception):
    """An address made more requests in one second than allowed."""

    status = 429

    def __init__(self, ip: str, count: int, limit: int) -> None:
        super().__init__(f"{ip} made {count} requests, limit is {limit}")
        self.ip = ip
        self.count = count
        self.limit = limit

    @property
    def body(self) -> dict:
        return {"code": self.status, "msg": "请求过于频繁"}


class RateLimiter:
    """Counts requests per address per second; counters live for a minute."""

    def __init__(
        self,
        limit: int,
        ttl: float = KEY_TTL_SECONDS,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.limit = limit
        self._ttl = ttl
        self._clock = clock
        self._counters: dict[str, list[float]] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._counters)

    def _purge(self, now: float) -> None:
        expired = [key for key, (_, until) in self._counters.items() if until <= now]
        for key in expired:
            del self._counters[key]

    def hit(self, ip: str, now: float | None = None) -> int:
        """Count one request from an address and return the count for its second."""
        if now is None:
            now = self._clock()
        key = f"rate_{ip}_{int(now)}"
        with self._lock:
            self._purge(now)
            entry = self._counters.setdefault(key, [0, now])
            entry[0] += 1
            entry[1] = now + self._ttl
            return int(entry[0])

    def check(self, ip: str, now: float | None = None) -> int:
        """Count a request, raising RateLimitExceeded when over the limit."""
        count = self.hit(ip, now)
        if count > self.limit:
            raise RateLimitExceeded(ip, count, self.limit)
        return count