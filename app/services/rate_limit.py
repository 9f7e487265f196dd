from __future__ import annotations

import math
import threading
from dataclasses import dataclass
from datetime import datetime, timezone


@dataclass(frozen=True)
class RateLimitDecision:
    allowed: bool
    limit: int
    remaining: int
    reset_after_seconds: int

    def headers(self) -> dict[str, str]:
        return {
            "RateLimit-Limit": str(self.limit),
            "RateLimit-Remaining": str(self.remaining),
            "RateLimit-Reset": str(self.reset_after_seconds),
        }


class FixedWindowRateLimiter:
    """Counts hits per client key inside fixed windows of ``window_seconds``."""

    def __init__(self, *, max_requests: int, window_seconds: int) -> None:
        self._max_requests = max(int(max_requests), 0)
        self._window_seconds = max(int(window_seconds), 1)
        self._lock = threading.Lock()
        self._windows: dict[str, tuple[datetime, int]] = {}

    @property
    def max_requests(self) -> int:
        return self._max_requests

    @property
    def window_seconds(self) -> int:
        return self._window_seconds

    def hit(self, key: str, *, now: datetime) -> RateLimitDecision:
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)

        with self._lock:
            started, count = self._windows.get(key, (now, 0))
            elapsed = (now - started).total_seconds()
            if elapsed >= self._window_seconds:
                started, count, elapsed = now, 0, 0.0
            count += 1
            self._windows[key] = (started, count)
            self._prune(now)

        reset_after = max(math.ceil(self._window_seconds - elapsed), 1)
        return RateLimitDecision(
            allowed=count <= self._max_requests,
            limit=self._max_requests,
            remaining=max(self._max_requests - count, 0),
            reset_after_seconds=reset_after,
        )

    def reset(self) -> None:
        with self._lock:
            self._windows.clear()

    def _prune(self, now: datetime) -> None:
        expired = [
            k
            for k, (started, _) in self._windows.items()
            if (now - started).total_seconds() >= self._window_seconds
        ]
        for k in expired:
            del self._windows[k]
