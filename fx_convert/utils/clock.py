"""Time sources used by the cache freshness check."""

from __future__ import annotations

import time
from typing import Protocol


class Clock(Protocol):
    """Anything that reports the current time as seconds since the epoch."""

    def now(self) -> float:
        ...  # pragma: no cover - protocol definition


class SystemClock:
    """Wall clock backed by :func:`time.time`."""

    def now(self) -> float:
        return time.time()


__all__ = ["Clock", "SystemClock"]
