"""Freshness bookkeeping for the on-disk rates file."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from fx_convert.config import DEFAULT_CACHE_TTL_SECONDS
from fx_convert.utils.clock import Clock, SystemClock
from fx_convert.utils.logger import get_logger

LOGGER = get_logger(__name__)


class RatesSource(Protocol):
    """Contract for anything able to (re)write the cache file."""

    def refresh(self, destination: Path) -> Path:
        ...  # pragma: no cover - protocol definition


class RateCache:
    """Decide whether the cached rates file is recent enough to be used.

    The file modification time is the only staleness signal: a file written
    less than ``ttl_seconds`` ago is fresh, anything older, missing or
    unreadable is stale and must be downloaded again.
    """

    def __init__(
        self,
        path: str | Path,
        *,
        ttl_seconds: int = DEFAULT_CACHE_TTL_SECONDS,
        clock: Clock | None = None,
    ) -> None:
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        self.path = Path(path)
        self.ttl_seconds = ttl_seconds
        self.clock = clock or SystemClock()

    def age_seconds(self) -> float | None:
        """Return seconds since the last write, or ``None`` if unknown."""

        try:
            modified = self.path.stat().st_mtime
        except FileNotFoundError:
            LOGGER.info("A local copy of %s didn't exist.", self.path)
            return None
        except OSError as exc:
            LOGGER.warning("Couldn't read metadata of %s (error: %s).", self.path, exc)
            return None
        return self.clock.now() - modified

    def is_fresh(self) -> bool:
        age = self.age_seconds()
        if age is None:
            return False
        if age < 0:
            LOGGER.info("Cached rates in %s are dated in the future; refreshing", self.path)
            return False
        if age >= self.ttl_seconds:
            LOGGER.info("Cached rates in %s are %.0f seconds old; refreshing", self.path, age)
            return False
        return True

    def ensure_fresh(self, source: RatesSource) -> bool:
        """Refresh the cache through ``source`` when stale.

        Returns ``True`` when a download happened. Download errors propagate
        unchanged so the caller can abort the run.
        """

        if self.is_fresh():
            LOGGER.debug("Using cached rates from %s", self.path)
            return False
        source.refresh(self.path)
        return True


__all__ = ["RateCache", "RatesSource"]
