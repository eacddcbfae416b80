"""Runtime configuration for fx_convert.

Values default to the public rates feed and a one hour cache in the platform
temporary directory. Each field can be overridden through an ``FX_CONVERT_``
prefixed environment variable (``FX_CONVERT_TEMP_DIR=/var/cache``) or by
passing keyword arguments when building :class:`Settings` directly.
"""

from __future__ import annotations

import tempfile
from functools import lru_cache
from pathlib import Path
from typing import Final

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from fx_convert.utils.logger import get_logger

LOGGER = get_logger(__name__)

DEFAULT_RATES_URL: Final[str] = "https://cdn.wahrungsrechner.info/api/latest.json"
DEFAULT_CACHE_FILENAME: Final[str] = "currency.json"
DEFAULT_CACHE_TTL_SECONDS: Final[int] = 3_600


class Settings(BaseSettings):
    """Settings loaded from the environment with sensible defaults."""

    model_config = SettingsConfigDict(env_prefix="FX_CONVERT_", case_sensitive=False)

    rates_url: str = DEFAULT_RATES_URL
    cache_filename: str = DEFAULT_CACHE_FILENAME
    cache_ttl_seconds: int = Field(default=DEFAULT_CACHE_TTL_SECONDS, gt=0)
    temp_dir: Path | None = None
    # ``None`` keeps the transfer blocking without a deadline.
    http_timeout_seconds: float | None = Field(default=None, gt=0)
    log_level: str = "WARNING"

    @property
    def cache_path(self) -> Path:
        """Absolute location of the cached rates file."""

        return resolve_temp_dir(self) / self.cache_filename


def resolve_temp_dir(settings: Settings) -> Path:
    """Return the directory that holds the cache file.

    An explicit ``temp_dir`` wins; otherwise the platform convention reported
    by :func:`tempfile.gettempdir` is used, falling back to the current
    directory when no usable temporary directory exists.
    """

    if settings.temp_dir is not None:
        return Path(settings.temp_dir)
    try:
        return Path(tempfile.gettempdir())
    except FileNotFoundError as exc:
        LOGGER.warning("Could not find a temporary directory (%s); using '.'", exc)
        return Path(".")


@lru_cache
def get_settings() -> Settings:
    return Settings()


__all__ = [
    "DEFAULT_RATES_URL",
    "DEFAULT_CACHE_FILENAME",
    "DEFAULT_CACHE_TTL_SECONDS",
    "Settings",
    "get_settings",
    "resolve_temp_dir",
]
