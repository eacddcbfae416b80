"""Exception hierarchy for fx_convert.

Every error carries the process exit code the command line front-end reports
for it, so library callers can catch :class:`FxConvertError` and the CLI can
translate it without a lookup table.
"""

from __future__ import annotations

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_DOWNLOAD = 1
EXIT_LOAD = 2
EXIT_ARGUMENT = 3
EXIT_FROM_NOT_FOUND = 4
EXIT_TO_NOT_FOUND = 5


class FxConvertError(Exception):
    """Base class for all user-visible failures."""

    exit_code: int = EXIT_USAGE

    def __init__(self, message: str, *, exit_code: int | None = None) -> None:
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class DownloadError(FxConvertError):
    """The rate file could not be created or the HTTP transfer failed."""

    exit_code = EXIT_DOWNLOAD


class RatesLoadError(FxConvertError):
    """The cached rate file is unreadable, empty or not the expected JSON."""

    exit_code = EXIT_LOAD


class ArgumentError(FxConvertError):
    """Malformed, missing or excess command line input."""

    exit_code = EXIT_ARGUMENT


class CurrencyNotFoundError(FxConvertError):
    """A requested currency code is absent from the rate table."""

    def __init__(self, code: str, *, exit_code: int) -> None:
        super().__init__(f"Did not find currency {code}.", exit_code=exit_code)
        self.code = code


__all__ = [
    "EXIT_OK",
    "EXIT_USAGE",
    "EXIT_DOWNLOAD",
    "EXIT_LOAD",
    "EXIT_ARGUMENT",
    "EXIT_FROM_NOT_FOUND",
    "EXIT_TO_NOT_FOUND",
    "FxConvertError",
    "DownloadError",
    "RatesLoadError",
    "ArgumentError",
    "CurrencyNotFoundError",
]
