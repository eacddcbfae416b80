"""Public interface for the fx_convert package."""

from __future__ import annotations

from importlib import metadata as importlib_metadata

from fx_convert.converter import ConversionRequest, ConversionResult, convert
from fx_convert.errors import (
    ArgumentError,
    CurrencyNotFoundError,
    DownloadError,
    FxConvertError,
    RatesLoadError,
)
from fx_convert.rates import (
    RateCache,
    RatesFetcher,
    RateTable,
    currency_name,
    load_rate_table,
    parse_rate_table,
)

__all__ = [
    "__version__",
    "ArgumentError",
    "ConversionRequest",
    "ConversionResult",
    "CurrencyNotFoundError",
    "DownloadError",
    "FxConvertError",
    "RateCache",
    "RateTable",
    "RatesFetcher",
    "RatesLoadError",
    "convert",
    "currency_name",
    "load_rate_table",
    "parse_rate_table",
]

try:
    __version__ = importlib_metadata.version("fx-convert")
except importlib_metadata.PackageNotFoundError:  # pragma: no cover - fallback for local runs
    __version__ = "0.1.0"
