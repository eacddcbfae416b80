"""Rate download, caching and loading helpers."""

from __future__ import annotations

from fx_convert.rates.cache import RateCache
from fx_convert.rates.fetcher import RatesFetcher
from fx_convert.rates.loader import RateTable, load_rate_table, parse_rate_table
from fx_convert.rates.names import CURRENCY_NAMES, UNKNOWN_CURRENCY, currency_name

__all__ = [
    "CURRENCY_NAMES",
    "UNKNOWN_CURRENCY",
    "RateCache",
    "RateTable",
    "RatesFetcher",
    "currency_name",
    "load_rate_table",
    "parse_rate_table",
]
