"""Turn the cached rates JSON into an in-memory rate table."""

from __future__ import annotations

import json
import math
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

from fx_convert.errors import RatesLoadError
from fx_convert.utils.logger import get_logger

LOGGER = get_logger(__name__)

RateTable = Mapping[str, float]


def _coerce_rate(code: str, value: Any) -> float:
    # ``bool`` is an ``int`` subclass but never a valid rate.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise RatesLoadError(f"Rate for {code} is not numeric: {value!r}")
    try:
        rate = float(value)
    except OverflowError as exc:
        raise RatesLoadError(f"Rate for {code} is out of range") from exc
    if not math.isfinite(rate):
        raise RatesLoadError(f"Rate for {code} is not finite: {value!r}")
    if not rate > 0:
        raise RatesLoadError(f"Rate for {code} must be positive: {value!r}")
    return rate


def _reject_constant(token: str) -> Any:
    # NaN and Infinity are accepted by ``json`` but are not valid JSON.
    raise RatesLoadError(f"Rates file is not valid JSON: unexpected {token}")


def parse_rate_table(content: str) -> RateTable:
    """Parse a ``{"rates": {"CODE": number, ...}}`` payload.

    Other top-level fields are ignored. The returned mapping is read-only.
    """

    if not content.strip():
        raise RatesLoadError("File is empty.")
    try:
        payload = json.loads(content, parse_constant=_reject_constant)
    except ValueError as exc:
        raise RatesLoadError(f"Rates file is not valid JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise RatesLoadError("Rates file must contain a JSON object")
    rates = payload.get("rates")
    if not isinstance(rates, dict):
        raise RatesLoadError("Rates file has no 'rates' object")

    table: dict[str, float] = {}
    for code, value in rates.items():
        table[str(code)] = _coerce_rate(code, value)
    return MappingProxyType(table)


def load_rate_table(path: str | Path) -> RateTable:
    """Read the cache file in one go and parse it."""

    file_path = Path(path)
    try:
        content = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise RatesLoadError(f"Couldn't open {file_path} (error: {exc}).") from exc
    table = parse_rate_table(content)
    LOGGER.debug("Loaded %s rates from %s", len(table), file_path)
    return table


__all__ = ["RateTable", "load_rate_table", "parse_rate_table"]
