"""Cross-rate computation between two entries of a rate table."""

from __future__ import annotations

from dataclasses import dataclass

from fx_convert.errors import EXIT_FROM_NOT_FOUND, EXIT_TO_NOT_FOUND, CurrencyNotFoundError
from fx_convert.rates.loader import RateTable

DEFAULT_AMOUNT = 1.0


@dataclass(frozen=True, slots=True)
class ConversionRequest:
    """What the user asked to convert."""

    from_code: str
    to_code: str
    amount: float = DEFAULT_AMOUNT


@dataclass(frozen=True, slots=True)
class ConversionResult:
    """Outcome of a single conversion; rendering is left to :mod:`fx_convert.report`."""

    from_code: str
    to_code: str
    amount_from: float
    rate: float
    amount_to: float


def require_currencies(table: RateTable, request: ConversionRequest) -> None:
    """Raise :class:`CurrencyNotFoundError` unless both codes are known.

    The source currency is checked before the target currency.
    """

    if request.from_code not in table:
        raise CurrencyNotFoundError(request.from_code, exit_code=EXIT_FROM_NOT_FOUND)
    if request.to_code not in table:
        raise CurrencyNotFoundError(request.to_code, exit_code=EXIT_TO_NOT_FOUND)


def convert(table: RateTable, request: ConversionRequest) -> ConversionResult:
    """Convert ``request.amount`` using the ratio of the two table rates."""

    require_currencies(table, request)
    rate = table[request.to_code] / table[request.from_code]
    return ConversionResult(
        from_code=request.from_code,
        to_code=request.to_code,
        amount_from=request.amount,
        rate=rate,
        amount_to=request.amount * rate,
    )


__all__ = ["DEFAULT_AMOUNT", "ConversionRequest", "ConversionResult", "convert", "require_currencies"]
