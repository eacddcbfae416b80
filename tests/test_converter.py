from __future__ import annotations

import math
from types import MappingProxyType

import pytest

from fx_convert.converter import ConversionRequest, convert, require_currencies
from fx_convert.errors import CurrencyNotFoundError

TABLE = MappingProxyType({"EUR": 1.0, "USD": 1.1, "JPY": 161.5, "GBP": 0.85})


def test_convert_uses_cross_rate() -> None:
    result = convert(TABLE, ConversionRequest("USD", "JPY", 10.0))

    assert result.rate == TABLE["JPY"] / TABLE["USD"]
    assert result.amount_to == pytest.approx(10.0 * 161.5 / 1.1)
    assert result.amount_from == 10.0
    assert (result.from_code, result.to_code) == ("USD", "JPY")


def test_convert_from_base_currency() -> None:
    result = convert(TABLE, ConversionRequest("EUR", "USD", 50.0))

    assert result.rate == pytest.approx(1.1)
    assert result.amount_to == pytest.approx(55.0)


def test_convert_does_not_round() -> None:
    result = convert(TABLE, ConversionRequest("GBP", "USD", 1.0))

    assert result.amount_to == 1.1 / 0.85


def test_same_currency_is_identity() -> None:
    result = convert(TABLE, ConversionRequest("JPY", "JPY", 42.0))

    assert result.rate == 1.0
    assert result.amount_to == 42.0


@pytest.mark.parametrize("pair", [("EUR", "USD"), ("USD", "JPY"), ("GBP", "JPY")])
def test_round_trip_returns_original_amount(pair: tuple[str, str]) -> None:
    there = convert(TABLE, ConversionRequest(pair[0], pair[1], 123.45))
    back = convert(TABLE, ConversionRequest(pair[1], pair[0], there.amount_to))

    assert math.isclose(back.amount_to, 123.45, rel_tol=1e-12)


def test_missing_from_currency_exit_code() -> None:
    with pytest.raises(CurrencyNotFoundError) as excinfo:
        convert(TABLE, ConversionRequest("XXX", "USD"))

    assert excinfo.value.exit_code == 4
    assert excinfo.value.code == "XXX"
    assert str(excinfo.value) == "Did not find currency XXX."


def test_missing_to_currency_exit_code() -> None:
    with pytest.raises(CurrencyNotFoundError) as excinfo:
        require_currencies(TABLE, ConversionRequest("EUR", "YYY"))

    assert excinfo.value.exit_code == 5


def test_from_currency_is_checked_first() -> None:
    with pytest.raises(CurrencyNotFoundError) as excinfo:
        convert(TABLE, ConversionRequest("XXX", "YYY"))

    assert excinfo.value.code == "XXX"
    assert excinfo.value.exit_code == 4
