"""Display names for the commonly traded currencies."""

from __future__ import annotations

from typing import Final, Mapping

UNKNOWN_CURRENCY: Final[str] = "Unknown"

CURRENCY_NAMES: Final[Mapping[str, str]] = {
    "EUR": "Euro",
    "USD": "US Dollar",
    "JPY": "Japanese Yen",
    "BGN": "Bulgarian Lev",
    "CZK": "Czech Koruna",
    "DKK": "Danish Krone",
    "GBP": "Pound Sterling",
    "HUF": "Hungarian Forint",
    "PLN": "Polish Zloty",
    "RON": "Romanian Leu",
    "SEK": "Swedish Krona",
    "CHF": "Swiss Franc",
    "ISK": "Icelandic Krona",
    "NOK": "Norwegian Krone",
    "TRY": "Turkish Lira",
    "AUD": "Australian Dollar",
    "BRL": "Brazilian Real",
    "CAD": "Canadian Dollar",
    "CNY": "Chinese Yuan Renminbi",
    "HKD": "Hong Kong Dollar",
    "IDR": "Indonesian Rupiah",
    "ILS": "Israeli Shekel",
    "INR": "Indian Rupee",
    "KRW": "South Korean Won",
    "MXN": "Mexican Peso",
    "MYR": "Malaysian Ringgit",
    "NZD": "New Zealand Dollar",
    "PHP": "Philippine Peso",
    "SGD": "Singapore Dollar",
    "THB": "Thai Baht",
    "ZAR": "South African Rand",
}


def currency_name(code: str) -> str:
    """Return the display name for ``code`` or :data:`UNKNOWN_CURRENCY`."""

    return CURRENCY_NAMES.get(code, UNKNOWN_CURRENCY)


__all__ = ["CURRENCY_NAMES", "UNKNOWN_CURRENCY", "currency_name"]
