"""Console rendering for conversion results and currency listings."""

from __future__ import annotations

import sys
from typing import TextIO

from fx_convert.converter import ConversionResult
from fx_convert.rates.loader import RateTable
from fx_convert.rates.names import UNKNOWN_CURRENCY, currency_name

BOLD = "\x1b[1m"
RESET = "\x1b[0m"
NO_UNDERLINE = "\x1b[24m"
GREEN = "\x1b[92m"
YELLOW = "\x1b[93m"
DEFAULT_FG = "\x1b[39m"

LISTING_HINT = f"\n{BOLD}Use the abbreviation to calc the exchange rates.{RESET}"


def _stream(out: TextIO | None) -> TextIO:
    return out if out is not None else sys.stdout


def format_result(result: ConversionResult) -> str:
    """Return the coloured one-line summary, amounts with four decimals."""

    return (
        f"{NO_UNDERLINE}Actual exchange rate:{RESET} "
        f"{GREEN}{result.from_code}{DEFAULT_FG} {YELLOW}{result.amount_from:.4f}{DEFAULT_FG} = "
        f"{GREEN}{result.to_code}{DEFAULT_FG} {YELLOW}{result.amount_to:.4f}{DEFAULT_FG}"
    )


def print_result(result: ConversionResult, out: TextIO | None = None) -> None:
    print(format_result(result), file=_stream(out))


def usual_currencies(table: RateTable) -> list[tuple[str, str]]:
    """Sorted ``(code, name)`` pairs for every code with a known display name."""

    pairs = ((code, currency_name(code)) for code in sorted(table))
    return [(code, name) for code, name in pairs if name != UNKNOWN_CURRENCY]


def print_usual(table: RateTable, out: TextIO | None = None) -> None:
    stream = _stream(out)
    print(f"{BOLD}Usual exchange rates:\n---------------------{RESET}\n", file=stream)
    print(" Abbr| Currency Name\n-----|----------------------", file=stream)
    for code, name in usual_currencies(table):
        print(f" {code} | {name}", file=stream)
    print(LISTING_HINT, file=stream)


def print_all(table: RateTable, out: TextIO | None = None) -> None:
    stream = _stream(out)
    print(f"{BOLD}All available exchange rates:\n-----------------------------{RESET}\n", file=stream)
    print("".join(f"| {code} " for code in sorted(table)) + "|", file=stream)
    print(LISTING_HINT, file=stream)


HELP_TEMPLATE = """
Usage:
{prog} [<OPTIONS>] [CURRENCY_FROM] [CURRENCY_TO] [AMOUNT]

Options:
-l,  --list        same as '--list-usual'
-la, --list-all    list all available currencies (long list)
-lu, --list-usual  list the usual currencies for exchange
-h,  --help        show this help
-V,  --version     show the program version and exit

Exchange arguments:
CURRENCY_FROM      The currency you have.
CURRENCY_TO        The currency you want to change into.
AMOUNT             The amount you want to change (default: 1).
"""


def print_help(prog: str, out: TextIO | None = None) -> None:
    print(HELP_TEMPLATE.format(prog=prog), file=_stream(out))


def print_version(prog: str, version: str, out: TextIO | None = None) -> None:
    print(f"{prog} v{version}", file=_stream(out))


__all__ = [
    "format_result",
    "print_all",
    "print_help",
    "print_result",
    "print_usual",
    "print_version",
    "usual_currencies",
]
