"""Command line parsing for ``fx-convert``.

The grammar is deliberately small: ``[OPTIONS] FROM TO [AMOUNT]``. Options are
inspected in the order they appear and the first recognised one wins, so
``fx-convert --list-all EUR`` lists currencies and ignores ``EUR``.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from fx_convert.converter import DEFAULT_AMOUNT, ConversionRequest
from fx_convert.errors import EXIT_ARGUMENT, EXIT_USAGE, ArgumentError


# Plain decimal or exponent notation; no padding, underscores or signs.
AMOUNT_PATTERN = re.compile(r"(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class Action(str, Enum):
    """What the invocation asked for."""

    CONVERT = "convert"
    LIST_USUAL = "list-usual"
    LIST_ALL = "list-all"
    HELP = "help"
    VERSION = "version"


@dataclass(frozen=True, slots=True)
class ArgumentOutcome:
    action: Action
    request: ConversionRequest | None = None


FLAG_ACTIONS: dict[str, Action] = {
    "-h": Action.HELP,
    "--help": Action.HELP,
    "-V": Action.VERSION,
    "--version": Action.VERSION,
    "-l": Action.LIST_USUAL,
    "--list": Action.LIST_USUAL,
    "-lu": Action.LIST_USUAL,
    "--list-usual": Action.LIST_USUAL,
    "-la": Action.LIST_ALL,
    "--list-all": Action.LIST_ALL,
}


def parse_amount(token: str) -> float:
    """Parse ``AMOUNT`` into a finite, non-negative float."""

    if not AMOUNT_PATTERN.fullmatch(token):
        raise ArgumentError(f"Invalid amount: {token}", exit_code=EXIT_ARGUMENT)
    amount = float(token)
    if not math.isfinite(amount) or amount < 0:
        raise ArgumentError(f"Invalid amount: {token}", exit_code=EXIT_ARGUMENT)
    return amount


def parse_arguments(args: Sequence[str], *, prog: str = "fx-convert") -> ArgumentOutcome:
    """Classify ``args`` (without the program name) into an :class:`ArgumentOutcome`.

    Raises :class:`ArgumentError` with exit code 1 for missing input and exit
    code 3 for unknown options, surplus positionals or a malformed amount.
    """

    if not args:
        raise ArgumentError(f"{prog} needs three arguments or try --help.", exit_code=EXIT_USAGE)

    positionals: list[str] = []
    for token in args:
        action = FLAG_ACTIONS.get(token)
        if action is not None:
            return ArgumentOutcome(action)
        if token.startswith("-"):
            raise ArgumentError(f"Unknown argument: {token}", exit_code=EXIT_ARGUMENT)
        if len(positionals) == 3:
            raise ArgumentError(
                f"Too many arguments, try: {prog} --help", exit_code=EXIT_ARGUMENT
            )
        positionals.append(token)

    if len(positionals) < 2:
        raise ArgumentError(f"Not enough arguments, try: {prog} --help", exit_code=EXIT_USAGE)

    from_code, to_code = positionals[0].upper(), positionals[1].upper()
    amount = parse_amount(positionals[2]) if len(positionals) == 3 else DEFAULT_AMOUNT
    return ArgumentOutcome(
        Action.CONVERT,
        ConversionRequest(from_code=from_code, to_code=to_code, amount=amount),
    )


__all__ = ["Action", "ArgumentOutcome", "FLAG_ACTIONS", "parse_amount", "parse_arguments"]
