"""Command line front-end: refresh, load, parse, then convert or list."""

from __future__ import annotations

import sys
from typing import Sequence

import requests

from fx_convert import __version__
from fx_convert.arguments import Action, parse_arguments
from fx_convert.config import Settings, get_settings
from fx_convert.converter import convert
from fx_convert.errors import EXIT_OK, FxConvertError
from fx_convert.rates.cache import RateCache
from fx_convert.rates.fetcher import RatesFetcher
from fx_convert.rates.loader import load_rate_table
from fx_convert.report import print_all, print_help, print_result, print_usual, print_version
from fx_convert.utils.clock import Clock
from fx_convert.utils.logger import configure_logging, get_logger

LOGGER = get_logger(__name__)

PROG = "fx-convert"


def _fail(exc: FxConvertError, headline: str | None = None) -> int:
    print(str(exc), file=sys.stderr)
    if headline:
        print(headline, file=sys.stderr)
    return exc.exit_code


def main(
    argv: Sequence[str] | None = None,
    *,
    settings: Settings | None = None,
    session: requests.Session | None = None,
    clock: Clock | None = None,
) -> int:
    """Run one invocation and return its process exit code."""

    settings = settings or get_settings()
    configure_logging(settings.log_level)
    args = list(sys.argv[1:] if argv is None else argv)

    cache = RateCache(settings.cache_path, ttl_seconds=settings.cache_ttl_seconds, clock=clock)
    fetcher = RatesFetcher(
        settings.rates_url, session=session, timeout=settings.http_timeout_seconds
    )
    try:
        cache.ensure_fresh(fetcher)
    except FxConvertError as exc:
        return _fail(exc, "Error downloading the currency data.")

    try:
        table = load_rate_table(cache.path)
    except FxConvertError as exc:
        return _fail(exc, "Error loading currency data from disk.")

    try:
        outcome = parse_arguments(args, prog=PROG)
    except FxConvertError as exc:
        return _fail(exc)
    LOGGER.debug("Requested action: %s", outcome.action.value)

    if outcome.action is Action.HELP:
        print_help(PROG)
    elif outcome.action is Action.VERSION:
        print_version(PROG, __version__)
    elif outcome.action is Action.LIST_USUAL:
        print_usual(table)
    elif outcome.action is Action.LIST_ALL:
        print_all(table)
    elif outcome.request is not None:
        try:
            result = convert(table, outcome.request)
        except FxConvertError as exc:
            return _fail(exc)
        print_result(result)
    return EXIT_OK


def run() -> None:  # pragma: no cover - console script wrapper
    sys.exit(main())


__all__ = ["main", "run"]
