"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys

from yeri.ui.i18n import LANGUAGES
from yeri.ui.settings import AppSettings

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    defaults = AppSettings()
    parser = argparse.ArgumentParser(
        prog="yeri",
        description="Fare and payment status display for a transit validator.",
    )
    parser.add_argument(
        "--expiry-ms",
        type=_positive_int,
        default=defaults.expiry_duration_ms,
        help="how long a presented card stays on screen (default: %(default)s)",
    )
    parser.add_argument(
        "--fare",
        default=defaults.fare_amount,
        help="fare amount shown while idle (default: %(default)s)",
    )
    parser.add_argument(
        "--language",
        choices=LANGUAGES,
        default=defaults.language,
    )
    parser.add_argument(
        "--mask-pan",
        action="store_true",
        help="hide all but the last four PAN digits",
    )
    parser.add_argument(
        "--stdin",
        action="store_true",
        help="also read command tokens, one per line, from standard input",
    )
    parser.add_argument(
        "--log-level",
        choices=_LOG_LEVELS,
        default=defaults.log_level,
    )
    return parser


def parse_settings(argv: list[str] | None = None) -> AppSettings:
    args = build_parser().parse_args(argv)
    return AppSettings(
        language=args.language,
        log_level=args.log_level,
        fare_amount=args.fare,
        mask_pan=args.mask_pan,
        expiry_duration_ms=args.expiry_ms,
        read_stdin=args.stdin,
    )


def main(argv: list[str] | None = None) -> None:
    """Launch the validator application."""
    from yeri.ui.bootstrap import run_application

    settings = parse_settings(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    sys.exit(run_application(settings, sys.argv[:1]))


if __name__ == "__main__":
    main()
