"""
Command-line front end for radixconv.

Usage:
    radixconv 11Z --from 36 --to 2
    radixconv ABC --from 16 --validate
    python scripts/run_converter.py FF --from 16 --to 10

Any conversion error is written to stderr and the process exits with code 1.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from radixconv.config import LOG_LEVELS, CliConfig, EncoderConfig
from radixconv.converter import convert
from radixconv.errors import RadixError
from radixconv.validator import validate

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog="radixconv",
        description="Convert unsigned integers between bases 2..36 (digits 0-9, A-Z)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Base 36 -> binary
  radixconv 11Z --from 36 --to 2

  # Only check that a numeral is valid in base 16
  radixconv ABC --from 16 --validate

  # Legacy behaviour: zero encodes to an empty string
  radixconv 000 --from 10 --to 2 --zero-as-empty
        """
    )

    parser.add_argument(
        "numeral",
        help="Numeral to convert (uppercase digits only)"
    )

    parser.add_argument(
        "--from",
        dest="origin_base",
        type=int,
        required=True,
        help="Base the numeral is written in (2..36)"
    )

    parser.add_argument(
        "--to",
        dest="dest_base",
        type=int,
        default=None,
        help="Base to convert to (2..36)"
    )

    parser.add_argument(
        "--validate",
        action="store_true",
        help="Only validate the numeral and print 'valid'"
    )

    parser.add_argument(
        "--zero-as-empty",
        action="store_true",
        help="Encode zero as an empty string instead of '0'"
    )

    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="WARNING",
        help="Logging level (default: WARNING)"
    )

    return parser


def run(args: argparse.Namespace) -> int:
    """Execute a parsed command; returns the process exit code."""
    cfg = CliConfig(
        log_level=args.log_level,
        encoder=EncoderConfig(zero_as_empty=args.zero_as_empty),
    )
    logging.basicConfig(level=cfg.log_level_value)

    try:
        if args.validate:
            validate(args.numeral, args.origin_base)
            print("valid")
        else:
            print(convert(args.numeral, args.origin_base, args.dest_base, cfg.encoder))
    except RadixError as e:
        logger.debug("conversion failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.dest_base is None and not args.validate:
        parser.error("--to is required unless --validate is given")

    return run(args)


def console_main() -> None:
    sys.exit(main())


if __name__ == "__main__":
    console_main()
