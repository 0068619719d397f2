"""
Command line entry point.

Decodes a shortcode and prints the result as JSON on stdout. Logs go to
stderr.

Examples:
  shortcode parse CALL_FRXUSDJPY_100_1393816299_1393828299_S0P_0 --currency USD
  shortcode longcode PUT_FRXEURNOK_100_1394590423_1394591143_S0P_0

Exit codes:
  0   - Success
  1   - Library error (missing template, unrecognized barrier, ...)
  2   - Invalid arguments (argparse default)
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from config.logging_config import setup_logging
from config.settings import Settings, load_settings
from core.errors import LongcodeError
from longcode.service import create_longcode_stack
from longcode.tokens import longcode_to_json

logger = logging.getLogger(__name__)


def parse_cli_args(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse CLI arguments.

    Args:
        argv: Command line arguments (defaults to sys.argv)

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        prog="shortcode",
        description="Convert contract shortcodes to parameters or longcode tokens",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__.split("Examples:", 1)[1] if __doc__ else None,
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Log level (default: from settings)",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Emit JSON log lines",
    )
    parser.add_argument(
        "--enable-token-issuance",
        action="store_true",
        help="Recognize BINARYICO token-issuance shortcodes",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    parse_cmd = commands.add_parser("parse", help="Print decoded contract parameters")
    parse_cmd.add_argument("shortcode", help="Shortcode to decode")
    parse_cmd.add_argument("--currency", default=None, help="Account currency (e.g. USD)")
    parse_cmd.add_argument("--sold", action="store_true", help="Mark the contract as sold")

    longcode_cmd = commands.add_parser("longcode", help="Print longcode tokens")
    longcode_cmd.add_argument("shortcode", help="Shortcode to describe")
    longcode_cmd.add_argument("--currency", default=None, help="Account currency (e.g. USD)")

    return parser.parse_args(argv)


def run(args: argparse.Namespace, settings: Settings) -> object:
    """Execute a parsed command and return its JSON-ready result."""
    if args.enable_token_issuance:
        settings = settings.model_copy(
            update={"parser": settings.parser.model_copy(update={"enable_token_issuance": True})}
        )
    service = create_longcode_stack(settings)

    if args.command == "parse":
        return service.parse(args.shortcode, args.currency, args.sold).to_dict()
    return longcode_to_json(service.assemble(args.shortcode, args.currency))


def main(argv: list[str] | None = None) -> int:
    args = parse_cli_args(argv)
    settings = load_settings()

    setup_logging(
        level=args.log_level or settings.log_level,
        json_format=args.json_logs or settings.log_json,
    )

    try:
        result = run(args, settings)
    except LongcodeError as e:
        logger.error(f"{type(e).__name__}: {e}")
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
