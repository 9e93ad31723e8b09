"""
HKID-OPS command line entry point

Run with: python -m hkid_ops.main <command>
Or: hkid-ops <command>
"""

import argparse
import sys
from typing import Optional, Sequence

from hkid_ops import __version__
from hkid_ops.config.settings import HKIDOpsConfig, load_config_safe
from hkid_ops.core.check_digit import calculate_check_digit
from hkid_ops.core.generator import HKIDGenerator
from hkid_ops.core.prefix import HKIDPrefix, parse_prefix
from hkid_ops.core.symbol import parse_symbol
from hkid_ops.core.validator import validate_hkid
from hkid_ops.exceptions import HKIDError
from hkid_ops.logging.setup import get_logger, setup_logging

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hkid-ops",
        description="Hong Kong Identity Card number operations",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", help="Path to a YAML configuration file")

    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("check-digit", help="Calculate the check digit of an HKID body")
    p.add_argument("body", help="Prefix and 6 digits, e.g. A123456")

    p = sub.add_parser("validate", help="Validate a full HKID")
    p.add_argument("hkid", help="Full HKID, e.g. A123456(3)")
    p.add_argument("--must-be-known", action="store_true", default=None,
                   help="Reject prefixes that are not known")

    p = sub.add_parser("generate", help="Generate synthetic HKIDs")
    p.add_argument("--prefix", help="Prefix to use (random if omitted)")
    p.add_argument("--must-be-known", action="store_true", default=None,
                   help="Only use known prefixes")
    p.add_argument("--count", type=int, help="Number of HKIDs to generate")
    p.add_argument("--no-parens", action="store_true",
                   help="Do not wrap the check digit in parentheses")

    p = sub.add_parser("prefix", help="Describe an HKID prefix")
    p.add_argument("text")

    p = sub.add_parser("symbol", help="Describe an HKID card symbol")
    p.add_argument("text")

    sub.add_parser("prefixes", help="List known HKID prefixes")

    return parser


def _run(args: argparse.Namespace, config: HKIDOpsConfig) -> int:
    must_be_known = config.must_be_known if getattr(args, "must_be_known", None) is None else True

    if args.command == "check-digit":
        check_digit = calculate_check_digit(args.body)
        if check_digit is None:
            print(f"Invalid HKID body: {args.body}", file=sys.stderr)
            return EXIT_ERROR
        print(check_digit)
        return EXIT_OK

    if args.command == "validate":
        valid = validate_hkid(args.hkid, must_be_known=must_be_known)
        print("valid" if valid else "invalid")
        return EXIT_OK if valid else EXIT_INVALID

    if args.command == "generate":
        count = args.count if args.count is not None else config.count
        prefix = args.prefix if args.prefix is not None else config.default_prefix
        parenthesize = config.parenthesize and not args.no_parens
        generator = HKIDGenerator(parenthesize=parenthesize)
        for hkid in generator.generate_many(count, prefix, must_be_known):
            print(hkid)
        logger.info(
            "Generated HKIDs",
            extra={"event": "hkids_generated", "count": count, "prefix": prefix},
        )
        return EXIT_OK

    if args.command == "prefix":
        prefix = parse_prefix(args.text)
        status = "known" if prefix.is_known() else "unknown"
        print(f"{prefix.as_str()}\t{status}\t{prefix.description or ''}")
        return EXIT_OK if prefix.is_known() else EXIT_INVALID

    if args.command == "symbol":
        symbol = parse_symbol(args.text)
        print(f"{symbol.symbol}\t{symbol.message}")
        return EXIT_OK if symbol.is_known() else EXIT_INVALID

    if args.command == "prefixes":
        for known in HKIDPrefix:
            print(f"{known.code}\t{known.description}")
        return EXIT_OK

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the hkid-ops command line."""
    parser = build_parser()
    args = parser.parse_args(argv)

    config, error = load_config_safe(args.config)
    setup_logging(
        level=config.log_level,
        json_format=config.log_format == "json",
        stream=sys.stderr,
        command=args.command,
    )
    if error:
        logger.error(error, extra={"event": "config_error"})
        print(error, file=sys.stderr)
        return EXIT_ERROR

    try:
        return _run(args, config)
    except HKIDError as e:
        logger.warning(str(e), extra={"event": "hkid_error"})
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
