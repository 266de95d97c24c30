"""Command-line interface for pwstore-otp."""

import argparse
import logging
import sys

from pwstore_otp.formatting import DEFAULT_DIGITS
from pwstore_otp.hotp import DEFAULT_ALGORITHM, SUPPORTED_ALGORITHMS
from pwstore_otp.otp import compute_code


logger = logging.getLogger(__name__)


def code_command(args: argparse.Namespace) -> int:
    """Handle the code command."""
    logger.debug(
        "Computing code: counter=%s algorithm=%s digits=%s issuer=%s",
        args.counter,
        args.algorithm,
        args.digits,
        args.issuer,
    )
    result = compute_code(
        args.secret,
        args.counter,
        algorithm=args.algorithm,
        digits=args.digits,
        issuer=args.issuer,
    )
    if not result.ok:
        print(f"✗ Failed to generate code: {result.error}", file=sys.stderr)
        return 1

    print(result.code)
    return 0


def algorithms_command(args: argparse.Namespace) -> int:
    """Handle the algorithms command."""
    print("Supported algorithms:")
    for name in SUPPORTED_ALGORITHMS:
        marker = " (default)" if name == DEFAULT_ALGORITHM else ""
        print(f"  {name}{marker}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pwstore-otp",
        description="HOTP/TOTP and Steam Guard code generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log the resolved request to stderr",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Code command
    code_parser = subparsers.add_parser(
        "code",
        aliases=["generate", "gen"],
        help="Generate the code for a counter",
    )
    code_parser.add_argument(
        "secret",
        help="Base32 encoded shared secret",
    )
    code_parser.add_argument(
        "--counter",
        "-c",
        type=int,
        required=True,
        help="HOTP counter or TOTP time step (e.g. unix time // 30)",
    )
    code_parser.add_argument(
        "--algorithm",
        "-a",
        default=DEFAULT_ALGORITHM,
        help=f"Digest algorithm (default: {DEFAULT_ALGORITHM})",
    )
    code_parser.add_argument(
        "--digits",
        "-d",
        default=DEFAULT_DIGITS,
        help=f'Number of digits (6-10) or "s" for Steam Guard (default: {DEFAULT_DIGITS})',
    )
    code_parser.add_argument(
        "--issuer",
        "-i",
        default=None,
        help='Account issuer; "Steam" selects Steam Guard codes',
    )

    # Algorithms command
    subparsers.add_parser(
        "algorithms",
        aliases=["ls"],
        help="List supported digest algorithms",
    )

    return parser


def main(argv=None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if not args.command:
        parser.print_help()
        return 1

    if args.command in ("code", "generate", "gen"):
        return code_command(args)
    elif args.command in ("algorithms", "ls"):
        return algorithms_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
