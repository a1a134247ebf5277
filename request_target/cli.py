"""Command-line interface for the request-target classifier.

Provides the argparse front end: targets are given as arguments, read
from a file, or both.
"""

import argparse
import os
import sys

from request_target import __version__


def build_parser() -> argparse.ArgumentParser:
    """Build and return the argument parser for the request-target CLI."""
    parser = argparse.ArgumentParser(
        prog="request-target",
        description=(
            "Request-Target v{ver}: classify HTTP request targets.\n\n"
            "Sorts each request-line target into origin-form, "
            "absolute-form, authority-form or asterisk-form, and "
            "optionally checks it against the request method."
        ).format(ver=__version__),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  request-target /r/rust https://example.com example.com:443 '*'\n"
            "  request-target --file targets.txt --method GET\n"
        ),
    )

    parser.add_argument(
        "targets",
        nargs="*",
        metavar="TARGET",
        help="Request targets to classify.",
    )
    parser.add_argument(
        "--file",
        default=None,
        help="Path to a .txt file with one request target per line.",
    )
    parser.add_argument(
        "--method",
        default=None,
        help=(
            "Request method the targets arrived with (e.g. GET, CONNECT). "
            "Targets whose form is not allowed for it are reported."
        ),
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate parsed CLI arguments.

    Raises:
        SystemExit: If nothing was given to classify, the targets file is
            missing or unreadable, or the method is blank.
    """
    if not args.targets and args.file is None:
        print(
            "Error: Give at least one target or --file.", file=sys.stderr
        )
        sys.exit(1)

    if args.file is not None:
        if not os.path.isfile(args.file):
            print(
                f"Error: Targets file not found: '{args.file}'",
                file=sys.stderr,
            )
            sys.exit(1)

        if not os.access(args.file, os.R_OK):
            print(
                f"Error: Targets file is not readable: '{args.file}'",
                file=sys.stderr,
            )
            sys.exit(1)

    if args.method is not None and not args.method.strip():
        print("Error: Method cannot be empty.", file=sys.stderr)
        sys.exit(1)


def parse_cli(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse and validate command-line arguments.

    Args:
        argv: Optional list of arguments (defaults to sys.argv).

    Returns:
        Parsed and validated argument namespace.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    validate_args(args)
    return args
