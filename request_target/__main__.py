"""Request-Target main entry point.

Ties together the CLI, loader, and report modules.
"""

import sys

from request_target.cli import parse_cli
from request_target.loader import load_targets_file
from request_target.report import classify_targets, print_report


def main(argv: list[str] | None = None) -> int:
    """Run the request-target classifier.

    Args:
        argv: Optional argument list (defaults to sys.argv).

    Returns:
        Exit code (0 = all valid, 1 = some target invalid, 2 = error).
    """
    args = parse_cli(argv)

    targets = list(args.targets)
    if args.file:
        print(f"[*] Loading request targets from: {args.file}")
        try:
            targets.extend(load_targets_file(args.file))
        except (OSError, UnicodeDecodeError) as exc:
            print(f"Error reading targets file: {exc}", file=sys.stderr)
            return 2

    method = args.method.strip().upper() if args.method else None

    print(f"[*] Classifying {len(targets)} request target(s)...")
    if method:
        print(f"    Method : {method}")

    results = classify_targets(targets, method=method)
    print_report(results)

    return 0 if all(result.is_valid for result in results) else 1


if __name__ == "__main__":
    sys.exit(main())
