#!/usr/bin/env python3
"""CLI for docs redirect table maintenance.

Usage:
    python -m cli <command>

Commands:
    check    Validate the redirect table and report chains
    lookup   Print the redirect target for a legacy path
    export   Write the redirect table as JSON
"""

import argparse
import json
import logging
import sys
from pathlib import Path

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def cmd_check(strict: bool = False) -> int:
    """Validate the redirect table; non-zero on errors (or chains with --strict)."""
    from services.redirect_service import audit_redirects, redirects

    logger.info(f"Checking {len(redirects)} redirects...")
    audit = audit_redirects(redirects)

    for error in audit.errors:
        logger.error(error)
    for old_path, intermediate, final in audit.chains:
        logger.warning(f"Redirect chain: {old_path} -> {intermediate} -> {final}")

    if not audit.ok:
        logger.error(f"Found {len(audit.errors)} invalid redirects")
        return 1
    if strict and audit.chains:
        logger.error(f"Found {len(audit.chains)} redirect chains (--strict)")
        return 1

    logger.info("Redirect table OK")
    return 0


def cmd_lookup(path: str) -> int:
    """Print the target for ``path``; exit 1 if it is not a legacy path."""
    from services.redirect_service import lookup

    target = lookup(path)
    if target is None:
        logger.info(f"No redirect for {path}")
        return 1
    print(target)
    return 0


def cmd_export(output: str | None = None) -> int:
    """Write ``{old_path: new_path}`` as JSON to ``output`` or stdout."""
    from services.redirect_service import redirects

    payload = json.dumps(
        {entry.old_path: entry.new_path for entry in redirects.entries()},
        indent=2,
    )
    if output:
        Path(output).write_text(payload + "\n", encoding="utf-8")
        logger.info(f"Wrote {len(redirects)} redirects to {output}")
    else:
        print(payload)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Docs redirects CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    check_parser = subparsers.add_parser(
        "check",
        help="Validate the redirect table and report chains",
    )
    check_parser.add_argument(
        "--strict",
        action="store_true",
        help="Also fail when a redirect target is itself a legacy path",
    )

    lookup_parser = subparsers.add_parser(
        "lookup",
        help="Print the redirect target for a legacy path",
    )
    lookup_parser.add_argument("path", help="Legacy path, e.g. /quickstart")

    export_parser = subparsers.add_parser(
        "export",
        help="Write the redirect table as JSON",
    )
    export_parser.add_argument(
        "--output",
        "-o",
        help="File to write (defaults to stdout)",
    )

    args = parser.parse_args(argv)

    if args.command == "check":
        return cmd_check(strict=args.strict)
    elif args.command == "lookup":
        return cmd_lookup(args.path)
    elif args.command == "export":
        return cmd_export(args.output)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
