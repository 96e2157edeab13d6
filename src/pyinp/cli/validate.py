"""
``pyinp validate`` subcommand.

Parses an INP file and lists every line that could not be decoded.
Exits with status 1 when any line fails.
"""

from __future__ import annotations

import argparse

from pyinp.cli._common import add_common_arguments, configure_logging, load_document
from pyinp.core.exceptions import ValidationError


def add_validate_parser(subparsers: argparse._SubParsersAction) -> None:
    """Register the ``validate`` subcommand."""
    p = subparsers.add_parser(
        "validate",
        help="Report lines that fail to decode.",
        description="Parse an INP file and report every line-level error.",
    )
    add_common_arguments(p)
    p.add_argument(
        "--show-unknown",
        action="store_true",
        help="Also list lines outside recognized sections",
    )

    p.set_defaults(func=run_validate)


def run_validate(args: argparse.Namespace) -> int:
    """Run the ``validate`` subcommand."""
    configure_logging(args.debug)

    document = load_document(args)
    if document is None:
        return 1

    for name, count in document.section_counts().items():
        if count:
            print(f"  {name}: {count}")

    if args.show_unknown:
        for unknown in document.unknown_sections:
            print(f"  unknown: {unknown.text}")

    try:
        document.raise_for_errors()
    except ValidationError as exc:
        print(f"ERROR: {exc}")
        for message in exc.errors:
            print(f"  {message}")
        return 1

    print(f"OK: {document.entity_count} entities, no errors")
    return 0
