"""
``pyinp parse`` subcommand.

Parses an INP file and prints (or writes) the document as JSON.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from pyinp.cli._common import add_common_arguments, configure_logging, load_document

logger = logging.getLogger(__name__)


def add_parse_parser(subparsers: argparse._SubParsersAction) -> None:
    """Register the ``parse`` subcommand."""
    p = subparsers.add_parser(
        "parse",
        help="Print the parsed document as JSON.",
        description="Parse an INP file and emit the document as JSON.",
    )
    add_common_arguments(p)
    p.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Write JSON to this file instead of stdout",
    )
    p.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indent; use -1 for compact output (default: 2)",
    )

    p.set_defaults(func=run_parse)


def run_parse(args: argparse.Namespace) -> int:
    """Run the ``parse`` subcommand."""
    configure_logging(args.debug)

    from pyinp.io.config import ExportSettings
    from pyinp.io.serialize import document_to_json

    document = load_document(args)
    if document is None:
        return 1

    settings = ExportSettings(indent=None if args.indent < 0 else args.indent)
    text = document_to_json(document, indent=settings.indent)

    if args.output is None:
        print(text)
    else:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(text + "\n", encoding="utf-8")
        logger.info(f"Wrote {args.output}")
    return 0
