"""
``pyinp export`` subcommand.

Writes one CSV table per entity section of an INP file.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from pyinp.cli._common import add_common_arguments, configure_logging, load_document


def add_export_parser(subparsers: argparse._SubParsersAction) -> None:
    """Register the ``export`` subcommand."""
    p = subparsers.add_parser(
        "export",
        help="Export sections to CSV tables.",
        description="Write one CSV file per non-empty INP section (plus errors.csv).",
    )
    add_common_arguments(p)
    p.add_argument(
        "--output-dir",
        type=Path,
        default=Path("output"),
        help="Output directory for exported files (default: ./output)",
    )

    p.set_defaults(func=run_export)


def run_export(args: argparse.Namespace) -> int:
    """Run the ``export`` subcommand."""
    configure_logging(args.debug)

    from pyinp.io.config import ExportSettings
    from pyinp.io.tables import write_csv_tables

    document = load_document(args)
    if document is None:
        return 1

    settings = ExportSettings(output_dir=args.output_dir)
    output_dir = settings.output_dir.resolve()
    written = write_csv_tables(document, output_dir)

    for path in written:
        print(f"  Exported: {path}")
    print(f"Exported {len(written)} file(s) to {output_dir}")
    return 0
