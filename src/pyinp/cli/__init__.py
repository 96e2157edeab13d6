"""
pyinp command-line interface.

Usage:
    pyinp parse FILE [options]      Print the parsed document as JSON
    pyinp validate FILE [options]   Report lines that failed to decode
    pyinp export FILE [options]     Write one CSV table per section
    python -m pyinp <command>       Same as above
"""

from __future__ import annotations

import argparse


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="pyinp",
        description="Read EPANET INP water network files.",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Register subcommands
    from pyinp.cli.export import add_export_parser
    from pyinp.cli.parse import add_parse_parser
    from pyinp.cli.validate import add_validate_parser

    add_parse_parser(subparsers)
    add_validate_parser(subparsers)
    add_export_parser(subparsers)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    # Dispatch to the subcommand handler
    result: int = args.func(args)
    return result


__all__ = ["main"]
