"""Helpers shared by the CLI subcommands."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from pyinp.core.document import Document
from pyinp.io.config import ReaderSettings

logger = logging.getLogger(__name__)


def add_common_arguments(p: argparse.ArgumentParser) -> None:
    """Add the INP file argument and the options every subcommand shares."""
    p.add_argument("inp_file", type=Path, metavar="FILE", help="Path to the INP file")
    p.add_argument(
        "--encoding",
        default="utf-8",
        help="Text encoding of the INP file (default: utf-8)",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )


def configure_logging(debug: bool) -> None:
    log_level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def load_document(args: argparse.Namespace) -> Document | None:
    """Read ``args.inp_file``, printing an error and returning None on failure."""
    from pyinp.io.document_reader import read_inp_file

    settings = ReaderSettings(encoding=args.encoding)
    try:
        return read_inp_file(args.inp_file, settings)
    except (OSError, ValueError, LookupError) as exc:
        logger.debug("Failed to read %s", args.inp_file, exc_info=True)
        print(f"ERROR: Failed to read {args.inp_file}: {exc}")
        return None
