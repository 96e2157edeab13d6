"""
Tabular (pandas) views of a parsed document.

Each entity collection becomes a DataFrame with one row per entity and
one column per field, in field order. Absent optional numbers are NaN.
"""

from __future__ import annotations

import logging
from dataclasses import fields
from pathlib import Path
from typing import get_args, get_type_hints

import numpy as np
import pandas as pd

from pyinp.core.document import Document
from pyinp.io.serialize import document_to_dict
from pyinp.sections import COLLECTION_TYPES, Section

logger = logging.getLogger(__name__)


def _float_columns(entity_type: type[Section]) -> list[str]:
    """Names of fields typed ``float`` or ``float | None``."""
    hints = get_type_hints(entity_type)
    columns = []
    for f in fields(entity_type):  # type: ignore[arg-type]
        hint = hints[f.name]
        if hint is float or float in get_args(hint):
            columns.append(f.name)
    return columns


def section_frame(document: Document, collection: str) -> pd.DataFrame:
    """Return one entity collection of *document* as a DataFrame.

    Args:
        document: Parsed document
        collection: Collection name, e.g. ``"pipes"``

    Raises:
        KeyError: If *collection* is not an entity collection.
    """
    if collection not in COLLECTION_TYPES:
        raise KeyError(f"Unknown collection: {collection!r}")
    entity_type = COLLECTION_TYPES[collection]
    columns = [f.name for f in fields(entity_type)]  # type: ignore[arg-type]
    rows = document_to_dict(document)[collection]

    frame = pd.DataFrame(rows, columns=columns)
    for name in _float_columns(entity_type):
        frame[name] = pd.to_numeric(frame[name], errors="coerce").astype(np.float64)
    return frame


def document_frames(document: Document, include_empty: bool = False) -> dict[str, pd.DataFrame]:
    """Return a DataFrame per entity collection, keyed by collection name."""
    frames: dict[str, pd.DataFrame] = {}
    for collection in Document.collection_names():
        if not include_empty and not getattr(document, collection):
            continue
        frames[collection] = section_frame(document, collection)
    return frames


def errors_frame(document: Document) -> pd.DataFrame:
    """Return the line errors of *document* as a DataFrame."""
    rows = document_to_dict(document)["errors"]
    return pd.DataFrame(rows, columns=["line_number", "message", "line"])


def write_csv_tables(document: Document, output_dir: Path | str) -> list[Path]:
    """Write one CSV file per non-empty collection (plus ``errors.csv``).

    Args:
        document: Parsed document
        output_dir: Directory to write into (created if missing)

    Returns:
        Paths of the files written
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    written: list[Path] = []
    for collection, frame in document_frames(document).items():
        path = output_dir / f"{collection}.csv"
        frame.to_csv(path, index=False)
        logger.debug(f"Wrote {len(frame)} rows to {path}")
        written.append(path)

    if document.errors:
        path = output_dir / "errors.csv"
        errors_frame(document).to_csv(path, index=False)
        written.append(path)

    logger.info(f"Wrote {len(written)} CSV tables to {output_dir}")
    return written
