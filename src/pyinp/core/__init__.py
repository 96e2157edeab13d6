"""Core data model for pyinp."""

from __future__ import annotations

from pyinp.core.document import Document, LineError, UnknownLine
from pyinp.core.exceptions import (
    FileFormatError,
    INPIOError,
    PyINPError,
    SectionError,
    SectionHeaderError,
    ValidationError,
)

__all__ = [
    "Document",
    "LineError",
    "UnknownLine",
    "PyINPError",
    "SectionError",
    "ValidationError",
    "INPIOError",
    "FileFormatError",
    "SectionHeaderError",
]
