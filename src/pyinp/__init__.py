"""
pyinp - Python package for EPANET INP water network files.

This package provides tools for:
- Reading INP documents into an immutable in-memory model
- Reporting lines that fail to decode without aborting the parse
- Serializing parsed documents to JSON and pandas tables
"""

from __future__ import annotations

__version__ = "0.1.0"

from pyinp.core.document import Document, LineError, UnknownLine
from pyinp.core.exceptions import (
    FileFormatError,
    INPIOError,
    PyINPError,
    SectionError,
    SectionHeaderError,
    ValidationError,
)
from pyinp.io.document_reader import InpReader, read_inp, read_inp_file
from pyinp.io.serialize import document_to_dict, document_to_json
from pyinp.sections import (
    Emitter,
    Junction,
    Pipe,
    Pump,
    Quality,
    Reservoir,
    Section,
    Source,
    Tank,
    Valve,
    ValveType,
)

__all__ = [
    "__version__",
    # Document model
    "Document",
    "LineError",
    "UnknownLine",
    # Sections
    "Section",
    "Junction",
    "Reservoir",
    "Tank",
    "Pipe",
    "Pump",
    "Valve",
    "ValveType",
    "Emitter",
    "Source",
    "Quality",
    # Reading
    "InpReader",
    "read_inp",
    "read_inp_file",
    # Serialization
    "document_to_dict",
    "document_to_json",
    # Exceptions
    "PyINPError",
    "SectionError",
    "ValidationError",
    "INPIOError",
    "FileFormatError",
    "SectionHeaderError",
]
