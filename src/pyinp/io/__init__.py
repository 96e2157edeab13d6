"""I/O for EPANET INP documents."""

from __future__ import annotations

from pyinp.io.config import ExportSettings, ReaderSettings
from pyinp.io.document_reader import InpReader, read_inp, read_inp_file
from pyinp.io.inp_reader import (
    is_section_header,
    is_skippable_line,
    iter_lines,
    read_section_header,
    split_properties,
)
from pyinp.io.serialize import (
    document_from_dict,
    document_from_json,
    document_to_dict,
    document_to_json,
)

__all__ = [
    "ReaderSettings",
    "ExportSettings",
    "InpReader",
    "read_inp",
    "read_inp_file",
    "iter_lines",
    "is_skippable_line",
    "is_section_header",
    "read_section_header",
    "split_properties",
    "document_to_dict",
    "document_to_json",
    "document_from_dict",
    "document_from_json",
]
