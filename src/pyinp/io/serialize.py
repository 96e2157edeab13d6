"""
Structured (dict / JSON) representation of a parsed document.

The key names are stable: ``title``, one array per entity collection
(``junctions``, ``reservoirs``, ``tanks``, ``pipes``, ``pumps``,
``valves``, ``emitters``, ``sources``, ``quality``), ``unknown_sections``
as ``{text}`` objects and ``errors`` as ``{message, line, line_number}``
objects. Valve types are written as their INP token.
"""

from __future__ import annotations

from typing import Any

from pydantic import TypeAdapter

from pyinp.core.document import Document

_DOCUMENT_ADAPTER: TypeAdapter[Document] = TypeAdapter(Document)


def document_to_dict(document: Document) -> dict[str, Any]:
    """Return a JSON-compatible dict for *document*."""
    return _DOCUMENT_ADAPTER.dump_python(document, mode="json")


def document_to_json(document: Document, indent: int | None = None) -> str:
    """Serialize *document* to a JSON string."""
    return _DOCUMENT_ADAPTER.dump_json(document, indent=indent).decode("utf-8")


def document_from_dict(data: dict[str, Any]) -> Document:
    """Rebuild a Document from the output of :func:`document_to_dict`."""
    return _DOCUMENT_ADAPTER.validate_python(data)


def document_from_json(text: str | bytes) -> Document:
    """Rebuild a Document from the output of :func:`document_to_json`."""
    return _DOCUMENT_ADAPTER.validate_json(text)
