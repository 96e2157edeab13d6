"""
Entity sections of an INP document.

``SECTION_TYPES`` maps each recognized section header to the class that
decodes its data lines. The document reader only consults this table, so
supporting a new section means adding one :class:`Section` subclass and
one entry here.
"""

from __future__ import annotations

from pyinp.sections.base import Section, parse_float, parse_float32
from pyinp.sections.emitter import Emitter
from pyinp.sections.junction import Junction
from pyinp.sections.pipe import Pipe
from pyinp.sections.pump import Pump
from pyinp.sections.quality import Quality
from pyinp.sections.reservoir import Reservoir
from pyinp.sections.source import Source
from pyinp.sections.tank import Tank
from pyinp.sections.valve import Valve, ValveType

TITLE_SECTION = "TITLE"

SECTION_TYPES: dict[str, type[Section]] = {
    cls.section_name: cls
    for cls in (Junction, Reservoir, Tank, Pipe, Pump, Valve, Emitter, Source, Quality)
}

# Document collection name -> entity class
COLLECTION_TYPES: dict[str, type[Section]] = {
    cls.collection: cls for cls in SECTION_TYPES.values()
}


def get_section_type(name: str | None) -> type[Section] | None:
    """Return the entity class for a section header, or ``None`` if unrecognized."""
    if name is None:
        return None
    return SECTION_TYPES.get(name)


__all__ = [
    "Section",
    "parse_float",
    "parse_float32",
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
    "SECTION_TYPES",
    "COLLECTION_TYPES",
    "TITLE_SECTION",
    "get_section_type",
]
