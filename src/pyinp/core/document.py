"""
In-memory model of a parsed INP document.

A :class:`Document` is built in one pass by
:class:`~pyinp.io.document_reader.InpReader` and never mutated afterwards.
Every data line of the source ends up in exactly one place: an entity
collection, ``unknown_sections`` or ``errors``.
"""

from __future__ import annotations

from dataclasses import dataclass, fields

from pyinp.core.exceptions import ValidationError
from pyinp.sections.emitter import Emitter
from pyinp.sections.junction import Junction
from pyinp.sections.pipe import Pipe
from pyinp.sections.pump import Pump
from pyinp.sections.quality import Quality
from pyinp.sections.reservoir import Reservoir
from pyinp.sections.source import Source
from pyinp.sections.tank import Tank
from pyinp.sections.valve import Valve


@dataclass(frozen=True)
class UnknownLine:
    """A data line outside any recognized section, kept verbatim."""

    text: str


@dataclass(frozen=True)
class LineError:
    """A data line that could not be decoded.

    Attributes:
        message: Human-readable cause
        line: Original line text
        line_number: 1-based line number in the source document
    """

    message: str
    line: str
    line_number: int

    def __str__(self) -> str:
        return f"line {self.line_number}: {self.message}"


@dataclass(frozen=True)
class Document:
    """Parsed contents of an INP document."""

    title: str = ""
    junctions: tuple[Junction, ...] = ()
    reservoirs: tuple[Reservoir, ...] = ()
    tanks: tuple[Tank, ...] = ()
    pipes: tuple[Pipe, ...] = ()
    pumps: tuple[Pump, ...] = ()
    valves: tuple[Valve, ...] = ()
    emitters: tuple[Emitter, ...] = ()
    sources: tuple[Source, ...] = ()
    quality: tuple[Quality, ...] = ()
    unknown_sections: tuple[UnknownLine, ...] = ()
    errors: tuple[LineError, ...] = ()

    @classmethod
    def collection_names(cls) -> list[str]:
        """Names of the entity collections, in declaration order."""
        return [f.name for f in fields(cls) if f.name not in _NON_ENTITY_FIELDS]

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def entity_count(self) -> int:
        """Total number of decoded entities across all collections."""
        return sum(len(getattr(self, name)) for name in self.collection_names())

    def section_counts(self) -> dict[str, int]:
        """Return the number of entities in each collection."""
        return {name: len(getattr(self, name)) for name in self.collection_names()}

    def raise_for_errors(self) -> None:
        """Raise :class:`ValidationError` if any line failed to decode."""
        if self.errors:
            raise ValidationError(
                f"{len(self.errors)} line(s) could not be decoded",
                errors=[str(e) for e in self.errors],
            )


_NON_ENTITY_FIELDS = frozenset({"title", "unknown_sections", "errors"})
