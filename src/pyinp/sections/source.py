"""Water quality sources (``[SOURCES]``)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Sequence

from pyinp.sections.base import Section, optional_token, parse_float


@dataclass(frozen=True)
class Source(Section):
    """A water quality source at a node.

    Attributes:
        node: Node ID
        source_type: ``CONCEN``, ``MASS``, ``FLOWPACED`` or ``SETPOINT``
        strength: Baseline source strength
        pattern: Time pattern ID, if the strength varies with time
        comment: Trailing comment text
    """

    kind: ClassVar[str] = "SOURCE"
    section_name: ClassVar[str] = "SOURCES"
    collection: ClassVar[str] = "sources"
    min_properties: ClassVar[int] = 3

    node: str
    source_type: str
    strength: float
    pattern: str | None = None
    comment: str | None = None

    @classmethod
    def from_properties(
        cls, properties: Sequence[str], comment: str | None = None
    ) -> Source:
        cls.check_properties(properties)
        return cls(
            node=properties[0],
            source_type=properties[1],
            strength=parse_float(properties[2], "strength"),
            pattern=optional_token(properties, 3),
            comment=comment,
        )
