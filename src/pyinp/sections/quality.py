"""Initial water quality (``[QUALITY]``)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Sequence

from pyinp.sections.base import Section, parse_float


@dataclass(frozen=True)
class Quality(Section):
    kind: ClassVar[str] = "QUALITY"
    section_name: ClassVar[str] = "QUALITY"
    collection: ClassVar[str] = "quality"
    min_properties: ClassVar[int] = 2

    node_id: str
    initial_quality: float
    comment: str | None = None

    @classmethod
    def from_properties(
        cls, properties: Sequence[str], comment: str | None = None
    ) -> Quality:
        cls.check_properties(properties)
        return cls(
            node_id=properties[0],
            initial_quality=parse_float(properties[1], "initial quality"),
            comment=comment,
        )
