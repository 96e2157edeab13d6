"""Emitters (``[EMITTERS]``)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Sequence

from pyinp.sections.base import Section, parse_float


@dataclass(frozen=True)
class Emitter(Section):
    """A pressure-dependent outflow attached to a junction."""

    kind: ClassVar[str] = "EMITTER"
    section_name: ClassVar[str] = "EMITTERS"
    collection: ClassVar[str] = "emitters"
    min_properties: ClassVar[int] = 2

    junction_id: str
    flow_coefficient: float
    comment: str | None = None

    @classmethod
    def from_properties(
        cls, properties: Sequence[str], comment: str | None = None
    ) -> Emitter:
        cls.check_properties(properties)
        return cls(
            junction_id=properties[0],
            flow_coefficient=parse_float(properties[1], "flow coefficient"),
            comment=comment,
        )
