"""Junction nodes (``[JUNCTIONS]``)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Sequence

from pyinp.sections.base import Section, optional_float, optional_token, parse_float


@dataclass(frozen=True)
class Junction(Section):
    """A demand node.

    Attributes:
        id: Junction ID label
        elevation: Elevation, ft (m)
        base_demand_flow: Base demand flow, if given
        demand_pattern_id: Demand pattern ID, if given
        comment: Trailing comment text
    """

    kind: ClassVar[str] = "JUNCTION"
    section_name: ClassVar[str] = "JUNCTIONS"
    collection: ClassVar[str] = "junctions"
    min_properties: ClassVar[int] = 2

    id: str
    elevation: float
    base_demand_flow: float | None = None
    demand_pattern_id: str | None = None
    comment: str | None = None

    @classmethod
    def from_properties(
        cls, properties: Sequence[str], comment: str | None = None
    ) -> Junction:
        cls.check_properties(properties)
        return cls(
            id=properties[0],
            elevation=parse_float(properties[1], "elevation"),
            base_demand_flow=optional_float(properties, 2, "base demand flow"),
            demand_pattern_id=optional_token(properties, 3),
            comment=comment,
        )
