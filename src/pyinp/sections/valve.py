"""Valves (``[VALVES]``)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Sequence

from pyinp.core.exceptions import SectionError
from pyinp.sections.base import Section, parse_float


class ValveType(Enum):
    """Valve types recognized by EPANET."""

    PRV = "PRV"  # Pressure reducing
    PSV = "PSV"  # Pressure sustaining
    PBV = "PBV"  # Pressure breaker
    FCV = "FCV"  # Flow control
    TCV = "TCV"  # Throttle control
    GPV = "GPV"  # General purpose


@dataclass(frozen=True)
class Valve(Section):
    """A control valve link.

    Attributes:
        id: Valve ID label
        start_node: Start node ID
        end_node: End node ID
        diameter: Diameter, inches (mm)
        valve_type: One of :class:`ValveType`
        setting: Valve setting; meaning depends on the valve type
        minor_loss_coefficient: Minor loss coefficient
        comment: Trailing comment text
    """

    kind: ClassVar[str] = "VALVE"
    section_name: ClassVar[str] = "VALVES"
    collection: ClassVar[str] = "valves"
    min_properties: ClassVar[int] = 7

    id: str
    start_node: str
    end_node: str
    diameter: float
    valve_type: ValveType
    setting: float
    minor_loss_coefficient: float
    comment: str | None = None

    @classmethod
    def from_properties(
        cls, properties: Sequence[str], comment: str | None = None
    ) -> Valve:
        cls.check_properties(properties)
        try:
            valve_type = ValveType(properties[4])
        except ValueError:
            raise SectionError(f"Invalid valve type {properties[4]!r}") from None
        return cls(
            id=properties[0],
            start_node=properties[1],
            end_node=properties[2],
            diameter=parse_float(properties[3], "diameter"),
            valve_type=valve_type,
            setting=parse_float(properties[5], "setting"),
            minor_loss_coefficient=parse_float(properties[6], "minor loss coefficient"),
            comment=comment,
        )
