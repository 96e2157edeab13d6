"""
Storage tanks (``[TANKS]``).

One line per tank containing:

1. ID label
2. Bottom elevation, ft (m)
3. Initial water level, ft (m)
4. Minimum water level, ft (m)
5. Maximum water level, ft (m)
6. Nominal diameter, ft (m)
7. Minimum volume, cubic ft (cubic meters)
8. Volume curve ID (optional)
9. Overflow indicator, ``YES`` / ``NO`` (optional)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Sequence

from pyinp.sections.base import Section, optional_token, parse_float


@dataclass(frozen=True)
class Tank(Section):
    """A variable-level storage node."""

    kind: ClassVar[str] = "TANK"
    section_name: ClassVar[str] = "TANKS"
    collection: ClassVar[str] = "tanks"
    min_properties: ClassVar[int] = 7

    id: str
    elevation: float
    init_level: float
    min_level: float
    max_level: float
    diameter: float
    min_volume: float
    volume_curve_id: str | None = None
    overflow: bool = False
    comment: str | None = None

    @classmethod
    def from_properties(
        cls, properties: Sequence[str], comment: str | None = None
    ) -> Tank:
        cls.check_properties(properties)
        overflow = optional_token(properties, 8) or ""
        return cls(
            id=properties[0],
            elevation=parse_float(properties[1], "elevation"),
            init_level=parse_float(properties[2], "initial level"),
            min_level=parse_float(properties[3], "minimum level"),
            max_level=parse_float(properties[4], "maximum level"),
            diameter=parse_float(properties[5], "diameter"),
            min_volume=parse_float(properties[6], "minimum volume"),
            volume_curve_id=optional_token(properties, 7),
            overflow=overflow.isascii() and overflow.upper() == "YES",
            comment=comment,
        )
