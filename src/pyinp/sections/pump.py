"""
Pumps (``[PUMPS]``).

A pump line is ``ID StartNode EndNode`` followed by keyword/value pairs:

- ``POWER value`` - power for a constant energy pump, hp (kW)
- ``HEAD id`` - ID of the curve describing head versus flow
- ``SPEED value`` - relative speed setting
- ``PATTERN id`` - time pattern ID for speed setting

Either ``POWER`` or ``HEAD`` must be supplied. Power and speed keep
single precision to match the values EPANET itself stores.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Sequence

from pyinp.core.exceptions import SectionError
from pyinp.sections.base import Section, parse_float32

PUMP_KEYWORDS = ("POWER", "HEAD", "SPEED", "PATTERN")


@dataclass(frozen=True)
class Pump(Section):
    """A pump link."""

    kind: ClassVar[str] = "PUMP"
    section_name: ClassVar[str] = "PUMPS"
    collection: ClassVar[str] = "pumps"
    min_properties: ClassVar[int] = 3

    id: str
    start_node: str
    end_node: str
    power: float | None = None
    head: str | None = None
    speed: float | None = None
    pattern: str | None = None
    comment: str | None = None

    @classmethod
    def from_properties(
        cls, properties: Sequence[str], comment: str | None = None
    ) -> Pump:
        cls.check_properties(properties)

        options: dict[str, str] = {}
        for i in range(3, len(properties), 2):
            keyword = properties[i]
            if keyword not in PUMP_KEYWORDS:
                raise SectionError(f"Unknown {cls.kind} keyword {keyword!r}")
            if i + 1 >= len(properties):
                raise SectionError(f"Missing value for {cls.kind} keyword {keyword!r}")
            options[keyword] = properties[i + 1]

        if "POWER" not in options and "HEAD" not in options:
            raise SectionError("Either POWER or HEAD must be supplied for each pump")

        return cls(
            id=properties[0],
            start_node=properties[1],
            end_node=properties[2],
            power=parse_float32(options["POWER"], "power") if "POWER" in options else None,
            head=options.get("HEAD"),
            speed=parse_float32(options["SPEED"], "speed") if "SPEED" in options else None,
            pattern=options.get("PATTERN"),
            comment=comment,
        )
