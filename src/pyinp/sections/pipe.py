"""Pipes (``[PIPES]``)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Sequence

from pyinp.sections.base import Section, parse_float

DEFAULT_STATUS = "OPEN"


@dataclass(frozen=True)
class Pipe(Section):
    """A pipe link between two nodes.

    Attributes:
        id: Pipe ID label
        node1: Start node ID
        node2: End node ID
        length: Length, ft (m)
        diameter: Diameter, inches (mm)
        roughness: Roughness coefficient
        minor_loss: Minor loss coefficient (0.0 when omitted)
        status: ``OPEN``, ``CLOSED`` or ``CV`` (``OPEN`` when omitted)
        comment: Trailing comment text
    """

    kind: ClassVar[str] = "PIPE"
    section_name: ClassVar[str] = "PIPES"
    collection: ClassVar[str] = "pipes"
    min_properties: ClassVar[int] = 6

    id: str
    node1: str
    node2: str
    length: float
    diameter: float
    roughness: float
    minor_loss: float = 0.0
    status: str = DEFAULT_STATUS
    comment: str | None = None

    @classmethod
    def from_properties(
        cls, properties: Sequence[str], comment: str | None = None
    ) -> Pipe:
        cls.check_properties(properties)
        minor_loss = parse_float(properties[6], "minor loss") if len(properties) > 6 else 0.0
        status = properties[7] if len(properties) > 7 else DEFAULT_STATUS
        return cls(
            id=properties[0],
            node1=properties[1],
            node2=properties[2],
            length=parse_float(properties[3], "length"),
            diameter=parse_float(properties[4], "diameter"),
            roughness=parse_float(properties[5], "roughness"),
            minor_loss=minor_loss,
            status=status,
            comment=comment,
        )
