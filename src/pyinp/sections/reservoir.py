"""Reservoir nodes (``[RESERVOIRS]``)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Sequence

from pyinp.sections.base import Section, optional_token, parse_float


@dataclass(frozen=True)
class Reservoir(Section):
    """A fixed-head node.

    Attributes:
        id: Reservoir ID label
        head: Hydraulic head, ft (m)
        pattern: Head pattern ID, if the head varies with time
        comment: Trailing comment text
    """

    kind: ClassVar[str] = "RESERVOIR"
    section_name: ClassVar[str] = "RESERVOIRS"
    collection: ClassVar[str] = "reservoirs"
    min_properties: ClassVar[int] = 2

    id: str
    head: float
    pattern: str | None = None
    comment: str | None = None

    @classmethod
    def from_properties(
        cls, properties: Sequence[str], comment: str | None = None
    ) -> Reservoir:
        cls.check_properties(properties)
        return cls(
            id=properties[0],
            head=parse_float(properties[1], "head"),
            pattern=optional_token(properties, 2),
            comment=comment,
        )
