"""
Shared decoding contract for INP entity sections.

Every entity kind (junction, pipe, pump, ...) is a frozen dataclass that
subclasses :class:`Section` and implements :meth:`Section.from_properties`.
The document reader hands each implementation the whitespace-split tokens
of one data line plus its trailing comment, and records either the decoded
entity or the :class:`~pyinp.core.exceptions.SectionError` it raises.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import ClassVar, Sequence

import numpy as np

from pyinp.core.exceptions import SectionError


def parse_float(value: str, context: str = "") -> float:
    """Parse a token as a finite 64-bit float, raising :class:`SectionError` on failure.

    Python's ``float()`` is more permissive than INP numbers allow, so
    tokens with underscore digit separators, non-ASCII digits, or that
    evaluate to ``inf``/``nan`` are rejected.

    Parameters
    ----------
    value : str
        The token to parse.
    context : str
        Name of the field being parsed (for error messages).
    """
    msg = (
        f"invalid float literal for {context}: {value!r}"
        if context
        else f"invalid float literal: {value!r}"
    )
    if "_" in value or not value.isascii():
        raise SectionError(msg)
    try:
        number = float(value)
    except (ValueError, TypeError) as exc:
        raise SectionError(msg) from exc
    if not math.isfinite(number):
        raise SectionError(msg)
    return number


def parse_float32(value: str, context: str = "") -> float:
    """Parse a token and round it to single precision.

    Values too large for single precision are rejected.
    """
    number = parse_float(value, context)
    with np.errstate(over="ignore"):
        rounded = float(np.float32(number))
    if not math.isfinite(rounded):
        raise SectionError(
            f"value out of single precision range for {context or 'number'}: {value!r}"
        )
    return rounded


def optional_float(properties: Sequence[str], index: int, context: str = "") -> float | None:
    """Parse ``properties[index]`` as a float, or ``None`` if absent."""
    if index >= len(properties):
        return None
    return parse_float(properties[index], context)


def optional_token(properties: Sequence[str], index: int) -> str | None:
    """Return ``properties[index]``, or ``None`` if absent."""
    if index >= len(properties):
        return None
    return properties[index]


class Section(ABC):
    """Base class for entities decoded from one INP data line.

    Subclasses declare their kind label (used in error messages), the
    section header they belong to, the name of the collection they are
    stored under on a :class:`~pyinp.core.document.Document`, and the
    minimum number of properties a line needs before any field is decoded.
    """

    kind: ClassVar[str]
    section_name: ClassVar[str]
    collection: ClassVar[str]
    min_properties: ClassVar[int] = 1

    @classmethod
    @abstractmethod
    def from_properties(
        cls, properties: Sequence[str], comment: str | None = None
    ) -> Section:
        """Decode an entity from a property list.

        Args:
            properties: Whitespace-delimited tokens of the data line.
            comment: Text after the first ``;`` on the line, if any.

        Returns:
            The decoded entity.

        Raises:
            SectionError: If the line cannot be decoded.
        """
        ...

    @classmethod
    def check_properties(cls, properties: Sequence[str]) -> None:
        """Raise :class:`SectionError` if *properties* is too short."""
        if len(properties) < cls.min_properties:
            raise SectionError(f"Not enough properties to create {cls.kind} section")
