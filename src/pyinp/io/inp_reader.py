"""
INP line-reading utilities.

Helpers for classifying and splitting the lines of an EPANET input file.
The format is line oriented: ``[SECTION]`` headers, whitespace-separated
fields, and comments introduced by ``;`` (either the whole line or the
tail of a data line).
"""

from __future__ import annotations

from typing import Iterator

from pyinp.core.exceptions import SectionHeaderError

COMMENT_CHAR = ";"
SECTION_OPEN = "["
SECTION_CLOSE = "]"


def iter_lines(content: str) -> Iterator[str]:
    """Yield the lines of *content* without their line terminators.

    Lines are split on ``\\n`` and a single trailing ``\\r`` is removed,
    so ``\\r\\n`` files read the same as ``\\n`` files. A final newline
    does not produce an extra empty line.
    """
    if not content:
        return
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    for line in lines:
        yield line[:-1] if line.endswith("\r") else line


def is_skippable_line(line: str) -> bool:
    """Check if line is blank or a full-line ``;`` comment."""
    stripped = line.strip()
    return not stripped or stripped[0] == COMMENT_CHAR


def is_section_header(line: str) -> bool:
    """Check if the first non-blank character of *line* is ``[``."""
    return line.strip().startswith(SECTION_OPEN)


def read_section_header(line: str, line_number: int | None = None) -> str:
    """Return the section name enclosed by ``[`` and the first ``]``.

    The name is returned verbatim: it is not trimmed and its case is
    preserved. Anything after the closing bracket is ignored.

    Raises:
        SectionHeaderError: If the line has no closing bracket.
    """
    stripped = line.strip()
    if not stripped.startswith(SECTION_OPEN):
        raise SectionHeaderError(
            f"Section header must start with {SECTION_OPEN!r}", line_number=line_number
        )
    end = stripped.find(SECTION_CLOSE, 1)
    if end < 0:
        raise SectionHeaderError(
            f"Missing {SECTION_CLOSE!r} in section header {stripped!r}", line_number=line_number
        )
    return stripped[1:end]


def split_properties(line: str) -> tuple[list[str], str | None]:
    """Split a data line into its properties and trailing comment.

    Returns ``(properties, comment)``. Properties are the
    whitespace-delimited tokens before the first ``;``. The comment is
    everything after that ``;``, verbatim, or ``None`` when the line has
    no ``;``.
    """
    data, sep, comment = line.partition(COMMENT_CHAR)
    return data.split(), (comment if sep else None)
