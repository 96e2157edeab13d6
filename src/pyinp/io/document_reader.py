"""
Reader that turns INP text into a :class:`~pyinp.core.document.Document`.

The reader walks the document once, line by line. The active section is
the only state carried between lines: it is passed into
:meth:`InpReader._read_line` and the (possibly new) section is returned.
A line that fails to decode is recorded as a
:class:`~pyinp.core.document.LineError` and the walk continues.

Example
-------
>>> from pyinp.io.document_reader import read_inp
>>> doc = read_inp("[RESERVOIRS]\\nR1 512\\n")
>>> doc.reservoirs[0].head
512.0
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from pyinp.core.document import Document, LineError, UnknownLine
from pyinp.core.exceptions import SectionError, SectionHeaderError
from pyinp.io.config import ReaderSettings
from pyinp.io.inp_reader import (
    is_section_header,
    is_skippable_line,
    iter_lines,
    read_section_header,
    split_properties,
)
from pyinp.sections import TITLE_SECTION, Section, get_section_type

logger = logging.getLogger(__name__)


@dataclass
class _DocumentBuilder:
    """Mutable accumulator owned by a single :meth:`InpReader.read` call."""

    title_lines: list[str] = field(default_factory=list)
    entities: dict[str, list[Section]] = field(
        default_factory=lambda: {name: [] for name in Document.collection_names()}
    )
    unknown_sections: list[UnknownLine] = field(default_factory=list)
    errors: list[LineError] = field(default_factory=list)

    def build(self) -> Document:
        collections = {name: tuple(items) for name, items in self.entities.items()}
        return Document(
            title=" ".join(self.title_lines),
            unknown_sections=tuple(self.unknown_sections),
            errors=tuple(self.errors),
            **collections,
        )


class InpReader:
    """Reader for EPANET INP documents."""

    def read(self, content: str) -> Document:
        """Parse INP text.

        Args:
            content: Full text of the INP document

        Returns:
            The parsed Document. Lines that failed to decode are reported
            in ``Document.errors``; this method does not raise for bad data.
        """
        builder = _DocumentBuilder()
        section: str | None = None
        n_lines = 0
        for n_lines, line in enumerate(iter_lines(content), start=1):
            section = self._read_line(section, line, n_lines, builder)

        document = builder.build()
        logger.info(
            f"Read {n_lines} lines: {document.entity_count} entities, "
            f"{len(document.unknown_sections)} unknown lines, {len(document.errors)} errors"
        )
        return document

    def _read_line(
        self,
        section: str | None,
        line: str,
        line_number: int,
        builder: _DocumentBuilder,
    ) -> str | None:
        """Process one line and return the section active after it."""
        if is_section_header(line):
            try:
                name = read_section_header(line, line_number)
            except SectionHeaderError as exc:
                logger.warning("Line %d: %s", line_number, exc)
                builder.errors.append(LineError(str(exc), line, line_number))
                return None
            logger.debug("Line %d: entering section [%s]", line_number, name)
            return name

        if is_skippable_line(line):
            return section

        if section == TITLE_SECTION:
            builder.title_lines.append(line.strip())
            return section

        section_type = get_section_type(section)
        if section_type is None:
            builder.unknown_sections.append(UnknownLine(text=line))
            return section

        properties, comment = split_properties(line)
        try:
            entity = section_type.from_properties(properties, comment)
        except SectionError as exc:
            logger.debug("Line %d: %s", line_number, exc.message)
            builder.errors.append(LineError(exc.message, line, line_number))
        else:
            builder.entities[section_type.collection].append(entity)
        return section


def read_inp(content: str) -> Document:
    """Parse INP text into a Document.

    Args:
        content: Full text of the INP document

    Returns:
        Parsed Document
    """
    return InpReader().read(content)


def read_inp_file(filepath: Path | str, settings: ReaderSettings | None = None) -> Document:
    """Read and parse an INP file.

    Args:
        filepath: Path to the INP file
        settings: Encoding options (defaults to UTF-8, strict)

    Returns:
        Parsed Document
    """
    filepath = Path(filepath)
    settings = settings or ReaderSettings()
    if not filepath.exists():
        raise FileNotFoundError(f"File not found: {filepath}")
    if not filepath.is_file():
        raise ValueError(f"Path is not a file: {filepath}")

    logger.info(f"Reading INP file {filepath}")
    # newline="" leaves line breaks to iter_lines, same as for read_inp
    with open(
        filepath, "r", encoding=settings.encoding, errors=settings.encoding_errors, newline=""
    ) as f:
        content = f.read()
    return read_inp(content)
