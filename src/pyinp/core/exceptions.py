"""Custom exceptions for pyinp package."""

from __future__ import annotations


class PyINPError(Exception):
    """Base exception for all pyinp errors."""

    pass


class SectionError(PyINPError):
    """Error raised when a data line cannot be decoded into an entity.

    Carries only a human-readable message. The document reader attaches
    the offending line and its line number when it records the failure.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(PyINPError):
    """Error raised when a parsed document contains line errors."""

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class INPIOError(PyINPError):
    """Error related to file I/O operations."""

    pass


class FileFormatError(INPIOError):
    """Error raised when file format is invalid."""

    def __init__(self, message: str, line_number: int | None = None) -> None:
        super().__init__(message)
        self.line_number = line_number


class SectionHeaderError(FileFormatError):
    """Error raised for a ``[`` header line with no closing ``]``."""

    pass
