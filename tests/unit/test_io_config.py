"""Unit tests for reader and export settings."""

from __future__ import annotations

from pathlib import Path

import pydantic
import pytest

from pyinp.io.config import ExportSettings, ReaderSettings


class TestReaderSettings:
    def test_defaults(self) -> None:
        settings = ReaderSettings()
        assert settings.encoding == "utf-8"
        assert settings.encoding_errors == "strict"

    def test_extra_forbidden(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            ReaderSettings(delimiter=";")  # type: ignore[call-arg]


class TestExportSettings:
    def test_defaults(self) -> None:
        settings = ExportSettings()
        assert settings.indent == 2
        assert settings.output_dir == Path("output")

    def test_compact(self) -> None:
        assert ExportSettings(indent=None).indent is None

    def test_negative_indent_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            ExportSettings(indent=-1)

    def test_output_dir_coerced(self) -> None:
        assert ExportSettings(output_dir="tables").output_dir == Path("tables")
