"""
Settings for reading and exporting INP documents.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


class ReaderSettings(BaseModel):
    """Settings for reading INP files from disk."""

    encoding: str = Field(default="utf-8", description="Text encoding of the INP file")
    encoding_errors: str = Field(
        default="strict", description="Codec error handler ('strict', 'replace', ...)"
    )

    model_config = {"extra": "forbid"}


class ExportSettings(BaseModel):
    """Settings for serializing a parsed document."""

    indent: int | None = Field(default=2, ge=0, description="JSON indent (None for compact)")
    output_dir: Path = Field(default=Path("output"), description="Directory for CSV tables")

    model_config = {"extra": "forbid"}
