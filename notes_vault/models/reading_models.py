"""Pydantic input models for read operations.

This module defines input models for reading tools:
- Read one file
- Read several files at once
- File metadata
- Markdown sections of a file
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from .base import BaseFileInput, clean_path


class ReadNoteInput(BaseFileInput):
    """Input model for the read tool.

    Returns the complete content of one file.

    Examples:
        >>> ReadNoteInput(filepath="Daily Notes/2025-10-27.md")
    """

    class Config:
        """Pydantic model configuration."""
        json_schema_extra = {
            "examples": [
                {"filepath": "Daily Notes/2025-10-27.md"},
                {"filepath": "Projects/plan.md"}
            ]
        }


class ReadMultipleInput(BaseModel):
    """Input model for the read_multiple tool.

    Reads several files in one call. Files that cannot be read are omitted
    from the response instead of failing the call.

    Examples:
        >>> ReadMultipleInput(filepaths=["a.md", "Projects/b.md"])
    """

    filepaths: list[str] = Field(
        min_length=1,
        description=(
            "Paths relative to the vault root. "
            "Example: ['Daily Notes/2025-10-27.md', 'Projects/plan.md']"
        )
    )

    @field_validator('filepaths')
    @classmethod
    def validate_filepaths(cls, v: list[str]) -> list[str]:
        """Strip whitespace from each path and reject empty entries."""
        return [clean_path(path, "File path") for path in v]


class GetMetadataInput(BaseFileInput):
    """Input model for the get_metadata tool (size, timestamps, type)."""


class GetSectionsInput(BaseFileInput):
    """Input model for the get_sections tool (heading-delimited sections)."""
