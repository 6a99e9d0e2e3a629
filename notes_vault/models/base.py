"""Base Pydantic models for MCP tool input validation.

This module defines the base model shared by every tool that takes a single
vault-relative path. Other input models inherit from it.

Path confinement (absolute paths, ``..`` segments, null bytes, symlink
escapes) is deliberately not checked here: every path goes through
:class:`notes_vault.core.paths.PathResolver`, which reports those cases as
``InvalidPathError``. The models only normalize whitespace and reject empty
values.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


def clean_path(value: str, field_name: str = "Path") -> str:
    """Strip surrounding whitespace and reject empty paths."""
    cleaned = value.strip()
    if not cleaned:
        raise ValueError(
            f"{field_name} cannot be empty. "
            "Provide a path relative to the vault root like 'Projects/plan.md'."
        )
    return cleaned


class BaseFileInput(BaseModel):
    """Base model for operations on a single file.

    Provides the ``filepath`` field with whitespace normalization.
    """

    filepath: str = Field(
        min_length=1,
        description=(
            "Path relative to the vault root, including the extension. "
            "Examples: 'Daily Notes/2025-10-27.md', 'README.md'. "
            "Forward slashes for folders, case-sensitive."
        ),
        examples=["Daily Notes/2025-10-27.md", "Projects/plan.md", "README.md"]
    )

    @field_validator('filepath')
    @classmethod
    def validate_filepath(cls, v: str) -> str:
        """Strip whitespace and reject empty file paths."""
        return clean_path(v, "File path")
