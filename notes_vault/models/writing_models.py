"""Pydantic input models for write operations.

This module defines input models for writing tools:
- Create new files
- Overwrite files
- Append to files
- Surgical find/replace edits
"""

from __future__ import annotations

from pydantic import Field, field_validator

from .base import BaseFileInput


class CreateNoteInput(BaseFileInput):
    """Input model for the create tool.

    Creates a new file. Fails if something already exists at the path.
    Parent folders are created automatically.

    Examples:
        >>> CreateNoteInput(filepath="Projects/New Project.md", content="# New Project")
        >>> CreateNoteInput(filepath="Inbox/empty.md", content="")
    """

    content: str = Field(
        description=(
            "Full content for the new file. "
            "Can be empty to create a blank note."
        )
    )

    class Config:
        """Pydantic model configuration."""
        json_schema_extra = {
            "examples": [
                {
                    "filepath": "Projects/New Project.md",
                    "content": "# New Project\n\n## Goals\n"
                }
            ]
        }


class WriteNoteInput(BaseFileInput):
    """Input model for the write tool.

    Replaces the whole file content; creates the file when missing.
    """

    content: str = Field(
        description="New complete content (can be empty to clear the file)."
    )


class AppendNoteInput(BaseFileInput):
    """Input model for the append tool.

    Appends content verbatim to the end of an existing file. No separator
    is inserted, so include a leading newline when needed.

    Examples:
        >>> AppendNoteInput(filepath="Log.md", content="\\n- Finished review")
    """

    content: str = Field(
        min_length=1,
        description=(
            "Content to append, written exactly as given. "
            "Start with '\\n' to begin a new line."
        )
    )

    @field_validator('content')
    @classmethod
    def validate_content(cls, v: str) -> str:
        """Reject empty content (appending nothing is almost always a mistake)."""
        if not v:
            raise ValueError(
                "Content cannot be empty. "
                "Provide the text you want to append."
            )
        return v


class EditNoteInput(BaseFileInput):
    """Input model for the edit tool.

    Replaces the first occurrence of ``old_content`` with ``new_content``.

    Examples:
        >>> EditNoteInput(filepath="plan.md", old_content="- [ ] Ship", new_content="- [x] Ship")
    """

    old_content: str = Field(
        min_length=1,
        description=(
            "Exact text to find (case-sensitive). "
            "Only the first occurrence is replaced."
        )
    )

    new_content: str = Field(
        description="Replacement text (can be empty to delete old_content)."
    )

    class Config:
        """Pydantic model configuration."""
        json_schema_extra = {
            "examples": [
                {
                    "filepath": "Projects/plan.md",
                    "old_content": "- [ ] Ship v1",
                    "new_content": "- [x] Ship v1"
                }
            ]
        }
