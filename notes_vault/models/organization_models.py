"""Pydantic input models for organization operations.

This module defines input models for organization tools:
- Create directories
- Move/rename files
- Delete files
"""

from __future__ import annotations

from pydantic import BaseModel, Field, StrictBool, field_validator, model_validator

from .base import BaseFileInput, clean_path


class CreateDirectoryInput(BaseModel):
    """Input model for the create_directory tool.

    Creates a folder and any missing parents. Succeeds if it already exists.

    Examples:
        >>> CreateDirectoryInput(dirpath="Projects/2025")
    """

    dirpath: str = Field(
        min_length=1,
        description=(
            "Folder path relative to the vault root. "
            "Examples: 'Projects/2025', 'Archive'"
        )
    )

    @field_validator('dirpath')
    @classmethod
    def validate_dirpath(cls, v: str) -> str:
        """Strip whitespace and reject empty folder paths."""
        return clean_path(v, "Directory path")


class MoveNoteInput(BaseModel):
    """Input model for the move tool.

    Moves or renames a file. Destination folders are created automatically.

    Examples:
        >>> MoveNoteInput(source="Inbox/idea.md", destination="Projects/idea.md")
    """

    source: str = Field(
        min_length=1,
        description="Current path of the file, relative to the vault root."
    )

    destination: str = Field(
        min_length=1,
        description="New path for the file, relative to the vault root."
    )

    @field_validator('source', 'destination')
    @classmethod
    def validate_paths(cls, v: str) -> str:
        """Strip whitespace and reject empty paths."""
        return clean_path(v)

    @model_validator(mode='after')
    def validate_different_paths(self) -> 'MoveNoteInput':
        """Ensure source and destination differ."""
        if self.source == self.destination:
            raise ValueError(
                "Source and destination are the same. "
                "Provide a different destination to move or rename the file."
            )
        return self


class DeleteNoteInput(BaseFileInput):
    """Input model for the delete tool.

    Permanently removes a file. ``confirm`` must be ``true``; when it is
    omitted or false the tool fails without deleting anything.

    Examples:
        >>> DeleteNoteInput(filepath="Inbox/old.md", confirm=True)
    """

    confirm: StrictBool = Field(
        False,
        description=(
            "Must be true to delete. Always confirm with the user first."
        )
    )
