"""Pydantic input models for MCP tool validation.

This package defines Pydantic models that provide automatic input validation
for all MCP tools. Each model represents the input schema for one tool,
with field-level validation, type checking, and descriptive error messages.

Architecture:
- base: BaseFileInput for tools that take a single file path
- discovery_models: list, search, search_files, get_structure
- reading_models: read, read_multiple, get_metadata, get_sections
- writing_models: create, write, append, edit
- organization_models: create_directory, move, delete
- utility_models: health

Usage:
    from notes_vault.models import ReadNoteInput, CreateNoteInput
    from notes_vault.models import SearchContentInput, DeleteNoteInput
"""

from .base import BaseFileInput
from .discovery_models import (
    ListNotesInput,
    SearchContentInput,
    SearchFilesInput,
    GetStructureInput,
)
from .reading_models import (
    ReadNoteInput,
    ReadMultipleInput,
    GetMetadataInput,
    GetSectionsInput,
)
from .writing_models import (
    CreateNoteInput,
    WriteNoteInput,
    AppendNoteInput,
    EditNoteInput,
)
from .organization_models import (
    CreateDirectoryInput,
    MoveNoteInput,
    DeleteNoteInput,
)
from .utility_models import HealthInput

__all__ = [
    # Base models
    "BaseFileInput",
    # Discovery models
    "ListNotesInput",
    "SearchContentInput",
    "SearchFilesInput",
    "GetStructureInput",
    # Reading models
    "ReadNoteInput",
    "ReadMultipleInput",
    "GetMetadataInput",
    "GetSectionsInput",
    # Writing models
    "CreateNoteInput",
    "WriteNoteInput",
    "AppendNoteInput",
    "EditNoteInput",
    # Organization models
    "CreateDirectoryInput",
    "MoveNoteInput",
    "DeleteNoteInput",
    # Utility models
    "HealthInput",
]
