"""Reading tools.

This module provides MCP tool wrappers for read operations:
- read: Full content of one file
- read_multiple: Content of several files in one call
- get_metadata: Size, timestamps and type of a file or folder
- get_sections: Heading-delimited sections of a markdown file
"""
from __future__ import annotations

from typing import Any

from mcp.server.fastmcp import FastMCP

from notes_vault.core.note_operations import (
    get_note_metadata,
    get_note_sections,
    read_note,
    read_notes,
)
from notes_vault.core.vault_operations import VaultContext
from notes_vault.models import (
    GetMetadataInput,
    GetSectionsInput,
    ReadMultipleInput,
    ReadNoteInput,
)


def register(mcp: FastMCP, vault: VaultContext) -> None:
    """Register the reading tools on ``mcp`` for ``vault``."""

    # Returns the raw file body. Errors if the file is missing.
    @mcp.tool(name="read")
    async def read(input: ReadNoteInput) -> dict[str, Any]:
        """Read the complete contents of a single file.

        Args:
            input (ReadNoteInput): Validated input containing:
                - filepath (str): Path relative to the vault root

        Returns:
            {"path": str, "content": str}

        Token Cost: scales with note size; prefer search() for previews.

        Error Handling:
            - Invalid path (absolute, '..', null byte, escapes vault) → Error
            - File not found → Error, use list() or search_files() to find it
        """
        return read_note(vault, input.filepath)

    @mcp.tool(name="read_multiple")
    async def read_multiple(input: ReadMultipleInput) -> dict[str, Any]:
        """Read several files at once.

        Files are read concurrently. Files that cannot be read are left out of
        the response rather than failing the whole call; any invalid path fails
        the call before reading.

        Args:
            input (ReadMultipleInput): Validated input containing:
                - filepaths (list[str]): Paths relative to the vault root

        Returns:
            {"files": [{"path": str, "content": str}, ...]}
        """
        return await read_notes(vault, input.filepaths)

    @mcp.tool(name="get_metadata")
    async def get_metadata(input: GetMetadataInput) -> dict[str, Any]:
        """Get size, creation/modification time and type of a file or folder.

        Returns:
            {"path": str, "name": str, "size": int, "created": str,
             "modified": str, "is_directory": bool}
        """
        return get_note_metadata(vault, input.filepath)

    @mcp.tool(name="get_sections")
    async def get_sections(input: GetSectionsInput) -> dict[str, Any]:
        """Split a markdown file into sections by heading.

        Text before the first heading is not part of any section. Line numbers
        are 0-based.

        Returns:
            {"path": str, "sections": [{"heading": str, "level": int,
             "content": str, "line_start": int, "line_end": int}, ...]}
        """
        return get_note_sections(vault, input.filepath)
