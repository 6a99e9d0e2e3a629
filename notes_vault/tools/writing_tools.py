"""Writing tools.

This module provides MCP tool wrappers for write operations:
- create: New file (fails if it exists)
- write: Overwrite a file
- append: Append to an existing file
- edit: Replace the first occurrence of some text
"""
from __future__ import annotations

from typing import Any

from mcp.server.fastmcp import FastMCP

from notes_vault.core.note_operations import (
    append_to_note,
    create_note,
    edit_note,
    write_note,
)
from notes_vault.core.vault_operations import VaultContext
from notes_vault.models import (
    AppendNoteInput,
    CreateNoteInput,
    EditNoteInput,
    WriteNoteInput,
)


def register(mcp: FastMCP, vault: VaultContext) -> None:
    """Register the writing tools on ``mcp`` for ``vault``."""

    @mcp.tool(name="create")
    async def create(input: CreateNoteInput) -> dict[str, Any]:
        """Create a new file with content (fails if it already exists).

        Parent folders are created automatically.

        Args:
            input (CreateNoteInput): Validated input containing:
                - filepath (str): Path relative to the vault root
                - content (str): Full content (can be empty)

        Returns:
            {"path": str, "status": "created"}

        Examples:
            - Use when: User asks to "create", "make", or "start" a note
            - Don't use: Updating an existing file → Use write(), append() or edit()

        Error Handling:
            - File exists → Error, the existing file is left unchanged
        """
        return create_note(vault, input.filepath, input.content)

    # Replaces the entire file contents, creating the file when missing.
    @mcp.tool(name="write")
    async def write(input: WriteNoteInput) -> dict[str, Any]:
        """Overwrite a file with new content.

        Returns:
            {"path": str, "status": "written"}
        """
        return write_note(vault, input.filepath, input.content)

    @mcp.tool(name="append")
    async def append(input: AppendNoteInput) -> dict[str, Any]:
        """Append content to the end of an existing file.

        Content is written exactly as given; no newline is inserted.
        Most token-efficient way to add to a note without reading it.

        Returns:
            {"path": str, "status": "appended"}

        Error Handling:
            - File not found → Error, use create() instead
        """
        return append_to_note(vault, input.filepath, input.content)

    @mcp.tool(name="edit")
    async def edit(input: EditNoteInput) -> dict[str, Any]:
        """Perform a surgical find/replace edit on a file.

        Only the first occurrence of old_content is replaced. Include enough
        surrounding text to make old_content unique.

        Args:
            input (EditNoteInput): Validated input containing:
                - filepath (str): Path relative to the vault root
                - old_content (str): Exact text to find
                - new_content (str): Replacement text

        Returns:
            {"path": str, "status": "edited"}

        Error Handling:
            - old_content not found → Error, read() the file and retry
            - File not found → Error
        """
        return edit_note(vault, input.filepath, input.old_content, input.new_content)
