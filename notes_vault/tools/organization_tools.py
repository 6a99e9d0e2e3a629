"""Organization tools.

This module provides MCP tool wrappers for organizing the vault:
- create_directory: New folder
- move: Move or rename a file
- delete: Delete a file (requires explicit confirmation)
"""
from __future__ import annotations

from typing import Any

from mcp.server.fastmcp import FastMCP

from notes_vault.core.note_operations import (
    create_directory,
    delete_note,
    move_note,
)
from notes_vault.core.vault_operations import VaultContext
from notes_vault.models import (
    CreateDirectoryInput,
    DeleteNoteInput,
    MoveNoteInput,
)


def register(mcp: FastMCP, vault: VaultContext) -> None:
    """Register the organization tools on ``mcp`` for ``vault``."""

    @mcp.tool(name="create_directory")
    async def create_directory_tool(input: CreateDirectoryInput) -> dict[str, Any]:
        """Create a new folder in the vault (parents included).

        Returns:
            {"path": str, "status": "created"}
        """
        return create_directory(vault, input.dirpath)

    @mcp.tool(name="move")
    async def move(input: MoveNoteInput) -> dict[str, Any]:
        """Move or rename a file within the vault.

        Destination folders are created automatically. A file already at the
        destination is replaced.

        Args:
            input (MoveNoteInput): Validated input containing:
                - source (str): Current path
                - destination (str): New path

        Returns:
            {"source": str, "destination": str, "status": "moved"}

        Error Handling:
            - Source not found → Error with the source path
        """
        return move_note(vault, input.source, input.destination)

    # Removes the file entirely; refuses unless confirm is true.
    @mcp.tool(name="delete")
    async def delete(input: DeleteNoteInput) -> dict[str, Any]:
        """Delete a file permanently (requires confirm: true).

        Cannot be undone through this tool. Always confirm with the user
        before calling.

        Returns:
            {"path": str, "status": "deleted"}

        Error Handling:
            - confirm missing or false → Error, nothing is deleted
            - File not found → Error
        """
        return delete_note(vault, input.filepath, confirm=input.confirm)
