"""Discovery and search tools.

This module contains MCP tool wrappers for discovery operations:
- list: List markdown files in the vault
- search: Full-text content search with ranked line matches
- search_files: Search files by name
- get_structure: Directory tree of the vault

All tools delegate to core operations in notes_vault.core.note_operations.
"""
from __future__ import annotations

from typing import Any

from mcp.server.fastmcp import FastMCP

from notes_vault.core.note_operations import (
    get_vault_structure,
    list_notes,
    search_vault_content,
    search_vault_filenames,
)
from notes_vault.core.vault_operations import VaultContext
from notes_vault.models import (
    GetStructureInput,
    ListNotesInput,
    SearchContentInput,
    SearchFilesInput,
)


def register(mcp: FastMCP, vault: VaultContext) -> None:
    """Register the discovery tools on ``mcp`` for ``vault``."""

    @mcp.tool(name="list")
    async def list_files(input: ListNotesInput) -> dict[str, Any]:
        """List all markdown files in the vault (complete inventory).

        Hidden files and folders (names starting with '.') are skipped.

        Args:
            input (ListNotesInput): Validated input containing:
                - filter (str, optional): Substring to match in relative paths

        Returns:
            {"notes": [str, ...], "count": int}

        Examples:
            - Use when: Starting a conversation, need an overview of notes
            - Use when: Listing a folder → filter="Projects/"
            - Don't use: Looking for a word inside notes → Use search()
        """
        return list_notes(vault, input.filter)

    @mcp.tool(name="search")
    async def search(input: SearchContentInput) -> dict[str, Any]:
        """Full-text search across all markdown files, ranked by relevance.

        Matching is literal and case-insensitive. Each result lists every
        matching line with its 1-based line number and the match's character
        offsets. Exact-case hits and matches at word starts rank higher.

        Args:
            input (SearchContentInput): Validated input containing:
                - query (str): Text to find
                - max_results (int, optional): Maximum files returned
                - file_pattern (str, optional): Substring a file path must contain

        Returns:
            {
                "query": str,
                "results": [
                    {
                        "path": str,
                        "matches": [{"line": int, "content": str, "start": int, "end": int}],
                        "score": float
                    }
                ]
            }

        Examples:
            - Use when: Finding notes that mention a topic
            - Workflow: search() → read() for the full note
            - Don't use: Looking for a file by name → Use search_files()

        Error Handling:
            - ValidationError: Empty query or max_results below 1
        """
        return search_vault_content(
            vault,
            input.query,
            max_results=input.max_results,
            file_pattern=input.file_pattern,
        )

    @mcp.tool(name="search_files")
    async def search_files(input: SearchFilesInput) -> dict[str, Any]:
        """Search for markdown files by file name.

        Case-insensitive literal match against the last path segment only.

        Args:
            input (SearchFilesInput): Validated input containing:
                - query (str): Text to find in file names
                - max_results (int, optional): Maximum files returned

        Returns:
            {"query": str, "matches": [str, ...]}
        """
        return search_vault_filenames(vault, input.query, max_results=input.max_results)

    @mcp.tool(name="get_structure")
    async def get_structure(input: GetStructureInput) -> dict[str, Any]:
        """Get the complete directory tree of the vault.

        Directories are listed before files, then alphabetically. Hidden entries
        are skipped. The root node has path ".".

        Returns:
            {"name": str, "path": str, "is_directory": bool, "children": [...]}
        """
        return get_vault_structure(vault)
