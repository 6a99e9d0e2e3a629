"""Utility tools (health check)."""
from __future__ import annotations

import logging
from typing import Any

from mcp.server.fastmcp import FastMCP

from notes_vault.core.note_operations import vault_health
from notes_vault.core.vault_operations import VaultContext
from notes_vault.models import HealthInput

logger = logging.getLogger(__name__)


def register(mcp: FastMCP, vault: VaultContext) -> None:
    """Register the utility tools on ``mcp`` for ``vault``."""

    @mcp.tool(name="health")
    async def health(input: HealthInput) -> dict[str, Any]:
        """Check server health and vault accessibility.

        Returns:
            {
                "status": "healthy",
                "vault": {"path": str, "file_count": int},
                "config": {"vault_path": str, "max_search_results": int,
                           "file_pattern": str, "exclude_patterns": [str]}
            }

        Error Handling:
            - Vault directory missing → Error with the vault path
        """
        report = vault_health(vault)
        logger.debug("Health check: %d markdown files", report["vault"]["file_count"])
        return report
