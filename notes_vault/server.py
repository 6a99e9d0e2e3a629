"""FastMCP server construction and startup."""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional

from mcp.server.fastmcp import FastMCP

from notes_vault.config import load_configuration
from notes_vault.constants import LOG_LEVEL, LOG_LEVEL_ENV_VAR, SERVER_NAME
from notes_vault.core.vault_operations import VaultContext
from notes_vault.data_models import VaultConfig
from notes_vault.tools import TOOL_MODULES

logger = logging.getLogger(__name__)


def configure_logging(level: Optional[str] = None) -> None:
    """Send log records to stderr; stdout carries the stdio transport."""
    level_name = (level or os.environ.get(LOG_LEVEL_ENV_VAR) or LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_server(config: VaultConfig) -> FastMCP:
    """Create a FastMCP server with every vault tool bound to ``config``."""
    vault = VaultContext(config)
    mcp = FastMCP(SERVER_NAME)
    for module in TOOL_MODULES:
        module.register(mcp, vault)
    return mcp


def run_server() -> None:
    """Load configuration and start the MCP server with stdio transport."""
    configure_logging()
    config = load_configuration()
    logger.info(
        "Starting notes vault MCP server for %s (max_search_results=%d)",
        config.root,
        config.max_search_results,
    )
    build_server(config).run(transport="stdio")


if __name__ == "__main__":
    run_server()
