"""MCP tool definitions for vault operations.

Each tool module exposes ``register(mcp, vault)``, which defines its tools with
the ``@mcp.tool()`` decorator bound to the given vault context.
"""

from notes_vault.tools import discovery_tools
from notes_vault.tools import reading_tools
from notes_vault.tools import writing_tools
from notes_vault.tools import organization_tools
from notes_vault.tools import utility_tools

TOOL_MODULES = (
    discovery_tools,
    reading_tools,
    writing_tools,
    organization_tools,
    utility_tools,
)

__all__ = [
    "TOOL_MODULES",
    "discovery_tools",
    "reading_tools",
    "writing_tools",
    "organization_tools",
    "utility_tools",
]
