"""Module-level constants for the notes vault MCP server."""

from pathlib import Path

SERVER_NAME = "notes_vault"

# Configuration
CONFIG_ENV_VAR = "NOTES_VAULT_CONFIG"
VAULT_PATH_ENV_VAR = "VAULT_PATH"
MAX_RESULTS_ENV_VAR = "MAX_SEARCH_RESULTS"
# Expanded at lookup time so HOME changes are honoured.
DEFAULT_CONFIG_PATHS = (
    Path("~/.openotes/config.yaml"),
    Path("~/.openotes/config.json"),
)

# Logging
LOG_LEVEL_ENV_VAR = "NOTES_VAULT_LOG_LEVEL"
LOG_LEVEL = "INFO"
