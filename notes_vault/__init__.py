"""Notes Vault MCP Server

Exposes a local directory of markdown notes to AI assistants via Model Context
Protocol tools for discovery, search, reading, writing and organization.

Security: every path is confined to the configured vault root, including
through symlinks (see notes_vault.core.paths).
"""

from notes_vault.config import load_configuration
from notes_vault.core.paths import PathResolver
from notes_vault.core.vault_operations import VaultContext
from notes_vault.data_models import (
    DirectoryStructure,
    FileContent,
    FileMetadata,
    NoteSection,
    SearchMatch,
    SearchResult,
    VaultConfig,
)
from notes_vault.errors import (
    AlreadyExistsError,
    ConfigurationError,
    ConfirmationRequiredError,
    ContentNotFoundError,
    InvalidPathError,
    IOFailureError,
    NotFoundError,
    VaultError,
)
from notes_vault.server import build_server, run_server

__version__ = "1.0.0"
__all__ = [
    "load_configuration",
    "PathResolver",
    "VaultContext",
    "VaultConfig",
    "DirectoryStructure",
    "FileContent",
    "FileMetadata",
    "NoteSection",
    "SearchMatch",
    "SearchResult",
    "VaultError",
    "InvalidPathError",
    "NotFoundError",
    "AlreadyExistsError",
    "ContentNotFoundError",
    "ConfirmationRequiredError",
    "IOFailureError",
    "ConfigurationError",
    "build_server",
    "run_server",
]
