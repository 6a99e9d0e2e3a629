"""Vault context shared by every tool, and vault readiness checks."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from notes_vault.core.paths import PathResolver
from notes_vault.data_models import VaultConfig
from notes_vault.errors import NotFoundError


@dataclass(frozen=True)
class VaultContext:
    """Configuration plus the resolver anchored at its root.

    Created once per server in :func:`notes_vault.server.build_server` and passed
    to each operation; there is no module-level vault state.
    """

    config: VaultConfig
    resolver: PathResolver = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "resolver", PathResolver(self.config.root))

    @property
    def root(self) -> Path:
        """Real path of the vault root, the base of every absolute path handed out."""
        return self.resolver.root


def ensure_vault_ready(vault: VaultContext) -> None:
    """Ensure the vault directory is accessible before performing operations.

    Raises:
        NotFoundError: If the vault path does not exist or is not a directory.
    """
    if not vault.root.is_dir():
        raise NotFoundError(f"Vault is not accessible at {vault.root}")
