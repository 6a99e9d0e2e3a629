"""Shared fixtures for vault tests."""

from pathlib import Path

import pytest

from notes_vault import VaultConfig, VaultContext


def write_note(root: Path, relative: str, content: str) -> Path:
    """Create ``relative`` under ``root`` (parents included) and return its path."""
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def vault_root(tmp_path):
    """An empty vault directory, given as its real path."""
    root = tmp_path / "vault"
    root.mkdir()
    return root.resolve()


@pytest.fixture
def outside_dir(tmp_path):
    """A directory next to the vault that tools must never reach."""
    outside = tmp_path / "outside"
    outside.mkdir()
    (outside / "secret.md").write_text("top secret", encoding="utf-8")
    return outside.resolve()


@pytest.fixture
def vault(vault_root):
    """Vault context over ``vault_root`` with default settings."""
    return VaultContext(VaultConfig(root=vault_root, max_search_results=50))


@pytest.fixture
def sample_vault(vault_root, vault):
    """Vault with the two notes used throughout the search tests."""
    write_note(vault_root, "notes/a.md", "Hello World\nSecond line")
    write_note(vault_root, "notes/b.md", "no match here")
    return vault
