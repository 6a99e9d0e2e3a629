"""Tool-level vault operations.

Each function takes the :class:`VaultContext`, runs every caller-supplied path
through the resolver, delegates to the file store or search engine, and
returns a payload with vault-relative paths.
"""

from __future__ import annotations

import dataclasses
import logging
from pathlib import Path
from typing import Any, Optional

from notes_vault.core import file_operations
from notes_vault.core.search_operations import (
    extract_sections,
    search_content,
    search_filenames,
)
from notes_vault.core.vault_operations import VaultContext, ensure_vault_ready
from notes_vault.data_models import DirectoryStructure
from notes_vault.errors import (
    AlreadyExistsError,
    ConfirmationRequiredError,
    NotFoundError,
)

logger = logging.getLogger(__name__)


# ==============================================================================
# HELPER FUNCTIONS
# ==============================================================================


def _effective_max_results(vault: VaultContext, max_results: Optional[int]) -> int:
    """Fall back to the configured limit when ``max_results`` is unset or not positive."""
    if max_results is None or max_results <= 0:
        return vault.config.max_search_results
    return max_results


def _relative_structure(vault: VaultContext, node: DirectoryStructure) -> DirectoryStructure:
    """Rewrite a structure tree so every node carries a vault-relative path."""
    children = None
    if node.children is not None:
        children = [_relative_structure(vault, child) for child in node.children]
    return dataclasses.replace(
        node,
        path=vault.resolver.to_relative(node.path) or ".",
        children=children,
    )


def _require_existing(vault: VaultContext, filepath: str) -> Path:
    """Resolve ``filepath`` and fail with :class:`NotFoundError` if it is missing."""
    target = vault.resolver.resolve(filepath)
    if not file_operations.exists(target):
        raise NotFoundError(f"File does not exist: {filepath}")
    return target


# ==============================================================================
# DISCOVERY
# ==============================================================================


def list_notes(vault: VaultContext, filter: Optional[str] = None) -> dict[str, Any]:
    """List markdown files in the vault.

    Args:
        vault: Vault context.
        filter: Optional substring a relative path must contain.

    Returns:
        ``{"notes": [relative path, ...], "count": int}`` in walk order.
    """
    ensure_vault_ready(vault)
    files = file_operations.iter_markdown_files(
        vault.root,
        vault.config.file_pattern,
        vault.config.exclude_patterns,
    )
    notes = [vault.resolver.to_relative(path) for path in files]
    if filter:
        notes = [note for note in notes if filter in note]
    return {"notes": notes, "count": len(notes)}


def search_vault_content(
    vault: VaultContext,
    query: str,
    max_results: Optional[int] = None,
    file_pattern: Optional[str] = None,
) -> dict[str, Any]:
    """Full-text search across the vault.

    Returns:
        ``{"query": str, "results": [{"path", "matches", "score"}, ...]}`` ranked
        by descending score.
    """
    ensure_vault_ready(vault)
    results = search_content(
        vault.root,
        query,
        file_pattern=file_pattern,
        max_results=_effective_max_results(vault, max_results),
        exclude_patterns=vault.config.exclude_patterns,
    )
    return {
        "query": query,
        "results": [
            dataclasses.replace(result, path=vault.resolver.to_relative(result.path)).as_payload()
            for result in results
        ],
    }


def search_vault_filenames(
    vault: VaultContext,
    query: str,
    max_results: Optional[int] = None,
) -> dict[str, Any]:
    """Find markdown files by name. Returns ``{"query", "matches"}``."""
    ensure_vault_ready(vault)
    matches = search_filenames(
        vault.root,
        query,
        max_results=_effective_max_results(vault, max_results),
        exclude_patterns=vault.config.exclude_patterns,
    )
    return {
        "query": query,
        "matches": [vault.resolver.to_relative(path) for path in matches],
    }


def get_vault_structure(vault: VaultContext) -> dict[str, Any]:
    """Return the directory tree of the vault; the root node's path is ``"."``."""
    ensure_vault_ready(vault)
    structure = file_operations.get_directory_structure(vault.root)
    return _relative_structure(vault, structure).as_payload()


# ==============================================================================
# READING
# ==============================================================================


def read_note(vault: VaultContext, filepath: str) -> dict[str, Any]:
    """Read a single file.

    Raises:
        InvalidPathError: If ``filepath`` is rejected by the resolver.
        NotFoundError: If the file does not exist.
    """
    target = _require_existing(vault, filepath)
    return {
        "path": vault.resolver.to_relative(target),
        "content": file_operations.read_file(target),
    }


async def read_notes(vault: VaultContext, filepaths: list[str]) -> dict[str, Any]:
    """Read several files at once.

    Every path is validated before any read starts; an invalid path fails the
    whole call. Files that cannot be read are left out of ``files``.
    """
    targets = [vault.resolver.resolve(filepath) for filepath in filepaths]
    contents = await file_operations.read_multiple_files(targets)
    return {
        "files": [
            dataclasses.replace(item, path=vault.resolver.to_relative(item.path)).as_payload()
            for item in contents
        ],
    }


def get_note_metadata(vault: VaultContext, filepath: str) -> dict[str, Any]:
    """Return size, timestamps and type for a file or directory."""
    target = vault.resolver.resolve(filepath)
    metadata = file_operations.get_file_metadata(target)
    return dataclasses.replace(metadata, path=vault.resolver.to_relative(target)).as_payload()


def get_note_sections(vault: VaultContext, filepath: str) -> dict[str, Any]:
    """Split a note into heading-delimited sections."""
    target = _require_existing(vault, filepath)
    content = file_operations.read_file(target)
    return {
        "path": vault.resolver.to_relative(target),
        "sections": [section.as_payload() for section in extract_sections(content)],
    }


# ==============================================================================
# WRITING
# ==============================================================================


def create_note(vault: VaultContext, filepath: str, content: str) -> dict[str, Any]:
    """Create a new file, creating parent folders as needed.

    Raises:
        AlreadyExistsError: If something already exists at ``filepath``; the
            existing file is left untouched.
    """
    target = vault.resolver.resolve(filepath)
    if file_operations.exists(target):
        raise AlreadyExistsError(f"File already exists: {filepath}")

    file_operations.write_file(target, content)
    logger.info("Created '%s'", filepath)
    return {"path": vault.resolver.to_relative(target), "status": "created"}


def write_note(vault: VaultContext, filepath: str, content: str) -> dict[str, Any]:
    """Overwrite a file with ``content``, creating it if it does not exist."""
    target = vault.resolver.resolve(filepath)
    file_operations.write_file(target, content)
    logger.info("Wrote '%s'", filepath)
    return {"path": vault.resolver.to_relative(target), "status": "written"}


def append_to_note(vault: VaultContext, filepath: str, content: str) -> dict[str, Any]:
    """Append ``content`` verbatim to the end of an existing file."""
    target = _require_existing(vault, filepath)
    file_operations.append_file(target, content)
    logger.info("Appended to '%s'", filepath)
    return {"path": vault.resolver.to_relative(target), "status": "appended"}


def edit_note(
    vault: VaultContext,
    filepath: str,
    old_content: str,
    new_content: str,
) -> dict[str, Any]:
    """Replace the first occurrence of ``old_content`` in a file.

    Raises:
        NotFoundError: If the file does not exist.
        ContentNotFoundError: If ``old_content`` is not in the file.
    """
    target = vault.resolver.resolve(filepath)
    file_operations.edit_file(target, old_content, new_content)
    logger.info("Edited '%s'", filepath)
    return {"path": vault.resolver.to_relative(target), "status": "edited"}


# ==============================================================================
# ORGANIZATION
# ==============================================================================


def create_directory(vault: VaultContext, dirpath: str) -> dict[str, Any]:
    """Create a folder (and any missing parents). Existing folders are fine."""
    target = vault.resolver.resolve(dirpath)
    file_operations.ensure_directory(target)
    logger.info("Created directory '%s'", dirpath)
    return {"path": vault.resolver.to_relative(target), "status": "created"}


def move_note(vault: VaultContext, source: str, destination: str) -> dict[str, Any]:
    """Move or rename a file within the vault.

    An existing file at ``destination`` is replaced.

    Raises:
        NotFoundError: If ``source`` does not exist.
    """
    source_path = vault.resolver.resolve(source)
    destination_path = vault.resolver.resolve(destination)
    if not file_operations.exists(source_path):
        raise NotFoundError(f"Source file does not exist: {source}")

    file_operations.move_file(source_path, destination_path)
    logger.info("Moved '%s' to '%s'", source, destination)
    return {
        "source": vault.resolver.to_relative(source_path),
        "destination": vault.resolver.to_relative(destination_path),
        "status": "moved",
    }


def delete_note(vault: VaultContext, filepath: str, confirm: bool = False) -> dict[str, Any]:
    """Delete a file. Requires ``confirm`` to be exactly ``True``.

    Raises:
        ConfirmationRequiredError: If ``confirm`` is not ``True``; nothing is
            resolved or deleted.
        NotFoundError: If the file does not exist.
    """
    if confirm is not True:
        raise ConfirmationRequiredError("Deletion requires confirm: true")

    target = _require_existing(vault, filepath)
    file_operations.delete_file(target)
    logger.info("Deleted '%s'", filepath)
    return {"path": vault.resolver.to_relative(target), "status": "deleted"}


# ==============================================================================
# UTILITY
# ==============================================================================


def vault_health(vault: VaultContext) -> dict[str, Any]:
    """Report vault accessibility, markdown file count and active settings."""
    ensure_vault_ready(vault)
    file_count = sum(
        1
        for _ in file_operations.iter_markdown_files(
            vault.root,
            vault.config.file_pattern,
            vault.config.exclude_patterns,
        )
    )
    return {
        "status": "healthy",
        "vault": {
            "path": str(vault.root),
            "file_count": file_count,
        },
        "config": vault.config.as_payload(),
    }
