"""Data models for vault configuration, files and search results."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

DEFAULT_FILE_PATTERN = "**/*.md"
DEFAULT_MAX_SEARCH_RESULTS = 50


@dataclass(frozen=True)
class VaultConfig:
    """Normalized settings for the vault served by this process.

    Built once at startup by :func:`notes_vault.config.load_configuration` and
    handed to every component that needs it.
    """

    root: Path
    max_search_results: int = DEFAULT_MAX_SEARCH_RESULTS
    file_pattern: str = DEFAULT_FILE_PATTERN
    exclude_patterns: tuple[str, ...] = ()

    def as_payload(self) -> dict[str, Any]:
        """Return a serializable payload representation."""
        return {
            "vault_path": str(self.root),
            "max_search_results": self.max_search_results,
            "file_pattern": self.file_pattern,
            "exclude_patterns": list(self.exclude_patterns),
        }


@dataclass(frozen=True)
class FileMetadata:
    """Filesystem snapshot for a single vault entry."""

    path: str
    name: str
    size: int
    created_at: datetime
    modified_at: datetime
    is_directory: bool

    def as_payload(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "name": self.name,
            "size": self.size,
            "created": self.created_at.isoformat(),
            "modified": self.modified_at.isoformat(),
            "is_directory": self.is_directory,
        }


@dataclass(frozen=True)
class DirectoryStructure:
    """Node of the vault tree. ``children`` is ``None`` for files."""

    name: str
    path: str
    is_directory: bool
    children: Optional[list[DirectoryStructure]] = None

    def as_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "name": self.name,
            "path": self.path,
            "is_directory": self.is_directory,
        }
        if self.children is not None:
            payload["children"] = [child.as_payload() for child in self.children]
        return payload


@dataclass(frozen=True)
class SearchMatch:
    """One occurrence of a query on a line (1-based line, 0-based columns)."""

    line: int
    content: str
    start: int
    end: int

    def as_payload(self) -> dict[str, Any]:
        return {
            "line": self.line,
            "content": self.content,
            "start": self.start,
            "end": self.end,
        }


@dataclass(frozen=True)
class SearchResult:
    """Matches for a single file together with its relevance score."""

    path: str
    matches: list[SearchMatch] = field(default_factory=list)
    score: float = 0.0

    def as_payload(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "matches": [match.as_payload() for match in self.matches],
            "score": round(self.score, 4),
        }


@dataclass
class NoteSection:
    """Markdown section opened by a heading line.

    Mutable because the scanner extends ``content`` and closes ``line_end`` as it
    walks the document.
    """

    heading: str
    level: int
    content: str
    line_start: int
    line_end: int

    def as_payload(self) -> dict[str, Any]:
        return {
            "heading": self.heading,
            "level": self.level,
            "content": self.content,
            "line_start": self.line_start,
            "line_end": self.line_end,
        }


@dataclass(frozen=True)
class FileContent:
    """Path and text of a file returned by a batch read."""

    path: str
    content: str

    def as_payload(self) -> dict[str, Any]:
        return {"path": self.path, "content": self.content}
