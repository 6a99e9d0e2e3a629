"""Pydantic input models for discovery and search operations.

This module defines input models for discovery tools:
- List markdown files in the vault
- Full-text content search
- Filename search
- Directory structure
"""

from __future__ import annotations

from typing import Optional
from pydantic import BaseModel, Field, field_validator


def _validate_query(v: str) -> str:
    if not v.strip():
        raise ValueError(
            "Search query cannot be empty. "
            "Provide a search term to look for."
        )
    return v


class ListNotesInput(BaseModel):
    """Input model for the list tool.

    Lists every markdown file in the vault, optionally filtered.

    Examples:
        >>> ListNotesInput()
        >>> ListNotesInput(filter="Projects/")
    """

    filter: Optional[str] = Field(
        None,
        description=(
            "Optional substring to match in relative file paths. "
            "Examples: 'Projects/', '2025'"
        )
    )

    @field_validator('filter')
    @classmethod
    def validate_filter(cls, v: Optional[str]) -> Optional[str]:
        """Treat a blank filter as no filter."""
        if v is None or not v.strip():
            return None
        return v

    class Config:
        """Pydantic model configuration."""
        json_schema_extra = {
            "examples": [
                {"filter": None},
                {"filter": "Projects/"}
            ]
        }


class SearchContentInput(BaseModel):
    """Input model for the search tool.

    Case-insensitive literal search inside markdown files. Returns matching
    lines with positions, ranked by score.

    Examples:
        >>> SearchContentInput(query="machine learning")
        >>> SearchContentInput(query="TODO", max_results=5)
    """

    query: str = Field(
        min_length=1,
        description=(
            "Text to search for (case-insensitive, literal; regex characters "
            "have no special meaning). Examples: 'machine learning', 'TODO'"
        )
    )

    max_results: Optional[int] = Field(
        None,
        ge=1,
        description=(
            "Maximum number of files to return. "
            "Default: the server's configured max_search_results."
        )
    )

    file_pattern: Optional[str] = Field(
        None,
        description=(
            "Optional substring a file path must contain to be searched. "
            "Example: 'Daily Notes/'"
        )
    )

    @field_validator('query')
    @classmethod
    def validate_query(cls, v: str) -> str:
        """Validate search query is not empty."""
        return _validate_query(v)

    class Config:
        """Pydantic model configuration."""
        json_schema_extra = {
            "examples": [
                {"query": "machine learning", "max_results": None},
                {"query": "TODO", "max_results": 5, "file_pattern": "Projects/"}
            ]
        }


class SearchFilesInput(BaseModel):
    """Input model for the search_files tool.

    Case-insensitive literal match against file names (last path segment).

    Examples:
        >>> SearchFilesInput(query="meeting")
    """

    query: str = Field(
        min_length=1,
        description=(
            "Text to look for in file names (case-insensitive, literal). "
            "Examples: 'meeting', '2025-10'"
        )
    )

    max_results: Optional[int] = Field(
        None,
        ge=1,
        description=(
            "Maximum number of files to return. "
            "Default: the server's configured max_search_results."
        )
    )

    @field_validator('query')
    @classmethod
    def validate_query(cls, v: str) -> str:
        """Validate search query is not empty."""
        return _validate_query(v)


class GetStructureInput(BaseModel):
    """Input model for the get_structure tool.

    Takes no parameters, but using a model maintains API consistency.
    """
