"""Content search, filename search and markdown section extraction."""

from __future__ import annotations

import re
from collections.abc import Iterable
from pathlib import Path
from typing import Optional

from notes_vault.core.file_operations import iter_markdown_files, read_file
from notes_vault.data_models import (
    DEFAULT_MAX_SEARCH_RESULTS,
    NoteSection,
    SearchMatch,
    SearchResult,
)
from notes_vault.errors import VaultError

# Pattern for matching markdown headings (H1-H6)
HEADING_PATTERN = re.compile(r"^(?P<hashes>#{1,6})\s+(?P<title>.+)$")

LONG_LINE_THRESHOLD = 200

BASE_MATCH_SCORE = 1.0
EXACT_CASE_BONUS = 0.5
WORD_BOUNDARY_BONUS = 0.3
LONG_LINE_PENALTY = 0.1


# ==============================================================================
# HELPER FUNCTIONS
# ==============================================================================


def _literal_pattern(query: str) -> re.Pattern[str]:
    """Compile ``query`` as a case-insensitive literal."""
    return re.compile(re.escape(query), re.IGNORECASE)


def _find_matches(content: str, pattern: re.Pattern[str]) -> list[SearchMatch]:
    """Return every occurrence of ``pattern`` in ``content``, line by line."""
    matches: list[SearchMatch] = []
    for line_number, line in enumerate(content.split("\n"), start=1):
        trimmed = line.strip()
        for match in pattern.finditer(line):
            matches.append(
                SearchMatch(
                    line=line_number,
                    content=trimmed,
                    start=match.start(),
                    end=match.end(),
                )
            )
    return matches


def _score_matches(content: str, matches: list[SearchMatch], query: str) -> float:
    """Sum the per-match relevance score for one file.

    Each match earns a base point, a bonus when its line also contains the
    query with the caller's exact casing, a bonus when it starts a line or
    follows a space, and a small penalty when its line is very long.
    """
    lines = content.split("\n")
    score = 0.0
    for match in matches:
        score += BASE_MATCH_SCORE

        if query in match.content:
            score += EXACT_CASE_BONUS

        raw_line = lines[match.line - 1]
        if match.start == 0 or raw_line[match.start - 1] == " ":
            score += WORD_BOUNDARY_BONUS

        if len(match.content) > LONG_LINE_THRESHOLD:
            score -= LONG_LINE_PENALTY
    return score


# ==============================================================================
# SEARCH OPERATIONS
# ==============================================================================


def search_content(
    root: Path,
    query: str,
    file_pattern: Optional[str] = None,
    max_results: int = DEFAULT_MAX_SEARCH_RESULTS,
    exclude_patterns: Iterable[str] = (),
) -> list[SearchResult]:
    """Search markdown files under ``root`` for a literal, case-insensitive query.

    Args:
        root: Absolute directory to search.
        query: Text to look for. Regex metacharacters have no special meaning.
        file_pattern: Optional substring the root-relative path must contain.
        max_results: Maximum number of files returned.
        exclude_patterns: Simplified exclude globs, see
            :func:`notes_vault.core.file_operations.iter_markdown_files`.

    Returns:
        Results with at least one match, highest score first. Files with equal
        scores keep walk order. Files that cannot be read are skipped.
    """
    if not query:
        return []

    pattern = _literal_pattern(query)
    results: list[SearchResult] = []

    for path in iter_markdown_files(root, exclude_patterns=exclude_patterns):
        if file_pattern and file_pattern not in path.relative_to(root).as_posix():
            continue

        try:
            content = read_file(path)
        except VaultError:
            continue

        matches = _find_matches(content, pattern)
        if not matches:
            continue

        results.append(
            SearchResult(
                path=str(path),
                matches=matches,
                score=_score_matches(content, matches, query),
            )
        )

    results.sort(key=lambda result: result.score, reverse=True)
    return results[:max_results]


def search_filenames(
    root: Path,
    query: str,
    max_results: int = DEFAULT_MAX_SEARCH_RESULTS,
    exclude_patterns: Iterable[str] = (),
) -> list[Path]:
    """Return markdown files whose name contains ``query``, ignoring case.

    Only the final path segment is compared. Results are in walk order and are
    not scored.
    """
    pattern = _literal_pattern(query)
    matches: list[Path] = []
    for path in iter_markdown_files(root, exclude_patterns=exclude_patterns):
        if len(matches) >= max_results:
            break
        if pattern.search(path.name):
            matches.append(path)
    return matches


def extract_sections(content: str) -> list[NoteSection]:
    """Split markdown ``content`` into heading-delimited sections.

    A heading line closes the open section (its ``line_end`` becomes the line
    before the heading) and opens a new one. Other lines are appended, each
    followed by a newline, to the open section. Text before the first heading
    belongs to no section. Line numbers are 0-based.
    """
    lines = content.split("\n")
    last_line = len(lines) - 1
    sections: list[NoteSection] = []
    current: Optional[NoteSection] = None

    for index, line in enumerate(lines):
        heading = HEADING_PATTERN.match(line)
        if heading:
            if current is not None:
                current.line_end = index - 1
                sections.append(current)

            current = NoteSection(
                heading=heading.group("title"),
                level=len(heading.group("hashes")),
                content="",
                line_start=index,
                line_end=last_line,
            )
        elif current is not None:
            current.content += line + "\n"

    if current is not None:
        sections.append(current)

    return sections
