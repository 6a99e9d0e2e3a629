"""Tests for content search, filename search and section extraction."""

import pytest

from notes_vault.core.search_operations import (
    extract_sections,
    search_content,
    search_filenames,
)

from conftest import write_note


class TestSearchContent:
    def test_finds_single_case_insensitive_match(self, sample_vault, vault_root):
        results = search_content(vault_root, "hello")

        assert len(results) == 1
        result = results[0]
        assert result.path == str(vault_root / "notes" / "a.md")
        assert len(result.matches) == 1
        match = result.matches[0]
        assert (match.line, match.start, match.end) == (1, 0, 5)
        assert match.content == "Hello World"

    def test_score_components(self, sample_vault, vault_root):
        # Line start bonus only: "hello" is not an exact-case hit in "Hello World".
        assert search_content(vault_root, "hello")[0].score == pytest.approx(1.3)
        # Exact case adds 0.5.
        assert search_content(vault_root, "Hello")[0].score == pytest.approx(1.8)
        # "World" follows a space.
        assert search_content(vault_root, "World")[0].score == pytest.approx(1.8)
        # "orld" is mid-word.
        assert search_content(vault_root, "orld")[0].score == pytest.approx(1.5)

    def test_long_line_penalty(self, vault_root):
        write_note(vault_root, "long.md", "word " + "y" * 250)

        result = search_content(vault_root, "word")[0]

        assert result.score == pytest.approx(1.0 + 0.5 + 0.3 - 0.1)

    def test_every_occurrence_on_every_line_is_reported(self, vault_root):
        write_note(vault_root, "note.md", "cat and Cat\nno\n  CAT at start")

        matches = search_content(vault_root, "cat")[0].matches

        assert [(m.line, m.start, m.end) for m in matches] == [(1, 0, 3), (1, 8, 11), (3, 2, 5)]
        assert matches[2].content == "CAT at start"

    def test_query_is_literal(self, vault_root):
        write_note(vault_root, "regex.md", "abc\na.c\n(x+)")

        assert [m.line for m in search_content(vault_root, "a.c")[0].matches] == [2]
        assert [m.line for m in search_content(vault_root, "(x+)")[0].matches] == [3]
        assert search_content(vault_root, ".*z") == []

    def test_results_ranked_by_score(self, vault_root):
        write_note(vault_root, "one.md", "alpha")
        write_note(vault_root, "three.md", "alpha alpha alpha")
        write_note(vault_root, "two.md", "alpha alpha")

        results = search_content(vault_root, "alpha")

        assert [r.path.rsplit("/", 1)[-1] for r in results] == ["three.md", "two.md", "one.md"]

    def test_ties_keep_walk_order(self, vault_root):
        for name in ("c.md", "a.md", "b.md"):
            write_note(vault_root, name, "same text")

        results = search_content(vault_root, "same")

        assert [r.path.rsplit("/", 1)[-1] for r in results] == ["a.md", "b.md", "c.md"]

    def test_max_results_truncates_after_sorting(self, vault_root):
        write_note(vault_root, "a.md", "term")
        write_note(vault_root, "b.md", "term term term")
        write_note(vault_root, "c.md", "term term")

        results = search_content(vault_root, "term", max_results=2)

        assert [r.path.rsplit("/", 1)[-1] for r in results] == ["b.md", "c.md"]

    def test_file_pattern_restricts_files(self, vault_root):
        write_note(vault_root, "journal/day.md", "meeting")
        write_note(vault_root, "projects/plan.md", "meeting")

        results = search_content(vault_root, "meeting", file_pattern="projects/")

        assert [r.path for r in results] == [str(vault_root / "projects" / "plan.md")]

    def test_file_pattern_ignores_location_of_root(self, tmp_path):
        """Only the part of the path below the root is compared."""
        root = tmp_path / "projects" / "vault"
        write_note(root, "journal/day.md", "meeting")
        write_note(root, "projects/plan.md", "meeting")

        results = search_content(root, "meeting", file_pattern="projects/")

        assert [r.path for r in results] == [str(root / "projects" / "plan.md")]

    def test_unreadable_files_are_skipped(self, vault_root):
        (vault_root / "binary.md").write_bytes(b"\xff\xfe needle \x80")
        write_note(vault_root, "text.md", "needle")

        results = search_content(vault_root, "needle")

        assert [r.path for r in results] == [str(vault_root / "text.md")]

    def test_no_matches_returns_empty_list(self, sample_vault, vault_root):
        assert search_content(vault_root, "absent") == []

    def test_empty_query_matches_nothing(self, sample_vault, vault_root):
        assert search_content(vault_root, "") == []


class TestSearchFilenames:
    def test_matches_file_name_case_insensitively(self, sample_vault, vault_root):
        assert search_filenames(vault_root, "A") == [vault_root / "notes" / "a.md"]

    def test_only_last_segment_is_compared(self, sample_vault, vault_root):
        assert search_filenames(vault_root, "notes") == []

    def test_query_is_literal(self, vault_root):
        write_note(vault_root, "a+b.md", "")
        write_note(vault_root, "aab.md", "")

        assert search_filenames(vault_root, "a+b") == [vault_root / "a+b.md"]

    def test_max_results(self, vault_root):
        for name in ("day1.md", "day2.md", "day3.md"):
            write_note(vault_root, name, "")

        assert search_filenames(vault_root, "day", max_results=2) == [
            vault_root / "day1.md",
            vault_root / "day2.md",
        ]


class TestExtractSections:
    def test_sections_split_on_headings(self):
        content = "# Title\nintro\n## Sub\nbody\nmore"

        sections = extract_sections(content)

        assert [(s.heading, s.level, s.line_start, s.line_end) for s in sections] == [
            ("Title", 1, 0, 1),
            ("Sub", 2, 2, 4),
        ]
        assert sections[0].content == "intro\n"
        assert sections[1].content == "body\nmore\n"

    def test_preamble_is_discarded(self):
        sections = extract_sections("preamble text\n\n# Heading\nbody")

        assert len(sections) == 1
        assert sections[0].heading == "Heading"
        assert sections[0].line_start == 2
        assert sections[0].line_end == 3
        assert sections[0].content == "body\n"

    def test_heading_requires_space_and_at_most_six_hashes(self):
        content = "#tag\n####### seven\n###### six\n#\tTabbed"

        sections = extract_sections(content)

        assert [(s.heading, s.level) for s in sections] == [("six", 6), ("Tabbed", 1)]

    def test_consecutive_headings_produce_empty_sections(self):
        sections = extract_sections("# A\n# B\n")

        assert [(s.heading, s.content, s.line_start, s.line_end) for s in sections] == [
            ("A", "", 0, 0),
            ("B", "\n", 1, 2),
        ]

    def test_no_headings(self):
        assert extract_sections("just text\nmore text") == []
