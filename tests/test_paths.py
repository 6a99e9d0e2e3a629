"""Tests for vault path confinement."""

import os

import pytest

from notes_vault import InvalidPathError, PathResolver

from conftest import write_note


@pytest.fixture
def resolver(vault_root):
    return PathResolver(vault_root)


class TestRejectedInput:
    """Inputs rejected before the filesystem is consulted."""

    @pytest.mark.parametrize(
        "relative_path",
        [
            "../escape.md",
            "notes/../../escape.md",
            "notes/../a.md",
            "..",
            "notes\\..\\escape.md",
        ],
    )
    def test_rejects_parent_segments(self, resolver, relative_path):
        with pytest.raises(InvalidPathError, match="traversal"):
            resolver.resolve(relative_path)

    def test_rejects_absolute_path(self, resolver):
        with pytest.raises(InvalidPathError, match="absolute"):
            resolver.resolve("/etc/passwd")

    def test_rejects_absolute_path_inside_vault(self, resolver, vault_root):
        """Absolute input is refused even when it points inside the vault."""
        with pytest.raises(InvalidPathError, match="absolute"):
            resolver.resolve(str(vault_root / "a.md"))

    @pytest.mark.parametrize("relative_path", ["a\0b.md", "\0", "notes/\0/a.md"])
    def test_rejects_null_bytes(self, resolver, relative_path):
        with pytest.raises(InvalidPathError, match="null"):
            resolver.resolve(relative_path)

    def test_rejection_does_not_depend_on_vault_contents(self, resolver, vault_root):
        write_note(vault_root, "escape.md", "inside")
        with pytest.raises(InvalidPathError):
            resolver.resolve("../escape.md")

    def test_invalid_path_error_is_value_error(self, resolver):
        with pytest.raises(ValueError):
            resolver.resolve("../escape.md")


class TestResolve:
    """Successful resolution and the round trip back to relative form."""

    @pytest.mark.parametrize(
        "relative_path, normalized",
        [
            ("a.md", "a.md"),
            ("notes/a.md", "notes/a.md"),
            ("notes/./a.md", "notes/a.md"),
            ("notes//deep///a.md", "notes/deep/a.md"),
            ("./notes/a.md", "notes/a.md"),
            ("notes/", "notes"),
            ("v1..2 release.md", "v1..2 release.md"),
        ],
    )
    def test_round_trip(self, resolver, relative_path, normalized):
        resolved = resolver.resolve(relative_path)
        assert resolved.is_absolute()
        assert resolver.to_relative(resolved) == normalized

    @pytest.mark.parametrize("relative_path", ["notes..md", "drafts/..hidden.md", "a/b../c.md"])
    def test_double_dot_inside_a_name_is_not_traversal(self, resolver, vault_root, relative_path):
        """Only a whole ``..`` segment refers to the parent directory."""
        resolved = resolver.resolve(relative_path)
        assert resolved == vault_root.joinpath(*relative_path.split("/"))
        assert resolver.to_relative(resolved) == relative_path

    def test_resolves_inside_root(self, resolver, vault_root):
        assert resolver.resolve("notes/a.md") == vault_root / "notes" / "a.md"

    def test_missing_file_in_missing_folders_is_allowed(self, resolver, vault_root):
        resolved = resolver.resolve("new/deeply/nested/note.md")
        assert resolved == vault_root / "new" / "deeply" / "nested" / "note.md"

    def test_current_directory_maps_to_root(self, resolver, vault_root):
        assert resolver.resolve(".") == vault_root
        assert resolver.to_relative(vault_root) == ""

    def test_root_is_stored_as_real_path(self, tmp_path, vault_root):
        link = tmp_path / "vault-link"
        link.symlink_to(vault_root, target_is_directory=True)
        resolver = PathResolver(link)
        assert resolver.root == vault_root
        assert resolver.resolve("a.md") == vault_root / "a.md"


class TestSymlinks:
    """Symlinks placed inside the vault must not lead outside it."""

    def test_symlinked_file_pointing_outside_is_rejected(self, resolver, vault_root, outside_dir):
        (vault_root / "leak.md").symlink_to(outside_dir / "secret.md")
        with pytest.raises(InvalidPathError, match="symlink"):
            resolver.resolve("leak.md")

    def test_symlinked_directory_pointing_outside_is_rejected(self, resolver, vault_root, outside_dir):
        (vault_root / "portal").symlink_to(outside_dir, target_is_directory=True)
        with pytest.raises(InvalidPathError, match="symlink"):
            resolver.resolve("portal/secret.md")

    def test_new_file_under_escaping_directory_is_rejected(self, resolver, vault_root, outside_dir):
        """A file that does not exist yet is checked through its nearest ancestor."""
        (vault_root / "portal").symlink_to(outside_dir, target_is_directory=True)
        with pytest.raises(InvalidPathError, match="parent"):
            resolver.resolve("portal/new/created.md")
        assert not (outside_dir / "new").exists()

    def test_dangling_symlink_pointing_outside_is_rejected(self, resolver, vault_root, outside_dir):
        (vault_root / "dangling.md").symlink_to(outside_dir / "not-yet.md")
        with pytest.raises(InvalidPathError, match="symlink"):
            resolver.resolve("dangling.md")

    def test_symlink_within_vault_is_allowed(self, resolver, vault_root):
        write_note(vault_root, "real/target.md", "content")
        (vault_root / "alias").symlink_to(vault_root / "real", target_is_directory=True)
        resolved = resolver.resolve("alias/target.md")
        assert resolver.to_relative(resolved) == "alias/target.md"


class TestToRelative:
    def test_rejects_path_outside_root(self, resolver, outside_dir):
        with pytest.raises(InvalidPathError):
            resolver.to_relative(outside_dir / "secret.md")

    def test_rejects_sibling_with_shared_prefix(self, resolver, vault_root):
        sibling = str(vault_root) + "-archive" + os.sep + "a.md"
        with pytest.raises(InvalidPathError):
            resolver.to_relative(sibling)

    def test_accepts_string_paths(self, resolver, vault_root):
        assert resolver.to_relative(str(vault_root / "notes" / "a.md")) == "notes/a.md"
