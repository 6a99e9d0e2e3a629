"""Confinement of vault-relative paths to the vault root."""

from __future__ import annotations

import ntpath
import os
from pathlib import Path
from typing import Union

from notes_vault.errors import InvalidPathError

PathLike = Union[str, os.PathLike]


def _is_within(candidate: str, root: str) -> bool:
    """Return True when ``candidate`` equals ``root`` or lies beneath it."""
    if candidate == root:
        return True
    prefix = root if root.endswith(os.sep) else root + os.sep
    return candidate.startswith(prefix)


class PathResolver:
    """Resolve vault-relative paths to absolute paths inside a fixed root.

    Two layers of checks are applied. Cheap string checks reject absolute
    input, ``..`` segments and null bytes before the filesystem is touched.
    Symlink-aware checks then compare the real path of the target (or of its
    nearest existing ancestor) against the real path of the root, which blocks
    links placed inside the vault that point outside it.

    Nothing is cached: every call re-reads the filesystem.
    """

    def __init__(self, root: PathLike) -> None:
        self._root = os.path.realpath(os.fspath(root))

    @property
    def root(self) -> Path:
        """Real, absolute path of the vault root."""
        return Path(self._root)

    def resolve(self, relative_path: str) -> Path:
        """Validate ``relative_path`` and return its absolute location in the vault.

        Args:
            relative_path: Path supplied by the caller, relative to the vault root.
                Forward slashes separate folders.

        Returns:
            The absolute :class:`Path` inside the vault. The path itself is not
            symlink-resolved, so :meth:`to_relative` maps it back to the input.

        Raises:
            InvalidPathError: If the input is absolute, contains a ``..``
                segment or a null byte, or resolves outside the vault root
                (directly or through a symlink).
        """
        if os.path.isabs(relative_path) or ntpath.isabs(relative_path):
            raise InvalidPathError(relative_path, "absolute paths are not allowed")

        segments = relative_path.replace("\\", "/").split("/")
        if ".." in segments:
            raise InvalidPathError(relative_path, "path traversal ('..') is not allowed")

        if "\0" in relative_path:
            raise InvalidPathError(relative_path, "null bytes are not allowed")

        # Normalization only after the traversal checks above.
        normalized = os.path.normpath(relative_path) if relative_path else os.curdir
        joined = os.path.normpath(os.path.join(self._root, normalized))

        if not _is_within(joined, self._root):
            raise InvalidPathError(relative_path, "path escapes the vault directory")

        if os.path.lexists(joined):
            real_path = os.path.realpath(joined)
            if not _is_within(real_path, self._root):
                raise InvalidPathError(relative_path, "symlink escapes the vault directory")
        else:
            ancestor = self._nearest_existing_ancestor(joined)
            if ancestor is not None:
                real_ancestor = os.path.realpath(ancestor)
                if not _is_within(real_ancestor, self._root):
                    raise InvalidPathError(
                        relative_path, "parent directory symlink escapes the vault directory"
                    )

        return Path(joined)

    def to_relative(self, absolute_path: PathLike) -> str:
        """Map an absolute path inside the vault back to its vault-relative form.

        Returns:
            Forward-slash separated path relative to the root; ``""`` for the
            root itself.

        Raises:
            InvalidPathError: If ``absolute_path`` is not inside the vault root.
        """
        candidate = os.fspath(absolute_path)
        if not _is_within(candidate, self._root):
            raise InvalidPathError(candidate, "path is not within the vault directory")

        relative = candidate[len(self._root):].lstrip(os.sep)
        return relative.replace(os.sep, "/")

    def _nearest_existing_ancestor(self, path: str) -> str | None:
        current = os.path.dirname(path)
        while True:
            if os.path.lexists(current):
                return current
            parent = os.path.dirname(current)
            if parent == current:
                return None
            current = parent
