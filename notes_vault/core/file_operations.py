"""Filesystem primitives used by every vault tool.

All functions take absolute paths that have already passed through
:class:`notes_vault.core.paths.PathResolver`. OS errors are translated to the
typed errors in :mod:`notes_vault.errors` and propagated immediately, except in
:func:`read_multiple_files`, which drops failed reads from its result.
"""

from __future__ import annotations

import asyncio
import errno
import fnmatch
import os
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from stat import S_ISDIR
from typing import Optional

from notes_vault.data_models import (
    DEFAULT_FILE_PATTERN,
    DirectoryStructure,
    FileContent,
    FileMetadata,
)
from notes_vault.errors import (
    ContentNotFoundError,
    IOFailureError,
    NotFoundError,
)

MARKDOWN_SUFFIX = ".md"


# ==============================================================================
# HELPER FUNCTIONS
# ==============================================================================


@contextmanager
def _translate_os_errors(path: Path):
    """Re-raise OS errors for ``path`` as vault errors."""
    try:
        yield
    except (NotFoundError, IOFailureError):
        raise
    except (FileNotFoundError, NotADirectoryError) as exc:
        raise NotFoundError(f"File does not exist: {path}") from exc
    except OSError as exc:
        raise IOFailureError(f"Filesystem error for {path}: {exc.strerror or exc}") from exc
    except UnicodeDecodeError as exc:
        raise IOFailureError(f"File is not valid UTF-8 text: {path}") from exc


def _exclude_fragment(pattern: str) -> str:
    """Strip the ``**/`` prefix and ``/**`` suffix glob decorations."""
    fragment = pattern
    if fragment.startswith("**/"):
        fragment = fragment[3:]
    if fragment.endswith("/**"):
        fragment = fragment[:-3]
    return fragment


def _name_pattern(pattern: str) -> str:
    """Reduce a ``**/<glob>`` file pattern to the glob applied to file names."""
    while pattern.startswith("**/"):
        pattern = pattern[3:]
    return pattern or "*"


def _is_hidden(name: str) -> bool:
    return name.startswith(".")


def _sorted_entries(directory: Path) -> list[os.DirEntry]:
    with os.scandir(directory) as entries:
        return sorted(entries, key=lambda entry: entry.name)


def _escapes(entry: os.DirEntry, real_root: str) -> bool:
    """True when ``entry`` is a symlink whose target lies outside ``real_root``."""
    if not entry.is_symlink():
        return False
    target = os.path.realpath(entry.path)
    return target != real_root and not target.startswith(real_root.rstrip(os.sep) + os.sep)


# ==============================================================================
# QUERIES
# ==============================================================================


def exists(path: Path) -> bool:
    """Return whether ``path`` exists.

    Raises:
        IOFailureError: If existence cannot be determined (e.g. permission denied
            on a parent directory). A missing path is never an error.
    """
    try:
        os.stat(path)
    except (FileNotFoundError, NotADirectoryError):
        return False
    except OSError as exc:
        if exc.errno in (errno.ENOENT, errno.ENOTDIR, errno.ELOOP):
            return False
        raise IOFailureError(f"Unable to check {path}: {exc.strerror or exc}") from exc
    return True


def iter_markdown_files(
    root: Path,
    pattern: str = DEFAULT_FILE_PATTERN,
    exclude_patterns: Iterable[str] = (),
) -> Iterator[Path]:
    """Yield markdown files beneath ``root`` in depth-first, name-sorted order.

    Args:
        root: Absolute directory to walk.
        pattern: File glob; a leading ``**/`` is dropped and the rest is matched
            against file names, so the default keeps every ``.md`` file.
        exclude_patterns: Simplified globs. ``**/`` and ``/**`` decorations are
            stripped and the remainder is matched as a plain substring of the
            root-relative path. ``**/*.log`` style globs are not interpreted.

    Yields:
        Absolute paths of matching files. Entries whose name starts with ``.``
        are skipped, as are symlinks that point outside ``root``.
    """
    root = Path(root)
    real_root = os.path.realpath(root)
    name_glob = _name_pattern(pattern)
    fragments = [fragment for fragment in map(_exclude_fragment, exclude_patterns) if fragment]

    stack = [root]
    while stack:
        directory = stack.pop()
        with _translate_os_errors(directory):
            entries = _sorted_entries(directory)

        subdirectories: list[Path] = []
        for entry in entries:
            if _is_hidden(entry.name) or _escapes(entry, real_root):
                continue

            entry_path = Path(entry.path)
            try:
                is_directory = entry.is_dir()
            except OSError:
                continue

            if is_directory:
                subdirectories.append(entry_path)
                continue

            if os.path.splitext(entry.name)[1].lower() != MARKDOWN_SUFFIX:
                continue
            if not fnmatch.fnmatch(entry.name.lower(), name_glob.lower()):
                continue

            relative = entry_path.relative_to(root).as_posix()
            if any(fragment in relative for fragment in fragments):
                continue

            yield entry_path

        # Reversed so the stack pops subdirectories in name order.
        stack.extend(reversed(subdirectories))


def list_markdown_files(
    root: Path,
    pattern: str = DEFAULT_FILE_PATTERN,
    exclude_patterns: Iterable[str] = (),
) -> list[Path]:
    """Collect :func:`iter_markdown_files` into a list."""
    return list(iter_markdown_files(root, pattern, exclude_patterns))


def get_file_metadata(path: Path) -> FileMetadata:
    """Snapshot size, timestamps and type for ``path``.

    Creation time is ``st_birthtime`` where the platform records it, otherwise
    ``st_ctime``.

    Raises:
        NotFoundError: If ``path`` does not exist.
    """
    with _translate_os_errors(path):
        stat = os.stat(path)

    return FileMetadata(
        path=str(path),
        name=Path(path).name,
        size=stat.st_size,
        created_at=datetime.fromtimestamp(getattr(stat, "st_birthtime", stat.st_ctime)),
        modified_at=datetime.fromtimestamp(stat.st_mtime),
        is_directory=S_ISDIR(stat.st_mode),
    )


def get_directory_structure(root: Path, real_root: Optional[str] = None) -> DirectoryStructure:
    """Build the tree beneath ``root``, skipping hidden entries.

    Children are ordered directories first, then by name. Symlinks pointing
    outside the top-level ``root`` are left out.

    Raises:
        NotFoundError: If ``root`` does not exist.
    """
    root = Path(root)
    top_level = real_root is None
    if top_level:
        real_root = os.path.realpath(root)
    with _translate_os_errors(root):
        is_directory = root.is_dir()
        if not is_directory:
            if top_level:
                os.stat(root)
            return DirectoryStructure(name=root.name, path=str(root), is_directory=False)

        children = [
            get_directory_structure(Path(entry.path), real_root)
            for entry in _sorted_entries(root)
            if not _is_hidden(entry.name) and not _escapes(entry, real_root)
        ]

    children.sort(key=lambda node: (not node.is_directory, node.name))
    return DirectoryStructure(
        name=root.name,
        path=str(root),
        is_directory=True,
        children=children,
    )


# ==============================================================================
# READ / WRITE PRIMITIVES
# ==============================================================================


def ensure_directory(path: Path) -> None:
    """Create ``path`` and any missing parents. No-op if it already exists."""
    with _translate_os_errors(path):
        Path(path).mkdir(parents=True, exist_ok=True)


def read_file(path: Path) -> str:
    with _translate_os_errors(path):
        return Path(path).read_text(encoding="utf-8")


def write_file(path: Path, content: str) -> None:
    """Write ``content`` to ``path``, creating parent directories as needed."""
    path = Path(path)
    ensure_directory(path.parent)
    with _translate_os_errors(path):
        path.write_text(content, encoding="utf-8")


def append_file(path: Path, content: str) -> None:
    with _translate_os_errors(path):
        with open(path, "a", encoding="utf-8") as handle:
            handle.write(content)


def edit_file(path: Path, old_content: str, new_content: str) -> None:
    """Replace the first occurrence of ``old_content`` with ``new_content``.

    The read and the write are separate calls; a concurrent writer can change
    the file in between.

    Raises:
        NotFoundError: If ``path`` does not exist.
        ContentNotFoundError: If ``old_content`` is not in the file.
    """
    content = read_file(path)
    if old_content not in content:
        raise ContentNotFoundError(f"old_content not found in file: {path}")

    updated = content.replace(old_content, new_content, 1)
    with _translate_os_errors(path):
        Path(path).write_text(updated, encoding="utf-8")


def move_file(source: Path, destination: Path) -> None:
    """Rename ``source`` to ``destination``, creating destination parents."""
    destination = Path(destination)
    ensure_directory(destination.parent)
    with _translate_os_errors(source):
        os.replace(source, destination)


def delete_file(path: Path) -> None:
    with _translate_os_errors(path):
        Path(path).unlink()


async def read_multiple_files(paths: Iterable[Path]) -> list[FileContent]:
    """Read several files concurrently, dropping any that fail.

    Results keep the order of ``paths``. A missing entry means the read failed;
    it is indistinguishable from the caller's side from a path never requested.
    """
    paths = list(paths)
    outcomes = await asyncio.gather(
        *(asyncio.to_thread(read_file, path) for path in paths),
        return_exceptions=True,
    )
    return [
        FileContent(path=str(path), content=outcome)
        for path, outcome in zip(paths, outcomes)
        if not isinstance(outcome, BaseException)
    ]
