"""Exception types raised by vault operations.

Each error kind also derives from the builtin exception that plain filesystem
code would raise for the same condition, so callers catching
``FileNotFoundError`` or ``ValueError`` keep working.
"""

from __future__ import annotations


class VaultError(Exception):
    """Base class for all vault errors."""


class InvalidPathError(VaultError, ValueError):
    """Raised when a user-supplied path is rejected or escapes the vault root."""

    def __init__(self, user_path: str, reason: str) -> None:
        self.user_path = user_path
        self.reason = reason
        super().__init__(f"Invalid path '{user_path}': {reason}")


class NotFoundError(VaultError, FileNotFoundError):
    """Raised when a file or directory that must exist is missing."""


class AlreadyExistsError(VaultError, FileExistsError):
    """Raised when creating a file at a path that is already taken."""


class ContentNotFoundError(VaultError, ValueError):
    """Raised when an edit's old content is not present in the file."""


class ConfirmationRequiredError(VaultError, ValueError):
    """Raised when a destructive operation is attempted without confirmation."""


class IOFailureError(VaultError, OSError):
    """Raised for filesystem errors that are not otherwise classified."""


class ConfigurationError(VaultError, ValueError):
    """Raised when the vault configuration is missing or malformed."""
