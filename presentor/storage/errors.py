"""Storage error kinds.

Every failure from the repositories is one of these. The original OSError is
kept as ``cause`` (and chained via ``__cause__``); turning an error into text
for the UI happens in the routes.
"""

from __future__ import annotations


class StorageError(Exception):
    """Base class for all storage failures."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause

    def __str__(self) -> str:
        message = super().__str__()
        if self.cause is not None:
            return f"{message}: {self.cause}"
        return message


class NotFoundError(StorageError):
    """The target file of a read or delete does not exist."""


class InvalidSourcePathError(StorageError):
    """An import source path has no file name component."""


class StorageIOError(StorageError):
    """Any other filesystem failure (permissions, disk full, bad path...)."""


class NoDocumentsDirectoryError(StorageError):
    """The platform cannot report a user documents directory."""
