"""Exception hierarchy raised by docsource."""

from __future__ import annotations


class DocsourceError(RuntimeError):
    """Base class for docsource failures."""


class UnsupportedOperationError(DocsourceError):
    """Raised when an operation is not defined for the requested origin or file."""


class GitObjectNotFoundError(DocsourceError):
    """Raised when a file pinned to a commit has no blob in git object storage."""


class GitError(DocsourceError):
    """Raised when git plumbing fails for reasons other than a missing blob."""


class RestoreError(DocsourceError):
    """Raised when a dependency or template source has not been restored."""


__all__ = [
    "DocsourceError",
    "GitError",
    "GitObjectNotFoundError",
    "RestoreError",
    "UnsupportedOperationError",
]
