"""Unified, read-only access to docset, fallback, dependency and template files."""

from .config import ConfigError, DocsetConfig, load_config
from .errors import (
    DocsourceError,
    GitError,
    GitObjectNotFoundError,
    RestoreError,
    UnsupportedOperationError,
)
from .glob_config import GlobConfig, find_glob_value
from .input import Input, ResolvedPath
from .models import FileOrigin, FilePath
from .restore import RestoredGit, RestoreGitMap, StaticRestoreMap, load_restore_map

__all__ = [
    "ConfigError",
    "DocsetConfig",
    "DocsourceError",
    "FileOrigin",
    "FilePath",
    "GitError",
    "GitObjectNotFoundError",
    "GlobConfig",
    "Input",
    "ResolvedPath",
    "RestoreError",
    "RestoreGitMap",
    "RestoredGit",
    "StaticRestoreMap",
    "UnsupportedOperationError",
    "find_glob_value",
    "load_config",
    "load_restore_map",
]
