"""Application level input abstraction over docset, fallback, dependency and template files."""

from __future__ import annotations

import io
import os
from pathlib import Path
from typing import BinaryIO, List, NamedTuple, Optional, TextIO, Tuple

from .config import DocsetConfig
from .errors import GitObjectNotFoundError, UnsupportedOperationError
from .git.objects import GitObjectReader
from .logging import get_logger
from .models import FileOrigin, FilePath
from .restore import RestoreGitMap
from .stores.blob_cache import BlobCache


class ResolvedPath(NamedTuple):
    """Where the content of a ``FilePath`` lives.

    ``commit`` is ``None`` for files read from the live filesystem and set for
    files read from git object storage.
    """

    base_path: Optional[str]
    path: str
    commit: Optional[str]


class Input:
    """Reads and enumerates files without exposing where their bytes are stored.

    One instance serves one build session. It is safe to share between worker
    threads; git blobs are read at most once per file for the session.
    """

    def __init__(
        self,
        docset_path: str | Path,
        fallback_path: str | Path | None,
        config: DocsetConfig,
        restore_map: RestoreGitMap,
        *,
        git_reader: GitObjectReader | None = None,
        blob_cache: BlobCache | None = None,
    ) -> None:
        self._config = config
        self._restore_map = restore_map
        self._docset_path = os.path.abspath(docset_path)
        self._fallback_path = None if fallback_path is None else os.path.abspath(fallback_path)
        self._git_reader = git_reader or GitObjectReader()
        self._blob_cache = blob_cache or BlobCache(self._git_reader.read_bytes)
        self.logger = get_logger("input")
        self.logger.debug(
            "Input session for %s (fallback=%s)", self._docset_path, self._fallback_path
        )

    def exists(self, file: FilePath) -> bool:
        """Check if the specified file exists."""
        base_path, path, commit = self.resolve(file)

        if base_path is None:
            return False

        if commit is None:
            return os.path.isfile(os.path.join(base_path, path))

        return self._blob_cache.get_bytes(file, base_path, path, commit) is not None

    def try_get_physical_path(self, file: FilePath) -> Tuple[bool, Optional[str]]:
        """Return the absolute on-disk path of a file when it physically exists.

        Files pinned to a commit only live in git object storage and never have
        a physical path, even though their content can be read.
        """
        base_path, path, commit = self.resolve(file)

        if base_path is not None and commit is None:
            full_path = os.path.join(base_path, path)
            if os.path.isfile(full_path):
                return True, full_path

        return False, None

    def read_string(self, file: FilePath) -> str:
        """Read the specified file as a string."""
        with self.read_text(file) as reader:
            return reader.read()

    def read_text(self, file: FilePath) -> TextIO:
        """Open the specified file as text. The caller closes the returned reader."""
        return io.TextIOWrapper(self.read_stream(file), encoding="utf-8-sig")

    def read_stream(self, file: FilePath) -> BinaryIO:
        """Open the specified file as bytes. The caller closes the returned stream."""
        base_path, path, commit = self.resolve(file)

        if base_path is None:
            raise UnsupportedOperationError(f"read_stream: no base path for '{file}'")

        if commit is None:
            return open(os.path.join(base_path, path), "rb")

        data = self._blob_cache.get_bytes(file, base_path, path, commit)
        if data is None:
            raise GitObjectNotFoundError(
                f"Error reading '{file}': '{path}' not found in git object storage at {commit}"
            )
        return io.BufferedReader(io.BytesIO(data))

    def list_files_recursive(
        self, origin: FileOrigin, dependency_name: str | None = None
    ) -> List[FilePath]:
        """List every file of an origin."""
        if origin is FileOrigin.DEFAULT:
            files = self._list_directory(self._docset_path, origin)
        elif origin is FileOrigin.FALLBACK:
            if self._fallback_path is None:
                raise UnsupportedOperationError(
                    "list_files_recursive: no fallback path is configured"
                )
            files = self._list_directory(self._fallback_path, origin)
        elif origin is FileOrigin.DEPENDENCY:
            if not dependency_name:
                raise ValueError("list_files_recursive: dependency_name is required for dependency files")
            dependency_path, commit = self._restore_map.resolve(
                self._config.dependency_source(dependency_name), True
            )
            # TODO: list dependencies restored as plain folders (no commit) from disk.
            files = [
                FilePath.dependency(path, dependency_name)
                for path in self._git_reader.list_tree(dependency_path, commit or "HEAD")
            ]
        else:
            raise UnsupportedOperationError(f"list_files_recursive: {origin.value}")

        self.logger.debug("Listed %d %s files", len(files), origin.value)
        return files

    def resolve(self, file: FilePath) -> ResolvedPath:
        """Resolve a file to its base path, path relative to that base, and commit."""
        origin = file.origin

        if origin is FileOrigin.DEFAULT:
            return ResolvedPath(self._docset_path, file.path, file.commit)

        if origin is FileOrigin.DEPENDENCY:
            if file.dependency_name is None:
                raise ValueError(f"resolve: dependency file without dependency_name: '{file}'")
            dependency_path, dependency_commit = self._restore_map.resolve(
                self._config.dependency_source(file.dependency_name), True
            )
            return ResolvedPath(
                dependency_path, file.path_to_origin(), file.commit or dependency_commit
            )

        if origin is FileOrigin.FALLBACK:
            return ResolvedPath(self._fallback_path, file.path, file.commit)

        if origin is FileOrigin.TEMPLATE:
            if not self._config.template:
                return ResolvedPath(None, file.path, file.commit)
            template_path, _ = self._restore_map.resolve(self._config.template, False)
            return ResolvedPath(template_path, file.path, file.commit)

        raise UnsupportedOperationError(f"resolve: unsupported origin {origin!r} for '{file}'")

    # ------------------------------------------------------------------
    # Helpers

    @staticmethod
    def _list_directory(root: str, origin: FileOrigin) -> List[FilePath]:
        if not os.path.isdir(root):
            raise FileNotFoundError(f"{origin.value} root is not a directory: {root}")

        def _raise(error: OSError) -> None:
            raise error

        files: List[FilePath] = []
        for dirpath, dirnames, filenames in os.walk(root, onerror=_raise):
            dirnames.sort()
            current_dir = Path(dirpath)
            for filename in sorted(filenames):
                rel_path = (current_dir / filename).relative_to(root).as_posix()
                files.append(FilePath(rel_path, origin))
        return files


__all__ = ["Input", "ResolvedPath"]
