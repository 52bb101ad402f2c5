"""Core value types shared across docsource components."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional


class FileOrigin(Enum):
    """Where the bytes of a logical file physically live."""

    DEFAULT = "default"
    FALLBACK = "fallback"
    DEPENDENCY = "dependency"
    TEMPLATE = "template"


def normalize_path(path: str) -> str:
    """Return ``path`` with forward slashes and no empty or ``.`` segments."""
    parts = [part for part in path.replace("\\", "/").split("/") if part not in ("", ".")]
    return "/".join(parts)


@dataclass(frozen=True)
class FilePath:
    """Identifies a logical file independently of where its content is stored.

    Dependency files carry a docset-relative ``path`` prefixed by the dependency
    name; ``path_to_origin`` strips that prefix to address the file inside the
    dependency repository.
    """

    path: str
    origin: FileOrigin = FileOrigin.DEFAULT
    commit: Optional[str] = None
    dependency_name: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.origin, FileOrigin):
            raise ValueError(f"Unknown file origin: {self.origin!r}")
        object.__setattr__(self, "path", normalize_path(self.path))
        if self.dependency_name is not None:
            object.__setattr__(self, "dependency_name", normalize_path(self.dependency_name) or None)
        if (self.origin is FileOrigin.DEPENDENCY) != (self.dependency_name is not None):
            raise ValueError(
                f"dependency_name must be set only for dependency files: {self.path!r} ({self.origin.value})"
            )
        if self.commit == "":
            object.__setattr__(self, "commit", None)

    @classmethod
    def default(cls, path: str, commit: str | None = None) -> "FilePath":
        return cls(path, FileOrigin.DEFAULT, commit)

    @classmethod
    def fallback(cls, path: str, commit: str | None = None) -> "FilePath":
        return cls(path, FileOrigin.FALLBACK, commit)

    @classmethod
    def template(cls, path: str, commit: str | None = None) -> "FilePath":
        return cls(path, FileOrigin.TEMPLATE, commit)

    @classmethod
    def dependency(
        cls, path: str, dependency_name: str, commit: str | None = None
    ) -> "FilePath":
        """Build a dependency file from its path inside the dependency repository."""
        name = normalize_path(dependency_name)
        return cls(f"{name}/{normalize_path(path)}", FileOrigin.DEPENDENCY, commit, name)

    def path_to_origin(self) -> str:
        """Return the path relative to the root the file originates from."""
        if self.origin is FileOrigin.DEPENDENCY and self.dependency_name:
            prefix = f"{self.dependency_name}/"
            if self.path.startswith(prefix):
                return self.path[len(prefix):]
        return self.path

    def with_commit(self, commit: str | None) -> "FilePath":
        return replace(self, commit=commit)

    def __str__(self) -> str:
        text = self.path
        if self.origin is FileOrigin.DEPENDENCY:
            text = f"{text} ({self.dependency_name})"
        elif self.origin is not FileOrigin.DEFAULT:
            text = f"{text} ({self.origin.value})"
        if self.commit:
            text = f"{text} @{self.commit}"
        return text


__all__ = ["FileOrigin", "FilePath", "normalize_path"]
