"""Lookup of restored dependency and template repositories."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Mapping, Optional, Protocol, Tuple

from .errors import RestoreError

_LOCK_VERSION = 1


class RestoreGitMap(Protocol):
    """Maps a source descriptor to its restored repository path and commit."""

    def resolve(self, descriptor: str, is_dependency: bool) -> Tuple[str, Optional[str]]:
        ...


@dataclass(frozen=True)
class RestoredGit:
    """A repository already restored to disk."""

    path: str
    commit: Optional[str] = None


class StaticRestoreMap:
    """Restore map over a fixed set of already-restored repositories."""

    def __init__(
        self, entries: Mapping[str, RestoredGit], root: Path | None = None
    ) -> None:
        self._entries: Dict[str, RestoredGit] = {}
        for descriptor, entry in entries.items():
            path = Path(entry.path).expanduser()
            if root is not None and not path.is_absolute():
                path = root / path
            self._entries[descriptor] = RestoredGit(str(path.resolve()), entry.commit or None)

    def resolve(self, descriptor: str, is_dependency: bool) -> Tuple[str, Optional[str]]:
        entry = self._entries.get(descriptor)
        if entry is None:
            kind = "dependency" if is_dependency else "template"
            raise RestoreError(f"{kind.capitalize()} '{descriptor}' has not been restored")
        return entry.path, entry.commit

    def __len__(self) -> int:
        return len(self._entries)


def load_restore_map(lock_path: Path) -> StaticRestoreMap:
    """Load a restore lock file written by the restore step."""
    try:
        payload = json.loads(lock_path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise RestoreError(f"Restore lock not found: {lock_path}") from exc
    except (OSError, json.JSONDecodeError) as exc:
        raise RestoreError(f"Failed to read restore lock {lock_path.name}: {exc}") from exc

    if not isinstance(payload, dict) or payload.get("version") != _LOCK_VERSION:
        raise RestoreError(f"Unsupported restore lock format in {lock_path.name}")

    git = payload.get("git")
    if not isinstance(git, dict):
        raise RestoreError(f"{lock_path.name} must contain a 'git' mapping")

    entries: Dict[str, RestoredGit] = {}
    for descriptor, raw in git.items():
        if not isinstance(raw, dict) or not isinstance(raw.get("path"), str):
            raise RestoreError(f"Invalid restore entry for '{descriptor}'")
        commit = raw.get("commit")
        if commit is not None and not isinstance(commit, str):
            raise RestoreError(f"Invalid commit for '{descriptor}'")
        entries[str(descriptor)] = RestoredGit(path=raw["path"], commit=commit)

    return StaticRestoreMap(entries, root=lock_path.parent)


__all__ = ["RestoreGitMap", "RestoredGit", "StaticRestoreMap", "load_restore_map"]
