"""Read blobs and trees straight from git object storage."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Callable, Iterable, List, Optional

from ..errors import GitError
from ..logging import get_logger


class GitObjectReader:
    """Git plumbing reader that works for bare repositories and checkouts alike."""

    def __init__(self, runner: Callable[..., bytes] | None = None) -> None:
        self._runner = runner or self._default_runner
        self._logger = get_logger("git.objects")

    def read_bytes(self, base_path: str, path: str, commit: str) -> Optional[bytes]:
        """Return the blob at ``commit:path`` or ``None`` when it does not exist."""
        spec = f"{commit}:{path}"
        try:
            return self._run(["git", "cat-file", "blob", spec], cwd=Path(base_path))
        except subprocess.CalledProcessError as exc:
            self._logger.debug(
                "No blob for %s in %s (exit %s)", spec, base_path, exc.returncode
            )
            return None
        except OSError as exc:
            raise GitError(f"Cannot read '{spec}' from '{base_path}': {exc}") from exc

    def list_tree(self, base_path: str, commit: str) -> List[str]:
        """Return every file path recorded in the tree of ``commit``."""
        args = ["git", "ls-tree", "-r", "--name-only", "-z", commit]
        try:
            output = self._run(args, cwd=Path(base_path))
        except (subprocess.CalledProcessError, OSError) as exc:
            self._logger.warning("Failed to list tree %s in %s: %s", commit, base_path, exc)
            raise GitError(f"Cannot list tree '{commit}' in '{base_path}'") from exc
        # Undecodable bytes survive as lone surrogates and re-encode losslessly.
        names = output.decode("utf-8", errors="surrogateescape").split("\0")
        return [name for name in names if name]

    # ------------------------------------------------------------------
    # Helpers

    def _run(self, args: Iterable[str], *, cwd: Path) -> bytes:
        return self._runner(args, cwd=cwd)

    @staticmethod
    def _default_runner(args: Iterable[str], *, cwd: Path) -> bytes:
        completed = subprocess.run(
            list(args),
            cwd=str(cwd),
            check=True,
            capture_output=True,
        )
        return completed.stdout


__all__ = ["GitObjectReader"]
