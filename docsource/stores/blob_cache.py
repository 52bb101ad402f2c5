"""Session-scoped cache for blobs read from git object storage."""

from __future__ import annotations

import threading
from typing import Callable, Dict, Optional

from ..lazy import OnceCell
from ..logging import get_logger
from ..models import FilePath

BlobReader = Callable[[str, str, str], Optional[bytes]]


class BlobCache:
    """Memoizes blob bytes per ``FilePath`` with at most one read per key.

    Missing blobs are cached as ``None``. Entries are never evicted; the cache
    lives exactly as long as the build session that owns it.
    """

    def __init__(self, reader: BlobReader) -> None:
        self._reader = reader
        self._cells: Dict[FilePath, OnceCell[Optional[bytes]]] = {}
        self._cells_lock = threading.Lock()
        self._logger = get_logger("blob_cache")

    def get_bytes(
        self, file: FilePath, base_path: str, path: str, commit: str
    ) -> Optional[bytes]:
        cell = self._cell_for(file)

        def _read() -> Optional[bytes]:
            self._logger.debug("Reading %s from %s at %s", path, base_path, commit)
            return self._reader(base_path, path, commit)

        return cell.get_or_init(_read)

    def __contains__(self, file: object) -> bool:
        cell = self._cells.get(file)  # type: ignore[arg-type]
        return cell is not None and cell.is_set

    def __len__(self) -> int:
        return sum(1 for cell in list(self._cells.values()) if cell.is_set)

    # ------------------------------------------------------------------
    # Internal helpers

    def _cell_for(self, file: FilePath) -> OnceCell[Optional[bytes]]:
        cell = self._cells.get(file)
        if cell is not None:
            return cell
        # The lock only guards insertion; reads run under the per-key cell.
        with self._cells_lock:
            return self._cells.setdefault(file, OnceCell())


__all__ = ["BlobCache", "BlobReader"]
