"""Compute-once primitive for values shared between worker threads."""

from __future__ import annotations

import threading
from typing import Callable, Generic, TypeVar

T = TypeVar("T")

_UNSET = object()


class OnceCell(Generic[T]):
    """Holds a value that is computed at most once and then published to all readers.

    Readers that arrive while the first computation is running block on the cell's
    lock and observe the published result. A computation that raises publishes
    nothing, so the next caller retries.
    """

    __slots__ = ("_lock", "_value")

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._value: object = _UNSET

    @property
    def is_set(self) -> bool:
        return self._value is not _UNSET

    def get_or_init(self, factory: Callable[[], T]) -> T:
        value = self._value
        if value is not _UNSET:
            return value  # type: ignore[return-value]
        with self._lock:
            if self._value is _UNSET:
                self._value = factory()
            return self._value  # type: ignore[return-value]


__all__ = ["OnceCell"]
