"""Per-file configuration values selected by include/exclude patterns."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from fnmatch import fnmatchcase
from functools import lru_cache
from typing import Callable, Generic, Iterable, List, Optional, Sequence, Tuple, TypeVar

from .lazy import OnceCell

T = TypeVar("T")

PathKey = Callable[[str], str]
PathMatcher = Callable[[str], bool]


def CASE_SENSITIVE(path: str) -> str:
    return path


def CASE_INSENSITIVE(path: str) -> str:
    return path.casefold()


def default_path_key() -> PathKey:
    """Return the path comparison policy of the current platform."""
    if sys.platform.startswith(("win", "darwin")):
        return CASE_INSENSITIVE
    return CASE_SENSITIVE


def compile_glob_matcher(
    include: Sequence[str],
    exclude: Sequence[str],
    path_key: PathKey = CASE_SENSITIVE,
) -> PathMatcher:
    """Compile include/exclude glob lists into a predicate over relative paths.

    ``*`` and ``?`` stay within one path segment, ``**`` spans any number of
    segments and a trailing ``/`` selects everything below a directory.
    """
    includes = [_split_pattern(pattern, path_key) for pattern in include if pattern]
    excludes = [_split_pattern(pattern, path_key) for pattern in exclude if pattern]

    def _matches(path: str) -> bool:
        parts = tuple(part for part in path_key(path).replace("\\", "/").split("/") if part)
        if any(_match_segments(pattern, parts) for pattern in excludes):
            return False
        return any(_match_segments(pattern, parts) for pattern in includes)

    return _matches


def _split_pattern(pattern: str, path_key: PathKey) -> Tuple[str, ...]:
    normalized = path_key(pattern).replace("\\", "/")
    if normalized.endswith("/"):
        normalized = f"{normalized}**"
    if normalized.startswith("/"):
        normalized = normalized[1:]
    segments: List[str] = []
    for part in normalized.split("/"):
        if not part or (part == "**" and segments[-1:] == ["**"]):
            continue
        segments.append(part)
    return tuple(segments)


def _match_segments(pattern: Sequence[str], parts: Sequence[str]) -> bool:
    @lru_cache(maxsize=None)
    def _match(p: int, i: int) -> bool:
        if p == len(pattern):
            return i == len(parts)
        head = pattern[p]
        if head == "**":
            return any(_match(p + 1, index) for index in range(i, len(parts) + 1))
        if i == len(parts):
            return False
        return fnmatchcase(parts[i], head) and _match(p + 1, i + 1)

    return _match(0, 0)


@dataclass
class GlobConfig(Generic[T]):
    """A value that applies to files selected by include and exclude patterns.

    With ``is_glob`` disabled the patterns are literal: a pattern ending in ``/``
    selects every path below that directory, any other pattern selects only the
    identical path. Exclusions always win over inclusions.
    """

    include: List[str] = field(default_factory=list)
    exclude: List[str] = field(default_factory=list)
    value: Optional[T] = None
    is_glob: bool = True
    path_key: PathKey = field(default_factory=default_path_key, compare=False, repr=False)
    _matcher: OnceCell[PathMatcher] = field(
        default_factory=OnceCell, init=False, compare=False, repr=False
    )

    def match(self, file_path: str) -> bool:
        if not file_path:
            raise ValueError("file_path must not be empty")

        if self.is_glob:
            matcher = self._matcher.get_or_init(
                lambda: compile_glob_matcher(self.include, self.exclude, self.path_key)
            )
            return matcher(file_path)

        if any(self._match_item(file_path, pattern) for pattern in self.exclude):
            return False
        return any(self._match_item(file_path, pattern) for pattern in self.include)

    def _match_item(self, file_path: str, pattern: str) -> bool:
        path = self.path_key(file_path)
        key = self.path_key(pattern)
        if key.endswith("/"):
            return path.startswith(key)
        return path == key


def find_glob_value(
    entries: Iterable[GlobConfig[T]], file_path: str, default: Optional[T] = None
) -> Optional[T]:
    """Return the value of the last entry matching ``file_path``."""
    result = default
    for entry in entries:
        if entry.match(file_path):
            result = entry.value
    return result


__all__ = [
    "CASE_INSENSITIVE",
    "CASE_SENSITIVE",
    "GlobConfig",
    "PathKey",
    "PathMatcher",
    "compile_glob_matcher",
    "default_path_key",
    "find_glob_value",
]
