"""Tests for docsource.models."""

from __future__ import annotations

import pytest

from docsource.models import FileOrigin, FilePath


def test_file_path_normalizes_separators() -> None:
    file = FilePath.default("docs\\guide//./index.md")

    assert file.path == "docs/guide/index.md"
    assert file.origin is FileOrigin.DEFAULT
    assert file.commit is None
    assert file.dependency_name is None


def test_equal_file_paths_are_interchangeable_cache_keys() -> None:
    first = FilePath.dependency("a.md", "_themes", commit="abc")
    second = FilePath("_themes/a.md", FileOrigin.DEPENDENCY, "abc", "_themes")

    assert first == second
    assert hash(first) == hash(second)
    assert {first: 1}[second] == 1


def test_commit_distinguishes_cache_keys() -> None:
    live = FilePath.default("a.md")
    pinned = live.with_commit("abc")

    assert live != pinned
    assert pinned.commit == "abc"
    assert pinned.with_commit(None) == live


def test_dependency_name_required_for_dependency_origin() -> None:
    with pytest.raises(ValueError):
        FilePath("a.md", FileOrigin.DEPENDENCY)


@pytest.mark.parametrize("origin", [FileOrigin.DEFAULT, FileOrigin.FALLBACK, FileOrigin.TEMPLATE])
def test_dependency_name_rejected_for_other_origins(origin: FileOrigin) -> None:
    with pytest.raises(ValueError):
        FilePath("a.md", origin, dependency_name="_themes")


def test_unknown_origin_is_rejected() -> None:
    with pytest.raises(ValueError):
        FilePath("a.md", "default")  # type: ignore[arg-type]


def test_path_to_origin_strips_dependency_prefix() -> None:
    file = FilePath.dependency("styles/site.css", "_themes")

    assert file.path == "_themes/styles/site.css"
    assert file.path_to_origin() == "styles/site.css"
    assert FilePath.fallback("styles/site.css").path_to_origin() == "styles/site.css"


def test_file_path_is_immutable() -> None:
    file = FilePath.default("a.md")

    with pytest.raises(AttributeError):
        file.path = "b.md"  # type: ignore[misc]


def test_str_names_origin_and_commit() -> None:
    assert str(FilePath.default("a.md")) == "a.md"
    assert str(FilePath.fallback("a.md")) == "a.md (fallback)"
    assert str(FilePath.dependency("a.md", "_themes", "abc")) == "_themes/a.md (_themes) @abc"


@pytest.mark.parametrize("name", ["./", ".", "/"])
def test_dependency_name_that_normalizes_to_empty_is_rejected(name: str) -> None:
    with pytest.raises(ValueError):
        FilePath("x/a.md", FileOrigin.DEPENDENCY, dependency_name=name)
    with pytest.raises(ValueError):
        FilePath.dependency("a.md", name)


def test_dependency_name_is_normalized() -> None:
    file = FilePath("_themes/a.md", FileOrigin.DEPENDENCY, dependency_name="./_themes/")

    assert file.dependency_name == "_themes"
    assert file.path_to_origin() == "a.md"
