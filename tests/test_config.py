"""Tests for docsource.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from docsource.config import ConfigError, DocsetConfig, load_config, metadata_for
from docsource.glob_config import GlobConfig


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, DocsetConfig)
    assert config.root == tmp_path.resolve()
    assert config.dependencies == {}
    assert config.template is None
    assert config.fallback is None
    assert config.file_metadata == {}


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    config_file = tmp_path / "docfx.yml"
    config_file.write_text(
        """
dependencies:
  _themes: "https://github.com/org/theme#main"
  _shared: https://github.com/org/shared
template: https://github.com/org/template#live
fallback: ../fallback
file_metadata:
  ms.author:
    - include: ["docs/**"]
      exclude: ["docs/internal/**"]
      value: alice
    - include: ["api/"]
      is_glob: false
      value: bob
  ms.topic:
    "**/*.yml": reference
""",
        encoding="utf-8",
    )

    config = load_config(config_file)

    assert config.dependencies == {
        "_themes": "https://github.com/org/theme#main",
        "_shared": "https://github.com/org/shared",
    }
    assert config.template == "https://github.com/org/template#live"
    assert config.fallback == (tmp_path / ".." / "fallback").resolve()

    authors = config.file_metadata["ms.author"]
    assert [entry.value for entry in authors] == ["alice", "bob"]
    assert authors[0].include == ["docs/**"]
    assert authors[0].exclude == ["docs/internal/**"]
    assert authors[0].is_glob is True
    assert authors[1].is_glob is False

    topics = config.file_metadata["ms.topic"]
    assert len(topics) == 1
    assert topics[0].include == ["**/*.yml"]
    assert topics[0].value == "reference"


def test_metadata_for_applies_matching_entries(tmp_path: Path) -> None:
    config = DocsetConfig(
        root=tmp_path,
        file_metadata={
            "ms.author": [
                GlobConfig(include=["docs/**"], exclude=["docs/internal/**"], value="alice"),
                GlobConfig(include=["docs/team/"], value="carol", is_glob=False),
            ],
            "ms.topic": [GlobConfig(include=["**/*.yml"], value="reference")],
        },
    )

    assert metadata_for(config, "docs/a.md") == {"ms.author": "alice"}
    assert metadata_for(config, "docs/team/a.yml") == {"ms.author": "carol", "ms.topic": "reference"}
    assert metadata_for(config, "docs/internal/a.md") == {}


def test_dependency_source_rejects_undeclared_dependency(tmp_path: Path) -> None:
    config = DocsetConfig(root=tmp_path, dependencies={"_themes": "theme"})

    assert config.dependency_source("_themes") == "theme"
    with pytest.raises(ConfigError):
        config.dependency_source("_missing")


@pytest.mark.parametrize(
    "content",
    [
        "- just\n- a list\n",
        "dependencies: {a: [1, 2]}\n",
        "file_metadata:\n  ms.author: value\n",
        "file_metadata:\n  ms.author:\n    - value: alice\n",
        "file_metadata:\n  ms.author:\n    - alice\n",
        "dependencies: [unclosed\n",
    ],
)
def test_load_config_rejects_invalid_content(tmp_path: Path, content: str) -> None:
    (tmp_path / "docfx.yml").write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_load_config_handles_empty_file(tmp_path: Path) -> None:
    (tmp_path / "docfx.yml").write_text("\n", encoding="utf-8")

    assert load_config(tmp_path).dependencies == {}
