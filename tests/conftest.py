from __future__ import annotations

from pathlib import Path

import pytest

from tests._fixtures.docset_builder import CountingGitReader, DocsetBuilder


@pytest.fixture
def docset_builder(tmp_path: Path) -> DocsetBuilder:
    """Provide a docset/fallback/dependency layout rooted at the pytest tmp_path."""
    return DocsetBuilder(tmp_path)


@pytest.fixture
def git_reader() -> CountingGitReader:
    """Provide an in-memory git object reader that counts blob reads."""
    return CountingGitReader()
