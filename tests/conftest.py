from __future__ import annotations

from pathlib import Path

import pytest

from tests._fixtures.doclet_builder import DocletBuilder


@pytest.fixture
def doclet_builder(tmp_path: Path) -> DocletBuilder:
    """Provide a doclet builder rooted at the pytest tmp_path."""
    return DocletBuilder(tmp_path)
