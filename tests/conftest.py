"""Shared fixtures for color-json-editor tests."""

from pathlib import Path

import pytest


THEME_JSON = """{
  "name": "Sample Theme",
  "colors": {
    "background": "#1E1E1E",
    "foreground": "#d4d4d4",
    "selection": "#264F78CC",
    "comment": "#6A9955"
  },
  "fontSize": 14
}
"""


@pytest.fixture
def theme_text() -> str:
    """A small theme document with four color entries (one RGBA)."""
    return THEME_JSON


@pytest.fixture
def theme_file(tmp_path: Path) -> Path:
    """The sample theme written to a temporary file."""
    path = tmp_path / "theme.json"
    path.write_text(THEME_JSON, encoding="utf-8")
    return path


@pytest.fixture
def palette_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the default user palette at a temporary location."""
    path = tmp_path / "config" / "user-palette.json"
    monkeypatch.setenv("COLOR_JSON_EDITOR_PALETTE", str(path))
    return path
