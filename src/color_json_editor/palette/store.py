"""UserPalette - ordered favorite colors persisted between sessions."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator

from color_json_editor.config import default_palette_path
from color_json_editor.core.color import parse_color
from color_json_editor.core.errors import PaletteFormatError
from color_json_editor.palette.file import deserialize, serialize

logger = logging.getLogger(__name__)


class UserPalette:
    """Flat, order-preserving list of favorite colors.

    Duplicates are allowed and insertion order is kept through save/load.
    """

    def __init__(self, colors: Iterable[str] = ()) -> None:
        self._colors: list[str] = []
        for color in colors:
            self.add(color)

    def __len__(self) -> int:
        return len(self._colors)

    def __iter__(self) -> Iterator[str]:
        return iter(self._colors)

    def __getitem__(self, index: int) -> str:
        return self._colors[index]

    @property
    def colors(self) -> list[str]:
        """Copy of the palette colors."""
        return list(self._colors)

    def add(self, text: str) -> str:
        """Append a color, returning its normalized form.

        Raises:
            InvalidColorError: If text is not a hex color
        """
        color = parse_color(text)
        self._colors.append(color)
        return color

    def remove(self, index: int) -> str:
        """Remove and return the color at index."""
        return self._colors.pop(index)

    def clear(self) -> None:
        self._colors.clear()

    # -------------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------------

    def save(self, path: Path | str) -> Path:
        """Write the palette file, creating parent directories."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(serialize(self._colors), encoding="utf-8")
        logger.debug("Saved %d palette colors to %s", len(self._colors), path)
        return path

    def load(self, path: Path | str, replace: bool = True) -> int:
        """Read a palette file, replacing or appending to the current colors.

        Returns:
            Number of colors read

        Raises:
            OSError: If the file cannot be read
            PaletteFormatError: If the file is not a bracketed array
        """
        path = Path(path)
        colors = deserialize(path.read_text(encoding="utf-8"))
        if replace:
            self._colors.clear()
        self._colors.extend(colors)
        logger.debug("Loaded %d palette colors from %s", len(colors), path)
        return len(colors)

    def auto_load(self, path: Path | str | None = None) -> bool:
        """Load the default palette if present; failures are logged, not raised."""
        path = Path(path) if path is not None else default_palette_path()
        if not path.exists():
            return False
        try:
            self.load(path)
        except (OSError, UnicodeDecodeError, PaletteFormatError) as exc:
            logger.warning("Could not load user palette %s: %s", path, exc)
            return False
        return True

    def auto_save(self, path: Path | str | None = None) -> bool:
        """Save a non-empty palette to the default path; failures are logged."""
        if not self._colors:
            return False
        path = Path(path) if path is not None else default_palette_path()
        try:
            self.save(path)
        except OSError as exc:
            logger.warning("Could not save user palette %s: %s", path, exc)
            return False
        return True
