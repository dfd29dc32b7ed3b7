"""Palette file format - a flat JSON array of hex color strings.

Written one color per line::

    [
      "#FF0000",
      "#00FF0080"
    ]

Reading is best-effort: the container must be a bracketed array, but
individual items that are not hex colors are skipped.
"""

import logging
from typing import Iterable

from color_json_editor.core.color import normalize
from color_json_editor.core.errors import PaletteFormatError

logger = logging.getLogger(__name__)


def serialize(colors: Iterable[str]) -> str:
    """Render colors as a pretty-printed JSON array, order preserved."""
    items = [f'  "{color}"' for color in colors]
    lines = ["["]
    if items:
        lines.append(",\n".join(items))
    lines.append("]")
    return "\n".join(lines) + "\n"


def deserialize(text: str) -> list[str]:
    """
    Parse palette text into normalized colors.

    Args:
        text: Palette file contents

    Returns:
        Valid colors in file order; invalid items are dropped

    Raises:
        PaletteFormatError: If the text is not wrapped in [ ... ]
    """
    body = text.strip()
    if not body.startswith("[") or not body.endswith("]"):
        raise PaletteFormatError("Expected JSON array of hex strings.")

    colors: list[str] = []
    for part in body[1:-1].split(","):
        item = part.strip()
        if len(item) >= 2 and item.startswith('"') and item.endswith('"'):
            item = item[1:-1]
        if not item:
            continue
        color = normalize(item)
        if color is None:
            logger.debug("Dropping invalid palette item %r", item)
            continue
        colors.append(color)
    return colors
