"""Hex color normalization and the alpha-merge policy.

Colors are plain strings in canonical form: ``#RRGGBB`` or ``#RRGGBBAA``,
uppercase, always ``#``-prefixed. Everything that writes a color into a
document entry goes through this module.
"""

import re

from color_json_editor.core.errors import InvalidColorError


# Value grammar shared with the scanner (6 hex digits, optional alpha pair)
HEX_DIGITS = r"[0-9A-Fa-f]{6}(?:[0-9A-Fa-f]{2})?"

_CANONICAL = re.compile(r"[0-9A-F]{6}(?:[0-9A-F]{2})?")

RGB_LENGTH = 7   # "#RRGGBB"
RGBA_LENGTH = 9  # "#RRGGBBAA"


def normalize(text: object) -> str | None:
    """
    Normalize a hex color to ``#RRGGBB`` / ``#RRGGBBAA`` uppercase.

    Leading/trailing whitespace and a single leading ``#`` are ignored.
    Returns None when the text is not a 6- or 8-digit hex color; never raises.

    >>> normalize(" ff8000 ")
    '#FF8000'
    >>> normalize("#12345") is None
    True
    """
    if not isinstance(text, str):
        return None
    t = text.strip()
    if t.startswith("#"):
        t = t[1:]
    t = t.upper()
    if len(t) not in (6, 8) or not _CANONICAL.fullmatch(t):
        return None
    return "#" + t


def parse_color(text: object) -> str:
    """Normalize a hex color, raising InvalidColorError if it is not one."""
    color = normalize(text)
    if color is None:
        raise InvalidColorError(text)
    return color


def is_valid(text: object) -> bool:
    """True if the text normalizes to a hex color."""
    return normalize(text) is not None


def has_alpha(color: str | None) -> bool:
    """True if the color carries an alpha pair (``#RRGGBBAA``)."""
    normalized = normalize(color)
    return normalized is not None and len(normalized) == RGBA_LENGTH


def alpha_of(color: str | None) -> str | None:
    """Return the two alpha digits of an RGBA color, or None."""
    normalized = normalize(color)
    if normalized is None or len(normalized) != RGBA_LENGTH:
        return None
    return normalized[RGB_LENGTH:]


def to_rgb(color: str) -> tuple[int, int, int]:
    """Decode the RGB components of a color; alpha digits are ignored."""
    normalized = parse_color(color)
    r = int(normalized[1:3], 16)
    g = int(normalized[3:5], 16)
    b = int(normalized[5:7], 16)
    return (r, g, b)


def merge_onto_target(source: str, target: str | None) -> str:
    """
    Merge a source color onto an existing target color.

    Used whenever a new color (palette drop, typed hex, paste) is written
    into an entry that may already carry alpha:

    - RGBA onto RGBA: source unchanged
    - RGBA onto RGB: source alpha is dropped
    - RGB onto RGBA: target alpha is kept
    - RGB onto RGB: source unchanged

    An invalid or missing target is treated as having no alpha.

    >>> merge_onto_target("#AABBCC", "#11223344")
    '#AABBCC44'
    """
    src = parse_color(source)
    tgt_alpha = alpha_of(target)

    if len(src) == RGBA_LENGTH:
        if tgt_alpha is not None:
            return src
        return src[:RGB_LENGTH]

    if tgt_alpha is not None:
        return src + tgt_alpha
    return src


def from_picked_rgb(r: int, g: int, b: int, target: str | None = None) -> str:
    """
    Build a color from picker components, keeping the target's alpha.

    A color picker only ever yields RGB, so this is the "RGB source"
    branch of merge_onto_target.
    """
    if not all(isinstance(c, int) and not isinstance(c, bool) and 0 <= c <= 255 for c in (r, g, b)):
        raise InvalidColorError(
            (r, g, b), f"RGB values must be 0-255, got ({r}, {g}, {b})"
        )
    rgb = f"#{r:02X}{g:02X}{b:02X}"
    tgt_alpha = alpha_of(target)
    if tgt_alpha is not None:
        return rgb + tgt_alpha
    return rgb
