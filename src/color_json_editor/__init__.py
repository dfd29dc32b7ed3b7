"""
color-json-editor: edit hex colors inside JSON text in place

Finds ``"name": "#RRGGBB"`` / ``"#RRGGBBAA"`` entries in a document and
rewrites one value at a time, leaving every other byte of the file as it was.

Quick Start:
    >>> import color_json_editor as cje
    >>> doc = cje.load("theme.json")
    >>> for entry in doc.index:
    ...     print(entry.name, entry.color)
    >>> doc.index.apply_merged(0, "#FF8800")
    >>> doc.save()

Features:
    - Lexical scan of color entries with exact text spans
    - Incremental single-entry edits (no re-parse, no reformatting)
    - Hex normalization and alpha-preserving merge rules
    - User palette (favorites) stored as a flat JSON array
"""

__version__ = "0.1.0"

# Core types
from color_json_editor.core.entry import Entry
from color_json_editor.core.document import ColorDocument
from color_json_editor.core.errors import ColorJsonError, InvalidColorError, PaletteFormatError
from color_json_editor.core.color import (
    normalize,
    parse_color,
    to_rgb,
    merge_onto_target,
    from_picked_rgb,
)

# Scanning and editing
from color_json_editor.codec.scanner import scan
from color_json_editor.edit.index import EntryIndex
from color_json_editor.edit.spans import shift_spans

# Palette
from color_json_editor.palette.store import UserPalette

# Convenience functions
from color_json_editor.io.reader import load
from color_json_editor.io.writer import save

__all__ = [
    # Version
    "__version__",
    # Core types
    "Entry",
    "ColorDocument",
    "ColorJsonError",
    "InvalidColorError",
    "PaletteFormatError",
    # Colors
    "normalize",
    "parse_color",
    "to_rgb",
    "merge_onto_target",
    "from_picked_rgb",
    # Editing
    "scan",
    "EntryIndex",
    "shift_spans",
    # Palette
    "UserPalette",
    # I/O
    "load",
    "save",
]
