"""Core types: hex colors, entries and error classes."""

from color_json_editor.core.entry import Entry
from color_json_editor.core.errors import ColorJsonError, InvalidColorError, PaletteFormatError
from color_json_editor.core import color

__all__ = ["Entry", "ColorJsonError", "InvalidColorError", "PaletteFormatError", "color"]
