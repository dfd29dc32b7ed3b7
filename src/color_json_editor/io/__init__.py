"""File I/O for color documents."""

from color_json_editor.io.reader import load
from color_json_editor.io.writer import save

__all__ = ["load", "save"]
