"""Lexical scanning of color entries in raw text."""

from color_json_editor.codec.scanner import COLOR_ENTRY, iter_entries, scan

__all__ = ["COLOR_ENTRY", "iter_entries", "scan"]
