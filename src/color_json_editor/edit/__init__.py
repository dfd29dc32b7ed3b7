"""Edit module - entry index and incremental span edits."""

from color_json_editor.edit.index import EntryIndex
from color_json_editor.edit.spans import shift_spans

__all__ = ["EntryIndex", "shift_spans"]
