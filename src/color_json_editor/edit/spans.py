"""Span bookkeeping for incremental edits."""

from color_json_editor.core.entry import Entry


def shift_spans(entries: list[Entry], edited_index: int, delta: int) -> list[Entry]:
    """
    Shift every span after ``edited_index`` by ``delta``.

    Entries at or before the edited position are left alone, including the
    edited entry's own start. Entries are shifted in place and the same
    list is returned.

    Raises:
        IndexError: If edited_index is not a valid position in entries
    """
    if not 0 <= edited_index < len(entries):
        raise IndexError(f"Entry index {edited_index} out of range (0-{len(entries) - 1})")
    if delta == 0:
        return entries
    for entry in entries[edited_index + 1:]:
        entry.start += delta
        entry.end += delta
    return entries
