"""EntryIndex - live index of color entries over an editable buffer.

The index owns the document text and the ordered entries scanned from it.
Colors are changed one entry at a time: the entry's literal is replaced in
place and every later span is shifted, so the buffer never needs to be
re-scanned after an edit.
"""

from __future__ import annotations

import logging
from typing import Iterator, Union

from color_json_editor.codec.scanner import scan
from color_json_editor.core.color import from_picked_rgb, merge_onto_target, parse_color
from color_json_editor.core.entry import Entry
from color_json_editor.edit.spans import shift_spans

logger = logging.getLogger(__name__)

EntryRef = Union[int, Entry]


class EntryIndex:
    """Ordered color entries with spans over the current buffer.

    Lifecycle is ``empty -> loaded -> (edited)* -> loaded``. Only load()
    and revert() change the number of entries; edits mutate one entry's
    color and shift the spans that follow it.

    Example:
        index = EntryIndex('{"bg":"#112233","fg":"#ffffff80"}')
        index.apply_color(0, "#000")      # raises InvalidColorError
        index.apply_color(0, "abcdef")    # '{"bg":"#ABCDEF","fg":"#ffffff80"}'
        index.apply_merged(1, "#FF0000")  # keeps fg's alpha -> "#FF000080"
    """

    def __init__(self, buffer: str | None = None) -> None:
        self._buffer = ""
        self._entries: list[Entry] = []
        if buffer is not None:
            self.load(buffer)

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------

    def load(self, buffer: str) -> None:
        """Replace the buffer and rebuild all entries from it."""
        self._buffer = buffer
        self._entries = scan(buffer)

    def revert(self, original: str) -> None:
        """Discard all edits by rebuilding from the original text."""
        logger.debug("Reverting index (%d entries before revert)", len(self._entries))
        self.load(original)

    # -------------------------------------------------------------------------
    # Properties and lookup
    # -------------------------------------------------------------------------

    @property
    def buffer(self) -> str:
        """Current document text."""
        return self._buffer

    @property
    def entries(self) -> list[Entry]:
        """Entries in buffer order (live objects, do not mutate)."""
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries)

    def __getitem__(self, position: int) -> Entry:
        return self._entries[position]

    def position_of(self, ref: EntryRef) -> int:
        """Resolve an entry reference to its position in the index.

        Raises:
            IndexError: If an int position is out of range
            KeyError: If an Entry object is not owned by this index
        """
        if isinstance(ref, Entry):
            for i, entry in enumerate(self._entries):
                if entry is ref:
                    return i
            raise KeyError(f"Entry {ref.name!r} does not belong to this index")
        if not 0 <= ref < len(self._entries):
            raise IndexError(f"Entry index {ref} out of range ({len(self._entries)} entries)")
        return ref

    def find(self, name: str) -> Entry | None:
        """Return the first entry with the given name, or None."""
        for entry in self._entries:
            if entry.name == name:
                return entry
        return None

    def filter(self, query: str) -> list[Entry]:
        """Entries whose name or color contains query (case-insensitive)."""
        q = query.strip().lower()
        if not q:
            return list(self._entries)
        return [
            e for e in self._entries
            if q in e.name.lower() or q in e.color.lower()
        ]

    # -------------------------------------------------------------------------
    # Editing
    # -------------------------------------------------------------------------

    def apply_color(self, ref: EntryRef, text: str) -> str:
        """Set one entry's color and return the updated buffer.

        The entry's quoted literal is replaced in place; bytes outside its
        span are untouched. Later spans are shifted by the length change.

        Args:
            ref: Entry position or Entry object from this index
            text: New color in any accepted hex form

        Returns:
            The new buffer (unchanged if the color is already set)

        Raises:
            InvalidColorError: If text is not a hex color (nothing changes)
        """
        color = parse_color(text)
        position = self.position_of(ref)
        entry = self._entries[position]

        if color == entry.color:
            return self._buffer

        old_literal = entry.literal
        new_literal = f'"{color}"'
        self._buffer = self._buffer[:entry.start] + new_literal + self._buffer[entry.end:]

        delta = len(new_literal) - len(old_literal)
        entry.color = color
        entry.text = new_literal
        entry.end = entry.start + len(new_literal)
        shift_spans(self._entries, position, delta)

        logger.debug(
            "Set %r (#%d) %s -> %s, delta %+d", entry.name, position, old_literal, new_literal, delta
        )
        return self._buffer

    def apply_merged(self, ref: EntryRef, text: str) -> str:
        """Apply a dropped, pasted or typed color using the alpha-merge rule."""
        color = parse_color(text)
        entry = self._entries[self.position_of(ref)]
        return self.apply_color(ref, merge_onto_target(color, entry.color))

    def apply_picked_rgb(self, ref: EntryRef, r: int, g: int, b: int) -> str:
        """Apply a color picker result, keeping the entry's alpha if any."""
        entry = self._entries[self.position_of(ref)]
        return self.apply_color(ref, from_picked_rgb(r, g, b, entry.color))
