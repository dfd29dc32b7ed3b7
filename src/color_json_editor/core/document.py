"""ColorDocument - a JSON text file opened for color editing."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from color_json_editor.edit.index import EntryIndex


@dataclass
class ColorDocument:
    """
    Document text, its entry index and where it came from.

    ``original_text`` is the last loaded or saved text; revert() rebuilds
    the index from it and is_modified compares against it.
    """
    original_text: str = ""
    source_path: Path | None = None
    index: EntryIndex = field(default_factory=EntryIndex)

    def __post_init__(self) -> None:
        if not self.index.buffer and self.original_text:
            self.index.load(self.original_text)

    @classmethod
    def load(cls, path: str | Path) -> "ColorDocument":
        """Load a document from disk."""
        from color_json_editor.io.reader import load
        return load(path)

    @classmethod
    def from_text(cls, text: str) -> "ColorDocument":
        """Create an unsaved document from text."""
        return cls(original_text=text)

    def save(self, path: str | Path | None = None) -> Path:
        """Write the working text and make it the new original.

        Saves to source_path unless a new path is given (save-as).
        """
        from color_json_editor.io.writer import save
        return save(self, path)

    def revert(self) -> None:
        """Drop all edits since the last load or save."""
        self.index.revert(self.original_text)

    @property
    def text(self) -> str:
        """Current working text."""
        return self.index.buffer

    @property
    def is_modified(self) -> bool:
        """True if the working text differs from the last loaded or saved text."""
        return self.index.buffer != self.original_text

    @property
    def title(self) -> str:
        """File name, or Untitled."""
        if self.source_path:
            return self.source_path.name
        return "Untitled"
