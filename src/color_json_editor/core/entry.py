"""Entry - one name/color occurrence located in a text buffer."""

from dataclasses import dataclass

from color_json_editor.core.color import to_rgb


@dataclass
class Entry:
    """
    A ``"name":"#hex"`` occurrence and its live span in the buffer.

    ``start``/``end`` are a half-open range over the quoted color literal,
    quotes included, so ``buffer[start:end] == entry.literal`` always holds
    for the buffer the entry belongs to. ``color`` is the normalized value;
    ``text`` keeps the literal in its source spelling (case included).
    """
    name: str
    color: str
    start: int
    end: int
    text: str = ""

    def __post_init__(self) -> None:
        if not self.text:
            self.text = f'"{self.color}"'

    @property
    def literal(self) -> str:
        """The quoted color literal as it appears in the buffer."""
        return self.text

    @property
    def rgb(self) -> tuple[int, int, int]:
        """RGB components for display (alpha ignored)."""
        return to_rgb(self.color)

    def __str__(self) -> str:
        return f"{self.name}  {self.color}"
