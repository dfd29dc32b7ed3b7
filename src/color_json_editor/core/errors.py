"""Exception types raised by color-json-editor."""


class ColorJsonError(Exception):
    """Base class for all color-json-editor errors."""


class InvalidColorError(ColorJsonError, ValueError):
    """Raised when text is not a #RRGGBB or #RRGGBBAA hex color."""

    def __init__(self, text: object, message: str | None = None) -> None:
        self.text = text
        super().__init__(message or f"Invalid hex color: {text!r} (expected #RRGGBB or #RRGGBBAA)")


class PaletteFormatError(ColorJsonError, ValueError):
    """Raised when palette text is not a bracketed JSON array."""
