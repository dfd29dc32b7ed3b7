"""User palette - flat favorites list and its file format."""

from color_json_editor.palette.file import deserialize, serialize
from color_json_editor.palette.store import UserPalette

__all__ = ["deserialize", "serialize", "UserPalette"]
