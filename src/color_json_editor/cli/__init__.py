"""Command line interface for color-json-editor."""

from color_json_editor.cli.app import create_app
from color_json_editor.cli.main import main

__all__ = ["create_app", "main"]
