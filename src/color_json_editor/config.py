"""Default locations for per-user files."""

import os
import sys
from pathlib import Path

PALETTE_ENV_VAR = "COLOR_JSON_EDITOR_PALETTE"
PALETTE_FILENAME = "user-palette.json"


def default_palette_path() -> Path:
    """
    Get the per-user palette file location.

    Set COLOR_JSON_EDITOR_PALETTE to override. On Windows the file lives
    under %APPDATA%\\ColorJsonEditor, elsewhere under ~/.colorjsoneditor.
    """
    if env_path := os.environ.get(PALETTE_ENV_VAR):
        return Path(env_path).expanduser()

    if sys.platform.startswith("win"):
        appdata = os.environ.get("APPDATA")
        if appdata:
            return Path(appdata) / "ColorJsonEditor" / PALETTE_FILENAME

    return Path.home() / ".colorjsoneditor" / PALETTE_FILENAME
