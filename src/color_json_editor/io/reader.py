"""Load JSON documents for color editing."""

import logging
from pathlib import Path

from color_json_editor.core.document import ColorDocument

logger = logging.getLogger(__name__)


def load(path: str | Path) -> ColorDocument:
    """
    Load a document from disk.

    The file is read as UTF-8 and scanned for color entries. Any text is
    accepted; a file with no color entries loads with an empty index.
    """
    path = Path(path)
    # newline="" keeps CRLF documents byte-identical outside edited spans
    with open(path, "r", encoding="utf-8", newline="") as f:
        text = f.read()
    doc = ColorDocument(original_text=text, source_path=path)
    logger.info("Opened %s (%d color entries)", path, len(doc.index))
    return doc
