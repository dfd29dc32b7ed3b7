"""Save edited JSON documents."""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from color_json_editor.core.document import ColorDocument

logger = logging.getLogger(__name__)


def save(doc: "ColorDocument", path: str | Path | None = None) -> Path:
    """
    Save a document's working text to disk.

    With no path the document's source_path is used. After a successful
    write the saved text becomes the document's original and the path
    becomes its source_path.

    Raises:
        ValueError: If no path is given and the document has none
    """
    if path is None:
        if doc.source_path is None:
            raise ValueError("Document has no path; pass one to save as")
        path = doc.source_path
    path = Path(path)

    text = doc.index.buffer
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(text)

    doc.original_text = text
    doc.source_path = path
    logger.info("Saved %s", path)
    return path
