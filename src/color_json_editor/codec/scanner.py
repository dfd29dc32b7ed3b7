"""
Scanner for ``"name":"#RRGGBB"`` / ``"name":"#RRGGBBAA"`` occurrences.

This is a lexical scan over raw text, not a JSON parse. It does not know
about nesting, arrays or escaped quotes, and will match any substring of
the right shape. Spans are literal text offsets so the edit index can
rewrite a single value without touching the rest of the document.
"""

import logging
import re
from typing import Iterator

from color_json_editor.core.color import HEX_DIGITS
from color_json_editor.core.entry import Entry

logger = logging.getLogger(__name__)


# "name" : "#hex" - whitespace around the colon is tolerated
COLOR_ENTRY = re.compile(
    r'"(?P<name>[^"]+)"\s*:\s*(?P<literal>"#' + HEX_DIGITS + r'")'
)


def iter_entries(buffer: str) -> Iterator[Entry]:
    """
    Yield entries left to right.

    Matches never overlap: the leftmost match wins, the optional alpha pair
    is taken when present, and scanning resumes after the consumed span.
    """
    for match in COLOR_ENTRY.finditer(buffer):
        literal = match.group("literal")
        yield Entry(
            name=match.group("name"),
            color=literal[1:-1].upper(),
            start=match.start("literal"),
            end=match.end("literal"),
            text=literal,
        )


def scan(buffer: str) -> list[Entry]:
    """
    Scan a text buffer for color entries.

    Args:
        buffer: Raw document text

    Returns:
        Entries in order of appearance; empty if nothing matched
    """
    entries = list(iter_entries(buffer))
    logger.debug("Scanned %d color entries from %d characters", len(entries), len(buffer))
    return entries
