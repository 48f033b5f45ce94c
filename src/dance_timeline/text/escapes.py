# dance_timeline/text/escapes.py

"""Decode the handful of character escapes found in VirtualDJ catalog text."""

from __future__ import annotations

import re

from dance_timeline.domain.errors import UnhandledEscapeError

# Applied in order: "&amp;apos;" decodes to "&apos;", not to "'".
KNOWN_ESCAPES: tuple[tuple[str, str], ...] = (
    ("&apos;", "'"),
    ("&amp;", "&"),
)

_ESCAPE_RE = re.compile(r"&#?\w+;")


def deescape(text: str) -> str:
    """Replace known escapes with their literal characters.

    Raises:
        UnhandledEscapeError: if any other ``&name;`` escape remains.
    """
    result = text
    for escape, literal in KNOWN_ESCAPES:
        result = result.replace(escape, literal)

    if _ESCAPE_RE.search(result):
        raise UnhandledEscapeError(result)
    return result
