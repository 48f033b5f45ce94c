# dance_timeline/analysis/categories.py

"""Decide which dance category a played file belongs to.

If the catalog's User2 tag is set for a recording, that is the category.
Otherwise the category is derived from the Title tag (or the filename when
there is no title) by stripping the usual naming variations: a "+" marking a
longer recording, alternate versions in parentheses or brackets, and trailing
track numbers.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from pathlib import PureWindowsPath

from dance_timeline.text.escapes import deescape

CATEGORY_TAG = "User2"
TITLE_TAG = "Title"

# Names that legitimately end in digits and must keep them.
PROTECTED_NAMES = ("Passu", "Lisu")

_PARENS_RE = re.compile(r"\(.+\)")
_BRACKETS_RE = re.compile(r"\[.+\]")
_TRAILING_DIGITS_RE = re.compile(r"\d+$")
_PROTECTED_RE = re.compile("|".join(re.escape(n) for n in PROTECTED_NAMES))


def remove_parenthesized(text: str) -> str:
    return _PARENS_RE.sub("", text)


def remove_bracketed(text: str) -> str:
    return _BRACKETS_RE.sub("", text)


def remove_trailing_digits(text: str) -> str:
    """Drop a trailing track number unless the title is a protected name."""
    if _PROTECTED_RE.search(text):
        return text
    return _TRAILING_DIGITS_RE.sub("", text)


def remove_plus(text: str) -> str:
    return text.replace("+", "")


def strip_whitespace(text: str) -> str:
    return text.strip()


def remove_exposed_digits(text: str) -> str:
    """Second digit pass for numbers that were hidden behind whitespace."""
    return remove_trailing_digits(text).strip()


def capitalize_words(text: str) -> str:
    """Capitalize each word, but only for titles with no uppercase at all."""
    if any(c.isupper() for c in text):
        return text
    return " ".join(word[:1].upper() + word[1:] for word in text.split())


# Order matters; see remove_exposed_digits.
NORMALIZATION_STEPS: tuple[Callable[[str], str], ...] = (
    remove_parenthesized,
    remove_bracketed,
    remove_trailing_digits,
    remove_plus,
    strip_whitespace,
    remove_exposed_digits,
    deescape,
    capitalize_words,
)


def normalize_title(raw: str) -> str:
    """Collapse naming variants of the same dance onto one name."""
    text = raw
    for step in NORMALIZATION_STEPS:
        text = step(text)
    return text


def file_name(path: str) -> str:
    """Filename of a catalog path; VirtualDJ may store either separator."""
    return PureWindowsPath(path).name


def file_stem(path: str) -> str:
    return PureWindowsPath(path).stem


def title_for(path: str, tags: Mapping[str, str]) -> str:
    """The Title tag, or the filename without extension."""
    return tags.get(TITLE_TAG) or file_stem(path)


def resolve_category(path: str, tag_store: Mapping[str, Mapping[str, str]]) -> str:
    """Return the dance category for a played file.

    Raises:
        MissingTagsError: if the catalog has no entry for path.
    """
    tags = tag_store[path]
    if category := tags.get(CATEGORY_TAG):
        return category
    return normalize_title(title_for(path, tags))
