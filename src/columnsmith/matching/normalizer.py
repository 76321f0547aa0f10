"""Text normalization for header and alias comparison."""

import re
from typing import Any

_NON_ALNUM = re.compile(r"[^a-z0-9\s]")
_WHITESPACE = re.compile(r"\s+")
_CAMEL_BOUNDARY = re.compile(r"([A-Z])")


def normalize(value: Any) -> str:
    """
    Canonicalize a raw string for comparison.

    Lowercases, drops everything that is not an ASCII letter, digit or
    whitespace, collapses whitespace runs to a single space and trims.
    None becomes an empty string.
    """
    if value is None:
        return ""
    text = str(value).lower()
    text = _NON_ALNUM.sub("", text)
    return _WHITESPACE.sub(" ", text).strip()


def tokenize(normalized: str) -> set[str]:
    """Split a normalized string into its unique words longer than one character."""
    return {word for word in normalized.split(" ") if len(word) > 1}


def format_field_name(field: str) -> str:
    """Turn a camelCase field identifier into a display label (admissionNumber -> Admission Number)."""
    spaced = _CAMEL_BOUNDARY.sub(r" \1", field or "").strip()
    if not spaced:
        return ""
    return spaced[0].upper() + spaced[1:]
