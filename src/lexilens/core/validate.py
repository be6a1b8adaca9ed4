# src/lexilens/core/validate.py
"""
Query validation.

A query is the trimmed input, at most MAX_WORDS whitespace-separated words.
Nothing else is normalized: case, diacritics and script pass through as-is.
"""

import re
from enum import Enum


MAX_WORDS = 3

ASCII_WORD = re.compile(r"[A-Za-z\s'-]+")


class ValidationError(Enum):
    MISSING = "Missing word"
    TOO_MANY_WORDS = f"Please enter at most {MAX_WORDS} words"


def validate(raw: str | None) -> str | ValidationError:
    """
    Returns the normalized query, or the first rule it breaks.

    Idempotent: validating a returned query gives the same query back.
    """
    query = (raw or "").strip()
    if not query:
        return ValidationError.MISSING

    if len(query.split()) > MAX_WORDS:
        return ValidationError.TOO_MANY_WORDS

    return query


def is_ascii_word(text: str) -> bool:
    """Whether pronunciation playback can be offered for `text`."""
    return ASCII_WORD.fullmatch(text) is not None
