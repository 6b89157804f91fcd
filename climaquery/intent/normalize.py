"""Text normalization and keyword extraction for variable classification."""

from __future__ import annotations

import re

from climaquery.intent.dictionaries import ENGLISH_STOPWORDS

_DIGITS_RE = re.compile(r"\d+")
_NON_WORD_RE = re.compile(r"[^a-z\s]+")
_MULTISPACE_RE = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    """Normalize user text for keyword extraction.

    Normalization is intentionally conservative:
        - Lowercase.
        - Drop digits.
        - Replace punctuation with spaces.
        - Collapse whitespace.
    """

    value = (text or "").strip().lower()

    # Normalize typographic apostrophes so contractions split consistently.
    value = value.replace("’", "'")

    value = _DIGITS_RE.sub(" ", value)
    value = _NON_WORD_RE.sub(" ", value)
    value = _MULTISPACE_RE.sub(" ", value).strip()
    return value


def extract_keywords(text: str) -> list[str]:
    """Return the distinct non-stopword tokens of `text`, in order of first occurrence."""

    keywords: list[str] = []
    seen: set[str] = set()
    for token in normalize_text(text).split():
        if token in ENGLISH_STOPWORDS or token in seen:
            continue
        seen.add(token)
        keywords.append(token)
    return keywords
