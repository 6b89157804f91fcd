"""Tests for text normalization and keyword extraction."""

from __future__ import annotations

from climaquery.intent.normalize import extract_keywords, normalize_text


def test_normalize_lowercases_and_strips_digits_and_punctuation() -> None:
    assert normalize_text("Was it RAINY in Paris, March 2015?") == "was it rainy in paris march"


def test_keywords_drop_stopwords() -> None:
    assert extract_keywords("It was so cold and windy") == ["cold", "windy"]


def test_keywords_are_deduplicated_in_first_occurrence_order() -> None:
    assert extract_keywords("Rain, rain and more RAIN in Lyon 2014") == ["rain", "lyon"]


def test_keywords_of_empty_text() -> None:
    assert extract_keywords("") == []
    assert extract_keywords("2015 12 31") == []
