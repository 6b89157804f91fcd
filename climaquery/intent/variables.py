"""Climate variable classification from free text.

Matching is a deterministic first-match rule over an ordered vocabulary: the raw keywords (not
their stems) are tested with `startswith` against each variable's stems, and the earliest variable
in the vocabulary with any match wins.
"""

from __future__ import annotations

import logging

import snowballstemmer

from climaquery.intent.dictionaries import VARIABLE_STEMS, VariableVocabulary
from climaquery.intent.errors import NoVariableFoundError
from climaquery.intent.normalize import extract_keywords
from climaquery.intent.schema import ClimateVariable

logger = logging.getLogger(__name__)


class VariableClassifier:
    """Pick exactly one climate variable for an input text.

    The vocabulary is injected once and never mutated; evaluation follows its order.
    """

    def __init__(self, vocabulary: VariableVocabulary = VARIABLE_STEMS) -> None:
        self.vocabulary = vocabulary
        self._stemmer = snowballstemmer.stemmer("english")

    def classify(self, text: str) -> ClimateVariable:
        """Return the first vocabulary variable matching the text's keywords.

        Raises:
            NoVariableFoundError: If no keyword starts with any vocabulary stem.
        """

        keywords = extract_keywords(text)
        # Stems are too unreliable to match on; they are kept for diagnostics only.
        stems = self._stemmer.stemWords(keywords)
        logger.debug("variable keywords=%s stems=%s", keywords, stems)

        for variable, valid_stems in self.vocabulary:
            if any(word.startswith(stem) for stem in valid_stems for word in keywords):
                return variable

        raise NoVariableFoundError("no climate variable found")
