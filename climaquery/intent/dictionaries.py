"""English vocabularies for climate variables and keyword extraction.

These tables are used by the variable classifier and keyword normalization and should remain
small and deterministic.
"""

from __future__ import annotations

from climaquery.intent.schema import ClimateVariable

VariableVocabulary = tuple[tuple[ClimateVariable, tuple[str, ...]], ...]

# Evaluated top to bottom; the first variable with a matching stem wins.
VARIABLE_STEMS: VariableVocabulary = (
    (ClimateVariable.Temperature, ("hot", "cold", "warm", "freeze")),
    (ClimateVariable.TotalCloudCover, ("sun", "cloud", "clear", "overcast")),
    (ClimateVariable.TotalPrecipitation, ("dry", "wet", "rain", "moist")),
    (ClimateVariable.WindSpeed, ("wind", "storm", "calm")),
)

ENGLISH_STOPWORDS: frozenset[str] = frozenset(
    {
        "a", "about", "above", "after", "again", "against", "all", "am", "an", "and", "any",
        "are", "as", "at", "be", "because", "been", "before", "being", "below", "between",
        "both", "but", "by", "can", "could", "did", "do", "does", "doing", "down", "during",
        "each", "few", "for", "from", "further", "had", "has", "have", "having", "he", "her",
        "here", "hers", "herself", "him", "himself", "his", "how", "i", "if", "in", "into",
        "is", "it", "its", "itself", "just", "me", "more", "most", "my", "myself", "no", "nor",
        "not", "now", "of", "off", "on", "once", "only", "or", "other", "our", "ours",
        "ourselves", "out", "over", "own", "same", "she", "should", "so", "some", "such",
        "than", "that", "the", "their", "theirs", "them", "themselves", "then", "there",
        "these", "they", "this", "those", "through", "to", "too", "under", "until", "up",
        "very", "was", "we", "were", "what", "when", "where", "which", "while", "who", "whom",
        "why", "will", "with", "would", "you", "your", "yours", "yourself", "yourselves",
    }
)
