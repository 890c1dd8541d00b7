"""Configuration for MPN classification and similarity scoring."""

import os

# Composite similarity weights (prefix / numeric run / suffix)
PREFIX_WEIGHT = 0.3
NUMERIC_WEIGHT = 0.5
SUFFIX_WEIGHT = 0.2

# Partial credit when only one MPN carries a trailing suffix (packaging codes are often omitted)
SUFFIX_PARTIAL_CREDIT = 0.5

# Fixed score for pairs sharing a known-equivalent prefix notation (e.g. 2N <-> PN)
SUBSTITUTION_SCORE = 0.9

# Upper bound for two distinct single-character inputs
SINGLE_CHARACTER_CAP = 0.5

# Distinct inputs never score 1.0 (e.g. "LM0358" vs "LM358" decompose identically)
DISTINCT_INPUT_CAP = 0.99

# Ranking defaults for alternate suggestions
MAX_SIMILAR_RESULTS = int(os.getenv("MPN_MAX_SIMILAR_RESULTS", "20"))
MIN_SIMILARITY_SCORE = float(os.getenv("MPN_MIN_SIMILARITY_SCORE", "0.0"))

# Grades for type-aware similarity between two recognized parts
HIGH_FAMILY_SIMILARITY = 0.9
MEDIUM_FAMILY_SIMILARITY = 0.7
LOW_FAMILY_SIMILARITY = 0.3
