"""String similarity kernel for MPN comparison.

All functions are pure and symmetric in their two string arguments. Scores are
floats in [0, 1]:

1. edit_distance / levenshtein_similarity - plain Levenshtein
2. case_insensitive, numeric, weighted, prefix and substitution variants
3. composite_similarity - prefix/numeric/suffix decomposition, the general
   purpose MPN comparator used for ranking alternates
"""

import math
import re
from dataclasses import dataclass
from typing import Callable, Iterable, Mapping

from . import config


# =============================================================================
# PRE-COMPILED REGEX PATTERNS
# =============================================================================

# Leading letters, the numeric run right after them, and everything else
_DECOMPOSE_PATTERN = re.compile(r"([A-Za-z]*)(\d*)(.*)", re.DOTALL)

# A plain decimal number: "100", "-3.3", ".5", "1e3". No "nan", "inf" or "1_000".
_NUMBER_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def _clamp(score: float) -> float:
    return max(0.0, min(1.0, score))


# =============================================================================
# LEVENSHTEIN
# =============================================================================


def edit_distance(a: str | None, b: str | None) -> int | None:
    """Levenshtein distance with unit insert/delete/substitute costs.

    Returns None when either input is None.

    Examples:
        edit_distance("kitten", "sitting") -> 3
        edit_distance("", "abc") -> 3
    """
    if a is None or b is None:
        return None
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)

    # Two-row DP over the shorter string
    if len(a) < len(b):
        a, b = b, a
    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            current.append(min(
                previous[j] + 1,  # deletion
                current[j - 1] + 1,  # insertion
                previous[j - 1] + (char_a != char_b),  # substitution
            ))
        previous = current
    return previous[-1]


def levenshtein_similarity(a: str | None, b: str | None) -> float:
    """Normalized similarity: 1 - distance / max(len(a), len(b)).

    Identical strings (including two empty strings) score 1.0. None, or an
    empty string against a non-empty one, scores 0.0.
    """
    if a is None or b is None:
        return 0.0
    if a == b:
        return 1.0
    if not a or not b:
        return 0.0
    distance = edit_distance(a, b)
    return _clamp(1.0 - distance / max(len(a), len(b)))


def case_insensitive_similarity(a: str | None, b: str | None) -> float:
    """Levenshtein similarity after folding both strings to lower case."""
    if a is None or b is None:
        return 0.0
    return levenshtein_similarity(a.lower(), b.lower())


# =============================================================================
# VARIANTS
# =============================================================================


def parse_number(s: str | None) -> float | None:
    """Parse a string that is entirely a finite decimal number, else None.

    Examples:
        "100" -> 100.0, " 3.3 " -> 3.3, "100A" -> None, "nan" -> None
    """
    if not s:
        return None
    s = s.strip()
    if not _NUMBER_PATTERN.fullmatch(s):
        return None
    value = float(s)
    return value if math.isfinite(value) else None


def numeric_similarity(a: str | None, b: str | None) -> float:
    """Value-aware similarity for numeric strings.

    When both strings parse as numbers: 1 - |a - b| / max(|a|, |b|, 1), so
    adjacent integers score high and order-of-magnitude gaps score low.
    Otherwise falls back to plain Levenshtein similarity.

    Equal values score 1.0 even when the spellings differ ("100" vs "100.0",
    "05" vs "5"). composite_similarity caps such distinct inputs below 1.0.

    Examples:
        numeric_similarity("100", "101") -> ~0.99
        numeric_similarity("100", "10000") -> 0.01
    """
    if a is None or b is None:
        return 0.0
    value_a = parse_number(a)
    value_b = parse_number(b)
    if value_a is None or value_b is None:
        return levenshtein_similarity(a, b)
    if value_a == value_b:
        return 1.0
    scale = max(abs(value_a), abs(value_b), 1.0)
    return _clamp(1.0 - abs(value_a - value_b) / scale)


def weighted_similarity(a: str | None, b: str | None, length_weight: float) -> float:
    """Levenshtein similarity with an extra penalty for differing lengths.

    The plain score is multiplied by 1 - length_weight * relative length
    difference. length_weight=0 reduces to levenshtein_similarity.
    """
    if not 0.0 <= length_weight <= 1.0:
        raise ValueError(f"length_weight must be in [0, 1], got {length_weight}")
    if a is None or b is None:
        return 0.0
    base = levenshtein_similarity(a, b)
    if base == 0.0 or a == b:
        return base
    length_diff = abs(len(a) - len(b)) / max(len(a), len(b))
    return _clamp(base * (1.0 - length_weight * length_diff))


def prefix_similarity(a: str | None, b: str | None, prefix_length: int) -> float:
    """Levenshtein similarity of the first prefix_length characters only.

    Scores family-code agreement independent of suffix noise, e.g.
    prefix_similarity("STM32F103C8T6", "STM32F103RBT6", 9) -> 1.0
    """
    if prefix_length < 1:
        raise ValueError(f"prefix_length must be positive, got {prefix_length}")
    if not a or not b:
        return 0.0
    return levenshtein_similarity(a[:prefix_length], b[:prefix_length])


def substitution_similarity(
    a: str | None,
    b: str | None,
    substitutions: Mapping[str, str] | Iterable[tuple[str, str]],
    score: float = config.SUBSTITUTION_SCORE,
) -> float:
    """Similarity aware of known-equivalent notations.

    substitutions pairs fragments that mean the same thing (e.g. a legacy
    transistor prefix and its modern equivalent). Each pair rewrites the first
    fragment to the second in both strings. If that makes them equal, the fixed
    policy score is returned. Otherwise the best of the plain and rewritten
    Levenshtein scores.

    Examples (with {"2N": "PN"}):
        "2N2222" vs "PN2222" -> 0.9
        "2N3904" vs "PN2222" -> ~0.33
    """
    if not a or not b:
        return 0.0
    if a == b:
        return 1.0
    best = levenshtein_similarity(a, b)
    pairs = substitutions.items() if isinstance(substitutions, Mapping) else substitutions
    for old, new in pairs:
        if not old or not new:
            continue
        rewritten_a = a.replace(old, new)
        rewritten_b = b.replace(old, new)
        if rewritten_a == rewritten_b:
            return score
        best = max(best, levenshtein_similarity(rewritten_a, rewritten_b))
    return best


# =============================================================================
# COMPOSITE (DECOMPOSITION-WEIGHTED) SIMILARITY
# =============================================================================


@dataclass(frozen=True)
class MPNParts:
    """An MPN split into leading letters, the numeric run after them, and the rest."""
    prefix: str
    number: str
    suffix: str


def split_mpn(text: str | None) -> MPNParts:
    """Split an MPN into contiguous prefix / number / suffix segments.

    Examples:
        "LM358N" -> ("LM", "358", "N")
        "7805" -> ("", "7805", "")
        "ACS712ELCTR-05B" -> ("ACS", "712", "ELCTR-05B")
    """
    if not text:
        return MPNParts("", "", "")
    match = _DECOMPOSE_PATTERN.match(text)
    return MPNParts(match.group(1), match.group(2), match.group(3))


def _prefix_score(p1: str, p2: str) -> float:
    return levenshtein_similarity(p1, p2)


def _numeric_score(n1: str, n2: str) -> float:
    # A missing numeric run is a full mismatch, not a skipped component
    if not n1 or not n2:
        return 0.0
    return numeric_similarity(n1, n2)


def _suffix_score(s1: str, s2: str) -> float:
    if not s1 and not s2:
        return 1.0
    if not s1 or not s2:
        return config.SUFFIX_PARTIAL_CREDIT
    return levenshtein_similarity(s1, s2)


def composite_similarity(a: str | None, b: str | None) -> float:
    """Weighted prefix/numeric/suffix similarity between two MPNs.

    score = 0.3 * prefix + 0.5 * numeric + 0.2 * suffix

    The numeric run dominates because the digits usually carry the electrical
    identity of a part family.

    Examples:
        composite_similarity("LM358", "LM358N") -> 0.9
        composite_similarity("A", "B") -> 0.2
    """
    if not a or not b:
        return 0.0
    if a == b:
        return 1.0

    parts_a = split_mpn(a)
    parts_b = split_mpn(b)
    score = (
        config.PREFIX_WEIGHT * _prefix_score(parts_a.prefix, parts_b.prefix)
        + config.NUMERIC_WEIGHT * _numeric_score(parts_a.number, parts_b.number)
        + config.SUFFIX_WEIGHT * _suffix_score(parts_a.suffix, parts_b.suffix)
    )
    score = min(_clamp(score), config.DISTINCT_INPUT_CAP)
    if len(a) == 1 and len(b) == 1:
        score = min(score, config.SINGLE_CHARACTER_CAP)
    return score


# =============================================================================
# RANKING
# =============================================================================


def rank_similar(
    target: str | None,
    candidates: Iterable[str | None],
    limit: int = config.MAX_SIMILAR_RESULTS,
    min_score: float = config.MIN_SIMILARITY_SCORE,
    scorer: Callable[[str | None, str | None], float] = composite_similarity,
) -> list[tuple[str, float]]:
    """Rank candidates by similarity to target, best first.

    Empty candidates and the target itself are skipped, duplicates are scored
    once, and ties are broken alphabetically so results are deterministic.
    """
    if not target or limit <= 0:
        return []

    scored: dict[str, float] = {}
    for candidate in candidates:
        if not candidate or candidate == target or candidate in scored:
            continue
        score = scorer(target, candidate)
        if score >= min_score:
            scored[candidate] = score

    ranked = sorted(scored.items(), key=lambda item: (-item[1], item[0]))
    return ranked[:limit]
