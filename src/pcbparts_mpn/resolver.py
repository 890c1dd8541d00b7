"""Official-replacement verdicts between two MPNs.

B is an accepted replacement for A when:
1. Both series are known and equal, or a named generation upgrade maps A's
   series to B's (one direction only).
2. Every load-bearing attribute matches exactly. An attribute present on one
   side only is a mismatch.

Packaging-only attributes (tape-and-reel, temperature grade, lead finish) are
never extracted, so they cannot veto. Fuzzy similarity is ignored unless the
resolver is built with ``min_similarity``.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable, Mapping

from .similarity import composite_similarity

logger = logging.getLogger(__name__)

SeriesExtractor = Callable[[str], str]
AttributeExtractor = Callable[[str], Mapping[str, str]]


@dataclass(frozen=True)
class GenerationUpgrade:
    """Named rule: parts of the newer series replace parts of the older one.

    The part of the series after the prefix must match, so with
    ``GenerationUpgrade("SHT4x replaces SHT3x", "SHT3", "SHT4")`` SHT31 -> SHT41
    is accepted but SHT31 -> SHT45 is not.
    """
    name: str
    older_prefix: str
    newer_prefix: str

    def applies(self, series_a: str, series_b: str) -> bool:
        """True if series_b is the newer-generation counterpart of series_a."""
        if not series_a or not series_b:
            return False
        if not series_a.startswith(self.older_prefix) or not series_b.startswith(self.newer_prefix):
            return False
        return series_a[len(self.older_prefix):] == series_b[len(self.newer_prefix):]


@dataclass
class ReplacementCheck:
    """Verdict for "can B replace A", with the reason it was reached."""
    accepted: bool
    reason: str
    mismatched: list[str] = field(default_factory=list)
    upgrade: str | None = None
    similarity: float | None = None

    def __bool__(self) -> bool:
        return self.accepted


class ReplacementResolver:
    """Applies series, load-bearing attribute and optional similarity rules."""

    def __init__(
        self,
        extract_series: SeriesExtractor,
        load_bearing: AttributeExtractor,
        upgrades: Iterable[GenerationUpgrade] = (),
        min_similarity: float | None = None,
    ):
        if min_similarity is not None and not 0.0 <= min_similarity <= 1.0:
            raise ValueError(f"min_similarity must be in [0, 1], got {min_similarity}")
        self._extract_series = extract_series
        self._load_bearing = load_bearing
        self.upgrades = tuple(upgrades)
        self.min_similarity = min_similarity

    def _find_upgrade(self, series_a: str, series_b: str) -> GenerationUpgrade | None:
        for upgrade in self.upgrades:
            if upgrade.applies(series_a, series_b):
                return upgrade
        return None

    def check(self, mpn_a: str | None, mpn_b: str | None) -> ReplacementCheck:
        """Decide whether mpn_b can officially replace mpn_a."""
        if not mpn_a or not mpn_b or not mpn_a.strip() or not mpn_b.strip():
            return ReplacementCheck(False, "missing MPN")

        a = mpn_a.strip().upper()
        b = mpn_b.strip().upper()

        series_a = self._extract_series(a)
        series_b = self._extract_series(b)
        if not series_a or not series_b:
            logger.debug(f"Replacement {a} -> {b} rejected: unknown series")
            return ReplacementCheck(False, "unknown series")

        upgrade = None
        if series_a != series_b:
            upgrade = self._find_upgrade(series_a, series_b)
            if upgrade is None:
                logger.debug(f"Replacement {a} -> {b} rejected: series {series_a} != {series_b}")
                return ReplacementCheck(False, f"different series ({series_a} vs {series_b})")

        attrs_a = self._load_bearing(a)
        attrs_b = self._load_bearing(b)
        # Sorted for a stable mismatch list
        mismatched = sorted(k for k in set(attrs_a) | set(attrs_b) if attrs_a.get(k) != attrs_b.get(k))
        if mismatched:
            logger.debug(f"Replacement {a} -> {b} rejected: load-bearing mismatch on {', '.join(mismatched)}")
            return ReplacementCheck(
                False,
                "load-bearing attribute mismatch",
                mismatched=mismatched,
                upgrade=upgrade.name if upgrade else None,
            )

        score = None
        if self.min_similarity is not None:
            score = composite_similarity(a, b)
            if score < self.min_similarity:
                logger.debug(f"Replacement {a} -> {b} rejected: similarity {score:.3f} < {self.min_similarity}")
                return ReplacementCheck(
                    False,
                    "below similarity threshold",
                    upgrade=upgrade.name if upgrade else None,
                    similarity=score,
                )

        if upgrade is not None:
            return ReplacementCheck(True, f"generation upgrade: {upgrade.name}", upgrade=upgrade.name, similarity=score)
        return ReplacementCheck(True, "same series", similarity=score)

    def is_replacement(self, mpn_a: str | None, mpn_b: str | None) -> bool:
        return self.check(mpn_a, mpn_b).accepted
