"""Shared contract for manufacturer handlers.

A handler is one manufacturer family's knowledge: which MPN shapes belong to
which component types, how to read the series and package out of an MPN, and
which attributes must agree for one part to officially replace another.
"""

import logging
import re
from abc import ABC, abstractmethod
from typing import ClassVar, Iterable

from ..component_types import ComponentType
from ..errors import InvalidRegistrationError
from ..packages import package_from_suffix
from ..registry import PatternRegistry, normalize_mpn
from ..resolver import GenerationUpgrade, ReplacementCheck, ReplacementResolver

logger = logging.getLogger(__name__)

# Leading letters plus the first digit run: "LM358N" -> "LM358"
_DEFAULT_SERIES_PATTERN = re.compile(r"[A-Z]+\d+")

# Ordering-code tail allowed after a family pattern ("DR", "-05B-T", "/NOPB", "#PBF")
ORDERING_SUFFIX = r"[A-Z0-9/#-]*"


class ManufacturerHandler(ABC):
    """Base class for one manufacturer family.

    Subclasses set ``name``, ``SUPPORTED_TYPES`` and implement ``patterns()``.
    Override ``extract_series``, ``extract_package_code`` and
    ``load_bearing_attributes`` where the manufacturer's ordering code needs it.
    """

    name: ClassVar[str] = ""
    aliases: ClassVar[tuple[str, ...]] = ()
    SUPPORTED_TYPES: ClassVar[frozenset[ComponentType]] = frozenset()
    GENERATION_UPGRADES: ClassVar[tuple[GenerationUpgrade, ...]] = ()

    def __init__(self, min_similarity: float | None = None):
        self.resolver = ReplacementResolver(
            self.extract_series,
            self.load_bearing_attributes,
            upgrades=self.GENERATION_UPGRADES,
            min_similarity=min_similarity,
        )

    @abstractmethod
    def patterns(self) -> Iterable[tuple[ComponentType, str]]:
        """(type, regex) pairs this handler contributes. Regexes are full-match, case-insensitive."""

    def initialize_patterns(self, registry: PatternRegistry) -> None:
        """Register every pattern with this handler as owner.

        Raises:
            InvalidRegistrationError: a pattern names a type outside SUPPORTED_TYPES
        """
        count = 0
        for component_type, pattern in self.patterns():
            if component_type not in self.SUPPORTED_TYPES:
                raise InvalidRegistrationError(
                    f"{self.name} handler registers {component_type!r}, which is not in its SUPPORTED_TYPES"
                )
            registry.register_pattern(component_type, pattern, owner=self.name)
            count += 1
        logger.debug(f"{self.name}: registered {count} patterns")

    def supported_types(self) -> frozenset[ComponentType]:
        return self.SUPPORTED_TYPES

    def matches(self, text: str | None, component_type: ComponentType | None, registry: PatternRegistry) -> bool:
        return registry.matches(text, component_type)

    def owns(self, text: str | None, registry: PatternRegistry) -> bool:
        """True if any of this handler's own matchers accepts the MPN."""
        return any(registry.matches(text, t, owner=self.name) for t in self.SUPPORTED_TYPES)

    # =========================================================================
    # MPN decoding
    # =========================================================================

    def extract_series(self, text: str | None) -> str:
        """Family identifier, e.g. "LM358" for "LM358DR". "" if unrecognized."""
        mpn = normalize_mpn(text)
        if not mpn:
            return ""
        match = _DEFAULT_SERIES_PATTERN.match(mpn)
        return match.group(0) if match else ""

    def extract_package_code(self, text: str | None) -> str:
        """Package name from the ordering suffix, e.g. "SOIC" for "LM358DR". "" if unknown."""
        return package_from_suffix(normalize_mpn(text))

    def load_bearing_attributes(self, text: str | None) -> dict[str, str]:
        """Attributes that must match exactly for a replacement to be accepted."""
        return {}

    # =========================================================================
    # Replacement
    # =========================================================================

    def replacement_check(self, mpn_a: str | None, mpn_b: str | None) -> ReplacementCheck:
        return self.resolver.check(mpn_a, mpn_b)

    def is_official_replacement(self, mpn_a: str | None, mpn_b: str | None) -> bool:
        """True if mpn_b is an official drop-in replacement for mpn_a."""
        return self.resolver.is_replacement(mpn_a, mpn_b)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
