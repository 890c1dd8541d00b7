"""MPN pattern registry and similarity engine.

Classifies manufacturer part numbers into component types through
per-manufacturer pattern handlers, and scores how alike two MPNs are.
"""

from .classifier import MPNClassifier
from .component_types import ComponentType
from .errors import InvalidRegistrationError, RegistryError, RegistryFrozenError
from .family_similarity import FAMILY_SCORERS, PartProfile, family_similarity
from .handlers import DEFAULT_HANDLERS, ManufacturerHandler
from .registry import PatternRegistry, RegexMatcher, normalize_mpn
from .resolver import GenerationUpgrade, ReplacementCheck, ReplacementResolver
from .similarity import (
    composite_similarity,
    edit_distance,
    levenshtein_similarity,
    rank_similar,
    split_mpn,
)

__version__ = "0.1.0"

__all__ = [
    "ComponentType",
    "DEFAULT_HANDLERS",
    "FAMILY_SCORERS",
    "GenerationUpgrade",
    "InvalidRegistrationError",
    "MPNClassifier",
    "ManufacturerHandler",
    "PartProfile",
    "PatternRegistry",
    "RegexMatcher",
    "RegistryError",
    "RegistryFrozenError",
    "ReplacementCheck",
    "ReplacementResolver",
    "composite_similarity",
    "edit_distance",
    "family_similarity",
    "levenshtein_similarity",
    "normalize_mpn",
    "rank_similar",
    "split_mpn",
]
