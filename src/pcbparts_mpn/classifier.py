"""MPN classification facade.

Owns one PatternRegistry, initializes each handler into it exactly once, then
freezes it. All queries after construction are read-only and thread-safe.
"""

import logging
from typing import Iterable

from . import config
from .component_types import ComponentType
from .errors import InvalidRegistrationError
from .family_similarity import PartProfile, family_similarity
from .handlers import DEFAULT_HANDLERS, ManufacturerHandler
from .manufacturer_aliases import resolve_manufacturer
from .registry import PatternRegistry, normalize_mpn
from .similarity import composite_similarity, rank_similar

logger = logging.getLogger(__name__)


def _specificity(component_type: ComponentType) -> tuple[int, int, str]:
    """Sort key: manufacturer-specific types first, then derived, then generic; ties by name."""
    depth = 0
    current = component_type
    while current.base_type is not current:
        depth += 1
        current = current.base_type
    return (0 if component_type.is_manufacturer_specific else 1, -depth, component_type.name)


class MPNClassifier:
    """Classify MPNs and compare them using a fixed set of manufacturer handlers.

    Args:
        handlers: handler instances or classes. Defaults to DEFAULT_HANDLERS.

    Raises:
        InvalidRegistrationError: two handlers share a name, or a handler
            registers a type it does not support
    """

    def __init__(self, handlers: Iterable[ManufacturerHandler | type[ManufacturerHandler]] | None = None):
        if handlers is None:
            handlers = DEFAULT_HANDLERS

        self.registry = PatternRegistry()
        self._handlers: dict[str, ManufacturerHandler] = {}
        for handler in handlers:
            if isinstance(handler, type):
                handler = handler()
            if handler.name in self._handlers:
                raise InvalidRegistrationError(f"Duplicate handler name: {handler.name}")
            handler.initialize_patterns(self.registry)
            self._handlers[handler.name] = handler
        self.registry.freeze()

        # Canonical name and aliases -> handler, all lowercase
        self._handlers_by_alias: dict[str, ManufacturerHandler] = {}
        for handler in self._handlers.values():
            for key in (handler.name, *handler.aliases):
                self._handlers_by_alias.setdefault(key.lower(), handler)

        logger.info(
            f"MPN classifier ready: {len(self._handlers)} handlers, {len(self.registry)} matchers, "
            f"{len(self.registry.supported_types())} types"
        )

    @property
    def handlers(self) -> tuple[ManufacturerHandler, ...]:
        return tuple(self._handlers.values())

    # =========================================================================
    # Classification
    # =========================================================================

    def matches(self, mpn: str | None, component_type: ComponentType | None) -> bool:
        return self.registry.matches(mpn, component_type)

    def matching_types(self, mpn: str | None) -> list[ComponentType]:
        """Every matching type, most specific first."""
        return sorted(self.registry.matching_types(mpn), key=_specificity)

    def detect_type(self, mpn: str | None) -> ComponentType | None:
        """Most specific matching type, or None if no handler recognizes the MPN."""
        types = self.matching_types(mpn)
        return types[0] if types else None

    def handler_for(self, mpn: str | None) -> ManufacturerHandler | None:
        """First handler (in construction order) whose own patterns accept the MPN."""
        if not normalize_mpn(mpn):
            return None
        for handler in self._handlers.values():
            if handler.owns(mpn, self.registry):
                return handler
        return None

    def handlers_for_type(self, component_type: ComponentType | None) -> list[ManufacturerHandler]:
        """Handlers that registered at least one matcher for the type."""
        owners = self.registry.owners(component_type)
        return [self._handlers[name] for name in owners if name in self._handlers]

    def handler_named(self, name: str | None) -> ManufacturerHandler | None:
        """Look up a handler by name, alias, or manufacturer alias ("TI", "st micro")."""
        if not name or not name.strip():
            return None
        handler = self._handlers_by_alias.get(name.strip().lower())
        if handler is not None:
            return handler
        return self._handlers_by_alias.get(resolve_manufacturer(name).lower())

    # =========================================================================
    # Attribute extraction and replacement
    # =========================================================================

    def extract_series(self, mpn: str | None) -> str:
        handler = self.handler_for(mpn)
        return handler.extract_series(mpn) if handler else ""

    def extract_package_code(self, mpn: str | None) -> str:
        handler = self.handler_for(mpn)
        return handler.extract_package_code(mpn) if handler else ""

    def is_official_replacement(self, mpn_a: str | None, mpn_b: str | None) -> bool:
        """Ask the handler that owns mpn_a whether mpn_b replaces it."""
        handler = self.handler_for(mpn_a)
        if handler is None:
            return False
        return handler.is_official_replacement(mpn_a, mpn_b)

    # =========================================================================
    # Similarity
    # =========================================================================

    def profile(self, mpn: str | None) -> PartProfile | None:
        """Decode an MPN with its owning handler, or None if unrecognized."""
        component_type = self.detect_type(mpn)
        handler = self.handler_for(mpn)
        if component_type is None or handler is None:
            return None
        return PartProfile(
            mpn=normalize_mpn(mpn),
            component_type=component_type,
            series=handler.extract_series(mpn),
            package=handler.extract_package_code(mpn),
        )

    def similarity(self, mpn_a: str | None, mpn_b: str | None) -> float:
        """Type-aware similarity, falling back to composite string similarity.

        When both MPNs are recognized and share a generic type listed in
        FAMILY_SCORERS, that family's grade (0.9 / 0.7 / 0.3) is returned.
        Anything else is scored with composite_similarity.
        """
        if not mpn_a or not mpn_b:
            return 0.0
        if mpn_a == mpn_b:
            return 1.0
        profile_a = self.profile(mpn_a)
        profile_b = self.profile(mpn_b) if profile_a else None
        if profile_a and profile_b:
            score = family_similarity(profile_a, profile_b)
            if score is not None:
                return score
        return composite_similarity(mpn_a, mpn_b)

    def rank_similar(
        self,
        mpn: str | None,
        candidates: Iterable[str | None],
        limit: int = config.MAX_SIMILAR_RESULTS,
        min_score: float = config.MIN_SIMILARITY_SCORE,
        same_type: bool = False,
    ) -> list[tuple[str, float]]:
        """Rank candidate MPNs by composite similarity.

        With same_type, candidates whose detected type is not in the same
        family as the target are dropped first, and the rest are scored with
        the type-aware similarity().
        """
        if same_type:
            target_type = self.detect_type(mpn)
            if target_type is None:
                return []
            candidates = [c for c in candidates if target_type.is_same_family(self.detect_type(c))]
            return rank_similar(mpn, candidates, limit=limit, min_score=min_score, scorer=self.similarity)
        return rank_similar(mpn, candidates, limit=limit, min_score=min_score)

    def __repr__(self) -> str:
        return f"MPNClassifier(handlers={list(self._handlers)})"
