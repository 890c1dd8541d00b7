"""Pattern registry: the single authority for "does MPN X match type T".

Each component type owns an ordered list of independent matchers, contributed
by any number of manufacturer handlers. A type matches when ANY of its
matchers accepts the normalized MPN, so every matcher must be tried (many
handlers contribute to the generic IC type, for example).

Lifecycle: handlers register during an initialization phase, then ``freeze()``
publishes the registry. After that it is read-only and safe to share between
threads without further locking.
"""

import logging
import re
import threading
from dataclasses import dataclass, field
from typing import Callable

from .component_types import ComponentType
from .errors import InvalidRegistrationError, RegistryFrozenError

logger = logging.getLogger(__name__)

Matcher = Callable[[str], bool]


def normalize_mpn(text: str | None) -> str:
    """Trim and uppercase an MPN. None -> ""."""
    if not text:
        return ""
    return text.strip().upper()


@dataclass(frozen=True)
class RegexMatcher:
    """Matcher that accepts MPNs fully matching a case-insensitive regex."""
    pattern: str
    _compiled: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        try:
            compiled = re.compile(self.pattern, re.IGNORECASE)
        except re.error as e:
            raise InvalidRegistrationError(f"Invalid MPN pattern {self.pattern!r}: {e}") from e
        object.__setattr__(self, "_compiled", compiled)

    def __call__(self, mpn: str) -> bool:
        return self._compiled.fullmatch(mpn) is not None


@dataclass(frozen=True)
class _Entry:
    matcher: Matcher
    owner: str | None


class PatternRegistry:
    """Type-indexed collection of MPN matchers."""

    def __init__(self) -> None:
        self._entries: dict[ComponentType, list[_Entry] | tuple[_Entry, ...]] = {}
        self._lock = threading.Lock()
        self._frozen = False

    # =========================================================================
    # Initialization phase
    # =========================================================================

    def register(self, component_type: ComponentType, matcher: Matcher, owner: str | None = None) -> None:
        """Append a matcher to a type's collection.

        Never replaces earlier matchers. Duplicates are allowed (and logged).

        Raises:
            InvalidRegistrationError: component_type is not a ComponentType or matcher is not callable
            RegistryFrozenError: the registry has already been frozen
        """
        if not isinstance(component_type, ComponentType):
            raise InvalidRegistrationError(
                f"Cannot register matcher for {component_type!r}: not a ComponentType"
            )
        if not callable(matcher):
            raise InvalidRegistrationError(
                f"Cannot register {matcher!r} for {component_type.name}: matcher must be callable"
            )

        entry = _Entry(matcher, owner)
        with self._lock:
            if self._frozen:
                raise RegistryFrozenError(
                    f"Registry is frozen; cannot register {component_type.name} matcher from {owner or 'unknown owner'}"
                )
            entries = self._entries.setdefault(component_type, [])
            if entry in entries:
                logger.warning(f"Duplicate matcher {matcher!r} for {component_type.name} from {owner}")
            entries.append(entry)
        logger.debug(f"Registered {matcher!r} for {component_type.name} (owner={owner})")

    def register_pattern(self, component_type: ComponentType, pattern: str, owner: str | None = None) -> RegexMatcher:
        """Compile a case-insensitive full-match regex and register it."""
        matcher = RegexMatcher(pattern)
        self.register(component_type, matcher, owner=owner)
        return matcher

    def freeze(self) -> None:
        """End the initialization phase.

        Snapshots every collection into a tuple and refuses later
        registrations. Calling it more than once is harmless.
        """
        with self._lock:
            if self._frozen:
                return
            self._entries = {t: tuple(entries) for t, entries in self._entries.items()}
            self._frozen = True
        logger.debug(f"Registry frozen with {len(self)} matchers across {len(self._entries)} types")

    @property
    def frozen(self) -> bool:
        return self._frozen

    # =========================================================================
    # Query phase
    # =========================================================================

    def matches(self, text: str | None, component_type: ComponentType | None, owner: str | None = None) -> bool:
        """Check if text matches a component type.

        Every matcher registered for the type is tried until one accepts.
        With owner set, only that owner's matchers are considered (still
        any-match). Returns False for empty text, a None type, or a type
        without matchers.
        """
        if not text or component_type is None:
            return False
        mpn = normalize_mpn(text)
        if not mpn:
            return False
        for entry in self._entries.get(component_type, ()):
            if owner is not None and entry.owner != owner:
                continue
            if entry.matcher(mpn):
                return True
        return False

    def matching_types(self, text: str | None, owner: str | None = None) -> frozenset[ComponentType]:
        """All types with at least one accepting matcher."""
        if not normalize_mpn(text):
            return frozenset()
        return frozenset(t for t in list(self._entries) if self.matches(text, t, owner=owner))

    def matchers(self, component_type: ComponentType | None) -> tuple[Matcher, ...]:
        """Read-only view of every matcher registered for a type, in registration order."""
        return tuple(entry.matcher for entry in self._entries.get(component_type, ()))

    def first_matcher(self, component_type: ComponentType | None) -> Matcher | None:
        """Debug-only: the first matcher registered for a type, or None.

        Not a classification API. A type usually has several matchers from
        several handlers; use ``matches`` to test an MPN.
        """
        entries = self._entries.get(component_type, ())
        return entries[0].matcher if entries else None

    def owners(self, component_type: ComponentType | None) -> tuple[str, ...]:
        """Distinct owners that registered matchers for a type, in first-seen order."""
        seen: dict[str, None] = {}
        for entry in self._entries.get(component_type, ()):
            if entry.owner is not None:
                seen.setdefault(entry.owner, None)
        return tuple(seen)

    def supported_types(self) -> frozenset[ComponentType]:
        """Types with at least one registered matcher."""
        return frozenset(t for t, entries in list(self._entries.items()) if entries)

    def __len__(self) -> int:
        return sum(len(entries) for entries in list(self._entries.values()))

    def __repr__(self) -> str:
        state = "frozen" if self._frozen else "open"
        return f"PatternRegistry({len(self)} matchers, {len(self._entries)} types, {state})"
