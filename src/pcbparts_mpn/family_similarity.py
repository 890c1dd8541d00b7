"""Type-aware similarity between two classified MPNs.

Each generic component type with its own notion of "close" gets a scorer in
FAMILY_SCORERS. A scorer sees both parts already decoded by their handlers
(type, series, package) and returns one of three grades:

- HIGH: same series, packages compatible
- MEDIUM: same series in an incompatible package, or a functional equivalent
- LOW: same kind of part, different function

Pairs whose generic types differ, or whose type has no scorer, get None so the
caller can fall back to composite string similarity.
"""

import logging
import re
from dataclasses import dataclass
from typing import Callable

from . import config
from .component_types import ComponentType
from .packages import packages_compatible

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PartProfile:
    """An MPN as decoded by the handler that owns it."""
    mpn: str
    component_type: ComponentType
    series: str
    package: str


Scorer = Callable[[PartProfile, PartProfile], float]


# =============================================================================
# FAMILY TABLES
# =============================================================================

# Op-amps interchangeable by channel count
_OPAMP_FUNCTION_GROUPS = (
    frozenset({"TL071", "TL081", "LM741"}),
    frozenset({"LM358", "LM2904", "TL072", "TL082", "MC1458", "NE5532"}),
    frozenset({"LM324", "LM2902", "TL074", "TL084", "MC3403"}),
)

_REGULATOR_KIND_PREFIXES = (
    ("LM78", "fixed"),
    ("LM79", "fixed"),
    ("LM317", "adjustable"),
    ("LM338", "adjustable"),
    ("LM350", "adjustable"),
    ("TPS7A", "ldo"),
)

# STM32F103 -> STM32F1, STM32L432 -> STM32L4, STM8S003 -> STM8S
_MCU_LINE_PATTERN = re.compile(r"(STM32[A-Z]{1,2}\d|STM8[A-Z])")

# 74HC00 -> 00, 74LVC1G04 -> 1G04
_LOGIC_FUNCTION_PATTERN = re.compile(r"74[A-Z]*((?:\dG)?\d{2,4})$")


# =============================================================================
# HELPERS
# =============================================================================


def _packages_agree(a: PartProfile, b: PartProfile) -> bool:
    # A part with no package code in its MPN fits any footprint of its series
    if not a.package or not b.package:
        return True
    return packages_compatible(a.package, b.package)


def _same_series_score(a: PartProfile, b: PartProfile) -> float:
    if _packages_agree(a, b):
        return config.HIGH_FAMILY_SIMILARITY
    return config.MEDIUM_FAMILY_SIMILARITY


def _regulator_kind(series: str) -> str:
    for prefix, kind in _REGULATOR_KIND_PREFIXES:
        if series.startswith(prefix):
            return kind
    return ""


def _sensing_kind(component_type: ComponentType) -> ComponentType:
    """What a sensor measures: SENSOR_CURRENT_ALLEGRO -> SENSOR_CURRENT."""
    current = component_type
    while current.base_type is not current and current.base_type is not ComponentType.SENSOR:
        current = current.base_type
    return current


def _first_group(pattern: re.Pattern[str], series: str) -> str:
    match = pattern.match(series)
    return match.group(1) if match else ""


# =============================================================================
# SCORERS
# =============================================================================


def score_opamps(a: PartProfile, b: PartProfile) -> float:
    if a.series and a.series == b.series:
        return _same_series_score(a, b)
    for group in _OPAMP_FUNCTION_GROUPS:
        if a.series in group and b.series in group:
            return config.MEDIUM_FAMILY_SIMILARITY
    return config.LOW_FAMILY_SIMILARITY


def score_regulators(a: PartProfile, b: PartProfile) -> float:
    """Fixed-output parts only match at the same voltage, i.e. the same series."""
    if a.series and a.series == b.series:
        return _same_series_score(a, b)
    kind = _regulator_kind(a.series)
    if kind and kind != "fixed" and kind == _regulator_kind(b.series):
        return config.MEDIUM_FAMILY_SIMILARITY
    return config.LOW_FAMILY_SIMILARITY


def score_microcontrollers(a: PartProfile, b: PartProfile) -> float:
    if a.series and a.series == b.series:
        return _same_series_score(a, b)
    line = _first_group(_MCU_LINE_PATTERN, a.series)
    if line and line == _first_group(_MCU_LINE_PATTERN, b.series):
        return config.MEDIUM_FAMILY_SIMILARITY
    return config.LOW_FAMILY_SIMILARITY


def score_sensors(a: PartProfile, b: PartProfile) -> float:
    if a.series and a.series == b.series:
        return _same_series_score(a, b)
    if _sensing_kind(a.component_type) is _sensing_kind(b.component_type):
        return config.MEDIUM_FAMILY_SIMILARITY
    return config.LOW_FAMILY_SIMILARITY


def score_logic(a: PartProfile, b: PartProfile) -> float:
    """Same gate function across logic families (74HC00 vs 74LS00) is a medium match."""
    if a.series and a.series == b.series:
        return _same_series_score(a, b)
    function = _first_group(_LOGIC_FUNCTION_PATTERN, a.series)
    if function and function == _first_group(_LOGIC_FUNCTION_PATTERN, b.series):
        return config.MEDIUM_FAMILY_SIMILARITY
    return config.LOW_FAMILY_SIMILARITY


# Generic type -> scorer
FAMILY_SCORERS: dict[ComponentType, Scorer] = {
    ComponentType.OPAMP: score_opamps,
    ComponentType.VOLTAGE_REGULATOR: score_regulators,
    ComponentType.MICROCONTROLLER: score_microcontrollers,
    ComponentType.SENSOR: score_sensors,
    ComponentType.LOGIC_IC: score_logic,
}


def family_similarity(a: PartProfile, b: PartProfile) -> float | None:
    """Grade two decoded parts with the scorer for their shared generic type.

    Returns None when the generic types differ or no scorer covers them.
    """
    family = a.component_type.generic_type
    if family is not b.component_type.generic_type:
        return None
    scorer = FAMILY_SCORERS.get(family)
    if scorer is None:
        return None
    score = scorer(a, b)
    logger.debug(f"{family.name} similarity {a.mpn} vs {b.mpn}: {score}")
    return score
