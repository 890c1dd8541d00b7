"""Texas Instruments: op-amps, linear regulators and 74-series logic."""

import re
from typing import Iterable

from ..component_types import ComponentType
from ..registry import normalize_mpn
from .base import ORDERING_SUFFIX, ManufacturerHandler

_OPAMP_PATTERNS = (
    rf"LM358{ORDERING_SUFFIX}",
    rf"LM324{ORDERING_SUFFIX}",
    rf"LM2904{ORDERING_SUFFIX}",
    rf"TL07[1-4]{ORDERING_SUFFIX}",
)

_REGULATOR_PATTERNS = (
    rf"LM78\d{{2}}{ORDERING_SUFFIX}",
    rf"LM317{ORDERING_SUFFIX}",
    rf"TPS7A\d{{2,4}}{ORDERING_SUFFIX}",
)

_LOGIC_PATTERNS = (
    rf"SN74[A-Z]{{0,4}}(?:\dG)?\d{{2,4}}{ORDERING_SUFFIX}",
)

# SN74HC00N -> 74HC00 (the SN prefix is TI's house marking, not part of the function)
_LOGIC_SERIES_PATTERN = re.compile(r"SN(74[A-Z]{0,4}(?:\dG)?\d{2,4})")
_TPS7A_SERIES_PATTERN = re.compile(r"TPS7A\d{2,4}")


class TexasInstrumentsHandler(ManufacturerHandler):
    name = "Texas Instruments"
    aliases = ("TI", "National Semiconductor")
    SUPPORTED_TYPES = frozenset({
        ComponentType.OPAMP_TI,
        ComponentType.OPAMP,
        ComponentType.VOLTAGE_REGULATOR_LINEAR_TI,
        ComponentType.VOLTAGE_REGULATOR,
        ComponentType.LOGIC_IC_TI,
        ComponentType.LOGIC_IC,
        ComponentType.IC,
    })

    def patterns(self) -> Iterable[tuple[ComponentType, str]]:
        for pattern in _OPAMP_PATTERNS:
            yield ComponentType.OPAMP_TI, pattern
            yield ComponentType.OPAMP, pattern
            yield ComponentType.IC, pattern
        for pattern in _REGULATOR_PATTERNS:
            yield ComponentType.VOLTAGE_REGULATOR_LINEAR_TI, pattern
            yield ComponentType.VOLTAGE_REGULATOR, pattern
            yield ComponentType.IC, pattern
        for pattern in _LOGIC_PATTERNS:
            yield ComponentType.LOGIC_IC_TI, pattern
            yield ComponentType.LOGIC_IC, pattern
            yield ComponentType.IC, pattern

    def extract_series(self, text: str | None) -> str:
        """Examples: "SN74HC00N" -> "74HC00", "TPS7A4700RGWR" -> "TPS7A4700", "LM7805CT" -> "LM7805"."""
        mpn = normalize_mpn(text)
        if not mpn:
            return ""
        match = _LOGIC_SERIES_PATTERN.match(mpn)
        if match:
            return match.group(1)
        match = _TPS7A_SERIES_PATTERN.match(mpn)
        if match:
            return match.group(0)
        return super().extract_series(mpn)
