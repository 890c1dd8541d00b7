"""Allegro MicroSystems: ACS current sensors, A1xxx Hall sensors, A3/A4/A5xxx motor drivers.

Ordering codes put a temperature-range letter right after the series, then a
two-letter package code, then tape-and-reel and option fields:

    ACS712 E LC TR -05B -T
    series temp pkg reel range lead-free
"""

import re
from typing import Iterable

from ..component_types import ComponentType
from ..registry import normalize_mpn
from .base import ORDERING_SUFFIX, ManufacturerHandler

_CURRENT_SENSOR_PATTERNS = (
    rf"ACS7\d{{2}}{ORDERING_SUFFIX}",
    rf"ACS37\d{{3}}{ORDERING_SUFFIX}",
)
_HALL_SENSOR_PATTERN = rf"A1\d{{3}}{ORDERING_SUFFIX}"
_MOTOR_DRIVER_PATTERN = rf"A[345]\d{{3}}{ORDERING_SUFFIX}"

_SERIES_PATTERN = re.compile(r"ACS37\d{3}|ACS7\d{2}|A[1345]\d{3}")

# Current range / sensitivity option: "-05B", "-20A", "-10AB", "-010B5"
_CURRENT_RANGE_PATTERN = re.compile(r"-(\d{2,3}[A-Z]{1,2}\d?)(?=-|$)")

# Temperature letter, then the package code
_TEMPERATURE_LETTERS = frozenset("ELKS")

ALLEGRO_PACKAGES: dict[str, str] = {
    "LC": "SOIC-8",
    "MA": "SOIC-16W",
    "LH": "SOT-23",
    "UA": "SIP-3",
    "ET": "QFN",
    "EG": "QFN",
    "LB": "SOIC-24",
    "LP": "TSSOP",
}


class AllegroHandler(ManufacturerHandler):
    name = "Allegro MicroSystems"
    aliases = ("Allegro",)
    SUPPORTED_TYPES = frozenset({
        ComponentType.SENSOR_CURRENT_ALLEGRO,
        ComponentType.SENSOR_CURRENT,
        ComponentType.HALL_SENSOR_ALLEGRO,
        ComponentType.HALL_SENSOR,
        ComponentType.MOTOR_DRIVER_ALLEGRO,
        ComponentType.MOTOR_DRIVER,
        ComponentType.SENSOR,
        ComponentType.IC,
    })

    def patterns(self) -> Iterable[tuple[ComponentType, str]]:
        for pattern in _CURRENT_SENSOR_PATTERNS:
            yield ComponentType.SENSOR_CURRENT_ALLEGRO, pattern
            yield ComponentType.SENSOR_CURRENT, pattern
            yield ComponentType.SENSOR, pattern
            yield ComponentType.IC, pattern
        yield ComponentType.HALL_SENSOR_ALLEGRO, _HALL_SENSOR_PATTERN
        yield ComponentType.HALL_SENSOR, _HALL_SENSOR_PATTERN
        yield ComponentType.SENSOR, _HALL_SENSOR_PATTERN
        yield ComponentType.IC, _HALL_SENSOR_PATTERN
        yield ComponentType.MOTOR_DRIVER_ALLEGRO, _MOTOR_DRIVER_PATTERN
        yield ComponentType.MOTOR_DRIVER, _MOTOR_DRIVER_PATTERN
        yield ComponentType.IC, _MOTOR_DRIVER_PATTERN

    def extract_series(self, text: str | None) -> str:
        """Examples: "ACS712ELCTR-05B-T" -> "ACS712", "A4988SETTR-T" -> "A4988"."""
        match = _SERIES_PATTERN.match(normalize_mpn(text))
        return match.group(0) if match else ""

    def extract_package_code(self, text: str | None) -> str:
        mpn = normalize_mpn(text)
        series = self.extract_series(mpn)
        if not series:
            return ""
        rest = mpn[len(series):]
        if rest[:1] in _TEMPERATURE_LETTERS:
            return ALLEGRO_PACKAGES.get(rest[1:3], "")
        return ""

    def load_bearing_attributes(self, text: str | None) -> dict[str, str]:
        """Current range for ACS sensors. Hall and motor-driver variants are fully named by the series."""
        mpn = normalize_mpn(text)
        if not mpn.startswith("ACS"):
            return {}
        match = _CURRENT_RANGE_PATTERN.search(mpn)
        return {"current_range": match.group(1)} if match else {}
