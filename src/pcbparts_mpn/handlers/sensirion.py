"""Sensirion SHT humidity/temperature and STS temperature sensors.

Ordering codes: SHT31-DIS-B, SHT31-ARP-B, SHT40-AD1B-R2. The first option
field selects the interface (ARP analog, DIS/xD1 digital I2C). Accuracy
letters and reel codes are packaging-only.
"""

import re
from typing import Iterable

from ..component_types import ComponentType
from ..registry import normalize_mpn
from ..resolver import GenerationUpgrade
from .base import ORDERING_SUFFIX, ManufacturerHandler

_HUMIDITY_PATTERN = rf"SHT[348]\d{ORDERING_SUFFIX}"
_TEMPERATURE_PATTERN = rf"STS[34]\d{ORDERING_SUFFIX}"

_SERIES_PATTERN = re.compile(r"(?:SHT|STS)\d{2}")
_OPTION_PATTERN = re.compile(r"(?:SHT|STS)\d{2}-(?P<option>ARP|DIS|[A-D]D1)")

INTERFACE_CODES: dict[str, str] = {
    "ARP": "analog",
    "DIS": "digital",
    "AD1": "digital",
    "BD1": "digital",
    "CD1": "digital",
    "DD1": "digital",
}

SENSIRION_PACKAGES: dict[str, str] = {
    "ARP": "DFN-8",
    "DIS": "DFN-8",
    "AD1": "DFN-4",
    "BD1": "DFN-4",
    "CD1": "DFN-4",
    "DD1": "DFN-4",
}


class SensirionHandler(ManufacturerHandler):
    name = "Sensirion"
    aliases = ("Sensirion AG",)
    SUPPORTED_TYPES = frozenset({
        ComponentType.SENSOR_HUMIDITY_SENSIRION,
        ComponentType.SENSOR_HUMIDITY,
        ComponentType.SENSOR_TEMPERATURE,
        ComponentType.SENSOR,
    })
    GENERATION_UPGRADES = (
        GenerationUpgrade("SHT4x replaces SHT3x", "SHT3", "SHT4"),
        GenerationUpgrade("STS4x replaces STS3x", "STS3", "STS4"),
    )

    def patterns(self) -> Iterable[tuple[ComponentType, str]]:
        yield ComponentType.SENSOR_HUMIDITY_SENSIRION, _HUMIDITY_PATTERN
        yield ComponentType.SENSOR_HUMIDITY, _HUMIDITY_PATTERN
        yield ComponentType.SENSOR_TEMPERATURE, _HUMIDITY_PATTERN
        yield ComponentType.SENSOR, _HUMIDITY_PATTERN
        yield ComponentType.SENSOR_TEMPERATURE, _TEMPERATURE_PATTERN
        yield ComponentType.SENSOR, _TEMPERATURE_PATTERN

    def extract_series(self, text: str | None) -> str:
        """Examples: "SHT31-DIS-B" -> "SHT31", "SHT40-AD1B-R2" -> "SHT40"."""
        match = _SERIES_PATTERN.match(normalize_mpn(text))
        return match.group(0) if match else ""

    def _option(self, text: str | None) -> str:
        match = _OPTION_PATTERN.match(normalize_mpn(text))
        return match.group("option") if match else ""

    def extract_package_code(self, text: str | None) -> str:
        return SENSIRION_PACKAGES.get(self._option(text), "")

    def load_bearing_attributes(self, text: str | None) -> dict[str, str]:
        option = self._option(text)
        if not option:
            return {}
        return {"interface": INTERFACE_CODES[option]}
