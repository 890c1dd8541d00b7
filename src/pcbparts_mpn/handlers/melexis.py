"""Melexis: MLX906xx IR thermometers and MLX902xx/MLX903xx Hall sensors.

Ordering codes: MLX90614 E SF - B A A - 000 - TU
    series, temperature letter, package, option code (supply, zones, optics),
    configuration code, packing (TU tube, RE reel).
"""

import re
from typing import Iterable

from ..component_types import ComponentType
from ..registry import normalize_mpn
from .base import ORDERING_SUFFIX, ManufacturerHandler

_IR_THERMOMETER_PATTERN = rf"MLX906(?:14|15|32|40|41){ORDERING_SUFFIX}"
_HALL_SENSOR_PATTERN = rf"MLX90(?:29|36|37|39)\d{ORDERING_SUFFIX}"
_CURRENT_SENSOR_PATTERN = rf"MLX912(?:0[4-8]|1[05-9]|2[01]){ORDERING_SUFFIX}"

_SERIES_PATTERN = re.compile(r"MLX\d{5}")

# MLX90614ESF-BAA-000-TU: temperature letter + package, option code, config code
_ORDERING_CODE_PATTERN = re.compile(
    r"MLX\d{5}(?P<temp>[A-Z])(?P<package>[A-Z]{2})(?:-(?P<option>[A-Z0-9]{3})(?:-(?P<config>\d{3}))?)?"
)

SUPPLY_CODES: dict[str, str] = {"A": "5V", "B": "3V", "D": "3V-medical"}

# Third letter of the IR option code
FIELD_OF_VIEW_CODES: dict[str, str] = {
    "A": "90", "B": "70", "C": "35", "D": "50", "F": "10", "H": "12", "I": "5", "K": "13",
}

MELEXIS_PACKAGES: dict[str, str] = {
    "SF": "TO-39",
    "LD": "DFN-6",
    "LW": "QFN-16",
    "DC": "SOIC-8",
    "GO": "SOIC-8",
    "VA": "TO-92",
    "UA": "TO-92",
}


class MelexisHandler(ManufacturerHandler):
    name = "Melexis"
    aliases = ("MLX", "Melexis Technologies")
    SUPPORTED_TYPES = frozenset({
        ComponentType.SENSOR_TEMPERATURE_MELEXIS,
        ComponentType.SENSOR_TEMPERATURE,
        ComponentType.HALL_SENSOR_MELEXIS,
        ComponentType.HALL_SENSOR,
        ComponentType.SENSOR_CURRENT,
        ComponentType.SENSOR,
    })

    def patterns(self) -> Iterable[tuple[ComponentType, str]]:
        yield ComponentType.SENSOR_TEMPERATURE_MELEXIS, _IR_THERMOMETER_PATTERN
        yield ComponentType.SENSOR_TEMPERATURE, _IR_THERMOMETER_PATTERN
        yield ComponentType.SENSOR, _IR_THERMOMETER_PATTERN
        yield ComponentType.HALL_SENSOR_MELEXIS, _HALL_SENSOR_PATTERN
        yield ComponentType.HALL_SENSOR, _HALL_SENSOR_PATTERN
        yield ComponentType.SENSOR, _HALL_SENSOR_PATTERN
        yield ComponentType.SENSOR_CURRENT, _CURRENT_SENSOR_PATTERN
        yield ComponentType.SENSOR, _CURRENT_SENSOR_PATTERN

    def extract_series(self, text: str | None) -> str:
        match = _SERIES_PATTERN.match(normalize_mpn(text))
        return match.group(0) if match else ""

    def extract_package_code(self, text: str | None) -> str:
        match = _ORDERING_CODE_PATTERN.match(normalize_mpn(text))
        if not match:
            return ""
        return MELEXIS_PACKAGES.get(match.group("package"), "")

    def load_bearing_attributes(self, text: str | None) -> dict[str, str]:
        """IR thermometers: supply and field of view. Hall sensors: configuration code.

        The option code is absent from bare orderable stems ("MLX90614ESF"),
        which leaves the attributes missing and vetoes replacement.
        """
        mpn = normalize_mpn(text)
        match = _ORDERING_CODE_PATTERN.match(mpn)
        if not match:
            return {}
        attrs: dict[str, str] = {}
        option = match.group("option")
        if mpn.startswith("MLX906") and option:
            attrs["supply"] = SUPPLY_CODES.get(option[0], option[0])
            attrs["field_of_view"] = FIELD_OF_VIEW_CODES.get(option[2], option[2])
        elif mpn.startswith(("MLX902", "MLX903")) and match.group("config"):
            attrs["configuration"] = match.group("config")
        return attrs
