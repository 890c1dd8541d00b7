"""STMicroelectronics STM32/STM8 microcontrollers.

Ordering code layout: STM32 F 103 C 8 T 6 (TR)
    family line   -> STM32F103 (series)
    pin count     -> C = 48 pins   (load-bearing)
    flash size    -> 8 = 64 KB     (load-bearing)
    package       -> T = LQFP      (packaging-only)
    temperature   -> 6 = -40..85C  (packaging-only)
"""

import re
from typing import Iterable

from ..component_types import ComponentType
from ..registry import normalize_mpn
from .base import ORDERING_SUFFIX, ManufacturerHandler

_ORDERING_CODE_PATTERN = re.compile(
    r"(?P<series>STM(?:32[A-Z]{1,2}\d[A-Z0-9]\d?|8[A-Z]\d{3}))(?P<pins>[A-Z])(?P<flash>[0-9A-Z])(?P<package>[A-Z])?(?P<temp>\d)?"
)

PIN_COUNT_CODES: dict[str, str] = {
    "D": "14", "Y": "20", "F": "20", "E": "25", "G": "28", "K": "32", "T": "36",
    "H": "40", "S": "44", "C": "48", "U": "63", "R": "64", "J": "72", "M": "80",
    "O": "90", "V": "100", "Q": "132", "Z": "144", "A": "169", "I": "176",
    "B": "208", "N": "216",
}

FLASH_SIZE_CODES: dict[str, str] = {
    "3": "8K", "4": "16K", "6": "32K", "8": "64K", "B": "128K", "Z": "192K",
    "C": "256K", "D": "384K", "E": "512K", "F": "768K", "G": "1M", "H": "1.5M",
    "I": "2M",
}

PACKAGE_LETTERS: dict[str, str] = {
    "T": "LQFP",
    "H": "BGA",
    "I": "UFBGA",
    "U": "UFQFPN",
    "Y": "WLCSP",
    "P": "TSSOP",
    "M": "SOIC",
}


class STMicroHandler(ManufacturerHandler):
    name = "STMicroelectronics"
    aliases = ("ST", "STM")
    SUPPORTED_TYPES = frozenset({
        ComponentType.MICROCONTROLLER_ST,
        ComponentType.MICROCONTROLLER,
        ComponentType.IC,
    })

    def patterns(self) -> Iterable[tuple[ComponentType, str]]:
        for pattern in (rf"STM32[A-Z]{{1,2}}\d[A-Z0-9]\d?{ORDERING_SUFFIX}", rf"STM8[A-Z]\d{{3}}{ORDERING_SUFFIX}"):
            yield ComponentType.MICROCONTROLLER_ST, pattern
            yield ComponentType.MICROCONTROLLER, pattern
            yield ComponentType.IC, pattern

    def _decode(self, text: str | None) -> re.Match[str] | None:
        return _ORDERING_CODE_PATTERN.match(normalize_mpn(text))

    def extract_series(self, text: str | None) -> str:
        """Family line, e.g. "STM32F103" for "STM32F103C8T6"."""
        match = self._decode(text)
        return match.group("series") if match else ""

    def extract_package_code(self, text: str | None) -> str:
        match = self._decode(text)
        if not match or not match.group("package"):
            return ""
        return PACKAGE_LETTERS.get(match.group("package"), "")

    def load_bearing_attributes(self, text: str | None) -> dict[str, str]:
        """Pin count and flash size. Unknown letters are kept raw so they still compare."""
        match = self._decode(text)
        if not match:
            return {}
        pins = match.group("pins")
        flash = match.group("flash")
        return {
            "pin_count": PIN_COUNT_CODES.get(pins, pins),
            "flash_size": FLASH_SIZE_CODES.get(flash, flash),
        }
