"""Manufacturer aliases for handler lookup.

Maps abbreviations and alternate names to the canonical manufacturer names
used by the handlers. Keys are lowercase for case-insensitive lookup.

NOTE: Only include TRUE aliases here (abbreviations, alternate names).
Canonical names resolve case-insensitively through KNOWN_MANUFACTURERS.
"""

import re

# Canonical names (handler manufacturers first)
KNOWN_MANUFACTURERS: set[str] = {
    # Handled families
    "Texas Instruments", "STMicroelectronics", "Allegro MicroSystems",
    "Melexis", "Sensirion",
    # Other semiconductor makers seen in MPN lists
    "NXP Semiconductors", "Microchip Technology", "Analog Devices", "onsemi",
    "Infineon Technologies", "Renesas Electronics", "ROHM Semiconductor",
    "Vishay Intertechnology", "Diodes Incorporated", "Nexperia", "TOSHIBA",
    "Maxim Integrated", "Bosch Sensortec", "TDK InvenSense",
}

MANUFACTURER_ALIASES: dict[str, str] = {
    # Texas Instruments
    "ti": "Texas Instruments",
    "texas": "Texas Instruments",
    "texas instruments inc": "Texas Instruments",
    "national semiconductor": "Texas Instruments",
    "burr-brown": "Texas Instruments",
    # STMicroelectronics
    "st": "STMicroelectronics",
    "stm": "STMicroelectronics",
    "st micro": "STMicroelectronics",
    "st microelectronics": "STMicroelectronics",
    # Allegro
    "allegro": "Allegro MicroSystems",
    "allegro microsystems, llc": "Allegro MicroSystems",
    "allegro micro": "Allegro MicroSystems",
    # Melexis
    "melexis technologies": "Melexis",
    "melexis technologies nv": "Melexis",
    "mlx": "Melexis",
    # Sensirion
    "sensirion ag": "Sensirion",
    # Others
    "nxp": "NXP Semiconductors",
    "microchip": "Microchip Technology",
    "atmel": "Microchip Technology",
    "adi": "Analog Devices",
    "linear technology": "Analog Devices",
    "maxim": "Maxim Integrated",
    "on semiconductor": "onsemi",
    "on semi": "onsemi",
    "fairchild": "onsemi",
    "infineon": "Infineon Technologies",
    "international rectifier": "Infineon Technologies",
    "renesas": "Renesas Electronics",
    "rohm": "ROHM Semiconductor",
    "vishay": "Vishay Intertechnology",
    "diodes": "Diodes Incorporated",
    "diodes inc": "Diodes Incorporated",
    "bosch": "Bosch Sensortec",
    "invensense": "TDK InvenSense",
}


def _normalize_manufacturer_name(name: str) -> str:
    """Lowercase, replace punctuation with spaces, collapse whitespace."""
    normalized = re.sub(r'[.,\-\(\)&]', ' ', name.lower())
    return re.sub(r'\s+', ' ', normalized).strip()


_MANUFACTURER_EXACT_NAMES: dict[str, str] = {name.lower(): name for name in KNOWN_MANUFACTURERS}

_MANUFACTURER_ALIASES_NORMALIZED: dict[str, str] = {
    _normalize_manufacturer_name(k): v for k, v in MANUFACTURER_ALIASES.items()
}
_MANUFACTURER_EXACT_NORMALIZED: dict[str, str] = {
    _normalize_manufacturer_name(name): name for name in KNOWN_MANUFACTURERS
}


def resolve_manufacturer(name: str | None) -> str:
    """Resolve a manufacturer alias to its canonical name.

    Lookup order:
    1. Aliases (case-insensitive)
    2. Canonical names (case-insensitive)
    3. Aliases, then canonical names, with punctuation normalized
    4. The input, stripped, unchanged

    Examples:
        "TI" -> "Texas Instruments", "st-micro" -> "STMicroelectronics",
        "Acme" -> "Acme", None -> ""
    """
    if not name or not name.strip():
        return ""
    name = name.strip()
    name_lower = name.lower()
    if name_lower in MANUFACTURER_ALIASES:
        return MANUFACTURER_ALIASES[name_lower]
    if name_lower in _MANUFACTURER_EXACT_NAMES:
        return _MANUFACTURER_EXACT_NAMES[name_lower]
    name_normalized = _normalize_manufacturer_name(name)
    if name_normalized in _MANUFACTURER_ALIASES_NORMALIZED:
        return _MANUFACTURER_ALIASES_NORMALIZED[name_normalized]
    if name_normalized in _MANUFACTURER_EXACT_NORMALIZED:
        return _MANUFACTURER_EXACT_NORMALIZED[name_normalized]
    return name
