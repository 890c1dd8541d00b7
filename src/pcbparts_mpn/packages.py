"""Package suffix codes used in MPNs.

Maps the short ordering-code suffixes that manufacturers append to a part
number (N, D, PW, DBV, ...) to package names, and groups package names into
families for compatibility checks. Keys are uppercase.
"""

import re


# Suffix code -> package name
PACKAGE_CODES: dict[str, str] = {
    # DIP
    "N": "DIP",
    "P": "DIP",
    "PU": "PDIP",
    # Atmel-style codes
    "AU": "TQFP",
    "MU": "QFN",
    "SU": "SOIC",
    "XU": "TSSOP",
    "CU": "WLCSP",
    # SOIC
    "D": "SOIC",
    "M": "SOIC",
    "R": "SOIC",
    "DW": "SOIC-Wide",
    # TSSOP / MSOP
    "PW": "TSSOP",
    "DT": "TSSOP",
    "PT": "TSSOP",
    "DGK": "MSOP",
    # SOT
    "DBV": "SOT-23",
    "MP": "SOT-223",
    "U": "SOT-223",
    "DRL": "SOT-553",
    "DRV": "SON",
    # TO-220
    "T": "TO-220",
    "T3": "TO-220",
    "CT": "TO-220",
    "TA": "TO-220F",
    "FP": "TO-220F",
    # Other TO
    "K": "TO-3",
    "H": "TO-39",
    "KC": "TO-252",
    "KV": "TO-252",
    "TU": "TO-251",
    "F": "TO-251",
    # DPAK / D2PAK
    "S": "D2PAK",
    "L": "DPAK",
    # Diodes
    "RL": "DO-41",
    "G": "DO-35",
    # Generic
    "SMD": "SMD",
    "THT": "THT",
}

# Tape-and-reel / lead-free markers appended after the package code
_PACKAGING_TRAILERS = ("TR", "R", "T", "G4", "E4")

POWER_PACKAGES = frozenset({
    "TO-220", "TO-220F", "TO-252", "TO-247", "TO-263", "D2PAK", "DPAK", "SOT-223",
})

# Small-outline IC packages that share pinouts (op-amps, logic, etc.)
_PIN_COMPATIBLE_SMALL_IC = frozenset({"DIP", "PDIP", "SOIC", "TSSOP", "MSOP"})

_TRAILING_LETTERS_PATTERN = re.compile(r"\d([A-Z]+\d?)$")


def resolve_package_code(code: str | None) -> str:
    """Resolve a suffix code to a package name.

    Examples:
        "N" -> "DIP", "pw" -> "TSSOP", "XYZ" -> "XYZ", None -> ""
    """
    if not code:
        return ""
    upper = code.strip().upper()
    return PACKAGE_CODES.get(upper, upper)


def is_known_package_code(code: str | None) -> bool:
    """Check if a suffix code is in the package table."""
    if not code:
        return False
    return code.strip().upper() in PACKAGE_CODES


def packages_compatible(pkg1: str | None, pkg2: str | None) -> bool:
    """Check if two package names are interchangeable on a footprint family basis.

    Same package, two power packages, or two small-outline IC packages are
    considered compatible.
    """
    if not pkg1 or not pkg2:
        return False
    p1 = pkg1.strip().upper()
    p2 = pkg2.strip().upper()
    if p1 == p2:
        return True
    if p1 in POWER_PACKAGES and p2 in POWER_PACKAGES:
        return True
    return p1 in _PIN_COMPATIBLE_SMALL_IC and p2 in _PIN_COMPATIBLE_SMALL_IC


# =============================================================================
# SUFFIX HELPERS
# =============================================================================


def suffix_after_hyphen(mpn: str) -> str:
    """Text after the last hyphen: "ATMEGA328P-PU" -> "PU"."""
    index = mpn.rfind("-")
    if 0 < index < len(mpn) - 1:
        return mpn[index + 1:]
    return ""


def trailing_suffix(mpn: str) -> str:
    """Letters after the last digit: "LM7805CT" -> "CT", "LM358N" -> "N"."""
    match = _TRAILING_LETTERS_PATTERN.search(mpn)
    return match.group(1) if match else ""


def strip_packaging_trailer(code: str) -> str:
    """Drop a tape-and-reel / lead-free marker: "DR" -> "D", "PWR" -> "PW".

    Codes that are themselves in the table are returned unchanged.
    """
    if code in PACKAGE_CODES:
        return code
    for trailer in _PACKAGING_TRAILERS:
        if code.endswith(trailer) and code[:-len(trailer)] in PACKAGE_CODES:
            return code[:-len(trailer)]
    return code


def package_from_suffix(mpn: str | None) -> str:
    """Resolve the package name from an MPN's suffix, or "" if unknown.

    Tries the hyphen-separated suffix first, then the trailing letters after
    the last digit.

    Examples:
        "ATMEGA328P-PU" -> "PDIP", "LM358DR" -> "SOIC", "LM358" -> ""
    """
    if not mpn:
        return ""
    upper = mpn.strip().upper()
    for suffix in (suffix_after_hyphen(upper), trailing_suffix(upper)):
        if not suffix:
            continue
        code = strip_packaging_trailer(suffix)
        if is_known_package_code(code):
            return resolve_package_code(code)
    return ""
