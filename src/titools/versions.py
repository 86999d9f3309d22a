"""
Dotted version parsing and ordering.

Not semver: suffixes are normalised away so Titanium SDK strings such as
"13.1.0.GA" and release tags such as "2.1.0" order sensibly.
"""

import re

_SEPARATORS = re.compile(r"[.-]")
_LEADING_DIGITS = re.compile(r"\d+")


def _to_int(piece: str) -> int:
    """Leading digits of piece as an int ("1beta" -> 1), or 0 if there are none."""
    match = _LEADING_DIGITS.match(piece)
    return int(match.group()) if match else 0


def parse_version(version: str) -> list:
    """Return the integer parts of a version string ("13.1.0.GA" -> [13, 1, 0])."""
    normalised = version.replace(".GA", "").replace(".RC", "-")
    return [_to_int(piece) for piece in _SEPARATORS.split(normalised)]


def compare_versions(v1: str, v2: str) -> int:
    """Return -1, 0 or 1 as v1 is lower than, equal to or higher than v2."""
    parts1 = parse_version(v1)
    parts2 = parse_version(v2)
    width = max(len(parts1), len(parts2))
    parts1 += [0] * (width - len(parts1))
    parts2 += [0] * (width - len(parts2))

    for p1, p2 in zip(parts1, parts2):
        if p1 < p2:
            return -1
        if p1 > p2:
            return 1
    return 0
