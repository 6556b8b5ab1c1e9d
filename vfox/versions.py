"""Version constants and dotted version comparison."""

from __future__ import annotations

import re

RUNTIME_VERSION = "0.2.4"

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _part_value(part: str) -> int:
    # Parts that are not plain integers count as zero.
    if _INTEGER.fullmatch(part):
        return int(part)
    return 0


def compare_version(v1: str, v2: str) -> int:
    """Compare two dotted versions; return 1, -1 or 0.

    Missing trailing parts count as zero.
    """
    parts1 = v1.split(".")
    parts2 = v2.split(".")
    for i in range(max(len(parts1), len(parts2))):
        a = _part_value(parts1[i]) if i < len(parts1) else 0
        b = _part_value(parts2[i]) if i < len(parts2) else 0
        if a != b:
            return 1 if a > b else -1
    return 0