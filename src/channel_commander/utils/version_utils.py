"""Version tokenization and minor-stream utilities."""

from __future__ import annotations

import re
from typing import Iterable, Sequence

from channel_commander.models import UpgradeType

_DELIMITERS = re.compile(r"[-._]")


def tokenize(version: str) -> list[str]:
    """Split a version string into segments on '-', '.' and '_'.

    Empty segments produced by consecutive or trailing delimiters are kept.
    """
    return _DELIMITERS.split(version)


def is_numeric(segment: str) -> bool:
    """True for a non-empty run of ASCII digits (no sign, any length)."""
    return segment.isascii() and segment.isdigit()


def numeric_prefix(segments: Sequence[str]) -> list[str]:
    """Return the leading run of numeric segments."""
    for i, segment in enumerate(segments):
        if not is_numeric(segment):
            return list(segments[:i])
    return list(segments)


def first_qualifier_segment(version: str | Sequence[str]) -> str:
    """Return the first non-numeric segment, or "" for a fully numeric version."""
    segments = tokenize(version) if isinstance(version, str) else version
    for segment in segments:
        if not is_numeric(segment):
            return segment
    return ""


def qualifier(version: str) -> str:
    """Return everything after the numeric prefix, delimiters preserved.

    "1.2.3.redhat-00001" -> "redhat-00001", "1.2.3" -> "".
    """
    remainder = version
    while True:
        parts = _DELIMITERS.split(remainder, maxsplit=1)
        if not is_numeric(parts[0]):
            return remainder
        if len(parts) == 1:
            return ""
        remainder = parts[1]


def is_the_same_minor(v1: str, v2: str) -> bool:
    """True if both versions share their first two segments.

    "1.2.3" and "1.2.4" -> True, "1.2.3" and "1.3.0" -> False.
    """
    s1 = tokenize(v1)
    s2 = tokenize(v2)
    if len(s1) < 2 or len(s2) < 2:
        return False
    return s1[0] == s2[0] and s1[1] == s2[1]


def find_micro_upgrade(base_version: str, upgrade_versions: Iterable[str]) -> str | None:
    """Return the highest version in the same minor stream as base_version.

    upgrade_versions must be ordered from lowest to highest.
    """
    result = None
    for version in upgrade_versions:
        if is_the_same_minor(base_version, version):
            result = version
    return result


def classify_upgrade(current: str, candidate: str) -> UpgradeType:
    """Classify the step from current to candidate by shared leading segments."""
    if is_the_same_minor(current, candidate):
        return UpgradeType.MICRO
    if tokenize(current)[0] == tokenize(candidate)[0]:
        return UpgradeType.MINOR
    return UpgradeType.MAJOR
