"""Ordering of Maven version strings.

Approximates Maven's ComparableVersion closely enough to sort the versions
listed in repository metadata:

* items are separated by '.', '-', '_' and by transitions between digits
  and letters ("1.0rc1" -> 1, 0, rc, 1);
* numeric items compare by value and rank above any qualifier;
* well-known qualifiers order alpha < beta < milestone < rc < snapshot <
  release < sp, unknown qualifiers come last and compare lexically;
* a missing item compares as 0 against a number and as a release against
  a qualifier, so "1" == "1.0" and "1-alpha" < "1" < "1-sp".
"""

from __future__ import annotations

import functools
import re
from typing import Iterable, Union

_ITEM_RE = re.compile(r"[0-9]+|[^0-9._-]+")

_ALIASES = {
    "a": "alpha",
    "b": "beta",
    "m": "milestone",
    "cr": "rc",
    "ga": "",
    "final": "",
    "release": "",
}

_QUALIFIER_RANKS = {
    "alpha": 0,
    "beta": 1,
    "milestone": 2,
    "rc": 3,
    "snapshot": 4,
    "": 5,
    "sp": 6,
}
_UNKNOWN_RANK = len(_QUALIFIER_RANKS)

Item = Union[int, str]


def parse_items(version: str) -> list[Item]:
    """Split a version into comparable items (ints and lowercase qualifiers)."""
    items: list[Item] = []
    for token in _ITEM_RE.findall(version.lower()):
        if token.isascii() and token.isdigit():
            items.append(int(token))
        else:
            items.append(_ALIASES.get(token, token))
    return items


def _qualifier_rank(q: str) -> tuple[int, str]:
    rank = _QUALIFIER_RANKS.get(q)
    if rank is None:
        return (_UNKNOWN_RANK, q)
    return (rank, "")


def _compare_items(a: Item | None, b: Item | None) -> int:
    if a is None:
        return 0 if b is None else -_compare_items(b, a)
    if isinstance(a, int):
        if b is None:
            b = 0
        if isinstance(b, int):
            return (a > b) - (a < b)
        return 1
    if isinstance(b, int):
        return -1
    ra = _qualifier_rank(a)
    rb = _qualifier_rank(b if b is not None else "")
    return (ra > rb) - (ra < rb)


def compare_versions(v1: str, v2: str) -> int:
    """Return -1, 0 or 1 as v1 is lower, equal or higher than v2."""
    i1 = parse_items(v1)
    i2 = parse_items(v2)
    for i in range(max(len(i1), len(i2))):
        a = i1[i] if i < len(i1) else None
        b = i2[i] if i < len(i2) else None
        diff = _compare_items(a, b)
        if diff:
            return diff
    return 0


version_key = functools.cmp_to_key(compare_versions)


def sort_descending(versions: Iterable[str]) -> list[str]:
    return sorted(versions, key=version_key, reverse=True)


def newer_than(baseline: str, versions: Iterable[str]) -> list[str]:
    """Return the distinct versions strictly newer than baseline, highest first."""
    newer = {v for v in versions if compare_versions(v, baseline) > 0}
    return sort_descending(sorted(newer))
