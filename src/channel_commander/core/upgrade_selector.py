"""Select the upgrade ladder for one stream from its available versions."""

from __future__ import annotations

import functools
import re
from typing import Iterable, NamedTuple, Sequence

from channel_commander.models.channel import Blocklist
from channel_commander.utils.version_utils import first_qualifier_segment, numeric_prefix, tokenize


class _Family(NamedTuple):
    """The representative of the version family currently being walked."""

    numeric: tuple[str, ...]
    qualifier: str
    length: int

    @property
    def last_index(self) -> int:
        return len(self.numeric) - 1

    @classmethod
    def of(cls, version: str) -> _Family:
        segments = tokenize(version)
        return cls(tuple(numeric_prefix(segments)), first_qualifier_segment(segments), len(segments))


class _LadderState(NamedTuple):
    family: _Family
    ladder: tuple[str, ...]


def _starts_new_family(current: _Family, candidate: _Family) -> bool:
    # All but the last numeric component of the representative must match.
    for i in range(current.last_index):
        if i >= len(candidate.numeric) or candidate.numeric[i] != current.numeric[i]:
            return True
    return candidate.qualifier != current.qualifier or candidate.length != current.length


def _step(state: _LadderState, version: str) -> _LadderState:
    family = _Family.of(version)
    if _starts_new_family(state.family, family):
        return _LadderState(family, state.ladder + (version,))
    return state


def filter_versions(
    versions: Iterable[str],
    include: re.Pattern[str] | None = None,
    exclude: re.Pattern[str] | None = None,
    blocked: frozenset[str] | set[str] = frozenset(),
) -> list[str]:
    """Apply the include/exclude patterns and the blocked versions, keeping order."""
    return [
        v for v in versions
        if (include is None or include.search(v))
        and (exclude is None or not exclude.search(v))
        and v not in blocked
    ]


def select_upgrade_ladder(
    versions: Sequence[str],
    include: re.Pattern[str] | None = None,
    exclude: re.Pattern[str] | None = None,
    blocked: frozenset[str] | set[str] = frozenset(),
) -> list[str]:
    """Return the highest version of each version family, lowest first.

    ``versions`` has to be sorted from highest to lowest. The highest version
    that survives filtering is always part of the result. Walking down from
    it, a version is kept whenever it leaves the family of the last kept
    version: a different qualifier, a different number of segments, or a
    difference anywhere before the last numeric segment. Micro releases
    therefore collapse into their newest member while every minor line
    (and every qualified build line) keeps one entry.
    """
    candidates = filter_versions(versions, include, exclude, blocked)
    if not candidates:
        return []

    highest = candidates[0]
    initial = _LadderState(_Family.of(highest), (highest,))
    final = functools.reduce(_step, candidates[1:], initial)
    return list(reversed(final.ladder))


def blocked_versions(blocklists: Iterable[Blocklist] | None, group_id: str, artifact_id: str) -> frozenset[str]:
    """Union of the versions every blocklist forbids for the given component."""
    blocked: set[str] = set()
    for blocklist in blocklists or ():
        blocked.update(blocklist.versions_for(group_id, artifact_id))
    return frozenset(blocked)
