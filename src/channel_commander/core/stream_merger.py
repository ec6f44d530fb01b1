"""Merge manifest streams keyed by component identity."""

from __future__ import annotations

from typing import Iterable

from channel_commander.models import Identity
from channel_commander.models.stream import Stream, identity_key


def _index_by_identity(streams: Iterable[Stream]) -> dict[Identity, Stream]:
    """Map identity -> stream, keeping the first stream seen for each identity."""
    indexed: dict[Identity, Stream] = {}
    for stream in streams:
        indexed.setdefault(identity_key(stream), stream)
    return indexed


def merge_streams(first: Iterable[Stream], second: Iterable[Stream]) -> list[Stream]:
    """Merge two stream collections, the second one winning on conflicts.

    Streams from ``first`` keep their position even when overridden; streams
    only present in ``second`` are appended in their original order.
    """
    merged = _index_by_identity(first)
    merged.update(_index_by_identity(second))
    return list(merged.values())
