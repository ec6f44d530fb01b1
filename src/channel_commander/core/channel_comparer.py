"""Compare the streams of two channels."""

from __future__ import annotations

import logging
from typing import Iterable

from channel_commander.models.stream import Stream, identity_key
from channel_commander.models.upgrade import StreamDiff

logger = logging.getLogger(__name__)


def compare_streams(base: Iterable[Stream], target: Iterable[Stream]) -> list[StreamDiff]:
    """Return base streams whose version differs in the target.

    Only identities present in both collections are compared.
    """
    target_versions: dict = {}
    for stream in target:
        target_versions.setdefault(identity_key(stream), stream.version)

    diffs: list[StreamDiff] = []
    for stream in base:
        target_version = target_versions.get(identity_key(stream))
        if target_version is None or target_version == stream.version:
            continue
        logger.info("%s -> %s", stream.gav, target_version)
        diffs.append(StreamDiff(stream=stream, target_version=target_version))
    return diffs
