"""Find possible upgrades for the streams of a channel."""

from __future__ import annotations

import logging
import re
from typing import Callable, Iterable

from channel_commander.core.upgrade_selector import blocked_versions, select_upgrade_ladder
from channel_commander.models import Identity
from channel_commander.models.channel import Blocklist
from channel_commander.models.stream import Stream, identity_key, triple_key
from channel_commander.models.upgrade import StreamUpgrade, UpgradeResult
from channel_commander.utils.maven_version import newer_than
from channel_commander.utils.version_utils import find_micro_upgrade

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int, str], None]
# identity -> {repository id: [versions...]}
VersionSource = Callable[[Identity], dict[str, list[str]]]


def find_upgrades(
    streams: Iterable[Stream],
    versions_source: VersionSource,
    include: re.Pattern[str] | None = None,
    exclude: re.Pattern[str] | None = None,
    blocklists: list[Blocklist] | None = None,
    on_progress: ProgressCallback | None = None,
) -> UpgradeResult:
    """Look up newer versions of every stream and collect the upgrade ladders.

    ``diff_streams`` holds the streams that have a micro upgrade, at that
    version; ``all_streams`` holds every stream, moved to its micro upgrade
    where one exists.
    """
    result = UpgradeResult()
    streams = list(streams)
    total = len(streams)

    all_streams: dict[Identity, Stream] = {}
    diff_streams: dict[tuple[str, str, str], Stream] = {}

    for i, stream in enumerate(streams, 1):
        all_streams.setdefault(identity_key(stream), stream)

        if not stream.has_concrete_version:
            logger.debug("Skipping stream without a concrete version: %s", stream.gav)
            continue

        if on_progress:
            on_progress(i, total, stream.gav)

        repo_versions = versions_source(stream.identity)
        origins = _record_origins(repo_versions)
        if origins:
            result.origins[stream.identity] = origins

        available = newer_than(stream.version, origins.keys())
        blocked = blocked_versions(blocklists, stream.group_id, stream.artifact_id)
        ladder = select_upgrade_ladder(available, include, exclude, blocked)
        if not ladder:
            continue

        logger.info("Found upgrades: %s -> %s", stream.gav, ", ".join(ladder))
        micro = find_micro_upgrade(stream.version, ladder)
        result.upgrades.append(StreamUpgrade(stream=stream, ladder=ladder, micro=micro))

        if micro is not None:
            upgraded = stream.with_version(micro)
            diff_streams.setdefault(triple_key(upgraded), upgraded)
            all_streams[identity_key(stream)] = upgraded

    result.diff_streams = list(diff_streams.values())
    result.all_streams = list(all_streams.values())
    return result


def _record_origins(repo_versions: dict[str, list[str]]) -> dict[str, str]:
    """Map each version to the first repository that offered it."""
    origins: dict[str, str] = {}
    for repo_id, versions in repo_versions.items():
        for v in versions:
            origins.setdefault(v, repo_id)
    return origins
