"""Read and write channel, manifest and blocklist YAML documents."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable

import yaml

from channel_commander.config.settings import settings
from channel_commander.models import Identity, NoStreamStrategy
from channel_commander.models.channel import Blocklist, Channel, Coordinate, Manifest, Repository
from channel_commander.models.stream import Stream

logger = logging.getLogger(__name__)


class DocumentError(ValueError):
    """Raised when a YAML document does not have the expected structure."""


def _load_mapping(text: str, kind: str) -> dict[str, Any]:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise DocumentError(f"Invalid {kind} YAML: {e}") from e
    if not isinstance(data, dict):
        raise DocumentError(f"A {kind} document has to be a YAML mapping")
    return data


def _list_of_mappings(data: dict[str, Any], key: str, kind: str) -> list[dict]:
    items = data.get(key) or []
    if not isinstance(items, list) or not all(isinstance(i, dict) for i in items):
        raise DocumentError(f"'{key}' in a {kind} document has to be a list of mappings")
    return items


def parse_manifest(text: str) -> Manifest:
    """Parse a manifest document into a Manifest."""
    data = _load_mapping(text, "manifest")
    streams = []
    for entry in _list_of_mappings(data, "streams", "manifest"):
        if "groupId" not in entry or "artifactId" not in entry:
            raise DocumentError(f"Manifest stream is missing groupId or artifactId: {entry}")
        streams.append(Stream.from_dict(entry))
    return Manifest(
        name=str(data.get("name") or ""),
        id=str(data.get("id") or ""),
        description=str(data.get("description") or ""),
        streams=streams,
    )


def parse_channel(text: str) -> Channel:
    """Parse a channel document into a Channel."""
    data = _load_mapping(text, "channel")
    repositories = [Repository.from_dict(r) for r in _list_of_mappings(data, "repositories", "channel")]
    strategy = data.get("resolve-if-no-stream")
    return Channel(
        name=str(data.get("name") or ""),
        description=str(data.get("description") or ""),
        repositories=repositories,
        manifest=Coordinate.from_dict(data.get("manifest")),
        blocklist=Coordinate.from_dict(data.get("blocklist")),
        no_stream_strategy=NoStreamStrategy.from_str(strategy) if strategy else None,
    )


def parse_blocklist(text: str) -> Blocklist:
    """Parse a blocklist document into a Blocklist."""
    data = _load_mapping(text, "blocklist")
    entries: dict[Identity, frozenset[str]] = {}
    for block in _list_of_mappings(data, "blocks", "blocklist"):
        if "groupId" not in block or "artifactId" not in block:
            raise DocumentError(f"Blocklist entry is missing groupId or artifactId: {block}")
        identity = Identity(str(block["groupId"]), str(block["artifactId"]))
        versions = frozenset(str(v) for v in block.get("versions") or [])
        entries[identity] = entries.get(identity, frozenset()) | versions
    return Blocklist(version=str(data.get("schemaVersion") or ""), entries=entries)


def manifest_to_yaml(streams: Iterable[Stream], name: str = "", description: str = "") -> str:
    data: dict[str, Any] = {"schemaVersion": settings.manifest_schema_version}
    if name:
        data["name"] = name
    if description:
        data["description"] = description
    data["streams"] = [s.to_dict() for s in streams]
    return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)


def channel_to_yaml(channel: Channel) -> str:
    data: dict[str, Any] = {"schemaVersion": settings.channel_schema_version}
    if channel.name:
        data["name"] = channel.name
    if channel.description:
        data["description"] = channel.description
    data["repositories"] = [r.to_dict() for r in channel.repositories]
    if channel.manifest:
        data["manifest"] = channel.manifest.to_dict()
    if channel.blocklist:
        data["blocklist"] = channel.blocklist.to_dict()
    if channel.no_stream_strategy:
        data["resolve-if-no-stream"] = channel.no_stream_strategy.value
    return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)


def write_manifest_file(path: Path, streams: Iterable[Stream], name: str = "") -> None:
    logger.info("Writing manifest into %s", path)
    path.write_text(manifest_to_yaml(streams, name=name), encoding="utf-8")


def write_channel_file(path: Path, channel: Channel) -> None:
    logger.info("Writing channel into %s", path)
    path.write_text(channel_to_yaml(channel), encoding="utf-8")
