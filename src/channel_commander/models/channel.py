"""Channel, manifest and blocklist models."""

from __future__ import annotations

from dataclasses import dataclass, field

from channel_commander.models import Identity, NoStreamStrategy
from channel_commander.models.stream import Stream


@dataclass(frozen=True)
class Repository:
    id: str
    url: str

    @classmethod
    def from_dict(cls, d: dict) -> Repository:
        return cls(id=str(d.get("id", "")), url=str(d.get("url", "")))

    def to_dict(self) -> dict[str, str]:
        return {"id": self.id, "url": self.url}


@dataclass(frozen=True)
class Coordinate:
    """A document location: either Maven GAV or a URL."""

    group_id: str = ""
    artifact_id: str = ""
    version: str = ""
    url: str = ""

    @property
    def is_maven(self) -> bool:
        return not self.url

    def __str__(self) -> str:
        if self.url:
            return self.url
        if self.version:
            return f"{self.group_id}:{self.artifact_id}:{self.version}"
        return f"{self.group_id}:{self.artifact_id}"

    @classmethod
    def from_dict(cls, d: dict | None) -> Coordinate | None:
        if not d:
            return None
        if "url" in d:
            return cls(url=str(d["url"]))
        maven = d.get("maven") or {}
        if not maven:
            return None
        return cls(
            group_id=str(maven.get("groupId", "")),
            artifact_id=str(maven.get("artifactId", "")),
            version=str(maven.get("version") or ""),
        )

    def to_dict(self) -> dict:
        if self.url:
            return {"url": self.url}
        maven = {"groupId": self.group_id, "artifactId": self.artifact_id}
        if self.version:
            maven["version"] = self.version
        return {"maven": maven}


@dataclass
class Manifest:
    name: str = ""
    id: str = ""
    description: str = ""
    streams: list[Stream] = field(default_factory=list)


@dataclass
class Channel:
    name: str = ""
    description: str = ""
    repositories: list[Repository] = field(default_factory=list)
    manifest: Coordinate | None = None
    blocklist: Coordinate | None = None
    no_stream_strategy: NoStreamStrategy | None = None


@dataclass
class Blocklist:
    """Versions that must never be offered as upgrades.

    ``version`` is the blocklist document's own version and plays no part in
    matching.
    """

    version: str = ""
    entries: dict[Identity, frozenset[str]] = field(default_factory=dict)

    def versions_for(self, group_id: str, artifact_id: str) -> set[str]:
        return set(self.entries.get(Identity(group_id, artifact_id), ()))
