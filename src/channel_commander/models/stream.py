"""Stream models and key extraction."""

from __future__ import annotations

from dataclasses import dataclass

from channel_commander.models import Identity

WILDCARD = "*"


@dataclass(frozen=True)
class Stream:
    group_id: str
    artifact_id: str
    version: str = ""
    version_pattern: str = ""

    @property
    def identity(self) -> Identity:
        return Identity(self.group_id, self.artifact_id)

    @property
    def gav(self) -> str:
        return f"{self.group_id}:{self.artifact_id}:{self.version or self.version_pattern}"

    @property
    def has_concrete_version(self) -> bool:
        """True if the stream pins one version of one artifact."""
        return bool(self.version) and self.artifact_id != WILDCARD

    def with_version(self, version: str) -> Stream:
        return Stream(self.group_id, self.artifact_id, version)

    @classmethod
    def from_dict(cls, d: dict) -> Stream:
        return cls(
            group_id=str(d.get("groupId", "")),
            artifact_id=str(d.get("artifactId", "")),
            version=str(d.get("version") or ""),
            version_pattern=str(d.get("versionPattern") or ""),
        )

    def to_dict(self) -> dict[str, str]:
        d = {"groupId": self.group_id, "artifactId": self.artifact_id}
        if self.version:
            d["version"] = self.version
        elif self.version_pattern:
            d["versionPattern"] = self.version_pattern
        return d


# Merging is keyed by identity only, deduplicated sets by the full triple.

def identity_key(stream: Stream) -> Identity:
    return stream.identity


def triple_key(stream: Stream) -> tuple[str, str, str]:
    return (stream.group_id, stream.artifact_id, stream.version)
