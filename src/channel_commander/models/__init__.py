"""Data models for Channel Commander."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class UpgradeType(enum.Enum):
    MICRO = "micro"
    MINOR = "minor"
    MAJOR = "major"


class NoStreamStrategy(enum.Enum):
    LATEST = "latest"
    MAVEN_LATEST = "maven-latest"
    MAVEN_RELEASE = "maven-release"
    NONE = "none"

    @classmethod
    def from_str(cls, s: str) -> NoStreamStrategy | None:
        for member in cls:
            if member.value == s:
                return member
        return None


@dataclass(frozen=True)
class Identity:
    """A component identity, compared by exact group and artifact id."""

    group_id: str
    artifact_id: str

    def __str__(self) -> str:
        return f"{self.group_id}:{self.artifact_id}"
