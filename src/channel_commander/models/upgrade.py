"""Upgrade and comparison result models."""

from __future__ import annotations

from dataclasses import dataclass, field

from channel_commander.models import Identity
from channel_commander.models.stream import Stream


@dataclass
class StreamUpgrade:
    stream: Stream
    ladder: list[str]
    micro: str | None = None

    @property
    def has_micro(self) -> bool:
        return self.micro is not None


@dataclass
class UpgradeResult:
    upgrades: list[StreamUpgrade] = field(default_factory=list)
    diff_streams: list[Stream] = field(default_factory=list)
    all_streams: list[Stream] = field(default_factory=list)
    # identity -> {version: repository id}
    origins: dict[Identity, dict[str, str]] = field(default_factory=dict)

    @property
    def has_upgrades(self) -> bool:
        return bool(self.upgrades)


@dataclass
class StreamDiff:
    stream: Stream
    target_version: str
