"""Parsing of coordinate, repository and strategy command line values."""

from __future__ import annotations

import re
from pathlib import Path

from channel_commander.models import NoStreamStrategy
from channel_commander.models.channel import Coordinate, Repository

_URL_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*://")


class CoordinateError(ValueError):
    """Raised for coordinate or repository strings that cannot be parsed."""


def parse_coordinate(text: str | None, required: bool = True) -> Coordinate | None:
    """Parse a URL, a "groupId:artifactId[:version]" GAV, or a local file path."""
    if not text or not text.strip():
        if required:
            raise CoordinateError("The coordinate has to be a non-empty string.")
        return None

    text = text.strip()
    if _URL_RE.match(text):
        return Coordinate(url=text)

    segments = text.split(":")
    if len(segments) == 2:
        return Coordinate(group_id=segments[0], artifact_id=segments[1])
    if len(segments) == 3:
        return Coordinate(group_id=segments[0], artifact_id=segments[1], version=segments[2])

    path = Path(text)
    if path.exists():
        return Coordinate(url=path.resolve().as_uri())
    raise CoordinateError(f"Given string is not URL or GAV: {text}")


def parse_repositories(items: list[str] | None) -> list[Repository]:
    """Parse "URL" or "ID::URL" items; bare URLs get positional "repo-N" ids."""
    if not items:
        return []
    repositories: list[Repository] = []
    for i, item in enumerate(items):
        parts = item.split("::")
        if len(parts) == 1:
            repositories.append(Repository(id=f"repo-{i}", url=item))
        elif len(parts) == 2:
            repositories.append(Repository(id=parts[0], url=parts[1]))
        else:
            raise CoordinateError(f"Invalid repository format, expected is 'repo-id::repo-url': {item}")
    return repositories


def split_csv(values: list[str] | None) -> list[str]:
    """Flatten repeated and comma separated option values."""
    result: list[str] = []
    for value in values or []:
        result.extend(part.strip() for part in value.split(",") if part.strip())
    return result


def parse_no_stream_strategy(text: str | None) -> NoStreamStrategy | None:
    if text is None:
        return None
    strategy = NoStreamStrategy.from_str(text)
    if strategy is None:
        raise CoordinateError(f"Unknown NoStreamStrategy name: {text}")
    return strategy
