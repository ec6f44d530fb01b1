"""Version and document resolution against Maven repositories."""

from __future__ import annotations

import logging
import os
import xml.etree.ElementTree as ET
from pathlib import Path
from urllib.parse import unquote, urlparse

import requests

from channel_commander.config.settings import settings
from channel_commander.models import Identity
from channel_commander.models.channel import Blocklist, Channel, Coordinate, Manifest, Repository
from channel_commander.models.stream import Stream
from channel_commander.utils.channel_yaml import parse_blocklist, parse_channel, parse_manifest
from channel_commander.utils.maven_version import sort_descending

logger = logging.getLogger(__name__)

MAVEN_METADATA_XML = "maven-metadata.xml"
MAVEN_METADATA_XML_LOCAL = "maven-metadata-local.xml"

CHANNEL_CLASSIFIER = "channel"
MANIFEST_CLASSIFIER = "manifest"
BLOCKLIST_CLASSIFIER = "blocklist"

# Module-level metadata cache, cleared between runs via clear_caches()
_metadata_cache: dict[str, list[str] | None] = {}


class ResolutionError(RuntimeError):
    """Raised when a channel document cannot be located or read."""


def clear_caches() -> None:
    """Reset the metadata cache (call once per command invocation)."""
    _metadata_cache.clear()


def _artifact_base(repo_url: str, group_id: str, artifact_id: str) -> str:
    return f"{repo_url.rstrip('/')}/{group_id.replace('.', '/')}/{artifact_id}"


def parse_metadata_versions(text: str) -> list[str]:
    """Return the versions listed in a maven-metadata.xml document."""
    root = ET.fromstring(text)
    versions = []
    for version_elem in root.findall("./{*}versioning/{*}versions/{*}version"):
        if version_elem.text and version_elem.text.strip():
            versions.append(version_elem.text.strip())
    return versions


class MavenResolver:
    """Reads version metadata and channel documents from Maven repositories."""

    def __init__(self, repositories: list[Repository], session: requests.Session | None = None):
        self.repositories = repositories
        self.session = session or requests.Session()

    def read_url(self, url: str) -> str | None:
        """Return the text behind a http(s) or file URL, or None if absent."""
        parsed = urlparse(url)
        if parsed.scheme == "file":
            path = Path(unquote(parsed.path))
            if not path.is_file():
                return None
            return path.read_text(encoding="utf-8")

        try:
            res = self.session.get(url, timeout=settings.request_timeout)
        except requests.RequestException:
            logger.debug("Request to %s failed", url, exc_info=True)
            return None
        if res.status_code != 200:
            logger.debug("GET %s returned %s", url, res.status_code)
            return None
        return res.text

    def _metadata_versions(self, repo: Repository, group_id: str, artifact_id: str) -> list[str] | None:
        url = f"{_artifact_base(repo.url, group_id, artifact_id)}/{MAVEN_METADATA_XML}"
        if url in _metadata_cache:
            return _metadata_cache[url]

        text = self.read_url(url)
        versions = None
        if text:
            try:
                versions = parse_metadata_versions(text)
            except ET.ParseError:
                logger.debug("Failed to parse metadata at %s", url, exc_info=True)
        _metadata_cache[url] = versions
        return versions

    def available_versions(self, identity: Identity) -> dict[str, list[str]]:
        """Get all versions of a component from all repositories.

        Returns {repo_id: [versions...]}, skipping repositories without metadata.
        """
        result: dict[str, list[str]] = {}
        for repo in self.repositories:
            versions = self._metadata_versions(repo, identity.group_id, identity.artifact_id)
            if versions:
                result[repo.id] = versions
        return result

    def latest_version(self, group_id: str, artifact_id: str) -> str | None:
        versions: list[str] = []
        for repo_versions in self.available_versions(Identity(group_id, artifact_id)).values():
            versions.extend(repo_versions)
        ordered = sort_descending(versions)
        return ordered[0] if ordered else None

    def resolve_document(self, coordinate: Coordinate, classifier: str) -> str:
        """Fetch the YAML document a coordinate points to."""
        if coordinate.url:
            text = self.read_url(coordinate.url)
            if text is None:
                raise ResolutionError(f"Unable to read {coordinate.url}")
            return text

        version = coordinate.version or self.latest_version(coordinate.group_id, coordinate.artifact_id)
        if not version:
            raise ResolutionError(f"No version of {coordinate} found in the given repositories")

        file_name = f"{coordinate.artifact_id}-{version}-{classifier}.yaml"
        for repo in self.repositories:
            url = f"{_artifact_base(repo.url, coordinate.group_id, coordinate.artifact_id)}/{version}/{file_name}"
            text = self.read_url(url)
            if text is not None:
                logger.debug("Resolved %s from %s", coordinate, url)
                return text
        raise ResolutionError(f"Unable to resolve {classifier} {coordinate}:{version}")


def load_channel(coordinate: Coordinate, repositories: list[Repository]) -> Channel:
    return parse_channel(MavenResolver(repositories).resolve_document(coordinate, CHANNEL_CLASSIFIER))


def load_manifest(coordinate: Coordinate, repositories: list[Repository]) -> Manifest:
    return parse_manifest(MavenResolver(repositories).resolve_document(coordinate, MANIFEST_CLASSIFIER))


def load_blocklist(coordinate: Coordinate, repositories: list[Repository]) -> Blocklist:
    return parse_blocklist(MavenResolver(repositories).resolve_document(coordinate, BLOCKLIST_CLASSIFIER))


def resolve_channel_streams(channel: Channel) -> list[Stream]:
    """Load the manifest a channel refers to, using the channel's repositories."""
    if channel.manifest is None:
        return []
    return load_manifest(channel.manifest, channel.repositories).streams


def resolve_channel_blocklists(channel: Channel, repositories: list[Repository]) -> list[Blocklist]:
    if channel.blocklist is None:
        return []
    return [load_blocklist(channel.blocklist, repositories + channel.repositories)]


def scan_local_repository(path: Path) -> list[Stream]:
    """Create streams for every version listed in a local repository's metadata."""
    metadata_files: list[Path] = []
    for dirpath, _, filenames in os.walk(path):
        for name in sorted(filenames):
            if name in (MAVEN_METADATA_XML, MAVEN_METADATA_XML_LOCAL):
                metadata_files.append(Path(dirpath) / name)
    metadata_files.sort()

    streams: list[Stream] = []
    for metadata_file in metadata_files:
        try:
            root = ET.fromstring(metadata_file.read_text(encoding="utf-8"))
        except (OSError, ET.ParseError):
            logger.debug("Failed to read %s", metadata_file, exc_info=True)
            continue
        # Metadata that lists specific artifact files carries a top-level version.
        if root.findtext("{*}version"):
            continue
        group_id = (root.findtext("{*}groupId") or "").strip()
        artifact_id = (root.findtext("{*}artifactId") or "").strip()
        for version_elem in root.findall("./{*}versioning/{*}versions/{*}version"):
            if version_elem.text and version_elem.text.strip():
                streams.append(Stream(group_id, artifact_id, version_elem.text.strip()))
    return streams
