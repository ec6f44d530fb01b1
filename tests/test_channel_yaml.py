"""Tests for channel, manifest and blocklist documents."""

import pytest
import yaml

from channel_commander.models import NoStreamStrategy
from channel_commander.models.channel import Channel, Coordinate, Repository
from channel_commander.models.stream import Stream
from channel_commander.utils.channel_yaml import (
    DocumentError,
    manifest_to_yaml,
    parse_blocklist,
    parse_channel,
    parse_manifest,
    write_channel_file,
    write_manifest_file,
)

MANIFEST = """
schemaVersion: 1.0.0
name: base
id: base-manifest
streams:
  - groupId: org.example
    artifactId: core
    version: 1.1.0
  - groupId: org.example
    artifactId: api
    versionPattern: '2\\..*'
"""

CHANNEL = """
schemaVersion: 2.0.0
name: test channel
repositories:
  - id: central
    url: https://repo1.maven.org/maven2/
manifest:
  maven:
    groupId: org.example
    artifactId: manifest
blocklist:
  url: https://example.com/blocklist.yaml
resolve-if-no-stream: none
"""

BLOCKLIST = """
schemaVersion: 1.0.0
blocks:
  - groupId: org.example
    artifactId: core
    versions:
      - 1.1.1
      - 1.1.2
"""


def test_parse_manifest():
    manifest = parse_manifest(MANIFEST)
    assert manifest.name == "base"
    assert manifest.id == "base-manifest"
    assert manifest.streams == [
        Stream("org.example", "core", "1.1.0"),
        Stream("org.example", "api", version_pattern="2\\..*"),
    ]


def test_parse_channel():
    channel = parse_channel(CHANNEL)
    assert channel.name == "test channel"
    assert channel.repositories == [Repository("central", "https://repo1.maven.org/maven2/")]
    assert channel.manifest == Coordinate(group_id="org.example", artifact_id="manifest")
    assert channel.blocklist == Coordinate(url="https://example.com/blocklist.yaml")
    assert channel.no_stream_strategy == NoStreamStrategy.NONE


def test_parse_blocklist():
    blocklist = parse_blocklist(BLOCKLIST)
    assert blocklist.version == "1.0.0"
    assert blocklist.versions_for("org.example", "core") == {"1.1.1", "1.1.2"}
    assert blocklist.versions_for("org.example", "other") == set()


@pytest.mark.parametrize("text", ["- a\n- b\n", "streams: 3\n", "streams:\n  - groupId: g\n"])
def test_invalid_manifest(text):
    with pytest.raises(DocumentError):
        parse_manifest(text)


def test_invalid_yaml():
    with pytest.raises(DocumentError, match="Invalid channel YAML"):
        parse_channel("repositories: [unclosed\n")


def test_manifest_to_yaml_keeps_stream_order():
    text = manifest_to_yaml([Stream("g2", "a2", "2"), Stream("g1", "a1", "1")], name="merged")
    data = yaml.safe_load(text)
    assert data["schemaVersion"] == "1.0.0"
    assert data["name"] == "merged"
    assert data["streams"] == [
        {"groupId": "g2", "artifactId": "a2", "version": "2"},
        {"groupId": "g1", "artifactId": "a1", "version": "1"},
    ]


def test_write_files(tmp_path):
    manifest_file = tmp_path / "manifest.yaml"
    write_manifest_file(manifest_file, [Stream("g", "a", "1")])
    assert parse_manifest(manifest_file.read_text()).streams == [Stream("g", "a", "1")]

    channel_file = tmp_path / "channel.yaml"
    channel = Channel(
        name="c",
        repositories=[Repository("r", "https://r")],
        manifest=Coordinate("g", "m", "1.0"),
        no_stream_strategy=NoStreamStrategy.LATEST,
    )
    write_channel_file(channel_file, channel)
    data = yaml.safe_load(channel_file.read_text())
    assert data["manifest"] == {"maven": {"groupId": "g", "artifactId": "m", "version": "1.0"}}
    assert data["resolve-if-no-stream"] == "latest"
    assert "blocklist" not in data
