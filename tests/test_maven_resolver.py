"""Tests for Maven repository resolution."""

from unittest.mock import MagicMock

import pytest
import requests

from channel_commander.core import maven_resolver
from channel_commander.core.maven_resolver import (
    MANIFEST_CLASSIFIER,
    MavenResolver,
    ResolutionError,
    load_channel,
    parse_metadata_versions,
    resolve_channel_streams,
    scan_local_repository,
)
from channel_commander.models import Identity
from channel_commander.models.channel import Coordinate, Repository
from channel_commander.models.stream import Stream


def metadata(group_id, artifact_id, versions):
    items = "".join(f"<version>{v}</version>" for v in versions)
    return (
        "<?xml version=\"1.0\" encoding=\"UTF-8\"?>\n"
        f"<metadata><groupId>{group_id}</groupId><artifactId>{artifact_id}</artifactId>"
        f"<versioning><versions>{items}</versions></versioning></metadata>\n"
    )


def publish(repo_dir, group_id, artifact_id, versions):
    artifact_dir = repo_dir.joinpath(*group_id.split("."), artifact_id)
    artifact_dir.mkdir(parents=True, exist_ok=True)
    (artifact_dir / "maven-metadata.xml").write_text(metadata(group_id, artifact_id, versions))
    return artifact_dir


@pytest.fixture(autouse=True)
def fresh_cache():
    maven_resolver.clear_caches()
    yield
    maven_resolver.clear_caches()


@pytest.fixture
def local_repo(tmp_path):
    repo_dir = tmp_path / "repo"
    publish(repo_dir, "org.example", "core", ["1.0.0", "1.1.0"])
    manifest_dir = publish(repo_dir, "org.example", "manifest", ["1.0.0", "1.0.1"])
    for version in ("1.0.0", "1.0.1"):
        (manifest_dir / version).mkdir()
        (manifest_dir / version / f"manifest-{version}-manifest.yaml").write_text(
            "schemaVersion: 1.0.0\n"
            "streams:\n"
            "  - groupId: org.example\n"
            "    artifactId: core\n"
            f"    version: {version}\n"
        )
    return Repository("local", repo_dir.as_uri())


def test_parse_metadata_versions():
    assert parse_metadata_versions(metadata("g", "a", ["1", "2"])) == ["1", "2"]


def test_available_versions_from_file_repository(local_repo, tmp_path):
    empty = Repository("empty", (tmp_path / "empty").as_uri())
    resolver = MavenResolver([empty, local_repo])
    assert resolver.available_versions(Identity("org.example", "core")) == {"local": ["1.0.0", "1.1.0"]}
    assert resolver.available_versions(Identity("org.example", "missing")) == {}


def test_resolve_document_uses_latest_version(local_repo):
    resolver = MavenResolver([local_repo])
    text = resolver.resolve_document(Coordinate("org.example", "manifest"), MANIFEST_CLASSIFIER)
    assert "version: 1.0.1" in text


def test_resolve_document_with_version(local_repo):
    resolver = MavenResolver([local_repo])
    text = resolver.resolve_document(Coordinate("org.example", "manifest", "1.0.0"), MANIFEST_CLASSIFIER)
    assert "version: 1.0.0" in text


def test_resolve_document_missing(local_repo):
    resolver = MavenResolver([local_repo])
    with pytest.raises(ResolutionError):
        resolver.resolve_document(Coordinate("org.example", "manifest", "9.9"), MANIFEST_CLASSIFIER)
    with pytest.raises(ResolutionError):
        resolver.resolve_document(Coordinate("org.example", "nothing"), MANIFEST_CLASSIFIER)


def test_load_channel_and_its_manifest(local_repo, tmp_path):
    channel_file = tmp_path / "channel.yaml"
    channel_file.write_text(
        "schemaVersion: 2.0.0\n"
        "repositories:\n"
        f"  - id: local\n    url: {local_repo.url}\n"
        "manifest:\n"
        "  maven:\n"
        "    groupId: org.example\n"
        "    artifactId: manifest\n"
        "    version: 1.0.0\n"
    )
    channel = load_channel(Coordinate(url=channel_file.as_uri()), [])
    assert resolve_channel_streams(channel) == [Stream("org.example", "core", "1.0.0")]


def test_http_repository_uses_session():
    response = MagicMock(status_code=200, text=metadata("g", "a", ["2.0"]))
    session = MagicMock()
    session.get.return_value = response
    resolver = MavenResolver([Repository("remote", "https://repo.example.com/maven2/")], session=session)

    assert resolver.available_versions(Identity("org.example", "a")) == {"remote": ["2.0"]}
    assert resolver.available_versions(Identity("org.example", "a")) == {"remote": ["2.0"]}
    session.get.assert_called_once()
    assert session.get.call_args.args[0] == "https://repo.example.com/maven2/org/example/a/maven-metadata.xml"


def test_http_failures_are_treated_as_missing():
    session = MagicMock()
    session.get.side_effect = requests.ConnectionError("boom")
    resolver = MavenResolver([Repository("remote", "https://repo.example.com")], session=session)
    assert resolver.read_url("https://repo.example.com/x") is None

    session.get.side_effect = None
    session.get.return_value = MagicMock(status_code=404, text="")
    assert resolver.read_url("https://repo.example.com/y") is None


def test_scan_local_repository(tmp_path):
    publish(tmp_path, "org.example", "b", ["2.0"])
    publish(tmp_path, "org.example", "a", ["1.0", "1.1"])
    version_dir = tmp_path / "org" / "example" / "a" / "1.1-SNAPSHOT"
    version_dir.mkdir()
    (version_dir / "maven-metadata.xml").write_text(
        "<metadata><groupId>org.example</groupId><artifactId>a</artifactId>"
        "<version>1.1-SNAPSHOT</version></metadata>"
    )
    assert scan_local_repository(tmp_path) == [
        Stream("org.example", "a", "1.0"),
        Stream("org.example", "a", "1.1"),
        Stream("org.example", "b", "2.0"),
    ]


NAMESPACED_METADATA = (
    '<metadata xmlns="http://maven.apache.org/METADATA/1.1.0" modelVersion="1.1.0">'
    "<groupId>org.example</groupId><artifactId>core</artifactId>"
    "<versioning><versions><version>1.0.0</version><version>1.1.0</version></versions></versioning>"
    "</metadata>"
)


def test_parse_namespaced_metadata():
    assert parse_metadata_versions(NAMESPACED_METADATA) == ["1.0.0", "1.1.0"]


def test_scan_local_repository_with_namespaced_metadata(tmp_path):
    artifact_dir = tmp_path / "org" / "example" / "core"
    artifact_dir.mkdir(parents=True)
    (artifact_dir / "maven-metadata-local.xml").write_text(NAMESPACED_METADATA)
    assert scan_local_repository(tmp_path) == [
        Stream("org.example", "core", "1.0.0"),
        Stream("org.example", "core", "1.1.0"),
    ]
