"""chcom merge-manifests <m1> <m2> - Merge two manifests."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer

from channel_commander.core.maven_resolver import ResolutionError, clear_caches, load_manifest
from channel_commander.core.stream_merger import merge_streams
from channel_commander.utils.channel_yaml import DocumentError, write_manifest_file
from channel_commander.utils.coordinates import CoordinateError, parse_coordinate, parse_repositories, split_csv


def merge_manifests(
    first: str = typer.Argument(help="First manifest coordinate (URL or GAV)"),
    second: str = typer.Argument(help="Second manifest coordinate (URL or GAV)"),
    manifest_repositories: Optional[List[str]] = typer.Option(
        None,
        "--manifest-repositories",
        help="Comma separated repository URLs where manifests are looked for, if given as GAV.",
    ),
    output_file: Path = typer.Option(Path("manifest.yaml"), "--output-file", "-o", help="Manifest file to be written"),
) -> None:
    """Merge two manifests. Streams of the second manifest override the first."""
    clear_caches()
    try:
        first_coordinate = parse_coordinate(first)
        second_coordinate = parse_coordinate(second)
        repositories = parse_repositories(split_csv(manifest_repositories))
        first_manifest = load_manifest(first_coordinate, repositories)
        second_manifest = load_manifest(second_coordinate, repositories)
    except (CoordinateError, DocumentError, ResolutionError) as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)

    merged = merge_streams(first_manifest.streams, second_manifest.streams)
    write_manifest_file(output_file, merged)
