"""chcom create-channel - Create a channel file."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer

from channel_commander.models.channel import Channel
from channel_commander.utils.channel_yaml import write_channel_file
from channel_commander.utils.coordinates import (
    CoordinateError,
    parse_coordinate,
    parse_no_stream_strategy,
    parse_repositories,
    split_csv,
)


def create_channel(
    repositories: List[str] = typer.Option(
        ..., "--repositories", "-r", help="Channel repositories in the format ID1::URL1,ID2::URL2,...",
    ),
    manifest_coordinate: str = typer.Option(..., "--manifest-coordinate", "-m", help="Manifest coordinate, GAV or URL"),
    blocklist_coordinate: Optional[str] = typer.Option(
        None, "--blocklist-coordinate", "-b", help="Blocklist coordinate, GAV or URL",
    ),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Channel name"),
    description: Optional[str] = typer.Option(None, "--description", "-d", help="Channel description"),
    no_stream_strategy: Optional[str] = typer.Option(
        None, "--no-stream-strategy", "-s", help="No stream strategy: latest, maven-latest, maven-release or none",
    ),
    output_file: Path = typer.Option(Path("channel.yaml"), "--output-file", "-o", help="Channel file to be written"),
) -> None:
    """Create a channel file according to the given parameters."""
    try:
        channel = Channel(
            name=name or "",
            description=description or "",
            repositories=parse_repositories(split_csv(repositories)),
            manifest=parse_coordinate(manifest_coordinate),
            blocklist=parse_coordinate(blocklist_coordinate, required=False),
            no_stream_strategy=parse_no_stream_strategy(no_stream_strategy),
        )
    except CoordinateError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)

    write_channel_file(output_file, channel)
