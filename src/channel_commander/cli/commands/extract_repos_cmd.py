"""chcom extract-repositories <channel> - Print the repository URLs of a channel."""

from __future__ import annotations

from typing import List, Optional

import typer

from channel_commander.core.maven_resolver import ResolutionError, clear_caches, load_channel
from channel_commander.utils.channel_yaml import DocumentError
from channel_commander.utils.coordinates import CoordinateError, parse_coordinate, parse_repositories, split_csv


def extract_repositories(
    channel: str = typer.Argument(help="Channel coordinate (URL or GAV)"),
    repositories: Optional[List[str]] = typer.Option(
        None,
        "--repositories",
        help="Comma separated repository URLs where the channel is looked for, if given as GAV.",
    ),
) -> None:
    """Print the URLs of the channel repositories, one per line."""
    clear_caches()
    try:
        resolved = load_channel(parse_coordinate(channel), parse_repositories(split_csv(repositories)))
    except (CoordinateError, DocumentError, ResolutionError) as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)

    for repo in resolved.repositories:
        typer.echo(repo.url)
