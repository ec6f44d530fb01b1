"""chcom create-manifest-from-repo [path] - Create a manifest from a local Maven repository."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from channel_commander.config.settings import settings
from channel_commander.core.maven_resolver import scan_local_repository
from channel_commander.utils.channel_yaml import write_manifest_file


def create_manifest_from_repo(
    path: Optional[Path] = typer.Argument(
        None, help="Local Maven repository path (default: the local repository from settings)",
    ),
    output_file: Path = typer.Option(Path("manifest.yaml"), "--output-file", "-o", help="Manifest file to be written"),
) -> None:
    """Scan a local Maven repository and write a manifest of the GAVs it contains."""
    repository_path = path or settings.local_repository
    if not repository_path.is_dir():
        typer.echo(f"Repository path '{repository_path}' is not a directory.", err=True)
        raise typer.Exit(code=1)

    streams = scan_local_repository(repository_path)
    write_manifest_file(output_file, streams, name="generated manifest")
