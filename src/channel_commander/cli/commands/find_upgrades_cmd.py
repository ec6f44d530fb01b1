"""chcom find-upgrades - Find possible upgrades for channel streams."""

from __future__ import annotations

import re
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from channel_commander.cli.options import ChannelRepositoriesOption, OutputOption
from channel_commander.config.settings import settings
from channel_commander.core.maven_resolver import (
    MavenResolver,
    ResolutionError,
    clear_caches,
    load_blocklist,
    load_channel,
    resolve_channel_blocklists,
    resolve_channel_streams,
)
from channel_commander.core.upgrade_finder import find_upgrades
from channel_commander.output.formatters import output_upgrades
from channel_commander.output.report import ReportBuilder
from channel_commander.utils.channel_yaml import DocumentError, write_manifest_file
from channel_commander.utils.coordinates import CoordinateError, parse_coordinate, parse_repositories, split_csv

console = Console(stderr=True)


def _compile(pattern: str | None, option: str) -> re.Pattern[str] | None:
    if pattern is None:
        return None
    try:
        return re.compile(pattern)
    except re.error as e:
        typer.echo(f"Invalid {option} '{pattern}': {e}", err=True)
        raise typer.Exit(code=1)


def find_upgrades_command(
    channel: str = typer.Argument(help="Base channel coordinate (URL or GAV)"),
    repositories: List[str] = typer.Option(
        ..., "--repositories", help="Comma separated repositories where upgrades are looked for (URL or ID::URL)",
    ),
    channel_repositories: Optional[List[str]] = ChannelRepositoriesOption,
    include_pattern: Optional[str] = typer.Option(
        None, "--include-pattern", help="Regexp that versions need to match in order to be added to the report",
    ),
    exclude_pattern: Optional[str] = typer.Option(
        None, "--exclude-pattern", help="Regexp to exclude versions from being added to the report",
    ),
    blocklist_coordinate: Optional[str] = typer.Option(
        None, "--blocklist-coordinate", help="Blocklist coordinate (URL or GAV), defaults to the channel's blocklist",
    ),
    output: str = OutputOption,
    report_file: Path = typer.Option(settings.report_file, "--report-file", help="HTML report file"),
) -> None:
    """Report possible upgrades for the streams of a channel.

    Also writes the diff manifest (upgraded streams only) and the upgraded
    manifest (all streams, upgraded where possible).
    """
    include = _compile(include_pattern, "--include-pattern")
    exclude = _compile(exclude_pattern, "--exclude-pattern")
    clear_caches()

    try:
        channel_coordinate = parse_coordinate(channel)
        channel_repos = parse_repositories(split_csv(channel_repositories))
        upgrade_repos = parse_repositories(split_csv(repositories))

        with console.status("[bold cyan]Resolving channel…") as status:
            resolved = load_channel(channel_coordinate, channel_repos)
            blocklist_coord = parse_coordinate(blocklist_coordinate, required=False)
            if blocklist_coord is not None:
                blocklists = [load_blocklist(blocklist_coord, channel_repos + resolved.repositories)]
            else:
                blocklists = resolve_channel_blocklists(resolved, channel_repos)
            streams = resolve_channel_streams(resolved)

            def on_progress(i: int, total: int, gav: str) -> None:
                status.update(f"[bold cyan]Checking upgrades… [dim]({i}/{total})[/dim] {gav}")

            resolver = MavenResolver(upgrade_repos)
            result = find_upgrades(
                streams,
                resolver.available_versions,
                include=include,
                exclude=exclude,
                blocklists=blocklists,
                on_progress=on_progress,
            )
    except (CoordinateError, DocumentError, ResolutionError) as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)

    output_upgrades(result, upgrade_repos, output)

    if not result.has_upgrades:
        return

    ReportBuilder().with_repositories(upgrade_repos).with_upgrades(result.upgrades).with_origins(
        result.origins
    ).write(report_file)
    write_manifest_file(settings.diff_manifest_file, result.diff_streams)
    write_manifest_file(settings.upgraded_manifest_file, result.all_streams)
