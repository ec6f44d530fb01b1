"""chcom compare-channels <base> <target> - Compare stream versions of two channels."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer

from channel_commander.cli.options import ChannelRepositoriesOption, OutputOption
from channel_commander.config.settings import settings
from channel_commander.core.channel_comparer import compare_streams
from channel_commander.core.maven_resolver import ResolutionError, clear_caches, load_channel, resolve_channel_streams
from channel_commander.output.formatters import output_diffs
from channel_commander.output.report import ReportBuilder
from channel_commander.utils.channel_yaml import DocumentError
from channel_commander.utils.coordinates import CoordinateError, parse_coordinate, parse_repositories, split_csv


def compare_channels(
    base: str = typer.Argument(help="Base channel coordinate (URL or GAV)"),
    target: str = typer.Argument(help="Channel to compare the base channel with (URL or GAV)"),
    channel_repositories: Optional[List[str]] = ChannelRepositoriesOption,
    output: str = OutputOption,
    report_file: Path = typer.Option(settings.report_file, "--report-file", help="HTML report file"),
) -> None:
    """Identify intersecting streams of two channels whose versions differ."""
    clear_caches()
    try:
        repositories = parse_repositories(split_csv(channel_repositories))
        base_channel = load_channel(parse_coordinate(base), repositories)
        target_channel = load_channel(parse_coordinate(target), repositories)
        base_streams = resolve_channel_streams(base_channel)
        target_streams = resolve_channel_streams(target_channel)
    except (CoordinateError, DocumentError, ResolutionError) as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)

    diffs = compare_streams(base_streams, target_streams)
    output_diffs(diffs, target_channel.repositories, output)
    ReportBuilder().with_repositories(target_channel.repositories).with_diffs(diffs).write(report_file)
