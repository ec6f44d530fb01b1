"""Shared CLI options."""

from __future__ import annotations

import typer

from channel_commander.config.settings import settings

OutputOption = typer.Option(settings.default_output, "--output", "-o", help="Output format: table, json, yaml")
ChannelRepositoriesOption = typer.Option(
    None,
    "--channel-repositories",
    help="Comma separated repository URLs (or ID::URL) where channels are looked for, if given as GAV.",
    metavar="URL",
)
VerboseOption = typer.Option(False, "--verbose", "-v", help="Enable debug logging")
LogLevelOption = typer.Option("WARNING", "--log-level", help="Log level: DEBUG, INFO, WARNING, ERROR")
