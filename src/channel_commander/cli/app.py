"""Root Typer application, mounts sub-commands."""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from channel_commander.cli.options import LogLevelOption, VerboseOption

app = typer.Typer(
    name="chcom",
    help="Channel Commander - Find upgrades, merge and compare Maven channel manifests.",
    no_args_is_help=True,
)


@app.callback()
def configure(
    verbose: bool = VerboseOption,
    log_level: str = LogLevelOption,
) -> None:
    """Configure logging for all sub-commands."""
    level = logging.DEBUG if verbose else getattr(logging, log_level.upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _register_commands() -> None:
    from channel_commander.cli.commands.find_upgrades_cmd import find_upgrades_command
    from channel_commander.cli.commands.merge_cmd import merge_manifests
    from channel_commander.cli.commands.compare_cmd import compare_channels
    from channel_commander.cli.commands.create_channel_cmd import create_channel
    from channel_commander.cli.commands.manifest_from_repo_cmd import create_manifest_from_repo
    from channel_commander.cli.commands.extract_repos_cmd import extract_repositories

    app.command(name="find-upgrades", help="Find possible upgrades for channel streams")(find_upgrades_command)
    app.command(name="merge-manifests", help="Merge two manifests, the second one wins")(merge_manifests)
    app.command(name="compare-channels", help="Compare stream versions of two channels")(compare_channels)
    app.command(name="create-channel", help="Create a channel file")(create_channel)
    app.command(
        name="create-manifest-from-repo", help="Create a manifest from a local Maven repository"
    )(create_manifest_from_repo)
    app.command(name="extract-repositories", help="Print the repository URLs of a channel")(extract_repositories)


_register_commands()


def main() -> None:
    app()
