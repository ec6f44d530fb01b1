"""Rich renderables for upgrade and comparison reports."""

from __future__ import annotations

from rich.table import Table
from rich.text import Text

from channel_commander.models import Identity
from channel_commander.models.channel import Repository
from channel_commander.models.upgrade import StreamUpgrade
from channel_commander.output.themes import repository_style, styled_upgrade_type
from channel_commander.utils.version_utils import classify_upgrade, is_the_same_minor

SUBITEM_MARK = "↳"


def aggregate_upgrades(upgrades: list[StreamUpgrade]) -> list[tuple[StreamUpgrade, int]]:
    """Sort upgrades by GAV and fold near-duplicates into their first entry.

    An upgrade is folded when an already listed entry has the same group id,
    the same current version and offers every version of its ladder. Returns
    (entry, number of folded artifacts) pairs.
    """
    ordered = sorted(
        upgrades,
        key=lambda u: (u.stream.group_id, u.stream.artifact_id, u.stream.version),
    )
    aggregated: list[StreamUpgrade] = []
    folded: list[int] = []
    for upgrade in ordered:
        for i, listed in enumerate(aggregated):
            if (
                listed.stream.group_id == upgrade.stream.group_id
                and listed.stream.version == upgrade.stream.version
                and set(upgrade.ladder) <= set(listed.ladder)
            ):
                folded[i] += 1
                break
        else:
            aggregated.append(upgrade)
            folded.append(0)
    return list(zip(aggregated, folded))


def repository_list(repositories: list[Repository]) -> Text:
    repo_ids = [r.id for r in repositories]
    text = Text()
    for repo in repositories:
        text.append("  ◦ ")
        text.append(f" {repo.id} ", style=repository_style(repo.id, repo_ids))
        text.append(f" {repo.url}\n")
    return text


def _version_cell(
    current: str,
    version: str,
    repo_id: str | None,
    repo_ids: list[str],
) -> Text:
    text = Text(version, style="bold" if is_the_same_minor(current, version) else "")
    if repo_id:
        text.append("  ")
        text.append(f" {repo_id} ", style=repository_style(repo_id, repo_ids))
    return text


def upgrade_table(
    upgrades: list[StreamUpgrade],
    repositories: list[Repository],
    origins: dict[Identity, dict[str, str]] | None = None,
    title: str = "Possible Component Upgrades",
) -> Table:
    origins = origins or {}
    repo_ids = [r.id for r in repositories]
    entries = aggregate_upgrades(upgrades)

    table = Table(title=title, title_justify="left", expand=False, show_footer=True)
    table.add_column("GAV", style="magenta", no_wrap=True, footer=f"{len(entries)} items")
    table.add_column("New Version", no_wrap=True)
    table.add_column("Type", no_wrap=True)

    for upgrade, folded in entries:
        stream = upgrade.stream
        version_origins = origins.get(stream.identity, {})
        for i, version in enumerate(upgrade.ladder):
            gav = Text(stream.gav) if i == 0 else Text(SUBITEM_MARK, style="dim")
            table.add_row(
                gav,
                _version_cell(stream.version, version, version_origins.get(version), repo_ids),
                styled_upgrade_type(classify_upgrade(stream.version, version)),
            )
        if folded:
            table.add_row(Text(f"{folded} more artifacts from the same groupId", style="dim"), "", "")
        table.add_section()
    return table
