"""Table / JSON / YAML output dispatch."""

from __future__ import annotations

import json
from typing import Any

import yaml
from rich.console import Console

from channel_commander.models.channel import Repository
from channel_commander.models.upgrade import StreamDiff, UpgradeResult
from channel_commander.output.report import ReportBuilder

console = Console()


def _upgrades_to_list(result: UpgradeResult) -> list[dict[str, Any]]:
    return [
        {
            "group_id": u.stream.group_id,
            "artifact_id": u.stream.artifact_id,
            "current_version": u.stream.version,
            "upgrades": u.ladder,
            "micro_upgrade": u.micro,
            "repositories": {
                v: result.origins.get(u.stream.identity, {}).get(v) for v in u.ladder
            },
        }
        for u in result.upgrades
    ]


def _diffs_to_list(diffs: list[StreamDiff]) -> list[dict[str, Any]]:
    return [
        {
            "group_id": d.stream.group_id,
            "artifact_id": d.stream.artifact_id,
            "base_version": d.stream.version,
            "target_version": d.target_version,
        }
        for d in diffs
    ]


def _print_data(data: Any, fmt: str) -> None:
    if fmt == "json":
        console.print_json(json.dumps(data, indent=2))
    else:
        console.print(yaml.safe_dump(data, default_flow_style=False, sort_keys=False), markup=False, emoji=False)


def output_upgrades(result: UpgradeResult, repositories: list[Repository], fmt: str) -> None:
    if fmt in ("json", "yaml"):
        _print_data(_upgrades_to_list(result), fmt)
        return

    content = (
        ReportBuilder()
        .with_repositories(repositories)
        .with_upgrades(result.upgrades)
        .with_origins(result.origins)
        .renderable()
    )
    if content is None:
        console.print("[green]No upgrades found.[/green]")
        return
    console.print(content)
    micro_count = sum(1 for u in result.upgrades if u.has_micro)
    console.print(
        f"\n[yellow]{len(result.upgrades)} stream(s) with upgrades, {micro_count} with a micro upgrade[/yellow]"
    )


def output_diffs(diffs: list[StreamDiff], repositories: list[Repository], fmt: str) -> None:
    if fmt in ("json", "yaml"):
        _print_data(_diffs_to_list(diffs), fmt)
        return

    content = ReportBuilder().with_repositories(repositories).with_diffs(diffs).renderable()
    if content is None:
        console.print("[green]No differing streams found.[/green]")
        return
    console.print(content)
