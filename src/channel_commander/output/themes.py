"""Upgrade type and repository label colors."""

from channel_commander.models import UpgradeType

UPGRADE_COLORS: dict[UpgradeType, str] = {
    UpgradeType.MICRO: "green",
    UpgradeType.MINOR: "yellow",
    UpgradeType.MAJOR: "red bold",
}

REPOSITORY_BACKGROUNDS: tuple[str, ...] = ("#a8df65", "#edf492", "#efb960", "#ee91bc")


def styled_upgrade_type(upgrade_type: UpgradeType) -> str:
    color = UPGRADE_COLORS.get(upgrade_type, "white")
    return f"[{color}]{upgrade_type.value}[/{color}]"


def repository_style(repo_id: str, repo_ids: list[str]) -> str:
    """Label style for a repository, cycling through the background palette."""
    idx = repo_ids.index(repo_id) if repo_id in repo_ids else len(repo_ids)
    return f"black on {REPOSITORY_BACKGROUNDS[idx % len(REPOSITORY_BACKGROUNDS)]}"
