"""Component upgrade report, rendered to the terminal or to HTML."""

from __future__ import annotations

import io
import logging
from datetime import date
from pathlib import Path

from rich.console import Console, Group, RenderableType
from rich.text import Text

from channel_commander.models import Identity
from channel_commander.models.channel import Repository
from channel_commander.models.upgrade import StreamDiff, StreamUpgrade
from channel_commander.output.tables import repository_list, upgrade_table

logger = logging.getLogger(__name__)

REPORT_WIDTH = 140


class ReportBuilder:
    """Collects report inputs and renders the component upgrade report."""

    def __init__(self) -> None:
        self.repositories: list[Repository] = []
        self.upgrades: list[StreamUpgrade] = []
        self.origins: dict[Identity, dict[str, str]] = {}
        self.generated_on: date | None = None

    def with_repositories(self, repositories: list[Repository]) -> ReportBuilder:
        self.repositories = repositories
        return self

    def with_upgrades(self, upgrades: list[StreamUpgrade]) -> ReportBuilder:
        self.upgrades = upgrades
        return self

    def with_diffs(self, diffs: list[StreamDiff]) -> ReportBuilder:
        self.upgrades = [StreamUpgrade(stream=d.stream, ladder=[d.target_version]) for d in diffs]
        return self

    def with_origins(self, origins: dict[Identity, dict[str, str]]) -> ReportBuilder:
        self.origins = origins
        return self

    def renderable(self) -> RenderableType | None:
        if not self.upgrades:
            logger.info("No components to upgrade.")
            return None
        generated_on = self.generated_on or date.today()
        return Group(
            Text("Component Upgrade Report", style="bold underline"),
            Text("Following repositories were searched:"),
            repository_list(self.repositories),
            upgrade_table(self.upgrades, self.repositories, self.origins),
            Text(f"Generated on {generated_on.isoformat()}", style="dim"),
        )

    def build_html(self) -> str | None:
        """Render the report as a standalone HTML page, None if there is nothing to report."""
        content = self.renderable()
        if content is None:
            return None
        console = Console(record=True, width=REPORT_WIDTH, file=io.StringIO(), force_terminal=True, emoji=False)
        console.print(content)
        return console.export_html(inline_styles=True)

    def write(self, path: Path) -> bool:
        html = self.build_html()
        if html is None:
            return False
        logger.info("Writing report file into %s", path)
        path.write_text(html, encoding="utf-8")
        return True
