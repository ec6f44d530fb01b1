"""Tests for upgrade tables and the HTML report."""

import io
from datetime import date

from rich.console import Console

from channel_commander.models import Identity
from channel_commander.models.channel import Repository
from channel_commander.models.stream import Stream
from channel_commander.models.upgrade import StreamDiff, StreamUpgrade
from channel_commander.output.formatters import output_diffs
from channel_commander.output.report import ReportBuilder
from channel_commander.output.tables import aggregate_upgrades, upgrade_table


def upgrade(artifact_id, ladder, group_id="org.example", version="1.0.0"):
    return StreamUpgrade(stream=Stream(group_id, artifact_id, version), ladder=ladder)


def test_aggregate_folds_same_group_and_version():
    upgrades = [
        upgrade("b", ["1.0.1"]),
        upgrade("a", ["1.0.1", "1.1.0"]),
        upgrade("c", ["2.0.0"]),
        upgrade("x", ["1.0.1"], group_id="org.other"),
    ]
    entries = aggregate_upgrades(upgrades)
    assert [(e.stream.artifact_id, folded) for e, folded in entries] == [
        ("a", 1),
        ("c", 0),
        ("x", 0),
    ]


def test_no_report_without_upgrades(tmp_path):
    builder = ReportBuilder().with_upgrades([])
    assert builder.build_html() is None
    assert builder.write(tmp_path / "report.html") is False
    assert not (tmp_path / "report.html").exists()


def test_html_report(tmp_path):
    builder = (
        ReportBuilder()
        .with_repositories([Repository("central", "https://repo1.maven.org/maven2/")])
        .with_upgrades([upgrade("a", ["1.0.1", "1.1.0"]), upgrade("b", ["1.0.1"])])
        .with_origins({Identity("org.example", "a"): {"1.0.1": "central"}})
    )
    builder.generated_on = date(2024, 1, 2)
    report_file = tmp_path / "report.html"

    assert builder.write(report_file)
    html = report_file.read_text()
    assert "<html" in html
    assert "org.example:a:1.0.0" in html
    assert "1 more artifacts from the same groupId" in html
    assert "https://repo1.maven.org/maven2/" in html
    assert "Generated on 2024-01-02" in html


def test_diffs_become_single_step_upgrades():
    builder = ReportBuilder().with_diffs([StreamDiff(Stream("g", "a", "1.0"), "2.0")])
    assert builder.upgrades == [StreamUpgrade(stream=Stream("g", "a", "1.0"), ladder=["2.0"])]


def test_table_keeps_gav_text_verbatim():
    console = Console(record=True, width=120, file=io.StringIO())
    console.print(upgrade_table([upgrade("a", ["1.0.1"])], []))
    text = console.export_text()
    assert "org.example:a:1.0.0" in text
    assert "1 items" in text


def test_yaml_output_is_printed_verbatim(capsys):
    output_diffs([StreamDiff(Stream("org.example", "a", "1.0"), "[bold]:a:")], [], "yaml")
    assert "[bold]:a:" in capsys.readouterr().out
