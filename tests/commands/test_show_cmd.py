"""Tests for the show CLI command."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from treelayout.cli import cli


class TestShowCommand:
    def test_table(self, cli_runner: CliRunner, snapshot_path: Path) -> None:
        result = cli_runner.invoke(cli, ["show", str(snapshot_path)])
        assert result.exit_code == 0
        assert "size: 3" in result.output
        assert "Offset" in result.output
        assert "8.0" in result.output

    def test_json_order(self, cli_runner: CliRunner, snapshot_path: Path) -> None:
        result = cli_runner.invoke(cli, ["--json", "show", str(snapshot_path)])
        assert result.exit_code == 0
        vertices = json.loads(result.output)["data"]["vertices"]
        assert [(v["depth"], v["offset"]) for v in vertices] == [
            (0.0, 5.0),
            (1.0, 2.0),
            (1.0, 8.0),
        ]

    def test_missing_snapshot(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["show", str(tmp_path / "none.json")])
        assert result.exit_code == 1
        assert "not found" in result.output
