"""Tests for ``revdeps graph``."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from revdeps.cli.main import cli


class TestGraphCommand:

    def test_text_output(self, runner: CliRunner, snapshot_file: Path) -> None:
        result = runner.invoke(cli, ["graph", str(snapshot_file)])
        assert result.exit_code == 0
        assert "Reverse Dependencies" in result.output
        assert "c.d.2" in result.output
        assert "4 packages" in result.output

    def test_json_output(self, runner: CliRunner, snapshot_file: Path) -> None:
        result = runner.invoke(cli, ["graph", str(snapshot_file), "--format", "json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["reverse_dependencies"]["c.d.1"] == ["user.look.1"]
        assert data["reverse_dependencies"]["c.d.2"] == ["user.scene.3"]
        assert data["reverse_dependencies"]["user.scene.3"] == []
        assert data["summary"]["unresolved"] == 2

    def test_meta_directory(self, runner: CliRunner, meta_directory: Path) -> None:
        result = runner.invoke(cli, ["graph", str(meta_directory), "--format", "json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["reverse_dependencies"] == {"c.d.1": ["u.y.1"], "u.y.1": []}

    def test_empty_library_exits_2(self, runner: CliRunner, empty_library: Path) -> None:
        result = runner.invoke(cli, ["graph", str(empty_library)])
        assert result.exit_code == 2
        assert "No packages found" in result.output
