"""Tests for graph CLI commands."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from graphpoet.cli import cli


def _invoke(runner: CliRunner, corpus: Path, *args: str) -> tuple[int, str]:
    """Invoke with --corpus; root flags may follow it before the subcommand."""
    result = runner.invoke(cli, ["--corpus", str(corpus), *args])
    return result.exit_code, result.output


class TestGraphCommands:
    def test_stats(self, cli_runner: CliRunner, mugar_corpus: Path) -> None:
        code, output = _invoke(cli_runner, mugar_corpus, "graph", "stats")
        assert code == 0
        assert "vertices: 11" in output
        assert "edges: 10" in output

    def test_stats_json(self, cli_runner: CliRunner, mugar_corpus: Path) -> None:
        code, output = _invoke(cli_runner, mugar_corpus, "--json", "graph", "stats")
        assert code == 0
        assert json.loads(output)["data"]["total_weight"] == 10

    def test_targets(self, cli_runner: CliRunner, enterprise_corpus: Path) -> None:
        code, output = _invoke(cli_runner, enterprise_corpus, "-q", "graph", "targets", "new")
        assert code == 0
        assert output.split() == ["civilizations", "life", "worlds"]

    def test_sources(self, cli_runner: CliRunner, enterprise_corpus: Path) -> None:
        code, output = _invoke(cli_runner, enterprise_corpus, "graph", "sources", "new")
        assert code == 0
        for word in ("strange", "out", "and"):
            assert word in output

    def test_bridges(self, cli_runner: CliRunner, enterprise_corpus: Path) -> None:
        code, output = _invoke(cli_runner, enterprise_corpus, "graph", "bridges", "explore", "new")
        assert code == 0
        assert "strange" in output
        assert "1 of 1 bridges (sum)" in output

    def test_bridges_top(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        corpus = tmp_path / "c.txt"
        corpus.write_text("a b d a c d a c d")
        result = cli_runner.invoke(
            cli, ["-q", "--corpus", str(corpus), "graph", "bridges", "a", "d", "--top", "1"]
        )
        assert result.output.strip() == "c"

    def test_bridges_top_must_be_positive(
        self, cli_runner: CliRunner, enterprise_corpus: Path
    ) -> None:
        code, output = _invoke(
            cli_runner, enterprise_corpus, "graph", "bridges", "explore", "new", "--top", "0"
        )
        assert code == 2
        assert "No bridge" not in output

    def test_missing_corpus(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        code, output = _invoke(cli_runner, tmp_path / "missing.txt", "graph", "stats")
        assert code == 1
        assert "ERROR" in output

    def test_group_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["graph", "--examples"])
        assert result.exit_code == 0
        assert "graph bridges" in result.output
