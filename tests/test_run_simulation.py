"""End-to-end tests for the demo and benchmark entry point."""

import json
from pathlib import Path

import pytest

from run_simulation import SCENARIOS, run_benchmark, run_scenarios
from src.config import DEFAULT_CONFIG


class TestScenarios:
    def test_every_scenario_runs(self, capsys: pytest.CaptureFixture[str]) -> None:
        run_scenarios(DEFAULT_CONFIG, list(SCENARIOS))
        out = capsys.readouterr().out
        assert "Graph still connected: YES" in out
        assert "Graph still connected: NO" in out
        assert "Greedy (heuristic):" in out

    def test_writes_results(self, tmp_path: Path) -> None:
        run_scenarios(DEFAULT_CONFIG, ["bridge"], str(tmp_path))
        result_files = list(tmp_path.glob("*/result.json"))
        assert len(result_files) == 1
        data = json.loads(result_files[0].read_text())
        assert data["result"]["edges_needed"] == 1

    def test_greedy_comparison_singular(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        run_scenarios(DEFAULT_CONFIG, ["bridge"])
        out = capsys.readouterr().out
        assert "Backtracking (optimal): 1 connection\n" in out
        assert "Greedy (heuristic):     1 connection\n" in out
        assert "1 connections" not in out


class TestBenchmark:
    def test_table_printed(self, capsys: pytest.CaptureFixture[str]) -> None:
        run_benchmark(DEFAULT_CONFIG)
        out = capsys.readouterr().out
        lines = [line for line in out.splitlines() if line.startswith("|")]
        # header, separator, one row per case
        assert len(lines) == 2 + len(DEFAULT_CONFIG.benchmark.n_users_values)
