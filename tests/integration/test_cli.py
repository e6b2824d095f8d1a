"""Integration tests for the degrees CLI."""

from __future__ import annotations

import json
import shutil
from pathlib import Path

import pytest
from typer.testing import CliRunner

from separation.cli import USAGE, app
from separation.model import SeparationResult

FIXTURES = Path(__file__).parent.parent / "fixtures"
INPUT = str(FIXTURES / "input.txt")
runner = CliRunner()


class TestUsage:
    @pytest.mark.parametrize("args", [[], ["Ana"], ["Ana", "Bruno", "Carla"]])
    def test_wrong_argument_count_prints_usage(self, args: list[str]) -> None:
        result = runner.invoke(app, args)
        assert result.exit_code == 0
        assert result.stdout.strip() == USAGE


class TestDefaultInputFile:
    def test_reads_input_txt_from_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        shutil.copy(FIXTURES / "input.txt", tmp_path / "input.txt")
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(app, ["Ana", "Diego"])
        assert result.exit_code == 0
        assert result.stdout == "3\n"

    def test_missing_input_txt(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(app, ["Ana", "Diego"])
        assert result.exit_code == 2
        assert "Error: File not found" in result.output

    def test_undecodable_input_file(self, tmp_path: Path) -> None:
        bad = tmp_path / "input.txt"
        bad.write_bytes(b"Jos\xe9 Ana\n")
        result = runner.invoke(app, ["Ana", "Diego", "--input", str(bad)])
        assert result.exit_code == 2
        assert "Error: Cannot read file" in result.output


class TestQueries:
    @pytest.mark.parametrize(
        ("origin", "target", "expected"),
        [
            ("Ana", "Bruno", "1"),
            ("Ana", "Elena", "2"),
            ("Ana", "Diego", "3"),
            ("Ana", "Ana", "0"),
            ("Nobody", "Nobody", "0"),
            ("Ana", "Gustavo", "-1"),
            ("Ana", "Nobody", "-1"),
        ],
    )
    def test_degrees(self, origin: str, target: str, expected: str) -> None:
        result = runner.invoke(app, [origin, target, "--input", INPUT])
        assert result.exit_code == 0
        assert result.stdout == f"{expected}\n"

    def test_config_file(self) -> None:
        cfg = FIXTURES / "separation.yml"
        result = runner.invoke(app, ["Gustavo", "Helena", "--config", str(cfg)])
        assert result.exit_code == 0
        assert result.stdout == "1\n"

    def test_config_input_relative_to_config_dir(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        data_dir = tmp_path / "other" / "dir"
        data_dir.mkdir(parents=True)
        (data_dir / "input.txt").write_text("Ana Bruno\nBruno Carla\n")
        (data_dir / "separation.yml").write_text("input_file: input.txt\n")
        (tmp_path / "input.txt").write_text("Ana Carla\n")
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(app, ["Ana", "Carla", "--config", "other/dir/separation.yml"])
        assert result.exit_code == 0
        assert result.stdout == "2\n"

    def test_input_option_overrides_config(self, tmp_path: Path) -> None:
        cfg = FIXTURES / "separation.yml"
        other = tmp_path / "friends.txt"
        other.write_text("Gustavo Ana\nAna Helena\n")
        result = runner.invoke(
            app, ["Gustavo", "Helena", "--config", str(cfg), "--input", str(other)]
        )
        assert result.exit_code == 0
        assert result.stdout == "2\n"

    def test_one_way_config(self, tmp_path: Path) -> None:
        cfg = tmp_path / "separation.yml"
        cfg.write_text(f"input_file: {INPUT}\nbidirectional: false\n")
        forward = runner.invoke(app, ["Ana", "Bruno", "--config", str(cfg)])
        backward = runner.invoke(app, ["Bruno", "Ana", "--config", str(cfg)])
        assert forward.stdout == "1\n"
        assert backward.stdout == "-1\n"


class TestPathOutput:
    def test_path_is_printed(self) -> None:
        result = runner.invoke(app, ["Ana", "Diego", "--input", INPUT, "--path"])
        assert result.exit_code == 0
        lines = result.stdout.splitlines()
        assert lines[0] == "3"
        assert lines[1] == "Path: (3 hops) Ana -> Bruno -> Carla -> Diego"

    def test_no_connection(self) -> None:
        result = runner.invoke(app, ["Ana", "Gustavo", "--input", INPUT, "--path"])
        lines = result.stdout.splitlines()
        assert lines[0] == "-1"
        assert lines[1] == "No connection between Ana and Gustavo"


class TestJsonOutput:
    def test_json_result(self) -> None:
        result = runner.invoke(app, ["Ana", "Elena", "--input", INPUT, "--json"])
        assert result.exit_code == 0
        parsed = SeparationResult.model_validate(json.loads(result.stdout))
        assert parsed.degrees == 2
        assert parsed.path == ["Ana", "Fabio", "Elena"]

    def test_json_determinism(self) -> None:
        first = runner.invoke(app, ["Ana", "Diego", "--input", INPUT, "--json"])
        second = runner.invoke(app, ["Ana", "Diego", "--input", INPUT, "--json"])
        assert first.stdout == second.stdout
