"""Integration tests for the numeric-adder entry point."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from numeric_adder import __version__, demo
from numeric_adder.cli import main


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner."""
    return CliRunner()


class TestMain:
    """Tests for the main command."""

    def test_prints_results_without_separator(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test the default output is the concatenated results."""
        result = runner.invoke(main, ["--config", str(tmp_path / "absent.yaml")])

        assert result.exit_code == 0
        assert result.output == "202020"

    def test_separator_from_config(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test the output separator is read from config."""
        path = tmp_path / "cfg.yaml"
        path.write_text("output:\n  separator: '|'\n")

        result = runner.invoke(main, ["--config", str(path)])

        assert result.exit_code == 0
        assert result.output == "20|20|20"

    def test_invalid_config_exits_nonzero(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test a config that fails validation is reported."""
        path = tmp_path / "cfg.yaml"
        path.write_text("coercion:\n  mode: sloppy\n")

        result = runner.invoke(main, ["--config", str(path)])

        assert result.exit_code == 1
        assert "Invalid config" in result.output

    def test_invalid_input_strict(
        self, runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test unparseable text fails the run in strict mode."""
        monkeypatch.setattr(demo, "DEMO_CALLS", [("abc", 1)])

        result = runner.invoke(main, ["--config", str(tmp_path / "absent.yaml")])

        assert result.exit_code == 1
        assert "Invalid numeric input" in result.output

    def test_invalid_input_lenient(
        self, runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test unparseable text reads as zero in lenient mode."""
        monkeypatch.setattr(demo, "DEMO_CALLS", [("abc", 1), ("12abc", "3")])
        path = tmp_path / "cfg.yaml"
        path.write_text("coercion:\n  mode: lenient\n")

        result = runner.invoke(main, ["--config", str(path)])

        assert result.exit_code == 0
        assert result.output == "115"

    def test_verbose_logs_conversions(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test --verbose emits conversion logs."""
        result = runner.invoke(main, ["--config", str(tmp_path / "absent.yaml"), "--verbose"])

        assert result.exit_code == 0
        assert "add:" in result.output

    def test_version(self, runner: CliRunner) -> None:
        """Test --version prints the package version."""
        result = runner.invoke(main, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output
