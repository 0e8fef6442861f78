"""Tests for the `patterns` command line."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from pattern_catalog.cli.main import app

# __file__ is tests/cli/test_main.py
FIXTURES = Path(__file__).parent.parent / "fixtures"

runner = CliRunner()


class TestRunCommand:
    def test_observer_sample_trace(self) -> None:
        result = runner.invoke(app, ["run", "observer"])

        assert result.exit_code == 0
        assert result.stdout.splitlines() == [
            "User1 received message: New update available!",
            "User2 received message: New update available!",
        ]

    def test_input_words_are_passed_through(self) -> None:
        result = runner.invoke(app, ["run", "chain_of_responsibility", "moderator"])

        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["Request handled by Moderator."]

    def test_unmatched_request_prints_nothing(self) -> None:
        result = runner.invoke(app, ["run", "chain_of_responsibility", "guest"])

        assert result.exit_code == 0
        assert result.stdout == ""

    def test_state_transitions(self) -> None:
        result = runner.invoke(app, ["run", "state", "next", "next", "next"])

        assert result.exit_code == 0
        assert result.stdout.splitlines() == [
            "Order placed.",
            "Order shipped.",
            "Order delivered.",
            "Order already delivered.",
        ]

    def test_unknown_pattern_exits_non_zero(self) -> None:
        result = runner.invoke(app, ["run", "interpreter"])

        assert result.exit_code == 1
        assert "Failed to run demonstration: unknown pattern 'interpreter'" in (
            result.output
        )

    def test_invalid_input_exits_non_zero(self) -> None:
        result = runner.invoke(app, ["run", "state", "sideways"])

        assert result.exit_code == 1
        assert "invalid input" in result.output

    def test_config_file_is_applied(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PATTERNS_ENV", "classroom")
        result = runner.invoke(
            app,
            ["run", "observer", "hi", "--config", str(FIXTURES / "valid_config.yaml")],
        )

        assert result.exit_code == 0
        assert result.stdout.splitlines() == [
            "Ana received message: hi",
            "Ben received message: hi",
            "Cleo received message: hi",
        ]

    def test_missing_config_file_exits_non_zero(self, tmp_path: Path) -> None:
        result = runner.invoke(
            app, ["run", "observer", "--config", str(tmp_path / "absent.yaml")]
        )

        assert result.exit_code == 1
        assert "Failed to load config" in result.output

    def test_invalid_log_format_exits_non_zero(self) -> None:
        result = runner.invoke(app, ["run", "observer", "--log-format", "xml"])

        assert result.exit_code == 1
        assert "Invalid log format" in result.output


class TestRunAllCommand:
    def test_prints_every_section(self) -> None:
        result = runner.invoke(app, ["run-all"])

        assert result.exit_code == 0
        assert "Chain of Responsibility" in result.stdout
        assert "Request handled by Admin." in result.stdout
        assert "Flyweight" in result.stdout
        assert "Trees: 3, tree types: 2" in result.stdout


class TestListCommand:
    def test_lists_patterns(self) -> None:
        result = runner.invoke(app, ["list"])

        assert result.exit_code == 0
        assert "observer" in result.stdout
        assert "singleton" in result.stdout
        assert "proxy" in result.stdout

    def test_filters_by_category(self) -> None:
        result = runner.invoke(app, ["list", "--category", "creational"])

        assert result.exit_code == 0
        assert "builder" in result.stdout
        assert "observer" not in result.stdout

    def test_unknown_category_exits_non_zero(self) -> None:
        result = runner.invoke(app, ["list", "--category", "concurrency"])

        assert result.exit_code == 1
        assert "Invalid category" in result.output

    def test_accepts_config_file(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PATTERNS_ENV", "classroom")
        result = runner.invoke(
            app, ["list", "--config", str(FIXTURES / "valid_config.yaml")]
        )

        assert result.exit_code == 0
        assert "observer" in result.stdout

    def test_bad_config_file_exits_non_zero(self) -> None:
        result = runner.invoke(
            app, ["list", "--config", str(FIXTURES / "list_config.yaml")]
        )

        assert result.exit_code == 1
        assert "must be a mapping" in result.output

    def test_invalid_log_format_exits_non_zero(self) -> None:
        result = runner.invoke(app, ["list", "--log-format", "xml"])

        assert result.exit_code == 1
        assert "Invalid log format" in result.output


class TestShowCommand:
    def test_shows_details_and_sample_trace(self) -> None:
        result = runner.invoke(app, ["show", "prototype"])

        assert result.exit_code == 0
        assert "Prototype" in result.stdout
        assert "creational" in result.stdout
        assert '"blue"' in result.stdout
        assert "Original unchanged: True" in result.stdout

    def test_unknown_pattern_exits_non_zero(self) -> None:
        result = runner.invoke(app, ["show", "interpreter"])

        assert result.exit_code == 1
        assert "unknown pattern" in result.output
