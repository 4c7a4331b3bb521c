"""ABOUTME: Tests for the typeresist CLI.
ABOUTME: Runs the Typer commands through CliRunner and checks printed output."""

import logging
from collections.abc import Callable
from pathlib import Path

import pytest
from typer.testing import CliRunner, Result

from typeresist.cli import app

Invoke = Callable[..., Result]


@pytest.fixture
def invoke(tmp_path: Path) -> Invoke:
    """Invoke the CLI with a bare logging config instead of the project one."""
    runner = CliRunner()
    log_config = tmp_path / "logging.yml"
    log_config.write_text("version: 1\ndisable_existing_loggers: false\n")

    def _invoke(*args: str, input: str | None = None) -> Result:
        return runner.invoke(app, ["--log-config", str(log_config), *args], input=input)

    return _invoke


class TestResist:
    """Tests for the resist command."""

    def test_lists_combinations(self, invoke: Invoke) -> None:
        result = invoke("resist", "fire")

        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert "The following type combination(s) resist Fire:" in lines
        assert "Water" in lines
        assert "Normal & Dragon" in lines
        assert "Grass" not in lines

    def test_duplicates_collapsed(self, invoke: Invoke) -> None:
        """Repeated types are listed once in the header."""
        result = invoke("resist", "fire", "FIRE", "Fire")

        assert result.exit_code == 0
        assert "resist Fire:" in result.output

    def test_multiple_types_header(self, invoke: Invoke) -> None:
        result = invoke("resist", "fire", "water")

        assert "resist Fire, Water:" in result.output

    def test_no_match(self, invoke: Invoke) -> None:
        all_types = invoke("types").output.split()
        result = invoke("resist", *all_types)

        assert result.exit_code == 0
        assert "No such type combination exists." in result.output

    def test_unknown_type(self, invoke: Invoke) -> None:
        result = invoke("resist", "fyre")

        assert result.exit_code == 1
        assert "Invalid type: fyre" in result.output

    def test_custom_chart(self, invoke: Invoke, tmp_path: Path) -> None:
        chart = tmp_path / "chart.yml"
        chart.write_text("""
types:
  Ghost:
    immune_to: [Normal]
""")

        result = invoke("resist", "normal", "--chart", str(chart))

        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert "Ghost" in lines
        assert "Rock" not in lines

    def test_missing_chart(self, invoke: Invoke, tmp_path: Path) -> None:
        result = invoke("resist", "normal", "--chart", str(tmp_path / "missing.yml"))

        assert result.exit_code == 1
        assert "Type chart not found" in result.output


class TestLoggingOptions:
    """Tests for the --log-config and --verbose options."""

    def test_missing_log_config(self, tmp_path: Path) -> None:
        """An explicitly given logging config must exist."""
        result = CliRunner().invoke(app, ["--log-config", str(tmp_path / "missing.yml"), "types"])

        assert result.exit_code == 1
        assert "Logging config not found" in result.output

    def test_verbose_emits_search_details(self, invoke: Invoke, caplog: pytest.LogCaptureFixture) -> None:
        """--verbose makes the search debug lines reach a handler."""
        logger = logging.getLogger("typeresist")
        try:
            result = invoke("resist", "fire", "--verbose")
        finally:
            logger.setLevel(logging.NOTSET)

        assert result.exit_code == 0
        assert "14 candidate types for attack types Fire" in caplog.text
        assert "Found 50 resistant type combinations" in caplog.text


class TestMatchup:
    """Tests for the matchup command."""

    def test_dual_type(self, invoke: Invoke) -> None:
        result = invoke("matchup", "steel", "fairy")

        assert result.exit_code == 0
        assert "Steel & Fairy" in result.output
        assert "Weaknesses: Fire (2x), Ground (2x)" in result.output
        assert "Immunities: Poison (0x), Dragon (0x)" in result.output

    def test_empty_band(self, invoke: Invoke) -> None:
        result = invoke("matchup", "normal")

        assert result.exit_code == 0
        assert "Resistances: -" in result.output

    def test_extra_immunity(self, invoke: Invoke) -> None:
        result = invoke("matchup", "water", "--immune", "grass")

        assert result.exit_code == 0
        assert "Immunities: Grass (0x)" in result.output

    def test_unknown_type(self, invoke: Invoke) -> None:
        result = invoke("matchup", "water", "sound")

        assert result.exit_code == 1
        assert "Invalid type: sound" in result.output


class TestInteractive:
    """Tests for the interactive command."""

    def test_collects_until_done(self, invoke: Invoke) -> None:
        result = invoke("interactive", input="fire\nfyre\nFIRE\nwater\ndone\n")

        assert result.exit_code == 0
        assert "Invalid type: fyre" in result.output
        assert "resist Fire, Water:" in result.output
        assert "Dragon" in result.output.splitlines()

    def test_done_without_types(self, invoke: Invoke) -> None:
        result = invoke("interactive", input="done\n")

        assert result.exit_code == 0
        assert "No types entered" in result.output
        assert "The following type combination(s)" not in result.output


class TestTypes:
    """Tests for the types command."""

    def test_lists_all_types(self, invoke: Invoke) -> None:
        result = invoke("types")

        assert result.exit_code == 0
        assert result.output.split() == [
            "Normal",
            "Fire",
            "Water",
            "Electric",
            "Grass",
            "Ice",
            "Fighting",
            "Poison",
            "Ground",
            "Flying",
            "Psychic",
            "Bug",
            "Rock",
            "Ghost",
            "Dragon",
            "Dark",
            "Steel",
            "Fairy",
        ]
