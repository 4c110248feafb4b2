"""Integration tests for the validate CLI command.

These tests verify the validate command works correctly end-to-end,
including:
- Valid configuration files pass validation
- Invalid configuration files produce errors
- Product-range warnings are displayed
- Exit codes are correct
"""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from modwall.cli.main import app

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestValidateCommand:
    """Tests for the validate command."""

    def test_valid_minimal_config(self, runner: CliRunner) -> None:
        config_path = FIXTURES_PATH / "valid_minimal.json"
        result = runner.invoke(app, ["validate", str(config_path)])

        assert result.exit_code == 0
        assert "Validation passed. Configuration is valid." in result.output

    def test_valid_tv_config(self, runner: CliRunner) -> None:
        config_path = FIXTURES_PATH / "valid_tv.json"
        result = runner.invoke(app, ["validate", str(config_path)])

        assert result.exit_code == 0

    def test_file_not_found(self, runner: CliRunner) -> None:
        config_path = FIXTURES_PATH / "nonexistent.json"
        result = runner.invoke(app, ["validate", str(config_path)])

        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_invalid_json_syntax(self, runner: CliRunner) -> None:
        config_path = FIXTURES_PATH / "invalid_json.json"
        result = runner.invoke(app, ["validate", str(config_path)])

        assert result.exit_code == 1
        assert "Invalid JSON syntax" in result.output
        assert "Validation failed" in result.output

    def test_unknown_field_rejected(self, runner: CliRunner) -> None:
        config_path = FIXTURES_PATH / "unknown_field.json"
        result = runner.invoke(app, ["validate", str(config_path)])

        assert result.exit_code == 1
        assert "Errors:" in result.output
        assert "wall.depth" in result.output

    def test_two_specials_rejected(self, runner: CliRunner) -> None:
        config_path = FIXTURES_PATH / "two_specials.json"
        result = runner.invoke(app, ["validate", str(config_path)])

        assert result.exit_code == 1
        assert "Only one special feature" in result.output

    def test_special_too_wide(self, runner: CliRunner) -> None:
        config_path = FIXTURES_PATH / "narrow_tv.json"
        result = runner.invoke(app, ["validate", str(config_path)])

        assert result.exit_code == 1
        assert "accessories.tv" in result.output
        assert "Validation failed: 1 error(s)" in result.output

    def test_valid_config_with_warnings(self, runner: CliRunner) -> None:
        config_path = FIXTURES_PATH / "valid_with_warnings.json"
        result = runner.invoke(app, ["validate", str(config_path)])

        assert result.exit_code == 2
        assert "Warnings:" in result.output
        assert "Suggestion:" in result.output
        assert "Validation passed with 2 warning(s)" in result.output


class TestValidateLayoutPreview:
    """Tests for the module sequence shown after a successful validation."""

    def test_centered_tv_sequence(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "valid_tv.json")])

        assert result.exit_code == 0
        assert "Layout:" in result.output
        assert "1000 | TV 2000 | 1000" in result.output
        assert "3 modules, 4000mm of 4000mm usable" in result.output
        assert "uncovered" not in result.output

    def test_uncovered_width_reported(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["validate", str(FIXTURES_PATH / "valid_with_warnings.json")]
        )

        assert result.exit_code == 2
        assert "1000 | 1200 | 800" in result.output
        assert "150mm uncovered" in result.output

    def test_no_preview_on_errors(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "narrow_tv.json")])

        assert result.exit_code == 1
        assert "Layout:" not in result.output
