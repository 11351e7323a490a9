"""Integration tests for the templates CLI commands."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from doorpanels.cli.main import app


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestTemplatesList:
    """Tests for 'templates list'."""

    def test_lists_all_templates(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["templates", "list"])

        assert result.exit_code == 0
        assert "Available templates:" in result.output
        assert "uk-interior " in result.output
        assert "762 x 1981, handle right, top row 40%" in result.output
        assert "uk-interior-right-hand" in result.output
        assert "tall-top-row" in result.output


class TestTemplatesInit:
    """Tests for 'templates init'."""

    def test_init_creates_file(self, runner: CliRunner, tmp_path: Path) -> None:
        output = tmp_path / "hall.json"
        result = runner.invoke(app, ["templates", "init", "uk-interior", "-o", str(output)])

        assert result.exit_code == 0
        assert f"Created: {output}" in result.output
        assert json.loads(output.read_text(encoding="utf-8"))["schema_version"] == "1.0"

    def test_initialized_file_validates(self, runner: CliRunner, tmp_path: Path) -> None:
        output = tmp_path / "landing.json"
        runner.invoke(app, ["templates", "init", "tall-top-row", "-o", str(output)])

        result = runner.invoke(app, ["validate", str(output)])
        # The standard handle spread reaches past the 80 mm margin
        assert result.exit_code == 2

    def test_refuses_to_overwrite(self, runner: CliRunner, tmp_path: Path) -> None:
        output = tmp_path / "hall.json"
        output.write_text("{}", encoding="utf-8")

        result = runner.invoke(app, ["templates", "init", "uk-interior", "-o", str(output)])

        assert result.exit_code == 1
        assert "File already exists" in result.output
        assert output.read_text(encoding="utf-8") == "{}"

    def test_force_overwrites(self, runner: CliRunner, tmp_path: Path) -> None:
        output = tmp_path / "hall.json"
        output.write_text("{}", encoding="utf-8")

        result = runner.invoke(
            app, ["templates", "init", "uk-interior", "-o", str(output), "--force"]
        )

        assert result.exit_code == 0
        assert "doors" in json.loads(output.read_text(encoding="utf-8"))

    def test_unknown_template(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(
            app, ["templates", "init", "garage", "-o", str(tmp_path / "x.json")]
        )

        assert result.exit_code == 1
        assert "Template not found: garage" in result.output
        assert "Available templates: uk-interior" in result.output

    def test_door_name_option(self, runner: CliRunner, tmp_path: Path) -> None:
        output = tmp_path / "landing.json"
        result = runner.invoke(
            app,
            ["templates", "init", "tall-top-row", "-o", str(output), "-n", "Landing"],
        )

        assert result.exit_code == 0
        assert "(door 'Landing')" in result.output
        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["doors"][0]["name"] == "Landing"

        calculated = runner.invoke(
            app, ["calculate", "-c", str(output), "--door", "Landing", "-f", "compact"]
        )
        assert calculated.exit_code == 0
