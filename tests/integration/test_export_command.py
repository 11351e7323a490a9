"""Integration tests for the export CLI command."""

import json
from pathlib import Path

import ezdxf
import pytest
from typer.testing import CliRunner

from doorpanels.cli.main import app

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "doors"


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestExportCommand:
    """Tests for the export command."""

    def test_default_door_all_formats(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(app, ["export", "--output-dir", str(tmp_path)])

        assert result.exit_code == 0
        assert "Exported files:" in result.output
        assert sorted(p.name for p in tmp_path.iterdir()) == [
            "door_dxf.dxf",
            "door_json.json",
            "door_svg.svg",
            "door_txt.txt",
        ]

    def test_single_door_project(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            [
                "export",
                "-c",
                str(FIXTURES_PATH / "valid_door.json"),
                "--formats",
                "json",
                "-d",
                str(tmp_path),
            ],
        )

        assert result.exit_code == 0
        data = json.loads((tmp_path / "valid_door_json.json").read_text(encoding="utf-8"))
        assert data["name"] == "Hall door"

    def test_multi_door_project(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            [
                "export",
                "-c",
                str(FIXTURES_PATH / "two_doors.json"),
                "--formats",
                "txt, dxf",
                "-d",
                str(tmp_path),
                "--project-name",
                "house",
            ],
        )

        assert result.exit_code == 0
        assert sorted(p.name for p in tmp_path.iterdir()) == [
            "house_hall-door_dxf.dxf",
            "house_hall-door_txt.txt",
            "house_landing_dxf.dxf",
            "house_landing_txt.txt",
        ]
        doc = ezdxf.readfile(tmp_path / "house_landing_dxf.dxf")
        assert len(doc.modelspace().query("CIRCLE")) == 4

    def test_unknown_format(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(
            app, ["export", "--formats", "svg,png", "-d", str(tmp_path)]
        )

        assert result.exit_code == 1
        assert "Unknown formats: png" in result.output
        assert list(tmp_path.iterdir()) == []

    def test_invalid_door_blocks_export(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            ["export", "-c", str(FIXTURES_PATH / "panel_too_wide.json"), "-d", str(tmp_path)],
        )

        assert result.exit_code == 1
        assert "Error: Wide panels: MDF panel is too wide" in result.output
        assert list(tmp_path.iterdir()) == []

    def test_doors_sharing_a_file_name_block_export(
        self, runner: CliRunner, tmp_path: Path
    ) -> None:
        """Two doors whose names map to the same file are rejected up front."""
        result = runner.invoke(
            app,
            [
                "export",
                "-c",
                str(FIXTURES_PATH / "clashing_names.json"),
                "--formats",
                "json",
                "-d",
                str(tmp_path),
                "-n",
                "house",
            ],
        )

        assert result.exit_code == 1
        assert "'Hall Door' and 'hall-door'" in result.output
        assert "house_hall-door" in result.output
        assert list(tmp_path.iterdir()) == []
