"""Unit tests for the TemplateManager class."""

import json
from pathlib import Path

import pytest

from doorpanels.application.config import (
    config_to_door,
    load_config,
    load_config_from_dict,
)
from doorpanels.application.templates import (
    TEMPLATE_DESCRIPTIONS,
    TemplateManager,
    TemplateNotFoundError,
)
from doorpanels.domain import DoorConfig, HandleSide


class TestTemplateManager:
    """Test suite for TemplateManager class."""

    @pytest.fixture
    def manager(self) -> TemplateManager:
        return TemplateManager()

    def test_list_templates(self, manager: TemplateManager) -> None:
        names = [info.name for info in manager.list_templates()]
        assert names == ["uk-interior", "uk-interior-right-hand", "tall-top-row"]

    def test_listing_describes_each_door(self, manager: TemplateManager) -> None:
        infos = {info.name: info for info in manager.list_templates()}

        assert infos["uk-interior"].door == DoorConfig()
        assert infos["uk-interior"].outline == "762 x 1981, handle left, top row 40%"
        assert infos["tall-top-row"].outline.endswith("top row 55%")
        assert infos["uk-interior-right-hand"].description == (
            TEMPLATE_DESCRIPTIONS["uk-interior-right-hand"]
        )

    @pytest.mark.parametrize("name", list(TEMPLATE_DESCRIPTIONS))
    def test_every_template_loads(self, manager: TemplateManager, name: str) -> None:
        """Each bundled template is a valid project file."""
        project = load_config_from_dict(json.loads(manager.get_template(name)))
        assert project.doors[0].name == "Door 1"

    def test_uk_interior_is_the_default_door(self, manager: TemplateManager) -> None:
        project = load_config_from_dict(json.loads(manager.get_template("uk-interior")))
        _, config = config_to_door(project)
        assert config == DoorConfig()

    def test_right_hand(self, manager: TemplateManager) -> None:
        project = load_config_from_dict(
            json.loads(manager.get_template("uk-interior-right-hand"))
        )
        _, config = config_to_door(project)
        assert config.handle_side is HandleSide.RIGHT

    def test_tall_top_row(self, manager: TemplateManager) -> None:
        project = load_config_from_dict(json.loads(manager.get_template("tall-top-row")))
        _, config = config_to_door(project)
        assert config.top_panel_ratio == 55

    def test_get_unknown_template(self, manager: TemplateManager) -> None:
        with pytest.raises(TemplateNotFoundError) as exc_info:
            manager.get_template("garage")
        assert exc_info.value.name == "garage"
        assert exc_info.value.available == list(TEMPLATE_DESCRIPTIONS)

    def test_template_exists(self, manager: TemplateManager) -> None:
        assert manager.template_exists("uk-interior")
        assert not manager.template_exists("garage")

    def test_init_template(self, manager: TemplateManager, tmp_path: Path) -> None:
        output = tmp_path / "hall.json"
        manager.init_template("uk-interior", output)

        assert output.read_text(encoding="utf-8") == manager.get_template("uk-interior")
        assert load_config(output).doors[0].config.door_width == 762

    def test_init_template_with_door_name(
        self, manager: TemplateManager, tmp_path: Path
    ) -> None:
        output = tmp_path / "landing.json"
        project = manager.init_template("tall-top-row", output, door_name="  Landing ")

        assert project.doors[0].name == "Landing"
        loaded = load_config(output)
        name, config = config_to_door(loaded)
        assert name == "Landing"
        assert config.top_panel_ratio == 55
        assert "topPanelRatio" in output.read_text(encoding="utf-8")

    def test_init_template_rejects_blank_door_name(
        self, manager: TemplateManager, tmp_path: Path
    ) -> None:
        output = tmp_path / "blank.json"
        with pytest.raises(ValueError, match="must not be blank"):
            manager.init_template("uk-interior", output, door_name="   ")
        assert not output.exists()
