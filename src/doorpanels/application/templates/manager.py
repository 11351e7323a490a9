"""Bundled door project templates.

Each template is a complete project file shipped in ``data/``. Templates are
read through the normal project loader, so a listing can show the door each
one describes and a new project can start from a renamed copy.
"""

import json
from dataclasses import dataclass
from importlib import resources
from pathlib import Path

from doorpanels.application.config import (
    DoorProjectConfiguration,
    config_to_door,
    doors_to_config,
    load_config_from_dict,
)
from doorpanels.domain import DoorConfig
from doorpanels.domain.services import format_mm

DATA_PACKAGE = "doorpanels.application.templates"

# Template name -> description, in listing order
TEMPLATE_DESCRIPTIONS: dict[str, str] = {
    "uk-interior": "Standard UK interior door, handle on the left",
    "uk-interior-right-hand": "Standard UK interior door, handle on the right",
    "tall-top-row": "UK interior door with a taller top row",
}


class TemplateNotFoundError(Exception):
    """Raised when a requested template does not exist."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.available = list(TEMPLATE_DESCRIPTIONS)
        super().__init__(f"Template not found: {name}")


@dataclass(frozen=True)
class TemplateInfo:
    """A bundled template and the door it starts from."""

    name: str
    description: str
    door: DoorConfig

    @property
    def outline(self) -> str:
        """One-line sketch of the door, e.g. "762 x 1981, handle left, top row 40%"."""
        d = self.door
        return (
            f"{format_mm(d.door_width)} x {format_mm(d.door_height)}, "
            f"handle {d.handle_side.value}, top row {format_mm(d.top_panel_ratio)}%"
        )


class TemplateManager:
    """Access to the bundled door project templates.

    Example:
        manager = TemplateManager()
        for info in manager.list_templates():
            print(f"{info.name}: {info.outline}")

        manager.init_template("uk-interior", Path("hall.json"), door_name="Hall")
    """

    def list_templates(self) -> list[TemplateInfo]:
        infos: list[TemplateInfo] = []
        for name, description in TEMPLATE_DESCRIPTIONS.items():
            _, door = config_to_door(self.load_template(name))
            infos.append(TemplateInfo(name, description, door))
        return infos

    def template_exists(self, name: str) -> bool:
        return name in TEMPLATE_DESCRIPTIONS

    def get_template(self, name: str) -> str:
        """Get the raw JSON text of a template.

        Raises:
            TemplateNotFoundError: If the template does not exist.
        """
        if not self.template_exists(name):
            raise TemplateNotFoundError(name)
        try:
            return (
                resources.files(DATA_PACKAGE)
                .joinpath("data", f"{name}.json")
                .read_text(encoding="utf-8")
            )
        except FileNotFoundError as e:
            raise TemplateNotFoundError(name) from e

    def load_template(self, name: str) -> DoorProjectConfiguration:
        """Parse a template into a validated project."""
        return load_config_from_dict(json.loads(self.get_template(name)))

    def init_template(
        self, name: str, output_path: Path, door_name: str | None = None
    ) -> DoorProjectConfiguration:
        """Write a template to ``output_path`` as a new project file.

        Without ``door_name`` the template text is copied unchanged.
        Otherwise the template's door is written under the given name.

        Raises:
            TemplateNotFoundError: If the template does not exist.
            ValueError: If ``door_name`` is blank.
        """
        if door_name is None:
            output_path.write_text(self.get_template(name), encoding="utf-8")
            return self.load_template(name)

        door_name = door_name.strip()
        if not door_name:
            raise ValueError("Door name must not be blank")
        _, door = config_to_door(self.load_template(name))
        project = doors_to_config([(door_name, door)])
        output_path.write_text(
            project.model_dump_json(by_alias=True, exclude_none=True, indent=2) + "\n",
            encoding="utf-8",
        )
        return project
