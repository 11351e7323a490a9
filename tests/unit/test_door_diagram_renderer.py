"""Unit tests for the SVG door schematic."""

from __future__ import annotations

import xml.etree.ElementTree as ET

import pytest

from doorpanels.domain import CutResult, DiagnosticGuide, DoorConfig, compute_cut_result
from doorpanels.infrastructure import (
    FIELD_GUIDES,
    DoorDiagramRenderer,
    InvalidResultError,
    guide_for_field,
)
from doorpanels.infrastructure.door_diagram_renderer import GUIDE_COLOR, WARN_COLOR

SVG_NS = "{http://www.w3.org/2000/svg}"


@pytest.fixture
def renderer() -> DoorDiagramRenderer:
    return DoorDiagramRenderer()


class TestGuideForField:
    """Tests for the field to guide lookup."""

    def test_every_config_field_has_a_guide(self) -> None:
        assert set(FIELD_GUIDES) == set(DoorConfig.field_names())

    @pytest.mark.parametrize(
        "field, guide",
        [
            ("door_width", DiagnosticGuide.DIMENSIONS),
            ("leftMargin", DiagnosticGuide.MARGINS),
            ("verticalGap", DiagnosticGuide.GAPS),
            ("mdfPanelWidth", DiagnosticGuide.BEADING),
            ("topPanelRatio", DiagnosticGuide.RATIO),
            ("handle_spread", DiagnosticGuide.HANDLE),
        ],
    )
    def test_lookup(self, field: str, guide: DiagnosticGuide) -> None:
        assert guide_for_field(field) is guide

    def test_unknown_field(self) -> None:
        assert guide_for_field("colour") is None


class TestDoorDiagramRenderer:
    """Tests for SVG rendering."""

    def test_is_well_formed_svg(
        self,
        renderer: DoorDiagramRenderer,
        default_config: DoorConfig,
        default_result: CutResult,
    ) -> None:
        root = ET.fromstring(renderer.render_svg(default_config, default_result))
        assert root.tag == f"{SVG_NS}svg"

    def test_scaled_size(
        self,
        renderer: DoorDiagramRenderer,
        default_config: DoorConfig,
        default_result: CutResult,
    ) -> None:
        root = ET.fromstring(renderer.render_svg(default_config, default_result))

        # (762 + 240) x 0.4 and (1981 + 240) x 0.4
        assert root.get("width") == "400.8"
        assert root.get("height") == "888.4"
        assert root.get("viewBox") == "-120 -120 1002 2221"

    def test_four_unit_groups(
        self,
        renderer: DoorDiagramRenderer,
        default_config: DoorConfig,
        default_result: CutResult,
    ) -> None:
        root = ET.fromstring(renderer.render_svg(default_config, default_result))
        ids = [g.get("id") for g in root.iter(f"{SVG_NS}g")]

        assert ids == [
            "unit-top-left",
            "unit-top-right",
            "unit-bottom-left",
            "unit-bottom-right",
        ]

    def test_panel_placement(
        self,
        renderer: DoorDiagramRenderer,
        default_config: DoorConfig,
        default_result: CutResult,
    ) -> None:
        svg = renderer.render_svg(default_config, default_result)
        # Top-left panel inset by beading (20) and gap (3)
        assert '<rect x="103" y="123" width="215" height="634.4"' in svg

    def test_handle_in_warning_colour(
        self,
        renderer: DoorDiagramRenderer,
        default_config: DoorConfig,
        default_result: CutResult,
    ) -> None:
        svg = renderer.render_svg(default_config, default_result)
        assert f'stroke="{WARN_COLOR}" stroke-width="8"' in svg

    def test_handle_without_warning(
        self, renderer: DoorDiagramRenderer, clear_handle_config: DoorConfig
    ) -> None:
        result = compute_cut_result(clear_handle_config)
        svg = renderer.render_svg(clear_handle_config, result)
        assert WARN_COLOR not in svg

    def test_no_guide_by_default(
        self,
        renderer: DoorDiagramRenderer,
        default_config: DoorConfig,
        default_result: CutResult,
    ) -> None:
        svg = renderer.render_svg(default_config, default_result)
        assert "Guide:" not in svg
        assert GUIDE_COLOR not in svg

    @pytest.mark.parametrize("guide", list(DiagnosticGuide))
    def test_every_guide_renders(
        self,
        renderer: DoorDiagramRenderer,
        default_config: DoorConfig,
        default_result: CutResult,
        guide: DiagnosticGuide,
    ) -> None:
        svg = renderer.render_svg(default_config, default_result, guide=guide)

        assert f"<!-- Guide: {guide.value} -->" in svg
        ET.fromstring(svg)

    def test_overlay_pins(
        self,
        renderer: DoorDiagramRenderer,
        default_config: DoorConfig,
        default_result: CutResult,
    ) -> None:
        svg = renderer.render_svg(
            default_config, default_result, guide=DiagnosticGuide.OVERLAY
        )
        root = ET.fromstring(svg)

        circles = list(root.iter(f"{SVG_NS}circle"))
        assert len(circles) == 4
        assert (circles[0].get("cx"), circles[0].get("cy")) == ("210.5", "110")
        assert "(551.5, 870.4)" in svg

    def test_ratio_guide_labels(
        self,
        renderer: DoorDiagramRenderer,
        default_config: DoorConfig,
        default_result: CutResult,
    ) -> None:
        svg = renderer.render_svg(
            default_config, default_result, guide=DiagnosticGuide.RATIO
        )
        assert ">40%</text>" in svg
        assert ">60%</text>" in svg

    def test_refuses_invalid(
        self, renderer: DoorDiagramRenderer, invalid_result: CutResult
    ) -> None:
        with pytest.raises(InvalidResultError):
            renderer.render_svg(DoorConfig(mdf_panel_width=400), invalid_result, name="Wide")
