"""Pytest configuration and shared fixtures for door overlay tests."""

from __future__ import annotations

import pytest

from doorpanels.domain import CutResult, DoorConfig, compute_cut_result


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: end-to-end CLI tests")
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared door fixtures
# =============================================================================


@pytest.fixture
def default_config() -> DoorConfig:
    """Standard UK interior door (762 x 1981) with the handle on the left."""
    return DoorConfig()


@pytest.fixture
def default_result(default_config: DoorConfig) -> CutResult:
    """Cut list for the standard door."""
    return compute_cut_result(default_config)


@pytest.fixture
def clear_handle_config() -> DoorConfig:
    """Standard door whose handle spread fits inside the left margin."""
    return DoorConfig(handle_spread=70)


@pytest.fixture
def invalid_result() -> CutResult:
    """Cut list for a door whose panels are too wide for their units."""
    return compute_cut_result(DoorConfig(mdf_panel_width=400))
