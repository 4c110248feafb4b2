"""Pytest configuration and shared fixtures for modwall tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from modwall.application.commands import GenerateLayoutCommand
    from modwall.domain import LayoutEngine, ModuleLayout


@pytest.fixture(autouse=True)
def _reset_service_factory():
    """Give every test a fresh default service factory."""
    from modwall.application.factory import reset_factory

    reset_factory()
    yield
    reset_factory()


@pytest.fixture
def generate_command() -> "GenerateLayoutCommand":
    """Create a GenerateLayoutCommand instance using the factory."""
    from modwall.application.factory import get_factory

    return get_factory().create_generate_command()


@pytest.fixture
def engine() -> "LayoutEngine":
    """Layout engine with the default catalog."""
    from modwall.domain import LayoutEngine

    return LayoutEngine()


@pytest.fixture
def tv_layout(engine: "LayoutEngine") -> "ModuleLayout":
    """4000mm usable width around a TV module: 1000 | TV 2000 | 1000."""
    return engine.layout(4000, "tv")


@pytest.fixture
def three_module_layout(engine: "LayoutEngine") -> "ModuleLayout":
    """3000mm usable width without a special module: 800 | 1200 | 1000."""
    return engine.layout(3000)
