"""Unit tests for the layout generation command and its DTOs."""

import pytest

from modwall.application import GenerateLayoutCommand, WallInput
from modwall.application.factory import ServiceFactory, get_factory, set_factory
from modwall.domain import (
    AccessoryFlags,
    AccessoryType,
    LayoutEngine,
    ModuleCatalog,
    WallConfiguration,
)


class TestWallInput:
    """Tests for WallInput validation and conversion."""

    def test_valid_input(self) -> None:
        assert WallInput(width=3200, height=2400).validate() == []

    def test_width_must_exceed_margins(self) -> None:
        errors = WallInput(width=40, height=2400).validate()
        assert "Width must be greater than the side margins (50mm)" in errors

    def test_width_maximum(self) -> None:
        errors = WallInput(width=12500, height=2400).validate()
        assert "Width exceeds maximum (12000mm)" in errors

    def test_height_range(self) -> None:
        assert "Height is below minimum (2200mm)" in WallInput(3200, 1800).validate()
        assert "Height exceeds maximum (4000mm)" in WallInput(3200, 4200).validate()
        assert "Height must be positive" in WallInput(3200, 0).validate()

    def test_shelves_range(self) -> None:
        assert "Shelves cannot be negative" in WallInput(3200, 2400, shelves=-1).validate()
        assert "Maximum 10 shelves supported" in WallInput(
            3200, 2400, shelves=11
        ).validate()

    def test_unknown_special(self) -> None:
        errors = WallInput(width=3200, height=2400, special="aquarium").validate()
        assert errors == ["Special module must be one of: none, tv, fire, gaming"]

    def test_to_wall_configuration(self) -> None:
        wall_input = WallInput(
            width=4050,
            height=2400,
            special="gaming",
            shelves=2,
            led_lighting=True,
            installation="professional",
        )
        config = wall_input.to_wall_configuration()

        assert isinstance(config, WallConfiguration)
        assert config.usable_width == 4000
        assert config.accessories == AccessoryFlags(gaming=True, shelves=2, led_lighting=True)
        assert config.installation.value == "professional"


class TestGenerateLayoutCommand:
    """Tests for GenerateLayoutCommand."""

    def test_generates_layout_with_placements(
        self, generate_command: GenerateLayoutCommand
    ) -> None:
        result = generate_command.execute(
            WallInput(width=4050, height=2400, special="tv", speakers=True, shelves=2)
        )

        assert result.is_valid
        assert [m.width for m in result.layout.modules] == [1000, 2000, 1000]
        assert [m.position for m in result.layout.modules] == [25, 1025, 3025]
        assert [p.label for p in result.placements] == [
            "tv",
            "speakers",
            "shelves",
            "shelves-1",
        ]
        assert result.warnings == []

    def test_modules_use_wall_height(self, generate_command: GenerateLayoutCommand) -> None:
        result = generate_command.execute(WallInput(width=2050, height=2700))
        assert all(m.height == 2700 for m in result.layout.modules)

    def test_narrow_wall_rejects_special_before_layout(self) -> None:
        class RecordingEngine(LayoutEngine):
            calls = 0

            def layout(self, *args, **kwargs):
                RecordingEngine.calls += 1
                return super().layout(*args, **kwargs)

        command = GenerateLayoutCommand(layout_engine=RecordingEngine())
        result = command.execute(WallInput(width=1950, height=2400, special="tv"))

        assert not result.is_valid
        assert result.layout is None
        assert result.errors == [
            "TV module requires at least 2000mm of usable width "
            "(wall width 2050mm), got 1900mm"
        ]
        assert RecordingEngine.calls == 0

    def test_invalid_input_returns_errors(
        self, generate_command: GenerateLayoutCommand
    ) -> None:
        result = generate_command.execute(WallInput(width=3200, height=1000))

        assert not result.is_valid
        assert result.configuration is None
        assert result.layout is None

    def test_gap_is_reported(self, generate_command: GenerateLayoutCommand) -> None:
        result = generate_command.execute(WallInput(width=3200, height=2400))

        assert result.is_valid
        assert result.has_gap
        assert result.layout.gap == 150

    def test_shelves_beyond_module_count(
        self, generate_command: GenerateLayoutCommand
    ) -> None:
        result = generate_command.execute(
            WallInput(width=4050, height=2400, special="tv", shelves=5)
        )

        shelves = [p for p in result.placements if p.accessory is AccessoryType.SHELVES]
        assert [p.module_id for p in shelves] == ["module-0", "module-1", "module-2"]
        assert result.placements[0].accessory is AccessoryType.TV
        assert result.placements[0].module_id == "module-1"
        assert len(result.placements) == 4
        capped = [w for w in result.warnings if w.code == "shelves_capped"]
        assert len(capped) == 1
        assert capped[0].message == (
            "5 shelves requested but only 3 modules available; 2 not placed"
        )

    def test_wide_wall_needs_custom_quote(
        self, generate_command: GenerateLayoutCommand
    ) -> None:
        result = generate_command.execute(WallInput(width=6650, height=2400, special="tv"))

        assert result.is_valid
        assert result.needs_custom_quote
        assert len(result.layout) == 7

    def test_standard_wall_needs_no_quote(
        self, generate_command: GenerateLayoutCommand
    ) -> None:
        result = generate_command.execute(WallInput(width=4050, height=2400))
        assert not result.needs_custom_quote

    def test_execute_configuration_is_fresh_each_time(
        self, generate_command: GenerateLayoutCommand
    ) -> None:
        config = WallConfiguration(total_width=4050, total_height=2400)
        first = generate_command.execute_configuration(config)
        second = generate_command.execute_configuration(
            config.with_accessories(AccessoryFlags(fire=True))
        )

        assert first.layout.special_module is None
        assert second.layout.special_module.type.value == "fire"


class TestServiceFactory:
    """Tests for service wiring."""

    def test_layout_engine_is_cached(self) -> None:
        factory = ServiceFactory()
        assert factory.get_layout_engine() is factory.get_layout_engine()

    def test_custom_catalog_reaches_command(self) -> None:
        catalog = ModuleCatalog(widths=(500, 1000), edge_widths=(500, 1000))
        command = ServiceFactory(catalog=catalog).create_generate_command()

        result = command.execute(WallInput(width=2550, height=2400))
        assert [m.width for m in result.layout.modules] == [500, 1000, 1000]

    def test_set_factory(self) -> None:
        custom = ServiceFactory()
        set_factory(custom)
        assert get_factory() is custom
