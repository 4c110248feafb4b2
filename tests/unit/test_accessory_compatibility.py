"""Unit tests for accessory compatibility rules, snap points and placements."""

import pytest

from modwall.domain import (
    AccessoryCompatibility,
    AccessoryFlags,
    AccessoryType,
    LayoutEngine,
    ModuleLayout,
    UnknownAccessoryError,
)
from modwall.domain.services import parse_accessory


class TestParseAccessory:
    """Tests for accessory id resolution."""

    def test_canonical_ids(self) -> None:
        assert parse_accessory("ledLighting") is AccessoryType.LED_LIGHTING
        assert parse_accessory("smartControl") is AccessoryType.SMART_CONTROL

    def test_aliases(self) -> None:
        assert parse_accessory("led_lighting") is AccessoryType.LED_LIGHTING
        assert parse_accessory("led") is AccessoryType.LED_LIGHTING
        assert parse_accessory("smart_control") is AccessoryType.SMART_CONTROL

    def test_enum_passthrough(self) -> None:
        assert parse_accessory(AccessoryType.SHELVES) is AccessoryType.SHELVES

    def test_unknown_accessory(self) -> None:
        with pytest.raises(UnknownAccessoryError, match="Unknown accessory 'laser'"):
            parse_accessory("laser")


class TestCanAttach:
    """Tests for per-module attachment checks."""

    def test_speakers_only_on_edges(self, three_module_layout: ModuleLayout) -> None:
        compatibility = AccessoryCompatibility(three_module_layout)

        center = compatibility.can_attach("module-1", "speakers")
        assert center.valid is False
        assert center.reason == "Speakers can only be placed on edge modules"

        assert compatibility.can_attach("module-0", "speakers").valid is True
        assert compatibility.can_attach("module-2", "speakers").valid is True

    def test_tv_needs_tv_module(self, tv_layout: ModuleLayout) -> None:
        compatibility = AccessoryCompatibility(tv_layout)

        assert compatibility.can_attach("module-1", "tv").valid is True
        rejected = compatibility.can_attach("module-0", "tv")
        assert rejected.valid is False
        assert rejected.reason == "TV requires a 2×1000mm TV module"

    def test_fire_rejected_on_tv_module(self, tv_layout: ModuleLayout) -> None:
        check = AccessoryCompatibility(tv_layout).can_attach("module-1", "fire")
        assert check.reason == "Fire requires a 2×1000mm Fire module"

    def test_gaming_reason(self, tv_layout: ModuleLayout) -> None:
        check = AccessoryCompatibility(tv_layout).can_attach("module-1", "gaming")
        assert check.reason == "Gaming console requires a Gaming module with extended base"

    def test_led_lighting_on_edges(self, tv_layout: ModuleLayout) -> None:
        compatibility = AccessoryCompatibility(tv_layout)

        assert compatibility.can_attach("module-0", "ledLighting").valid is True
        check = compatibility.can_attach("module-1", "led_lighting")
        assert check.valid is False
        assert check.reason == "LED lighting can only be placed on edge or top panels"

    def test_smart_control_only_on_last_module(self, tv_layout: ModuleLayout) -> None:
        compatibility = AccessoryCompatibility(tv_layout)

        assert compatibility.can_attach("module-2", "smartControl").valid is True
        check = compatibility.can_attach("module-0", "smartControl")
        assert check.valid is False
        assert check.reason == "Smart control panel must be placed on an end module"

    def test_shelves_anywhere(self, tv_layout: ModuleLayout) -> None:
        compatibility = AccessoryCompatibility(tv_layout)
        assert all(
            compatibility.can_attach(m.id, "shelves").valid for m in tv_layout.modules
        )

    def test_unknown_module(self, tv_layout: ModuleLayout) -> None:
        check = AccessoryCompatibility(tv_layout).can_attach("module-9", "shelves")
        assert check.valid is False
        assert check.reason == "Module not found"

    def test_unknown_accessory_raises(self, tv_layout: ModuleLayout) -> None:
        with pytest.raises(UnknownAccessoryError):
            AccessoryCompatibility(tv_layout).can_attach("module-0", "laser")

    def test_single_module_is_both_edges(self, engine: LayoutEngine) -> None:
        compatibility = AccessoryCompatibility(engine.layout(1000))

        assert compatibility.can_attach("module-0", "speakers").valid is True
        assert compatibility.can_attach("module-0", "smartControl").valid is True


class TestSnapPoints:
    """Tests for snap point coordinates."""

    def test_tv_snap_point(self, tv_layout: ModuleLayout) -> None:
        (point,) = AccessoryCompatibility(tv_layout).snap_points("tv")

        assert point.module_id == "module-1"
        assert (point.x, point.y, point.z) == (1000, 1400, 150)
        assert point.wall_x == 2000

    def test_speakers_sit_outboard(self, tv_layout: ModuleLayout) -> None:
        first, last = AccessoryCompatibility(tv_layout).snap_points("speakers")

        assert first.module_id == "module-0"
        assert (first.x, first.y, first.z) == (200, 1920, 150)
        assert last.module_id == "module-2"
        assert (last.x, last.y) == (800, 1920)

    def test_led_and_control_points(self, tv_layout: ModuleLayout) -> None:
        compatibility = AccessoryCompatibility(tv_layout)

        led = compatibility.snap_points("ledLighting")[0]
        assert (led.x, led.y, led.z) == (500, 2380, 200)

        (control,) = compatibility.snap_points("smartControl")
        assert control.module_id == "module-2"
        assert (control.x, control.y, control.z) == (850, 1200, 150)

    def test_shelf_points_on_every_module(self, tv_layout: ModuleLayout) -> None:
        points = AccessoryCompatibility(tv_layout).snap_points("shelves")

        assert [p.module_id for p in points] == ["module-0", "module-1", "module-2"]
        assert [p.x for p in points] == [500, 1000, 500]
        assert all(p.y == 1800 and p.z == 200 for p in points)

    def test_gaming_snap_point(self, engine: LayoutEngine) -> None:
        layout = engine.layout(4000, "gaming")
        (point,) = AccessoryCompatibility(layout).snap_points("gaming")

        assert (point.x, point.y, point.z) == (1000, 750, 350)

    def test_no_eligible_module(self, three_module_layout: ModuleLayout) -> None:
        assert AccessoryCompatibility(three_module_layout).snap_points("fire") == ()


class TestGeneratePlacements:
    """Tests for resolving active accessories onto modules."""

    def test_places_each_active_accessory(self, tv_layout: ModuleLayout) -> None:
        flags = AccessoryFlags(tv=True, speakers=True, shelves=2)
        placements = AccessoryCompatibility(tv_layout).generate_placements(flags)

        assert [(p.label, p.module_id) for p in placements] == [
            ("tv", "module-1"),
            ("speakers", "module-0"),
            ("shelves", "module-0"),
            ("shelves-1", "module-1"),
        ]

    def test_shelves_beyond_module_count_are_dropped(
        self, tv_layout: ModuleLayout
    ) -> None:
        placements = AccessoryCompatibility(tv_layout).generate_placements(
            AccessoryFlags(shelves=5)
        )
        assert len(placements) == 3

    def test_accessory_without_eligible_module_is_skipped(
        self, three_module_layout: ModuleLayout
    ) -> None:
        placements = AccessoryCompatibility(three_module_layout).generate_placements(
            AccessoryFlags(fire=True, smart_control=True)
        )
        assert [(p.accessory, p.module_id) for p in placements] == [
            (AccessoryType.SMART_CONTROL, "module-2")
        ]

    def test_no_accessories(self, tv_layout: ModuleLayout) -> None:
        assert AccessoryCompatibility(tv_layout).generate_placements(AccessoryFlags()) == ()


class TestModuleTooltip:
    """Tests for module capability descriptions."""

    def test_special_module(self, tv_layout: ModuleLayout) -> None:
        assert (
            AccessoryCompatibility(tv_layout).module_tooltip("module-1")
            == "2000mm Module – TV Ready"
        )

    def test_left_edge_module(self, tv_layout: ModuleLayout) -> None:
        assert (
            AccessoryCompatibility(tv_layout).module_tooltip("module-0")
            == "1000mm Module – Speaker Ready, LED Ready, Shelf Compatible"
        )

    def test_right_edge_module(self, tv_layout: ModuleLayout) -> None:
        assert AccessoryCompatibility(tv_layout).module_tooltip("module-2") == (
            "1000mm Module – Speaker Ready, LED Ready, Control Panel Ready, "
            "Shelf Compatible"
        )

    def test_inner_module(self, three_module_layout: ModuleLayout) -> None:
        assert (
            AccessoryCompatibility(three_module_layout).module_tooltip("module-1")
            == "1200mm Module – Shelf Compatible"
        )

    def test_unknown_module(self, tv_layout: ModuleLayout) -> None:
        assert AccessoryCompatibility(tv_layout).module_tooltip("module-7") == ""
