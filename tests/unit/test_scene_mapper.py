"""Unit tests for scene coordinate mapping."""

import pytest

from modwall.domain import AccessoryCompatibility, ModuleLayout, SceneMapper
from modwall.domain.services import ScenePosition, to_meters


class TestToMeters:
    def test_converts_millimeters(self) -> None:
        assert to_meters(2000) == 2.0

    def test_rounds_to_six_decimals(self) -> None:
        assert to_meters(1234.5678) == 1.234568


class TestSceneMapper:
    """Tests for module and snap point conversion."""

    def test_rejects_non_positive_width(self) -> None:
        with pytest.raises(ValueError, match="positive"):
            SceneMapper(0)

    def test_module_centers_are_wall_centered(self, tv_layout: ModuleLayout) -> None:
        mapper = SceneMapper(4000)
        left, tv, right = tv_layout.modules

        assert mapper.module_center(left) == ScenePosition(x=-1.5, y=1.2, z=0.0)
        assert mapper.module_center(tv).x == 0.0
        assert mapper.module_center(right).x == 1.5

    def test_module_size(self, tv_layout: ModuleLayout) -> None:
        assert SceneMapper(4000).module_size(tv_layout.modules[1]) == (2.0, 2.4)

    def test_snap_point(self, tv_layout: ModuleLayout) -> None:
        (point,) = AccessoryCompatibility(tv_layout).snap_points("tv")
        position = SceneMapper(4000).snap_point(point)

        assert position == ScenePosition(x=0.0, y=1.4, z=0.15)

    def test_map_layout(self, tv_layout: ModuleLayout) -> None:
        centers = SceneMapper(4000).map_layout(tv_layout)

        assert list(centers) == ["module-0", "module-1", "module-2"]
        assert centers["module-2"].x == 1.5
