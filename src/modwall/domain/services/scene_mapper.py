"""Scene coordinate mapping for 3D consumers.

The layout engine works in millimeters from the wall's left edge. Renderers
place meshes in meters relative to the wall center, so the conversion
happens here and nowhere else.

Coordinate system:
- Origin: center of the wall at floor level
- X: Width (left to right)
- Y: Height (bottom to top)
- Z: Out from the wall face
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..entities import ModuleLayout, WallModule
    from ..value_objects import SnapPoint

__all__ = [
    "SCENE_PRECISION",
    "ScenePosition",
    "SceneMapper",
    "to_meters",
]

SCENE_PRECISION = 6


def to_meters(mm: float) -> float:
    """Convert millimeters to meters, rounded to 6 decimal places."""
    return round(mm * 0.001, SCENE_PRECISION)


@dataclass(frozen=True)
class ScenePosition:
    """A point in scene space, in meters."""

    x: float
    y: float
    z: float


class SceneMapper:
    """Maps module and snap point coordinates into scene space."""

    def __init__(self, total_width: float) -> None:
        if total_width <= 0:
            raise ValueError("Total width must be positive")
        self.total_width = total_width

    def module_center(self, module: WallModule) -> ScenePosition:
        """Center of a module's face in scene space."""
        center_x = module.position - self.total_width / 2 + module.width / 2
        return ScenePosition(
            x=to_meters(center_x),
            y=to_meters(module.height / 2),
            z=0.0,
        )

    def module_size(self, module: WallModule) -> tuple[float, float]:
        """Module width and height in meters."""
        return to_meters(module.width), to_meters(module.height)

    def snap_point(self, point: SnapPoint) -> ScenePosition:
        """Snap point in scene space."""
        return ScenePosition(
            x=to_meters(point.wall_x - self.total_width / 2),
            y=to_meters(point.y),
            z=to_meters(point.z),
        )

    def map_layout(self, layout: ModuleLayout) -> dict[str, ScenePosition]:
        """Scene centers keyed by module id."""
        return {module.id: self.module_center(module) for module in layout.modules}
