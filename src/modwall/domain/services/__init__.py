"""Domain services for modular wall layouts.

This package provides:
- Layout generation (tiling the usable width around a centered special module)
- Accessory compatibility rules and snap points
- Scene coordinate mapping for 3D consumers
"""

from .accessory_compatibility import (
    AccessoryCompatibility,
    UnknownAccessoryError,
    parse_accessory,
)
from .layout_engine import (
    DEFAULT_STANDARD_HEIGHT,
    MINIMAL_GAP_THRESHOLD,
    LayoutEngine,
    LayoutError,
    SpecialModuleError,
    round_mm,
)
from .scene_mapper import SCENE_PRECISION, SceneMapper, ScenePosition, to_meters

__all__ = [
    "AccessoryCompatibility",
    "DEFAULT_STANDARD_HEIGHT",
    "LayoutEngine",
    "LayoutError",
    "MINIMAL_GAP_THRESHOLD",
    "SCENE_PRECISION",
    "SceneMapper",
    "ScenePosition",
    "SpecialModuleError",
    "UnknownAccessoryError",
    "parse_accessory",
    "round_mm",
    "to_meters",
]
