"""Domain layer - core layout logic."""

from .entities import MARGIN_PER_SIDE, ModuleLayout, WallConfiguration, WallModule
from .services import (
    AccessoryCompatibility,
    LayoutEngine,
    LayoutError,
    SceneMapper,
    SpecialModuleError,
    UnknownAccessoryError,
)
from .tiling import FillPlan, TilingError, fill_span, find_exact_cover, greedy_fill
from .value_objects import (
    DEFAULT_CATALOG,
    AccessoryFlags,
    AccessoryPlacement,
    AccessoryType,
    AttachmentCheck,
    Finish,
    FinishCategory,
    InstallationMode,
    LayoutInfo,
    LayoutWarning,
    ModuleCatalog,
    ModuleType,
    SnapPoint,
    SpecialRequest,
)

__all__ = [
    "AccessoryCompatibility",
    "AccessoryFlags",
    "AccessoryPlacement",
    "AccessoryType",
    "AttachmentCheck",
    "DEFAULT_CATALOG",
    "FillPlan",
    "Finish",
    "FinishCategory",
    "InstallationMode",
    "LayoutEngine",
    "LayoutError",
    "LayoutInfo",
    "LayoutWarning",
    "MARGIN_PER_SIDE",
    "ModuleCatalog",
    "ModuleLayout",
    "ModuleType",
    "SceneMapper",
    "SnapPoint",
    "SpecialModuleError",
    "SpecialRequest",
    "TilingError",
    "UnknownAccessoryError",
    "WallConfiguration",
    "WallModule",
    "fill_span",
    "find_exact_cover",
    "greedy_fill",
]
