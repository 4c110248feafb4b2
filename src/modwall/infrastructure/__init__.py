"""Infrastructure layer - output formatting."""

from .formatters import (
    JsonLayoutFormatter,
    LayoutDiagramFormatter,
    ModuleTableFormatter,
    PlacementFormatter,
    WarningFormatter,
)

__all__ = [
    "JsonLayoutFormatter",
    "LayoutDiagramFormatter",
    "ModuleTableFormatter",
    "PlacementFormatter",
    "WarningFormatter",
]
