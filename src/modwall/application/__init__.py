"""Application layer - use cases and orchestration."""

from .commands import GenerateLayoutCommand
from .dtos import LayoutOutput, WallInput

__all__ = [
    "GenerateLayoutCommand",
    "LayoutOutput",
    "WallInput",
]
