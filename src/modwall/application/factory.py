"""Service factory for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from modwall.application.commands import GenerateLayoutCommand
    from modwall.domain import (
        AccessoryCompatibility,
        LayoutEngine,
        ModuleCatalog,
        ModuleLayout,
    )
    from modwall.infrastructure.formatters import (
        JsonLayoutFormatter,
        LayoutDiagramFormatter,
        ModuleTableFormatter,
        PlacementFormatter,
        WarningFormatter,
    )


@dataclass
class ServiceFactory:
    """Factory for creating service instances.

    Centralizes service instantiation to support:
    - Dependency injection for testing
    - Swapping the module catalog for a different product line

    Services are stateless, so cached instances can be shared freely.

    Example:
        ```python
        factory = ServiceFactory()
        command = factory.create_generate_command()
        result = command.execute(WallInput(width=3200, height=2400))
        ```
    """

    catalog: "ModuleCatalog | None" = None

    _layout_engine: "LayoutEngine | None" = field(default=None, init=False, repr=False)

    def get_layout_engine(self) -> "LayoutEngine":
        """Get or create layout engine instance."""
        if self._layout_engine is None:
            from modwall.domain import LayoutEngine

            self._layout_engine = LayoutEngine(self.catalog)
        return self._layout_engine

    def create_compatibility(self, layout: "ModuleLayout") -> "AccessoryCompatibility":
        """Create accessory rules bound to a computed layout."""
        from modwall.domain import AccessoryCompatibility

        return AccessoryCompatibility(layout)

    def get_module_table_formatter(self) -> "ModuleTableFormatter":
        """Create module table formatter instance."""
        from modwall.infrastructure.formatters import ModuleTableFormatter

        return ModuleTableFormatter()

    def get_layout_diagram_formatter(self) -> "LayoutDiagramFormatter":
        """Create layout diagram formatter instance."""
        from modwall.infrastructure.formatters import LayoutDiagramFormatter

        return LayoutDiagramFormatter()

    def get_placement_formatter(self) -> "PlacementFormatter":
        """Create placement formatter instance."""
        from modwall.infrastructure.formatters import PlacementFormatter

        return PlacementFormatter()

    def get_json_formatter(self) -> "JsonLayoutFormatter":
        """Create JSON layout formatter instance."""
        from modwall.infrastructure.formatters import JsonLayoutFormatter

        return JsonLayoutFormatter()

    def get_warning_formatter(self) -> "WarningFormatter":
        """Create warning formatter instance."""
        from modwall.infrastructure.formatters import WarningFormatter

        return WarningFormatter()

    def create_generate_command(self) -> "GenerateLayoutCommand":
        """Create GenerateLayoutCommand with all dependencies."""
        from modwall.application.commands import GenerateLayoutCommand

        return GenerateLayoutCommand(layout_engine=self.get_layout_engine())


# Default factory instance
_default_factory: ServiceFactory | None = None


def get_factory() -> ServiceFactory:
    """Get the default service factory."""
    global _default_factory
    if _default_factory is None:
        _default_factory = ServiceFactory()
    return _default_factory


def set_factory(factory: ServiceFactory | None) -> None:
    """Set a custom factory (for testing)."""
    global _default_factory
    _default_factory = factory


def reset_factory() -> None:
    """Reset the factory to default (for testing cleanup)."""
    global _default_factory
    _default_factory = None
