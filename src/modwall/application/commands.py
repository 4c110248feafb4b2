"""Application commands (use cases) for wall layout generation."""

from __future__ import annotations

import logging

from modwall.domain import (
    AccessoryCompatibility,
    LayoutEngine,
    LayoutError,
    LayoutWarning,
    ModuleLayout,
    SpecialRequest,
    WallConfiguration,
)

from .dtos import MAX_STANDARD_MODULES, MAX_STANDARD_WALL_WIDTH, LayoutOutput, WallInput

logger = logging.getLogger(__name__)


class GenerateLayoutCommand:
    """Command to generate a complete wall layout.

    Validates the request, checks the special-module precondition before
    calling the layout engine, computes the layout, and resolves every
    active accessory onto a module.
    """

    def __init__(self, layout_engine: LayoutEngine | None = None) -> None:
        self.layout_engine = layout_engine or LayoutEngine()

    def execute(self, wall_input: WallInput) -> LayoutOutput:
        """Execute the layout generation command.

        Args:
            wall_input: Wall dimensions and accessory selection.

        Returns:
            LayoutOutput with the layout, placements and warnings, or with
            errors if the input was rejected.
        """
        errors = wall_input.validate()
        if errors:
            return LayoutOutput(configuration=None, layout=None, errors=errors)

        try:
            configuration = wall_input.to_wall_configuration()
        except ValueError as e:
            return LayoutOutput(configuration=None, layout=None, errors=[str(e)])

        return self.execute_configuration(configuration)

    def execute_configuration(self, configuration: WallConfiguration) -> LayoutOutput:
        """Generate the layout for an already-built wall configuration.

        The layout is always computed from scratch; nothing from a previous
        configuration is reused.
        """
        errors = self.check_preconditions(configuration)
        if errors:
            return LayoutOutput(configuration=configuration, layout=None, errors=errors)

        try:
            layout = self.layout_engine.layout(
                configuration.usable_width,
                configuration.special_request,
                standard_height=configuration.total_height,
                origin=configuration.margin_per_side,
            )
        except LayoutError as e:
            return LayoutOutput(
                configuration=configuration, layout=None, errors=[str(e)]
            )

        compatibility = AccessoryCompatibility(layout)
        placements = compatibility.generate_placements(configuration.accessories)

        warnings = list(layout.warnings)
        warnings.extend(self._placement_warnings(configuration, layout))
        warnings.extend(self._quote_warnings(configuration, layout))

        logger.info(
            f"Generated {len(layout)} modules for {configuration.total_width}mm wall "
            f"({configuration.special_request.value}), "
            f"{len(placements)} placements, {len(warnings)} warnings"
        )

        return LayoutOutput(
            configuration=configuration,
            layout=layout,
            placements=list(placements),
            warnings=warnings,
        )

    def check_preconditions(self, configuration: WallConfiguration) -> list[str]:
        """Check caller-level preconditions before invoking the engine.

        A special module needs its full reserved width; a too-narrow wall
        is rejected here rather than downgraded to a standard layout.
        """
        errors: list[str] = []
        special = configuration.special_request
        required = self.layout_engine.catalog.special_width
        if (
            special is not SpecialRequest.NONE
            and configuration.usable_width < required
        ):
            errors.append(
                f"{special.label} module requires at least {required}mm of usable "
                f"width (wall width {required + 2 * configuration.margin_per_side}mm), "
                f"got {configuration.usable_width}mm"
            )
        return errors

    def _placement_warnings(
        self, configuration: WallConfiguration, layout: ModuleLayout
    ) -> list[LayoutWarning]:
        shelves = configuration.accessories.shelves
        if shelves > len(layout):
            return [
                LayoutWarning(
                    code="shelves_capped",
                    message=(
                        f"{shelves} shelves requested but only {len(layout)} "
                        f"modules available; {shelves - len(layout)} not placed"
                    ),
                )
            ]
        return []

    def _quote_warnings(
        self, configuration: WallConfiguration, layout: ModuleLayout
    ) -> list[LayoutWarning]:
        if (
            configuration.total_width > MAX_STANDARD_WALL_WIDTH
            or len(layout) > MAX_STANDARD_MODULES
        ):
            return [
                LayoutWarning(
                    code="custom_quote",
                    message=(
                        f"Walls wider than {MAX_STANDARD_WALL_WIDTH}mm or with more "
                        f"than {MAX_STANDARD_MODULES} modules need a custom quote"
                    ),
                )
            ]
        return []
