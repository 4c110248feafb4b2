"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from modwall.domain import (
    AccessoryFlags,
    AccessoryPlacement,
    Finish,
    FinishCategory,
    InstallationMode,
    LayoutWarning,
    ModuleLayout,
    SpecialRequest,
    WallConfiguration,
)
from modwall.domain.entities import MARGIN_PER_SIDE

# Widths and heights offered as standard products, in mm
MIN_WALL_WIDTH = 1000
MAX_STANDARD_WALL_WIDTH = 6000
MAX_WALL_WIDTH = 12000
MIN_WALL_HEIGHT = 2200
MAX_WALL_HEIGHT = 4000
MAX_SHELVES = 10
MAX_STANDARD_MODULES = 6


@dataclass
class WallInput:
    """Input DTO for wall dimensions and requested accessories."""

    width: int
    height: int
    special: str = "none"
    speakers: bool = False
    shelves: int = 0
    led_lighting: bool = False
    smart_control: bool = False
    finish_category: str = "solid"
    finish_color: str = "#2d3748"
    finish_texture: str | None = None
    installation: str = "diy"

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        if self.width <= 2 * MARGIN_PER_SIDE:
            errors.append(
                f"Width must be greater than the side margins ({2 * MARGIN_PER_SIDE}mm)"
            )
        if self.width > MAX_WALL_WIDTH:
            errors.append(f"Width exceeds maximum ({MAX_WALL_WIDTH}mm)")
        if self.height <= 0:
            errors.append("Height must be positive")
        elif self.height < MIN_WALL_HEIGHT:
            errors.append(f"Height is below minimum ({MIN_WALL_HEIGHT}mm)")
        if self.height > MAX_WALL_HEIGHT:
            errors.append(f"Height exceeds maximum ({MAX_WALL_HEIGHT}mm)")
        if self.shelves < 0:
            errors.append("Shelves cannot be negative")
        if self.shelves > MAX_SHELVES:
            errors.append(f"Maximum {MAX_SHELVES} shelves supported")

        valid_specials = [s.value for s in SpecialRequest]
        if self.special not in valid_specials:
            errors.append(f"Special module must be one of: {', '.join(valid_specials)}")
        valid_finishes = [f.value for f in FinishCategory]
        if self.finish_category not in valid_finishes:
            errors.append(f"Finish category must be one of: {', '.join(valid_finishes)}")
        valid_installations = [i.value for i in InstallationMode]
        if self.installation not in valid_installations:
            errors.append(
                f"Installation must be one of: {', '.join(valid_installations)}"
            )
        return errors

    def to_accessory_flags(self) -> AccessoryFlags:
        """Convert to AccessoryFlags value object."""
        special = SpecialRequest(self.special)
        return AccessoryFlags(
            tv=special is SpecialRequest.TV,
            fire=special is SpecialRequest.FIRE,
            gaming=special is SpecialRequest.GAMING,
            speakers=self.speakers,
            shelves=self.shelves,
            led_lighting=self.led_lighting,
            smart_control=self.smart_control,
        )

    def to_wall_configuration(self) -> WallConfiguration:
        """Convert to WallConfiguration entity."""
        return WallConfiguration(
            total_width=self.width,
            total_height=self.height,
            finish=Finish(
                category=FinishCategory(self.finish_category),
                color=self.finish_color,
                texture=self.finish_texture,
            ),
            accessories=self.to_accessory_flags(),
            installation=InstallationMode(self.installation),
        )


@dataclass
class LayoutOutput:
    """Output DTO containing the generated layout results.

    Attributes:
        configuration: Wall configuration the layout was derived from.
        layout: Positioned modules, or None if generation failed.
        placements: Active accessories resolved onto modules.
        warnings: Soft conditions from layout and placement.
        errors: List of error messages if generation failed.
    """

    configuration: WallConfiguration | None
    layout: ModuleLayout | None
    placements: list[AccessoryPlacement] = field(default_factory=list)
    warnings: list[LayoutWarning] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the layout was generated successfully."""
        return len(self.errors) == 0

    @property
    def needs_custom_quote(self) -> bool:
        """Check if the wall falls outside the standard product range."""
        return any(w.code == "custom_quote" for w in self.warnings)

    @property
    def has_gap(self) -> bool:
        """Check if the layout leaves part of the usable width uncovered."""
        return any(w.code == "minimal_gap" for w in self.warnings)
