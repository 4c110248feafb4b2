"""Validation structures and product-range advisory checks.

This module provides validation result structures and domain-specific checks
for wall configurations: hard errors for walls that cannot be built as
requested, and advisories for walls outside the standard product range.
"""

from dataclasses import dataclass, field
from typing import Any

from modwall.application.config.schema import ModwallConfiguration
from modwall.application.dtos import (
    MAX_STANDARD_MODULES,
    MAX_STANDARD_WALL_WIDTH,
    MIN_WALL_WIDTH,
)
from modwall.domain import (
    DEFAULT_CATALOG,
    MARGIN_PER_SIDE,
    LayoutEngine,
    LayoutError,
    SpecialRequest,
)


@dataclass
class ValidationError:
    """A blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "wall.width")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the configuration has no blocking errors."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        """Check if the configuration has any warnings."""
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """Get the CLI exit code based on validation status.

        Returns:
            0 if valid with no warnings
            1 if there are errors
            2 if valid but has warnings
        """
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        """Add a validation error and return self for chaining."""
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        """Add a validation warning and return self for chaining."""
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Merge another ValidationResult into this one."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


def check_wall_fits(config: ModwallConfiguration) -> ValidationResult:
    """Check that the requested special module fits the usable width."""
    result = ValidationResult()

    width = config.wall.width
    if width <= 2 * MARGIN_PER_SIDE:
        result.add_error(
            path="wall.width",
            message=f"Wall width must exceed both side margins ({2 * MARGIN_PER_SIDE}mm)",
            value=width,
        )
        return result

    special = config.accessories.special_request
    usable = width - 2 * MARGIN_PER_SIDE
    required = DEFAULT_CATALOG.special_width
    if special is not SpecialRequest.NONE and usable < required:
        result.add_error(
            path=f"accessories.{special.value}",
            message=(
                f"{special.label} module requires at least {required}mm of usable "
                f"width (wall width {required + 2 * MARGIN_PER_SIDE}mm), got {usable}mm"
            ),
            value=width,
        )
    return result


def check_product_advisories(config: ModwallConfiguration) -> ValidationResult:
    """Check the configuration against the standard product range.

    Advisories checked:
    - Wall width below the smallest standard wall
    - Wall width or module count needing a custom quote
    - Usable width the catalog cannot cover exactly
    - More shelves requested than there are modules

    Assumes ``check_wall_fits`` passed.
    """
    result = ValidationResult()
    width = config.wall.width

    if width < MIN_WALL_WIDTH:
        result.add_warning(
            path="wall.width",
            message=(
                f"Wall width of {width}mm is below the standard minimum "
                f"of {MIN_WALL_WIDTH}mm"
            ),
            suggestion="Narrow walls may hold a single module or none",
        )

    try:
        layout = LayoutEngine().layout(
            width - 2 * MARGIN_PER_SIDE,
            config.accessories.special_request,
            standard_height=config.wall.height,
            origin=MARGIN_PER_SIDE,
        )
    except LayoutError as e:
        result.add_error(path="wall", message=str(e), value=width)
        return result

    if width > MAX_STANDARD_WALL_WIDTH or len(layout) > MAX_STANDARD_MODULES:
        result.add_warning(
            path="wall.width",
            message=(
                f"Wall of {width}mm with {len(layout)} modules is outside the "
                f"standard range ({MAX_STANDARD_WALL_WIDTH}mm, "
                f"{MAX_STANDARD_MODULES} modules)"
            ),
            suggestion="Request a custom quote for this wall",
        )

    if layout.gap > 0:
        result.add_warning(
            path="wall.width",
            message=f"{layout.gap}mm of usable width cannot be covered by modules",
            suggestion="Adjust the wall width to a multiple of 100mm plus margins",
        )

    shelves = config.accessories.shelves
    if shelves > len(layout):
        result.add_warning(
            path="accessories.shelves",
            message=(
                f"{shelves} shelves requested but the layout has only "
                f"{len(layout)} modules"
            ),
            suggestion=f"Reduce shelves to {len(layout)} or fewer",
        )

    return result


def validate_config(config: ModwallConfiguration) -> ValidationResult:
    """Perform full validation of a loaded configuration.

    Schema-level constraints are already enforced by Pydantic; this adds the
    checks that need the module catalog and layout engine.

    Example:
        >>> config = load_config(Path("living-room.json"))
        >>> result = validate_config(config)
        >>> if not result.is_valid:
        ...     for error in result.errors:
        ...         print(f"{error.path}: {error.message}")
    """
    result = check_wall_fits(config)
    if not result.is_valid:
        return result
    return result.merge(check_product_advisories(config))
