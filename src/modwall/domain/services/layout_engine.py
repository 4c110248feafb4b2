"""Module layout engine.

Computes the ordered, positioned list of panel modules that covers a wall's
usable width, optionally around a centered special module.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from ..entities import ModuleLayout, WallModule
from ..tiling import FillPlan, TilingError, fill_span
from ..value_objects import (
    DEFAULT_CATALOG,
    LayoutInfo,
    LayoutWarning,
    ModuleCatalog,
    ModuleType,
    SpecialRequest,
)

__all__ = [
    "DEFAULT_STANDARD_HEIGHT",
    "LayoutEngine",
    "LayoutError",
    "MINIMAL_GAP_THRESHOLD",
    "SpecialModuleError",
    "round_mm",
]

logger = logging.getLogger(__name__)

DEFAULT_STANDARD_HEIGHT = 2400

# Space around a special module below which the symmetric fill is flagged
MINIMAL_GAP_THRESHOLD = 100


class LayoutError(ValueError):
    """Raised for structurally invalid layout input."""

    pass


class SpecialModuleError(LayoutError):
    """Raised when a special module does not fit the usable width."""

    def __init__(self, special: SpecialRequest, usable_width: int, required: int) -> None:
        self.special = special
        self.usable_width = usable_width
        self.required = required
        super().__init__(
            f"{special.label} module requires at least {required}mm of usable "
            f"width, got {usable_width}mm"
        )


def round_mm(value: float) -> float:
    """Round a millimeter value to 3 decimal places."""
    return round(value, 3)


def _parse_special(special: SpecialRequest | str | None) -> SpecialRequest:
    if special is None:
        return SpecialRequest.NONE
    if isinstance(special, SpecialRequest):
        return special
    try:
        return SpecialRequest(special)
    except ValueError:
        valid = ", ".join(s.value for s in SpecialRequest)
        raise LayoutError(
            f"Unknown special module '{special}'. Must be one of: {valid}"
        ) from None


class LayoutEngine:
    """Partitions a usable width into catalog modules.

    The engine is stateless: every call computes a fresh layout from its
    arguments, so identical inputs always give identical layouts.
    """

    def __init__(self, catalog: ModuleCatalog | None = None) -> None:
        self.catalog = catalog or DEFAULT_CATALOG

    def layout(
        self,
        usable_width: int,
        special_request: SpecialRequest | str | None = SpecialRequest.NONE,
        standard_height: int = DEFAULT_STANDARD_HEIGHT,
        origin: float = 0.0,
    ) -> ModuleLayout:
        """Compute a positioned module layout.

        Args:
            usable_width: Width to cover in mm, already net of side margins.
            special_request: Centered feature module, or none.
            standard_height: Height of standard modules in mm.
            origin: Position of the usable width's left edge, normally the
                side margin. Module positions are measured from the wall's
                left edge, so they start here.

        Returns:
            ModuleLayout with modules sorted by position. If the catalog
            cannot cover a region exactly, the layout carries a minimal_gap
            warning and the remainder is left at the right end of the wall.

        Raises:
            LayoutError: If usable_width or standard_height is not positive,
                origin is negative, or the special request is unknown.
            SpecialModuleError: If a special module is requested on a usable
                width narrower than the special module.
        """
        special = _parse_special(special_request)

        if usable_width <= 0:
            raise LayoutError("Usable width must be positive")
        if standard_height <= 0:
            raise LayoutError("Standard height must be positive")
        if origin < 0:
            raise LayoutError("Layout origin cannot be negative")

        if special is SpecialRequest.NONE:
            return self._standard_layout(usable_width, standard_height, origin)
        return self._centered_layout(special, usable_width, standard_height, origin)

    def _standard_layout(
        self, usable_width: int, height: int, origin: float
    ) -> ModuleLayout:
        plan = self._plan(usable_width, left_is_boundary=True, right_is_boundary=True)

        modules = self._place(plan.widths, height, origin, start_index=0)
        warnings = self._gap_warnings([plan])
        info = LayoutInfo(
            center="No Center Module",
            left_fill=f"Fill: {plan.describe()}" if plan.widths else "Fill: Empty",
            right_fill="",
        )
        return self._build(
            modules, usable_width, origin, SpecialRequest.NONE, warnings, info
        )

    def _centered_layout(
        self,
        special: SpecialRequest,
        usable_width: int,
        height: int,
        origin: float,
    ) -> ModuleLayout:
        special_width = self.catalog.special_width
        if usable_width < special_width:
            raise SpecialModuleError(special, usable_width, special_width)

        remaining = usable_width - special_width
        left_space = remaining // 2
        right_space = remaining - left_space

        left_plan = self._plan(left_space, left_is_boundary=True, right_is_boundary=False)
        right_plan = self._plan(right_space, left_is_boundary=False, right_is_boundary=True)

        left_modules = self._place(left_plan.widths, height, origin, start_index=0)

        center_position = round_mm(origin + left_plan.covered)
        center = WallModule(
            id=f"module-{len(left_modules)}",
            width=special_width,
            height=self.catalog.gaming_height
            if special is SpecialRequest.GAMING
            else height,
            type=special.module_type,
            position=center_position,
        )

        right_modules = self._place(
            right_plan.widths,
            height,
            round_mm(center_position + special_width),
            start_index=len(left_modules) + 1,
        )

        warnings: list[LayoutWarning] = []
        if 0 < remaining < MINIMAL_GAP_THRESHOLD:
            logger.info(
                f"Minimal space ({remaining}mm) around {special.label} module, "
                f"adjusting layout for symmetry"
            )
            warnings.append(
                LayoutWarning(
                    code="minimal_gap",
                    message="Minimal gap detected. Auto-adjusting layout for symmetry.",
                    gap=float(remaining),
                )
            )
        else:
            warnings.extend(self._gap_warnings([left_plan, right_plan]))

        info = LayoutInfo(
            center=f"Center {special.label} Module – {special_width}mm Allocated",
            left_fill=f"Left Fill: {left_plan.describe()}"
            if left_plan.widths
            else "Left: Empty",
            right_fill=f"Right Fill: {right_plan.describe()}"
            if right_plan.widths
            else "Right: Empty",
        )
        modules = [*left_modules, center, *right_modules]
        return self._build(modules, usable_width, origin, special, warnings, info)

    def _plan(
        self, span: int, left_is_boundary: bool, right_is_boundary: bool
    ) -> FillPlan:
        try:
            return fill_span(span, self.catalog, left_is_boundary, right_is_boundary)
        except TilingError as e:
            raise LayoutError(str(e)) from e

    def _place(
        self,
        widths: tuple[int, ...],
        height: int,
        start_position: float,
        start_index: int,
    ) -> list[WallModule]:
        """Position modules left to right as a running sum of widths."""
        modules: list[WallModule] = []
        position = round_mm(start_position)
        for offset, width in enumerate(widths):
            modules.append(
                WallModule(
                    id=f"module-{start_index + offset}",
                    width=width,
                    height=height,
                    type=ModuleType.STANDARD,
                    position=position,
                )
            )
            position = round_mm(position + width)
        return modules

    def _gap_warnings(self, plans: list[FillPlan]) -> list[LayoutWarning]:
        gap = sum(plan.gap for plan in plans)
        if gap == 0:
            return []
        logger.warning(
            f"No exact module cover found, {gap}mm of usable width left uncovered"
        )
        return [
            LayoutWarning(
                code="minimal_gap",
                message=f"Minimal gap of {gap}mm detected, auto-adjusted layout",
                gap=float(gap),
            )
        ]

    def _build(
        self,
        modules: list[WallModule],
        usable_width: int,
        origin: float,
        special: SpecialRequest,
        warnings: list[LayoutWarning],
        info: LayoutInfo,
    ) -> ModuleLayout:
        if modules:
            modules[0] = replace(modules[0], layout_info=info)
        return ModuleLayout(
            modules=tuple(modules),
            usable_width=usable_width,
            origin=round_mm(origin),
            special_request=special,
            warnings=tuple(warnings),
            info=info,
        )
