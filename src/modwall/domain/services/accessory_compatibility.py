"""Accessory compatibility and snap point rules.

Decides which modules of a computed layout may host each accessory and
where on the module it attaches. All queries are pure: attachment state
lives in the wall configuration, not here.
"""

from __future__ import annotations

import logging
from typing import Callable

from ..entities import ModuleLayout, WallModule
from ..value_objects import (
    AccessoryFlags,
    AccessoryPlacement,
    AccessoryType,
    AttachmentCheck,
    ModuleType,
    SnapPoint,
)
from .layout_engine import LayoutError, round_mm

__all__ = [
    "AccessoryCompatibility",
    "UnknownAccessoryError",
    "parse_accessory",
]

logger = logging.getLogger(__name__)

# Accepted spellings in addition to the canonical enum values
_ACCESSORY_ALIASES: dict[str, AccessoryType] = {
    "led_lighting": AccessoryType.LED_LIGHTING,
    "led": AccessoryType.LED_LIGHTING,
    "smart_control": AccessoryType.SMART_CONTROL,
}

_SPECIAL_ACCESSORIES: dict[AccessoryType, ModuleType] = {
    AccessoryType.TV: ModuleType.TV,
    AccessoryType.FIRE: ModuleType.FIRE,
    AccessoryType.GAMING: ModuleType.GAMING,
}

_REJECTION_REASONS: dict[AccessoryType, str] = {
    AccessoryType.TV: "TV requires a 2×1000mm TV module",
    AccessoryType.FIRE: "Fire requires a 2×1000mm Fire module",
    AccessoryType.GAMING: "Gaming console requires a Gaming module with extended base",
    AccessoryType.SPEAKERS: "Speakers can only be placed on edge modules",
    AccessoryType.LED_LIGHTING: "LED lighting can only be placed on edge or top panels",
    AccessoryType.SMART_CONTROL: "Smart control panel must be placed on an end module",
}


class UnknownAccessoryError(LayoutError):
    """Raised when an accessory id is not recognized."""

    def __init__(self, accessory: str) -> None:
        self.accessory = accessory
        valid = ", ".join(a.value for a in AccessoryType)
        super().__init__(f"Unknown accessory '{accessory}'. Must be one of: {valid}")


def parse_accessory(accessory: AccessoryType | str) -> AccessoryType:
    """Resolve an accessory id to its enum value.

    Raises:
        UnknownAccessoryError: If the id is not a known accessory.
    """
    if isinstance(accessory, AccessoryType):
        return accessory
    try:
        return AccessoryType(accessory)
    except ValueError:
        pass
    if accessory in _ACCESSORY_ALIASES:
        return _ACCESSORY_ALIASES[accessory]
    raise UnknownAccessoryError(str(accessory))


class AccessoryCompatibility:
    """Accessory rules evaluated against one computed layout.

    Edge modules are the first and last modules of the whole wall. The
    smart control panel only goes on the last (right-hand) module.
    """

    def __init__(self, layout: ModuleLayout) -> None:
        self.layout = layout

    def can_attach(
        self, module_id: str, accessory: AccessoryType | str
    ) -> AttachmentCheck:
        """Check whether a module may host an accessory.

        A rejected pairing is a normal outcome reported through the result,
        not an exception.

        Raises:
            UnknownAccessoryError: If the accessory id is not recognized.
        """
        kind = parse_accessory(accessory)
        module = self.layout.find(module_id)
        if module is None:
            return AttachmentCheck.rejected("Module not found")

        if self._is_eligible(module, kind):
            return AttachmentCheck.ok()
        return AttachmentCheck.rejected(_REJECTION_REASONS[kind])

    def eligible_modules(self, accessory: AccessoryType | str) -> list[WallModule]:
        """Modules that may host an accessory, in layout order."""
        kind = parse_accessory(accessory)
        return [m for m in self.layout.modules if self._is_eligible(m, kind)]

    def snap_points(self, accessory: AccessoryType | str) -> tuple[SnapPoint, ...]:
        """Attachment coordinates, one per eligible module.

        Returns an empty tuple when no module can host the accessory.
        """
        kind = parse_accessory(accessory)
        offset = _SNAP_OFFSETS[kind]
        points = []
        for module in self.eligible_modules(kind):
            x, y, z = offset(module, self._is_first(module))
            points.append(
                SnapPoint(
                    module_id=module.id,
                    accessory=kind,
                    x=round_mm(x),
                    y=round_mm(y),
                    z=round_mm(z),
                    module_position=module.position,
                )
            )
        return tuple(points)

    def generate_placements(
        self, flags: AccessoryFlags
    ) -> tuple[AccessoryPlacement, ...]:
        """Resolve every active accessory onto a module.

        Each accessory goes to its first snap point. Shelves are spread one
        per module across the first N modules in layout order; shelves
        beyond the module count are not placed. Accessories with no
        eligible module are skipped.
        """
        placements: list[AccessoryPlacement] = []
        for kind, quantity in flags.active().items():
            points = self.snap_points(kind)
            if not points:
                logger.debug(f"No eligible module for {kind.value}, skipping")
                continue

            if kind is AccessoryType.SHELVES:
                for index, point in enumerate(points[:quantity]):
                    placements.append(
                        AccessoryPlacement(
                            accessory=kind,
                            module_id=point.module_id,
                            snap_point=point,
                            index=index,
                        )
                    )
            else:
                placements.append(
                    AccessoryPlacement(
                        accessory=kind, module_id=points[0].module_id, snap_point=points[0]
                    )
                )
        return tuple(placements)

    def module_tooltip(self, module_id: str) -> str:
        """Describe what a module can host, e.g. for hover text."""
        module = self.layout.find(module_id)
        if module is None:
            return ""

        if module.is_special:
            return f"{module.width}mm Module – {module.type.value.upper()} Ready"

        capabilities = []
        if self._is_edge(module):
            capabilities.extend(["Speaker Ready", "LED Ready"])
        if self._is_last(module):
            capabilities.append("Control Panel Ready")
        capabilities.append("Shelf Compatible")
        return f"{module.width}mm Module – {', '.join(capabilities)}"

    def _is_eligible(self, module: WallModule, kind: AccessoryType) -> bool:
        if kind in _SPECIAL_ACCESSORIES:
            return module.type is _SPECIAL_ACCESSORIES[kind]
        if kind in (AccessoryType.SPEAKERS, AccessoryType.LED_LIGHTING):
            return self._is_edge(module)
        if kind is AccessoryType.SMART_CONTROL:
            return self._is_last(module)
        return True

    def _is_first(self, module: WallModule) -> bool:
        return self.layout.index_of(module.id) == 0

    def _is_last(self, module: WallModule) -> bool:
        return self.layout.index_of(module.id) == len(self.layout.modules) - 1

    def _is_edge(self, module: WallModule) -> bool:
        return module in self.layout.edge_modules


def _outboard_x(module: WallModule, is_first: bool) -> float:
    # Speakers sit toward the outer edge of the wall
    return module.width * 0.2 if is_first else module.width * 0.8


_SNAP_OFFSETS: dict[
    AccessoryType, Callable[[WallModule, bool], tuple[float, float, float]]
] = {
    AccessoryType.TV: lambda m, _: (m.width / 2, m.height / 2 + 200, 150),
    AccessoryType.FIRE: lambda m, _: (m.width / 2, m.height / 2 - 300, 150),
    AccessoryType.GAMING: lambda m, _: (m.width / 2, m.height / 2 - 300, 350),
    AccessoryType.SPEAKERS: lambda m, first: (_outboard_x(m, first), m.height * 0.8, 150),
    AccessoryType.LED_LIGHTING: lambda m, _: (m.width / 2, m.height - 20, 200),
    AccessoryType.SMART_CONTROL: lambda m, _: (m.width - 150, m.height / 2, 150),
    AccessoryType.SHELVES: lambda m, _: (m.width / 2, m.height * 0.75, 200),
}
