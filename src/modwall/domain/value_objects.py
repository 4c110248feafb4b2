"""Value objects for the modular wall domain.

All lengths are integer or real millimeters unless a name says otherwise.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ModuleType(str, Enum):
    """Kinds of panel module a layout can contain."""

    STANDARD = "standard"
    TV = "tv"
    FIRE = "fire"
    GAMING = "gaming"


class SpecialRequest(str, Enum):
    """Centered feature module requested for a layout.

    At most one special feature may be active per wall. NONE means the
    whole usable width is tiled with standard modules.
    """

    NONE = "none"
    TV = "tv"
    FIRE = "fire"
    GAMING = "gaming"

    @property
    def module_type(self) -> ModuleType:
        """Module type created for this request."""
        if self is SpecialRequest.NONE:
            return ModuleType.STANDARD
        return ModuleType(self.value)

    @property
    def label(self) -> str:
        """Upper-case label used in layout descriptions."""
        return self.value.upper()


class AccessoryType(str, Enum):
    """Accessories that can be attached to modules."""

    TV = "tv"
    FIRE = "fire"
    GAMING = "gaming"
    SPEAKERS = "speakers"
    LED_LIGHTING = "ledLighting"
    SMART_CONTROL = "smartControl"
    SHELVES = "shelves"


class FinishCategory(str, Enum):
    """Surface finish families offered for the wall."""

    WOOD = "wood"
    SOLID = "solid"
    STONE = "stone"
    CLOTH = "cloth"
    METAL = "metal"
    MIRROR = "mirror"


class InstallationMode(str, Enum):
    """How the wall will be installed."""

    DIY = "diy"
    PROFESSIONAL = "professional"


@dataclass(frozen=True)
class ModuleCatalog:
    """Fixed set of module widths a wall can be built from.

    Attributes:
        widths: All permitted module widths in ascending order.
        edge_widths: Widths allowed as the outermost module at either physical
            end of the wall.
        special_width: Width of the reserved block for a TV, fire or gaming
            module.
        gaming_height: Height of the gaming module (extended base).
        max_modules_per_region: Most modules used to tile one fill region.
    """

    widths: tuple[int, ...] = (400, 600, 800, 1000, 1100, 1200)
    edge_widths: tuple[int, ...] = (400, 600, 800, 1000)
    special_width: int = 2000
    gaming_height: int = 2100
    max_modules_per_region: int = 3

    def __post_init__(self) -> None:
        if not self.widths:
            raise ValueError("Catalog must contain at least one width")
        if any(w <= 0 for w in self.widths):
            raise ValueError("Catalog widths must be positive")
        if list(self.widths) != sorted(set(self.widths)):
            raise ValueError("Catalog widths must be unique and ascending")
        if not set(self.edge_widths) <= set(self.widths):
            raise ValueError("Edge widths must be a subset of catalog widths")
        if not self.edge_widths:
            raise ValueError("Catalog must allow at least one edge width")
        if self.special_width <= 0:
            raise ValueError("Special module width must be positive")
        if self.max_modules_per_region < 1:
            raise ValueError("max_modules_per_region must be at least 1")

    @property
    def smallest(self) -> int:
        """Smallest catalog width; spans below this cannot hold a module."""
        return self.widths[0]

    @property
    def infill_widths(self) -> tuple[int, ...]:
        """Widths that may never be the outermost module of the wall."""
        return tuple(w for w in self.widths if w not in self.edge_widths)

    def is_edge_eligible(self, width: int) -> bool:
        """Check whether a width may sit at a physical end of the wall."""
        return width in self.edge_widths


DEFAULT_CATALOG = ModuleCatalog()


@dataclass(frozen=True)
class Finish:
    """Surface finish selection."""

    category: FinishCategory = FinishCategory.SOLID
    color: str = "#2d3748"
    texture: str | None = None


@dataclass(frozen=True)
class AccessoryFlags:
    """Accessories switched on for a wall.

    tv, fire and gaming are special features; only one of them may be on.
    """

    tv: bool = False
    fire: bool = False
    gaming: bool = False
    speakers: bool = False
    shelves: int = 0
    led_lighting: bool = False
    smart_control: bool = False

    def __post_init__(self) -> None:
        if self.shelves < 0:
            raise ValueError("Number of shelves cannot be negative")
        if sum((self.tv, self.fire, self.gaming)) > 1:
            raise ValueError(
                "Only one special feature (tv, fire, gaming) may be active at a time"
            )

    @property
    def special_request(self) -> SpecialRequest:
        """The centered feature implied by these flags."""
        if self.tv:
            return SpecialRequest.TV
        if self.fire:
            return SpecialRequest.FIRE
        if self.gaming:
            return SpecialRequest.GAMING
        return SpecialRequest.NONE

    def active(self) -> dict[AccessoryType, int]:
        """Active accessories mapped to their quantity, in a stable order."""
        quantities = {
            AccessoryType.TV: int(self.tv),
            AccessoryType.FIRE: int(self.fire),
            AccessoryType.GAMING: int(self.gaming),
            AccessoryType.SPEAKERS: int(self.speakers),
            AccessoryType.LED_LIGHTING: int(self.led_lighting),
            AccessoryType.SMART_CONTROL: int(self.smart_control),
            AccessoryType.SHELVES: self.shelves,
        }
        return {accessory: qty for accessory, qty in quantities.items() if qty > 0}


@dataclass(frozen=True)
class LayoutWarning:
    """A soft condition reported alongside a layout.

    Warnings never block a layout; callers decide whether to log or show
    them.

    Attributes:
        code: Machine-readable category (minimal_gap, shelves_capped,
            custom_quote).
        message: Human-readable description.
        gap: Uncovered width in mm, for minimal_gap warnings.
    """

    code: str
    message: str
    gap: float = 0.0

    def __post_init__(self) -> None:
        valid_codes = {"minimal_gap", "shelves_capped", "custom_quote"}
        if self.code not in valid_codes:
            raise ValueError(
                f"code must be one of {valid_codes}, got '{self.code}'"
            )


@dataclass(frozen=True)
class LayoutInfo:
    """Human-readable description of a layout's center and fill regions."""

    center: str
    left_fill: str
    right_fill: str

    def lines(self) -> list[str]:
        """Non-empty description lines in display order."""
        return [line for line in (self.center, self.left_fill, self.right_fill) if line]


@dataclass(frozen=True)
class AttachmentCheck:
    """Outcome of asking whether a module can host an accessory."""

    valid: bool
    reason: str | None = None

    @classmethod
    def ok(cls) -> "AttachmentCheck":
        return cls(valid=True)

    @classmethod
    def rejected(cls, reason: str) -> "AttachmentCheck":
        return cls(valid=False, reason=reason)


@dataclass(frozen=True)
class SnapPoint:
    """Attachment coordinate for an accessory on one module.

    Coordinates are local to the module's bounding box, in mm, measured
    from its bottom-left-front corner: x across the module, y up, z out
    from the wall face.
    """

    module_id: str
    accessory: AccessoryType
    x: float
    y: float
    z: float
    module_position: float = 0.0

    @property
    def wall_x(self) -> float:
        """X coordinate measured from the wall's left edge."""
        return round(self.module_position + self.x, 3)


@dataclass(frozen=True)
class AccessoryPlacement:
    """An accessory resolved onto a concrete module."""

    accessory: AccessoryType
    module_id: str
    snap_point: SnapPoint
    index: int = 0

    @property
    def label(self) -> str:
        """Placement label, numbered for repeated accessories like shelves."""
        if self.index == 0:
            return self.accessory.value
        return f"{self.accessory.value}-{self.index}"
