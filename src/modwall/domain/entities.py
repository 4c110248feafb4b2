"""Domain entities for modular wall layouts."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from .value_objects import (
    AccessoryFlags,
    Finish,
    InstallationMode,
    LayoutInfo,
    LayoutWarning,
    ModuleType,
    SpecialRequest,
)

# Cable routing space reserved at each end of the wall, in mm
MARGIN_PER_SIDE = 25


@dataclass(frozen=True)
class WallModule:
    """A single physical panel module placed on the wall.

    Attributes:
        id: Identifier unique within its layout (``module-<index>``).
        width: Module width in mm.
        height: Module height in mm.
        type: Standard panel or one of the special feature modules.
        position: Left edge in mm, measured from the wall's left edge.
        accessories: Accessory ids attached to this module.
        layout_info: Layout description, set on the first module only.
    """

    id: str
    width: int
    height: int
    type: ModuleType = ModuleType.STANDARD
    position: float = 0.0
    accessories: frozenset[str] = field(default_factory=frozenset)
    layout_info: LayoutInfo | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Module dimensions must be positive")
        if self.position < 0:
            raise ValueError("Module position must be non-negative")

    @property
    def right_edge(self) -> float:
        """Right edge position in mm."""
        return round(self.position + self.width, 3)

    @property
    def is_special(self) -> bool:
        """True for TV, fire and gaming modules."""
        return self.type is not ModuleType.STANDARD


@dataclass(frozen=True)
class ModuleLayout:
    """An ordered, positioned set of modules covering a usable width.

    Layouts are derived values: they are recomputed from scratch whenever
    the wall configuration changes and never patched in place.
    """

    modules: tuple[WallModule, ...]
    usable_width: int
    origin: float = 0.0
    special_request: SpecialRequest = SpecialRequest.NONE
    warnings: tuple[LayoutWarning, ...] = ()
    info: LayoutInfo | None = None

    def __len__(self) -> int:
        return len(self.modules)

    def __iter__(self):
        return iter(self.modules)

    @property
    def total_module_width(self) -> int:
        """Sum of all module widths."""
        return sum(module.width for module in self.modules)

    @property
    def gap(self) -> int:
        """Usable width left uncovered by a degraded tiling."""
        return self.usable_width - self.total_module_width

    @property
    def is_exact(self) -> bool:
        """True when the modules cover the usable width exactly."""
        return self.gap == 0

    @property
    def special_module(self) -> WallModule | None:
        """The centered feature module, if the layout has one."""
        for module in self.modules:
            if module.is_special:
                return module
        return None

    @property
    def edge_modules(self) -> tuple[WallModule, ...]:
        """First and last module (a single module counts once)."""
        if not self.modules:
            return ()
        if len(self.modules) == 1:
            return (self.modules[0],)
        return (self.modules[0], self.modules[-1])

    def find(self, module_id: str) -> WallModule | None:
        """Look up a module by id."""
        for module in self.modules:
            if module.id == module_id:
                return module
        return None

    def index_of(self, module_id: str) -> int:
        """Index of a module in layout order, or -1 if absent."""
        for i, module in enumerate(self.modules):
            if module.id == module_id:
                return i
        return -1


@dataclass(frozen=True)
class WallConfiguration:
    """Caller-owned wall settings from which a layout is derived.

    Changes are made by replacing whole fields through the ``with_*``
    methods, each of which returns a new configuration.
    """

    total_width: int
    total_height: int
    finish: Finish = field(default_factory=Finish)
    accessories: AccessoryFlags = field(default_factory=AccessoryFlags)
    installation: InstallationMode = InstallationMode.DIY

    margin_per_side: int = field(default=MARGIN_PER_SIDE, init=False)

    def __post_init__(self) -> None:
        if self.total_height <= 0:
            raise ValueError("Wall height must be positive")
        if self.total_width <= 2 * self.margin_per_side:
            raise ValueError(
                f"Wall width must exceed both side margins "
                f"({2 * self.margin_per_side}mm)"
            )

    @property
    def usable_width(self) -> int:
        """Width available for modules once side margins are removed."""
        return self.total_width - 2 * self.margin_per_side

    @property
    def special_request(self) -> SpecialRequest:
        """The single special feature requested, if any."""
        return self.accessories.special_request

    def with_dimensions(self, width: int, height: int) -> "WallConfiguration":
        return replace(self, total_width=width, total_height=height)

    def with_finish(self, finish: Finish) -> "WallConfiguration":
        return replace(self, finish=finish)

    def with_accessories(self, accessories: AccessoryFlags) -> "WallConfiguration":
        return replace(self, accessories=accessories)

    def with_installation(self, installation: InstallationMode) -> "WallConfiguration":
        return replace(self, installation=installation)
