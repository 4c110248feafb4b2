"""Pydantic models for wall configuration files.

A configuration file describes the wall dimensions, finish, requested
accessories and installation mode. The module layout itself is never stored;
it is derived from these values on every run.
"""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from modwall.domain.value_objects import (
    FinishCategory,
    InstallationMode,
    SpecialRequest,
)

# Supported schema versions for configuration files
# Version 1.0: Initial schema with wall, finish, accessories and installation
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class WallConfig(BaseModel):
    """Wall dimensions in millimeters.

    Attributes:
        width: Total wall width, including the side margins (100 to 12000)
        height: Total wall height (2200 to 4000)
    """

    model_config = ConfigDict(extra="forbid")

    width: int = Field(..., ge=100, le=12000, description="Total wall width in mm")
    height: int = Field(..., ge=2200, le=4000, description="Total wall height in mm")


class FinishConfig(BaseModel):
    """Surface finish selection.

    Attributes:
        category: Finish family
        color: Hex color, e.g. "#2d3748"
        texture: Optional texture reference
    """

    model_config = ConfigDict(extra="forbid")

    category: FinishCategory = FinishCategory.SOLID
    color: str = Field(default="#2d3748", pattern=r"^#[0-9a-fA-F]{6}$")
    texture: str | None = None


class AccessoriesConfig(BaseModel):
    """Accessories switched on for the wall.

    Only one of tv, fire and gaming may be enabled, since each reserves the
    same centered block.
    """

    model_config = ConfigDict(extra="forbid")

    tv: bool = False
    fire: bool = False
    gaming: bool = False
    speakers: bool = False
    shelves: int = Field(default=0, ge=0, le=10)
    led_lighting: bool = False
    smart_control: bool = False

    @model_validator(mode="after")
    def validate_single_special(self) -> "AccessoriesConfig":
        """Ensure at most one special feature is active."""
        active = [
            name for name in ("tv", "fire", "gaming") if getattr(self, name)
        ]
        if len(active) > 1:
            raise ValueError(
                f"Only one special feature may be active at a time, got: "
                f"{', '.join(active)}"
            )
        return self

    @property
    def special_request(self) -> SpecialRequest:
        """The centered feature implied by these flags."""
        for special in (SpecialRequest.TV, SpecialRequest.FIRE, SpecialRequest.GAMING):
            if getattr(self, special.value):
                return special
        return SpecialRequest.NONE


class OutputConfig(BaseModel):
    """CLI output preferences.

    Attributes:
        format: What to print (all, modules, diagram, placements, json)
    """

    model_config = ConfigDict(extra="forbid")

    format: str = Field(default="all")

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        """Ensure the output format is known."""
        valid = {"all", "modules", "diagram", "placements", "json"}
        if v not in valid:
            raise ValueError(f"format must be one of {sorted(valid)}, got '{v}'")
        return v


class ModwallConfiguration(BaseModel):
    """Root configuration model for a modular wall.

    Example:
        ```json
        {
            "schema_version": "1.0",
            "wall": {"width": 3200, "height": 2400},
            "accessories": {"tv": true, "speakers": true}
        }
        ```
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(default="1.0")
    wall: WallConfig
    finish: FinishConfig = Field(default_factory=FinishConfig)
    accessories: AccessoriesConfig = Field(default_factory=AccessoriesConfig)
    installation: InstallationMode = InstallationMode.DIY
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_schema_version(cls, v: str) -> str:
        """Reject schema versions this release cannot read."""
        if v not in SUPPORTED_VERSIONS:
            raise ValueError(
                f"Unsupported schema version '{v}'. Supported versions: "
                f"{', '.join(sorted(SUPPORTED_VERSIONS))}"
            )
        return v
