"""Configuration merging utilities for CLI override support.

Precedence is: CLI args > config values > defaults. Only non-None CLI
arguments override configuration values.
"""

from typing import Any

from modwall.application.config.schema import (
    AccessoriesConfig,
    ModwallConfiguration,
    OutputConfig,
    WallConfig,
)
from modwall.domain import SpecialRequest


def merge_config_with_cli(
    config: ModwallConfiguration,
    *,
    width: int | None = None,
    height: int | None = None,
    special: SpecialRequest | str | None = None,
    speakers: bool | None = None,
    shelves: int | None = None,
    led_lighting: bool | None = None,
    smart_control: bool | None = None,
    output_format: str | None = None,
) -> ModwallConfiguration:
    """Merge CLI arguments with configuration values.

    A ``special`` override replaces whichever of tv/fire/gaming the file
    enabled; passing ``"none"`` switches the special module off.

    Example:
        >>> config = load_config(Path("living-room.json"))
        >>> merged = merge_config_with_cli(config, width=4000)
        >>> merged.wall.width
        4000
    """
    wall_data = {
        "width": width if width is not None else config.wall.width,
        "height": height if height is not None else config.wall.height,
    }

    accessories_data = _build_accessories_data(
        config, special, speakers, shelves, led_lighting, smart_control
    )

    output_data = config.output.model_dump()
    if output_format is not None:
        output_data["format"] = output_format

    return ModwallConfiguration(
        schema_version=config.schema_version,
        wall=WallConfig.model_validate(wall_data),
        finish=config.finish,
        accessories=AccessoriesConfig.model_validate(accessories_data),
        installation=config.installation,
        output=OutputConfig.model_validate(output_data),
    )


def _build_accessories_data(
    config: ModwallConfiguration,
    special: SpecialRequest | str | None,
    speakers: bool | None,
    shelves: int | None,
    led_lighting: bool | None,
    smart_control: bool | None,
) -> dict[str, Any]:
    data = config.accessories.model_dump()

    if special is not None:
        requested = SpecialRequest(special)
        for name in ("tv", "fire", "gaming"):
            data[name] = name == requested.value

    overrides = {
        "speakers": speakers,
        "shelves": shelves,
        "led_lighting": led_lighting,
        "smart_control": smart_control,
    }
    for key, value in overrides.items():
        if value is not None:
            data[key] = value
    return data
