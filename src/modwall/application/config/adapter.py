"""Adapter to convert ModwallConfiguration to DTOs and domain objects.

Configuration files use the nested schema in ``schema.py``; the command layer
works with the flat ``WallInput`` DTO and the ``WallConfiguration`` entity.
"""

from modwall.application.config.schema import ModwallConfiguration
from modwall.application.dtos import WallInput
from modwall.domain import (
    AccessoryFlags,
    Finish,
    WallConfiguration,
)


def config_to_wall_input(config: ModwallConfiguration) -> WallInput:
    """Convert a ModwallConfiguration to the WallInput DTO.

    Example:
        >>> config = load_config(Path("living-room.json"))
        >>> result = GenerateLayoutCommand().execute(config_to_wall_input(config))
    """
    accessories = config.accessories
    return WallInput(
        width=config.wall.width,
        height=config.wall.height,
        special=accessories.special_request.value,
        speakers=accessories.speakers,
        shelves=accessories.shelves,
        led_lighting=accessories.led_lighting,
        smart_control=accessories.smart_control,
        finish_category=config.finish.category.value,
        finish_color=config.finish.color,
        finish_texture=config.finish.texture,
        installation=config.installation.value,
    )


def config_to_accessory_flags(config: ModwallConfiguration) -> AccessoryFlags:
    """Convert the accessories section to domain AccessoryFlags."""
    accessories = config.accessories
    return AccessoryFlags(
        tv=accessories.tv,
        fire=accessories.fire,
        gaming=accessories.gaming,
        speakers=accessories.speakers,
        shelves=accessories.shelves,
        led_lighting=accessories.led_lighting,
        smart_control=accessories.smart_control,
    )


def config_to_wall_configuration(config: ModwallConfiguration) -> WallConfiguration:
    """Convert a ModwallConfiguration to the WallConfiguration entity.

    Raises:
        ValueError: If the wall is not wider than both side margins.
    """
    return WallConfiguration(
        total_width=config.wall.width,
        total_height=config.wall.height,
        finish=Finish(
            category=config.finish.category,
            color=config.finish.color,
            texture=config.finish.texture,
        ),
        accessories=config_to_accessory_flags(config),
        installation=config.installation,
    )
