"""Configuration schema and loading system for modular walls.

Public API:
    - ModwallConfiguration: Root configuration model
    - load_config / load_config_from_dict: Load and validate configuration
    - ConfigError: Exception for configuration errors
    - validate_config: Catalog-aware validation with errors and advisories
    - merge_config_with_cli: Apply CLI overrides to a loaded configuration
    - config_to_wall_configuration / config_to_wall_input: Adapters

Example:
    >>> from pathlib import Path
    >>> from modwall.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("living-room.json"))
    ...     print(f"Wall: {config.wall.width}x{config.wall.height}")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from modwall.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from modwall.application.config.schema import (
    SUPPORTED_VERSIONS,
    AccessoriesConfig,
    FinishConfig,
    ModwallConfiguration,
    OutputConfig,
    WallConfig,
)
from modwall.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    check_product_advisories,
    check_wall_fits,
    validate_config,
)
from modwall.application.config.merger import merge_config_with_cli
from modwall.application.config.adapter import (
    config_to_accessory_flags,
    config_to_wall_configuration,
    config_to_wall_input,
)

__all__ = [
    # Schema models
    "AccessoriesConfig",
    "FinishConfig",
    "ModwallConfiguration",
    "OutputConfig",
    "SUPPORTED_VERSIONS",
    "WallConfig",
    # Loader
    "ConfigError",
    "load_config",
    "load_config_from_dict",
    # Validation
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "check_product_advisories",
    "check_wall_fits",
    "validate_config",
    # Merger
    "merge_config_with_cli",
    # Adapter
    "config_to_accessory_flags",
    "config_to_wall_configuration",
    "config_to_wall_input",
]
