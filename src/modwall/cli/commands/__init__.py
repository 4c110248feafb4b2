"""CLI command implementations for the modwall application.

This package contains subcommands for the modwall CLI, including:
- validate: Validate a configuration file
"""

from modwall.cli.commands.validate import validate_command

__all__ = ["validate_command"]
