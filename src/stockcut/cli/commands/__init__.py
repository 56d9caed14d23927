"""CLI command implementations for the stockcut application.

This package contains subcommands for the stockcut CLI, including:
- validate: Validate a configuration file
"""

from stockcut.cli.commands.validate import validate_command

__all__ = ["validate_command"]
