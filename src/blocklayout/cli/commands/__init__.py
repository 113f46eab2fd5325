"""CLI subcommands for the blocklayout application.

- validate: Validate a layout file
"""

from blocklayout.cli.commands.validate import validate_command

__all__ = ["validate_command"]
