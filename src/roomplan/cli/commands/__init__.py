"""CLI command implementations for the roomplan application.

This package contains subcommands for the roomplan CLI, including:
- validate: Validate a design document
- designs: Manage a design library directory
"""

from roomplan.cli.commands.designs import designs_app
from roomplan.cli.commands.validate import validate_command

__all__ = ["designs_app", "validate_command"]
