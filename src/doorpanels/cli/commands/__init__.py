"""CLI command implementations for the doorpanels application.

This package contains subcommands for the doorpanels CLI, including:
- validate: Validate a door project file
- templates: Manage door project templates
"""

from doorpanels.cli.commands.validate import validate_command
from doorpanels.cli.commands.templates import templates_app

__all__ = ["validate_command", "templates_app"]
