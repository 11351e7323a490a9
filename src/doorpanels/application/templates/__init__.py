"""Door project templates.

This package provides bundled project files for common doors and a
TemplateManager class for listing them and starting new projects.
"""

from doorpanels.application.templates.manager import (
    TEMPLATE_DESCRIPTIONS,
    TemplateInfo,
    TemplateManager,
    TemplateNotFoundError,
)

__all__ = [
    "TEMPLATE_DESCRIPTIONS",
    "TemplateInfo",
    "TemplateManager",
    "TemplateNotFoundError",
]
