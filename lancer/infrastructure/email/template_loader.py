"""
Email template loader and renderer.
Handles Jinja2 templates for notification emails.
"""

import logging
from typing import Dict, Any, Optional
from pathlib import Path
from jinja2 import Environment, FileSystemLoader, StrictUndefined

logger = logging.getLogger(__name__)


class EmailTemplateLoader:
    """Loads and renders email templates using Jinja2."""

    def __init__(self, templates_dir: Optional[Path] = None, app_name: str = "Lancer"):
        """Initialize template loader with email templates directory."""
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.app_name = app_name

        # Titles and display names are user-controlled; autoescape stays on
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=True,
            undefined=StrictUndefined
        )

    async def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render email template with context.

        Args:
            template_name: Name of template file (e.g., 'notification.html')
            context: Template context variables

        Returns:
            Rendered template content
        """
        enhanced_context = {
            "app_name": self.app_name,
            **context,
        }

        template = self.env.get_template(template_name)
        rendered = template.render(**enhanced_context).strip()

        logger.debug(f"Successfully rendered template: {template_name}")
        return rendered
