"""Page template store: every template is parsed once at startup."""

import logging
from pathlib import Path
from typing import Any, Mapping

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateNotFound
from litestar.plugins.jinja import JinjaTemplateEngine

logger = logging.getLogger("Doodlehall.frontend")

TEMPLATES_DIR = Path(__file__).parent / "templates"


class PageTemplates:
    """Holds the compiled page templates; read-only after construction."""

    def __init__(self, directory: Path = TEMPLATES_DIR):
        self.directory = directory
        self.environment = Environment(
            loader=FileSystemLoader(str(directory)),
            autoescape=True,
            undefined=StrictUndefined,
            auto_reload=False,
        )
        # Compile everything up front so a broken template stops the process
        # at startup instead of on the first request that needs it.
        self._templates: dict[str, Template] = {
            name: self.environment.get_template(name)
            for name in self.environment.list_templates(extensions=["html"])
        }
        self.engine = JinjaTemplateEngine.from_environment(self.environment)
        logger.info(f"Loaded {len(self._templates)} page templates from {directory}")

    def render(self, name: str, context: Mapping[str, Any]) -> str:
        """Render a template by its file name, e.g. 'error-page.html'."""
        template = self._templates.get(name)
        if template is None:
            raise TemplateNotFound(name)
        return template.render(context)
