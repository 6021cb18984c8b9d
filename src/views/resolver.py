"""
View resolver - Maps logical view names to Jinja2 templates.

Route handlers pick a view identifier such as ``"home"``; the resolver
turns it into a template file name and renders it.
"""

import logging
from typing import Any

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from jinja2 import TemplateNotFound

from .exceptions import ViewNotFound

logger = logging.getLogger(__name__)


class ViewResolver:
    """Resolves view identifiers to ``<name><suffix>`` templates."""

    def __init__(self, templates: Jinja2Templates, suffix: str = ".html") -> None:
        self.templates = templates
        self.suffix = suffix

    def resolve(self, view_name: str) -> str:
        """
        Return the template name for a view.

        Raises:
            ViewNotFound: If the templates directory has no matching file.
        """
        template_name = f"{view_name}{self.suffix}"
        try:
            self.templates.get_template(template_name)
        except TemplateNotFound:
            raise ViewNotFound(view_name) from None
        return template_name

    def render(self, request: Request, view_name: str, **context: Any) -> HTMLResponse:
        """Render the template for a view; ``view`` is always in the context."""
        template_name = self.resolve(view_name)
        logger.debug("Rendering view %s with template %s", view_name, template_name)
        return self.templates.TemplateResponse(
            request, template_name, {"view": view_name, **context}
        )
