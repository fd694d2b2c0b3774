"""User facing error pages."""

import logging
from dataclasses import dataclass
from typing import Any

from litestar import Request, Response
from litestar.enums import MediaType
from litestar.status_codes import HTTP_200_OK

from doodlehall.frontend.page import BasePageConfig
from doodlehall.frontend.templates import PageTemplates
from doodlehall.translations import Translation, get_translation, negotiate_locale

logger = logging.getLogger("Doodlehall.frontend")

ERROR_PAGE_TEMPLATE = "error-page.html"


class PageRenderError(RuntimeError):
    """
    A page template failed to render.

    Templates ship with the package, so this means the deployed build is
    broken. It is never turned into a degraded page.
    """

    def __init__(self, template_name: str, cause: BaseException):
        super().__init__(f"Rendering '{template_name}' failed: {cause}")
        self.template_name = template_name


@dataclass(frozen=True)
class ErrorPageData:
    """Everything error-page.html needs to be displayed."""
    base: BasePageConfig
    error_message: str
    translation: Translation
    locale: str

    def template_context(self) -> dict[str, Any]:
        return {
            **self.base.template_context(),
            "error_message": self.error_message,
            "translation": self.translation,
            "locale": self.locale,
        }


class ErrorPages:
    """Renders the error page; shares one BasePageConfig across all calls."""

    def __init__(self, templates: PageTemplates, base_page_config: BasePageConfig):
        self.templates = templates
        self.base_page_config = base_page_config

    def page_data(self, request: Request, error_message: str) -> ErrorPageData:
        locale = negotiate_locale(request.headers.get("accept-language"))
        return ErrorPageData(
            base=self.base_page_config,
            error_message=error_message,
            translation=get_translation(locale),
            locale=locale,
        )

    def user_facing_error(
        self,
        request: Request,
        error_message: str,
        status_code: int = HTTP_200_OK,
    ) -> Response:
        """Return the occurred error as an html page for the caller."""
        data = self.page_data(request, error_message)
        try:
            content = self.templates.render(ERROR_PAGE_TEMPLATE, data.template_context())
        except Exception as exc:
            raise PageRenderError(ERROR_PAGE_TEMPLATE, exc) from exc

        logger.debug(f"Rendered error page ({status_code}): {error_message}")
        return Response(content=content, status_code=status_code, media_type=MediaType.HTML)
