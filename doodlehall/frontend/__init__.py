"""Server-rendered web client: pages, bundled resources and static mounts."""

from doodlehall.frontend.errors import ErrorPageData, ErrorPages, PageRenderError
from doodlehall.frontend.mounts import StaticMountTable
from doodlehall.frontend.page import BasePageConfig
from doodlehall.frontend.routes import FrontendRoutes
from doodlehall.frontend.templates import PageTemplates

__all__ = [
    "BasePageConfig",
    "ErrorPageData",
    "ErrorPages",
    "FrontendRoutes",
    "PageRenderError",
    "PageTemplates",
    "StaticMountTable",
]
