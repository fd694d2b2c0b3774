import logging
from typing import Optional

from litestar import Litestar, Request
from litestar.response import Response
from litestar.status_codes import HTTP_500_INTERNAL_SERVER_ERROR
from litestar.template.config import TemplateConfig

from doodlehall.config import Settings, get_settings
from doodlehall.frontend import ErrorPages, FrontendRoutes, PageRenderError, PageTemplates
from doodlehall.lobby import LobbyPages, LobbyRegistry
from doodlehall.routes import RouteTable
from doodlehall.utils.logging import log_request_error

logger = logging.getLogger("Doodlehall")


# --- Exception handlers
def log_exceptions(request: Request, exc: Exception) -> Response:
    log_request_error(request, exc, message="Unhandled exception occurred")
    return Response(
        content={"detail": "Internal Server Error"},
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        media_type="application/json",
    )


def handle_render_failure(request: Request, exc: PageRenderError) -> Response:
    """A page template is broken, so the deployment is. Never send a partial page."""
    log_request_error(request, exc, message="Page rendering failed, deployment is broken", level=logging.CRITICAL)
    return Response(
        content="Internal Server Error",
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        media_type="text/plain",
    )


def create_app(settings: Optional[Settings] = None) -> Litestar:
    settings = settings or get_settings()

    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger.info(f"Starting app in {'DEBUG' if settings.debug else 'PRODUCTION'} mode")
    logger.info(f"Root path: '{settings.root_path or '/'}', version: '{settings.version or 'dev'}'")

    # Built once; every page shares these by reference.
    base_page_config = settings.base_page_config()
    templates = PageTemplates()

    error_pages = ErrorPages(templates, base_page_config)
    lobby_pages = LobbyPages(
        LobbyRegistry(max_players_limit=settings.lobby_max_players_limit),
        base_page_config,
        error_pages,
    )
    frontend = FrontendRoutes(
        root_path=settings.root_path,
        mounts=settings.static_mounts(),
        index_page=lobby_pages.index_page,
        enter_lobby=lobby_pages.enter_lobby,
        create_lobby=lobby_pages.create_lobby,
    )

    route_table = RouteTable()
    frontend.setup_routes(route_table.register)
    logger.info(f"Registered {len(route_table.routes)} routes")

    app = Litestar(
        route_handlers=route_table.route_handlers,
        debug=settings.debug,
        template_config=TemplateConfig(instance=templates.engine),
        exception_handlers={
            PageRenderError: handle_render_failure,
            HTTP_500_INTERNAL_SERVER_ERROR: log_exceptions,
        },
    )
    return app


# --- App init
app = create_app()
