"""Route table binding registered handlers to Litestar route handlers."""

import logging
import re
from typing import NamedTuple

from litestar import Request, Response
from litestar.enums import MediaType
from litestar.handlers import HTTPRouteHandler

from doodlehall.frontend.files import Handler

logger = logging.getLogger("Doodlehall.routes")

# Name of the path parameter catching everything below a prefix pattern.
WILDCARD_PARAM = "wildcard"

_SEGMENT_PARAM = re.compile(r"\{([A-Za-z_][A-Za-z0-9_]*)\}")


class RegisteredRoute(NamedTuple):
    method: str
    pattern: str
    handler: Handler


def litestar_paths(pattern: str) -> list[str]:
    """
    Translate a registration pattern into Litestar paths.

    '{name}' becomes '{name:str}'. A trailing '/' marks a prefix pattern,
    which answers the prefix itself and everything below it.
    """
    path = _SEGMENT_PARAM.sub(r"{\1:str}", pattern or "/")
    if not path.startswith("/"):
        path = "/" + path

    if not path.endswith("/"):
        return [path]

    base = path.rstrip("/")
    return [base or "/", f"{base}/{{{WILDCARD_PARAM}:path}}"]


class RouteTable:
    """
    Collects registrations and owns the resulting dispatch table.

    ``register`` is the sink handed to route composers; ``route_handlers`` is
    passed on to the Litestar application.
    """

    def __init__(self):
        self.routes: list[RegisteredRoute] = []
        self.route_handlers: list[HTTPRouteHandler] = []

    def register(self, method: str, pattern: str, handler: Handler) -> None:
        method = method.upper()
        paths = litestar_paths(pattern)
        # GET routes answer HEAD as well.
        http_methods = [method, "HEAD"] if method == "GET" else [method]

        async def endpoint(request: Request) -> Response:
            return await handler(request)

        endpoint.__name__ = getattr(handler, "__name__", "endpoint")
        route_handler = HTTPRouteHandler(
            path=paths,
            http_method=http_methods,
            media_type=MediaType.HTML,
            include_in_schema=False,
        )(endpoint)

        self.routes.append(RegisteredRoute(method, pattern, handler))
        self.route_handlers.append(route_handler)
        logger.debug(f"Registered {method} {pattern} -> {', '.join(paths)}")
