"""Composition of the web client's routes."""

import logging
from typing import Callable, Optional

from litestar import Request, Response
from litestar.exceptions import NotFoundException

from doodlehall.frontend.files import Handler
from doodlehall.frontend.mounts import StaticMountTable, resolve_mounts
from doodlehall.frontend.resources import resource_handler, resource_pattern
from doodlehall.utils import join_url_path

logger = logging.getLogger("Doodlehall.frontend")

Register = Callable[[str, str, Handler], None]


class FrontendRoutes:
    """
    Registers the official web client endpoints.

    Patterns handed to ``register`` use '{name}' for a single path segment and
    a trailing '/' for "this prefix and everything below it". The root route
    is registered without a trailing slash and static mounts with one, so an
    exact match on the root never competes with a mount's prefix match. Any
    router that prefers literal segments over wildcards resolves them the
    same way regardless of registration order.
    """

    def __init__(
        self,
        root_path: str,
        mounts: StaticMountTable,
        index_page: Handler,
        enter_lobby: Handler,
        create_lobby: Handler,
    ):
        self.root_path = root_path
        self.mounts = mounts
        self.index_page = index_page
        self.enter_lobby = enter_lobby
        self.create_lobby = create_lobby

    @property
    def root_pattern(self) -> str:
        return self.root_path or "/"

    def setup_routes(self, register: Register) -> None:
        generic_file_handler, mounts = resolve_mounts(self.root_path, self.mounts)

        for mount in mounts:
            # Trailing slash means wildcard.
            register("GET", mount.pattern, mount.handler)

        register("GET", self.root_pattern, self._root_handler(generic_file_handler))
        register("GET", resource_pattern(self.root_path), resource_handler(self.root_path))
        register("GET", join_url_path(self.root_path, "ssrEnterLobby", "{lobby_id}"), self.enter_lobby)
        register("POST", join_url_path(self.root_path, "ssrCreateLobby"), self.create_lobby)

    def _root_handler(self, generic_file_handler: Optional[Handler]) -> Handler:
        root = join_url_path(self.root_path)

        async def handler(request: Request) -> Response:
            below_root = request.url.path[len(root):] if request.url.path.startswith(root) else request.url.path
            if below_root in ("", "/"):
                return await self.index_page(request)

            if generic_file_handler is not None:
                return await generic_file_handler(request)

            raise NotFoundException()

        return handler
