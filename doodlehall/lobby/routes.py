"""Lobby page handlers: start page, lobby creation and lobby entry."""

import logging

from litestar import Request, Response
from litestar.response import Redirect, Template
from litestar.status_codes import HTTP_303_SEE_OTHER, HTTP_400_BAD_REQUEST, HTTP_404_NOT_FOUND
from pydantic import ValidationError

from doodlehall.frontend.errors import ErrorPages
from doodlehall.frontend.page import BasePageConfig
from doodlehall.lobby.registry import CreateLobbyForm, LobbyRegistry
from doodlehall.translations import SUPPORTED_LOCALES, get_translation, negotiate_locale
from doodlehall.utils import join_url_path

logger = logging.getLogger("Doodlehall.lobby")


class LobbyPages:
    """Server-rendered lobby pages."""

    def __init__(self, registry: LobbyRegistry, base_page_config: BasePageConfig, error_pages: ErrorPages):
        self.registry = registry
        self.base_page_config = base_page_config
        self.error_pages = error_pages

    def _page_context(self, request: Request) -> dict:
        locale = negotiate_locale(request.headers.get("accept-language"))
        return {
            **self.base_page_config.template_context(),
            "translation": get_translation(locale),
            "locale": locale,
        }

    def lobby_url(self, lobby_id: str) -> str:
        return join_url_path(self.base_page_config.root_path, "ssrEnterLobby", lobby_id)

    async def index_page(self, request: Request) -> Response:
        """Start page with the lobby creation form."""
        return Template(
            template_name="index.html",
            context={
                **self._page_context(request),
                "public_lobbies": self.registry.public_lobbies(),
                "languages": SUPPORTED_LOCALES,
                "max_players_limit": self.registry.max_players_limit,
                "create_lobby_url": join_url_path(self.base_page_config.root_path, "ssrCreateLobby"),
                "lobby_url": self.lobby_url,
            },
        )

    async def enter_lobby(self, request: Request) -> Response:
        lobby_id = request.path_params.get("lobby_id", "")
        lobby = self.registry.get(lobby_id)
        if lobby is None:
            logger.info(f"Lobby '{lobby_id}' not found")
            translation = get_translation(negotiate_locale(request.headers.get("accept-language")))
            return self.error_pages.user_facing_error(
                request, translation["lobby-not-found"], status_code=HTTP_404_NOT_FOUND
            )

        return Template(
            template_name="lobby.html",
            context={
                **self._page_context(request),
                "lobby": lobby,
                "share_url": f"{self.base_page_config.root_url}{self.lobby_url(lobby.id)}",
            },
        )

    async def create_lobby(self, request: Request) -> Response:
        form_data = await request.form()
        fields = {key: form_data.get(key) for key in ("lobby_name", "max_players", "language") if form_data.get(key)}
        fields["public"] = form_data.get("public") in ("on", "true", "1")

        try:
            form = CreateLobbyForm(**fields)
            lobby = self.registry.create(form)
        except (ValidationError, ValueError) as e:
            logger.info(f"Rejected lobby creation: {e}")
            translation = get_translation(negotiate_locale(request.headers.get("accept-language")))
            return self.error_pages.user_facing_error(
                request, translation["invalid-lobby-settings"], status_code=HTTP_400_BAD_REQUEST
            )

        logger.info(f"Lobby created: {lobby.id} ('{lobby.name}', {lobby.max_players} players)")
        return Redirect(path=self.lobby_url(lobby.id), status_code=HTTP_303_SEE_OTHER)
