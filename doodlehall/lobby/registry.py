"""In-memory lobby registry."""

import secrets
import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from doodlehall.translations import DEFAULT_LOCALE, SUPPORTED_LOCALES


class CreateLobbyForm(BaseModel):
    """Form submitted to create a new lobby."""
    lobby_name: str = Field(default="Doodle lobby", min_length=1, max_length=50)
    max_players: int = Field(default=8, ge=2)
    public: bool = False
    language: str = DEFAULT_LOCALE

    @field_validator("lobby_name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("lobby name must not be blank")
        return value

    @field_validator("language")
    @classmethod
    def _supported_language(cls, value: str) -> str:
        value = value.lower()
        if value not in SUPPORTED_LOCALES:
            raise ValueError(f"unsupported language '{value}'")
        return value


@dataclass
class Lobby:
    """A lobby players can enter through its id."""
    id: str
    name: str
    max_players: int
    public: bool
    language: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class LobbyRegistry:
    """Tracks open lobbies by id. Safe to share between concurrent requests."""

    def __init__(self, max_players_limit: int = 24):
        self.max_players_limit = max_players_limit
        self._lobbies: dict[str, Lobby] = {}
        self._lock = threading.Lock()

    def create(self, form: CreateLobbyForm) -> Lobby:
        if form.max_players > self.max_players_limit:
            raise ValueError(f"max_players must not exceed {self.max_players_limit}")

        with self._lock:
            lobby_id = secrets.token_urlsafe(8)
            while lobby_id in self._lobbies:
                lobby_id = secrets.token_urlsafe(8)
            lobby = Lobby(
                id=lobby_id,
                name=form.lobby_name,
                max_players=form.max_players,
                public=form.public,
                language=form.language,
            )
            self._lobbies[lobby_id] = lobby
        return lobby

    def get(self, lobby_id: str) -> Optional[Lobby]:
        with self._lock:
            return self._lobbies.get(lobby_id)

    def public_lobbies(self) -> list[Lobby]:
        with self._lock:
            lobbies = [lobby for lobby in self._lobbies.values() if lobby.public]
        return sorted(lobbies, key=lambda lobby: lobby.created_at, reverse=True)
