"""Lobby lifecycle: the default handlers behind the lobby endpoints."""

from doodlehall.lobby.registry import CreateLobbyForm, Lobby, LobbyRegistry
from doodlehall.lobby.routes import LobbyPages

__all__ = ["CreateLobbyForm", "Lobby", "LobbyPages", "LobbyRegistry"]
