"""Doodlehall: front door of the multiplayer drawing game server."""

__version__ = "0.4.0"
