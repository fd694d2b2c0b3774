"""Tests for the lobby endpoints and registry."""

import pytest
from pydantic import ValidationError

from doodlehall.config import Settings
from doodlehall.lobby import CreateLobbyForm, LobbyRegistry


@pytest.mark.asyncio
async def test_create_and_enter_lobby(client):
    resp = await client.post(
        "/ssrCreateLobby",
        data={"lobby_name": "Friday Doodles", "max_players": "6", "language": "en-us"},
    )
    assert resp.status_code == 303
    location = resp.headers["location"]
    assert location.startswith("/ssrEnterLobby/")

    lobby = await client.get(location)
    assert lobby.status_code == 200
    assert "Friday Doodles" in lobby.text
    assert f"https://doodle.example{location}" in lobby.text


@pytest.mark.asyncio
async def test_unknown_lobby_renders_error_page(client):
    resp = await client.get("/ssrEnterLobby/no-such-lobby")
    assert resp.status_code == 404
    assert resp.headers["content-type"].startswith("text/html")
    assert "This lobby doesn&#39;t exist or was closed." in resp.text


@pytest.mark.asyncio
async def test_invalid_lobby_settings_render_error_page(client):
    resp = await client.post(
        "/ssrCreateLobby",
        data={"lobby_name": "Too many", "max_players": "500"},
        headers={"accept-language": "de"},
    )
    assert resp.status_code == 400
    assert "Die Einstellungen der Lobby sind ungültig." in resp.text


@pytest.mark.asyncio
async def test_public_lobbies_listed_on_index(client):
    await client.post("/ssrCreateLobby", data={"lobby_name": "Open House", "public": "on"})
    await client.post("/ssrCreateLobby", data={"lobby_name": "Secret Club"})

    index = await client.get("/")
    assert "Open House" in index.text
    assert "Secret Club" not in index.text


@pytest.mark.asyncio
async def test_lobby_endpoints_under_root_path(client_for):
    client = await client_for(Settings(root_path="/doodle"))

    resp = await client.post("/doodle/ssrCreateLobby", data={"lobby_name": "Nested"})
    assert resp.status_code == 303
    assert resp.headers["location"].startswith("/doodle/ssrEnterLobby/")

    assert (await client.get(resp.headers["location"])).status_code == 200
    assert (await client.post("/ssrCreateLobby", data={"lobby_name": "Nested"})).status_code == 404


def test_registry_create_and_get():
    registry = LobbyRegistry(max_players_limit=10)
    lobby = registry.create(CreateLobbyForm(lobby_name="  Sketchy  ", max_players=4))

    assert lobby.name == "Sketchy"
    assert registry.get(lobby.id) is lobby
    assert registry.get("unknown") is None


def test_registry_enforces_player_limit():
    registry = LobbyRegistry(max_players_limit=10)

    with pytest.raises(ValueError, match="must not exceed 10"):
        registry.create(CreateLobbyForm(max_players=11))


def test_registry_lists_only_public_lobbies_newest_first():
    registry = LobbyRegistry()
    registry.create(CreateLobbyForm(lobby_name="older", public=True))
    registry.create(CreateLobbyForm(lobby_name="private"))
    registry.create(CreateLobbyForm(lobby_name="newer", public=True))

    public = registry.public_lobbies()
    assert public[0].created_at >= public[1].created_at
    assert {lobby.name for lobby in public} == {"older", "newer"}


@pytest.mark.parametrize(
    "fields",
    [
        {"lobby_name": "   "},
        {"lobby_name": "x" * 51},
        {"max_players": 1},
        {"language": "xx-yy"},
    ],
)
def test_create_lobby_form_validation(fields):
    with pytest.raises(ValidationError):
        CreateLobbyForm(**fields)
