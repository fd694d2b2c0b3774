"""Tests for the registrations made by FrontendRoutes.setup_routes."""

from litestar import Response

from doodlehall.frontend.mounts import StaticMountTable
from doodlehall.frontend.routes import FrontendRoutes


async def index_page(request) -> Response:
    return Response("index")


async def enter_lobby(request) -> Response:
    return Response("enter")


async def create_lobby(request) -> Response:
    return Response("create")


def compose(root_path: str, serve_directories: dict) -> list[tuple]:
    registered = []
    routes = FrontendRoutes(
        root_path=root_path,
        mounts=StaticMountTable.from_mapping(serve_directories),
        index_page=index_page,
        enter_lobby=enter_lobby,
        create_lobby=create_lobby,
    )
    routes.setup_routes(lambda method, pattern, handler: registered.append((method, pattern, handler)))
    return registered


def test_default_scenario_routes():
    registered = compose("", {"": "/www", "assets": "/static"})

    assert [(method, pattern) for method, pattern, _ in registered] == [
        ("GET", "/assets/"),
        ("GET", "/"),
        ("GET", "/resources/{file}"),
        ("GET", "/ssrEnterLobby/{lobby_id}"),
        ("POST", "/ssrCreateLobby"),
    ]


def test_unnamed_mount_is_never_registered_as_route():
    registered = compose("", {"": "/www"})
    patterns = [pattern for _, pattern, _ in registered]

    assert patterns.count("/") == 1
    assert "//" not in patterns
    assert len(registered) == 4


def test_routes_under_root_path():
    registered = compose("/doodle", {"assets": "/static"})

    assert [(method, pattern) for method, pattern, _ in registered] == [
        ("GET", "/doodle/assets/"),
        ("GET", "/doodle"),
        ("GET", "/doodle/resources/{file}"),
        ("GET", "/doodle/ssrEnterLobby/{lobby_id}"),
        ("POST", "/doodle/ssrCreateLobby"),
    ]


def test_root_is_exact_and_mounts_are_prefixes():
    registered = compose("/doodle", {"assets": "/static", "media": "/media"})
    patterns = {pattern for _, pattern, _ in registered}

    assert "/doodle" in patterns
    assert "/doodle/" not in patterns
    assert {"/doodle/assets/", "/doodle/media/"} <= patterns


def test_lobby_handlers_are_registered_untouched():
    registered = {(method, pattern): handler for method, pattern, handler in compose("", {})}

    assert registered[("GET", "/ssrEnterLobby/{lobby_id}")] is enter_lobby
    assert registered[("POST", "/ssrCreateLobby")] is create_lobby


def test_setup_routes_is_repeatable():
    routes = FrontendRoutes(
        root_path="",
        mounts=StaticMountTable.from_mapping({"": "/www", "assets": "/static"}),
        index_page=index_page,
        enter_lobby=enter_lobby,
        create_lobby=create_lobby,
    )
    first, second = [], []
    routes.setup_routes(lambda method, pattern, handler: first.append((method, pattern)))
    routes.setup_routes(lambda method, pattern, handler: second.append((method, pattern)))

    assert first == second
    assert routes.mounts.fallback_directory == "/www"
