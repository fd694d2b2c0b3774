import sys
from contextlib import AsyncExitStack
from pathlib import Path
from typing import AsyncIterator, Awaitable, Callable

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from asgi_lifespan import LifespanManager

sys.path.append(str(Path(__file__).resolve().parents[1]))

from doodlehall.config import Settings  # noqa: E402
from doodlehall.main import create_app  # noqa: E402


@pytest.fixture()
def www_dir(tmp_path: Path) -> Path:
    """Directory behind the generic fallback."""
    www = tmp_path / "www"
    (www / "nested").mkdir(parents=True)
    (www / "robots.txt").write_text("User-agent: *\nDisallow:\n")
    (www / "nested" / "page.txt").write_text("nested page")
    return www


@pytest.fixture()
def static_dir(tmp_path: Path) -> Path:
    """Directory mounted under the 'assets' prefix."""
    static = tmp_path / "static"
    (static / "img").mkdir(parents=True)
    (static / "app.css").write_text("body { color: red; }")
    (static / "img" / "logo.svg").write_text("<svg xmlns='http://www.w3.org/2000/svg'/>")
    return static


@pytest.fixture()
def settings(www_dir: Path, static_dir: Path) -> Settings:
    return Settings(
        version="1.2.3",
        commit="abc1234",
        root_url="https://doodle.example",
        cache_bust="bust42",
        serve_directories={"": str(www_dir), "assets": str(static_dir)},
    )


ClientFactory = Callable[[Settings], Awaitable[AsyncClient]]


@pytest_asyncio.fixture()
async def client_for() -> AsyncIterator[ClientFactory]:
    """Build a started app for the given settings and return a client for it."""
    async with AsyncExitStack() as stack:
        async def _client(settings: Settings) -> AsyncClient:
            app = create_app(settings)
            await stack.enter_async_context(LifespanManager(app))
            transport = ASGITransport(app=app)
            return await stack.enter_async_context(
                AsyncClient(transport=transport, base_url="http://testserver")
            )

        yield _client


@pytest_asyncio.fixture()
async def client(client_for: ClientFactory, settings: Settings) -> AsyncClient:
    return await client_for(settings)
