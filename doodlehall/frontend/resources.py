"""Bundled frontend resources (CSS, JS, images) shipped inside the package."""

from pathlib import Path

from litestar import Request, Response
from litestar.exceptions import NotFoundException

from doodlehall.frontend.files import FileServer, Handler
from doodlehall.utils import join_url_path

RESOURCES_DIR = Path(__file__).parent / "resources"

# One year. Resource URLs carry the cache busting token, so a new deployment
# changes the URL instead of relying on expiry.
RESOURCE_HEADERS = {"Cache-Control": "public, max-age=31536000"}


def resource_pattern(root_path: str) -> str:
    return join_url_path(root_path, "resources", "{file}")


def resource_handler(root_path: str, directory: Path = RESOURCES_DIR) -> Handler:
    """Serve '{root_path}/resources/{file}' from the bundled directory."""
    prefix = join_url_path(root_path, "resources") + "/"
    server = FileServer(directory, headers=RESOURCE_HEADERS)

    async def handler(request: Request) -> Response:
        path = request.url.path
        try:
            if not path.startswith(prefix):
                raise NotFoundException()
            return await server.serve(path[len(prefix):])
        except NotFoundException as exc:
            raise NotFoundException(detail=exc.detail, headers=RESOURCE_HEADERS) from exc

    return handler
