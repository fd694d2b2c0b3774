"""File serving primitives shared by directory mounts and bundled resources."""

from mimetypes import guess_type
from pathlib import Path
from typing import Awaitable, Callable, Optional, Union

from litestar import Request, Response
from litestar.enums import MediaType
from litestar.exceptions import NotFoundException, PermissionDeniedException
from litestar.file_system import BaseLocalFileSystem
from litestar.response import File, Redirect
from litestar.static_files import StaticFiles
from litestar.status_codes import HTTP_301_MOVED_PERMANENTLY

Handler = Callable[[Request], Awaitable[Response]]

INDEX_FILE = "index.html"


class FileServer:
    """
    Serves files below a single directory.

    Nothing touches the disk until a request arrives. A directory requested
    with a trailing slash is answered with its index.html; without the slash
    the client is redirected to the slashed form. Missing files and locations
    outside the directory are answered with 404.
    """

    def __init__(self, directory: Union[str, Path], headers: Optional[dict[str, str]] = None):
        self.directory = str(directory)
        self.headers = headers or {}
        self._files = StaticFiles(
            is_html_mode=False,
            directories=[self.directory],
            file_system=BaseLocalFileSystem(),
            headers=self.headers,
        )

    async def _lookup(self, relative: list[str]):
        try:
            return await self._files.get_fs_info(
                directories=self._files.directories, file_path=Path(*relative)
            )
        except PermissionError as exc:
            raise PermissionDeniedException(detail=f"cannot read {'/'.join(relative)}") from exc

    async def serve(self, path: str) -> Response:
        relative = [segment for segment in path.split("/") if segment]
        resolved, info = await self._lookup(relative)

        if info and info["type"] == "directory":
            if relative and not path.endswith("/"):
                # Relative location, so it works below any prefix.
                return Redirect(path=f"{relative[-1]}/", status_code=HTTP_301_MOVED_PERMANENTLY)
            relative = [*relative, INDEX_FILE]
            resolved, info = await self._lookup(relative)

        if not info or info["type"] != "file":
            raise NotFoundException(detail=f"no file matches {'/'.join(relative) or '/'}")

        return File(
            path=resolved,
            file_info=info,
            filename=relative[-1],
            content_disposition_type="inline",
            headers=self.headers,
            # Routes default to HTML; the file type decides instead.
            media_type=guess_type(relative[-1])[0] or MediaType.OCTET,
        )


def strip_prefix(prefix: str, server: FileServer) -> Handler:
    """
    Wrap a file server so it only sees the part of the path below prefix.

    The prefix itself without its trailing slash is redirected to the slashed
    form. Any other path that doesn't start with prefix is answered with 404.
    """

    async def handler(request: Request) -> Response:
        path = request.url.path
        if len(prefix) > 1 and prefix.endswith("/") and path == prefix[:-1]:
            return Redirect(path=prefix, status_code=HTTP_301_MOVED_PERMANENTLY)
        if not path.startswith(prefix):
            raise NotFoundException()
        return await server.serve(path[len(prefix):])

    return handler
