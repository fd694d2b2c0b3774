"""Administrator-configured static directory mounts."""

import logging
from dataclasses import dataclass, field
from typing import Mapping, NamedTuple, Optional

from doodlehall.frontend.files import FileServer, Handler, strip_prefix
from doodlehall.utils import join_url_path

logger = logging.getLogger("Doodlehall.frontend")


class Mount(NamedTuple):
    """A file-serving handler and the prefix pattern it answers."""
    prefix: str
    directory: str
    pattern: str
    handler: Handler


@dataclass(frozen=True)
class StaticMountTable:
    """
    Route prefix -> directory, with the unnamed mount kept apart.

    The unnamed mount (configured under the empty prefix) is never a regular
    mount: its directory only feeds the generic fallback answering root-level
    paths nothing else matched. ``None`` means no fallback is configured.
    """
    fallback_directory: Optional[str] = None
    mounts: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, serve_directories: Mapping[str, str]) -> "StaticMountTable":
        """Split a raw prefix -> directory mapping. The input is left untouched."""
        remaining = dict(serve_directories)
        fallback = remaining.pop("", "") or None

        mounts = {}
        for prefix, directory in remaining.items():
            name = prefix.strip("/")
            if not directory:
                logger.warning(f"Skipping mount '{prefix}': no directory configured")
                continue
            if not name:
                # '/' and friends normalize to the unnamed mount, which was
                # already taken from the mapping itself.
                logger.warning(f"Skipping mount '{prefix}': use the empty prefix for the fallback directory")
                continue
            mounts[name] = directory

        return cls(fallback_directory=fallback, mounts=mounts)


def resolve_mounts(root_path: str, table: StaticMountTable) -> tuple[Optional[Handler], list[Mount]]:
    """
    Build the generic fallback handler and one handler per prefixed mount.

    Each prefixed mount strips '{root_path}/{prefix}/' from the request path
    before resolving the file, and is meant to be registered under the
    wildcard pattern '{root_path}/{prefix}/'.
    """
    fallback = None
    if table.fallback_directory:
        fallback_prefix = join_url_path(root_path) if root_path else "/"
        fallback = strip_prefix(fallback_prefix, FileServer(table.fallback_directory))
        logger.info(f"Generic fallback serves {table.fallback_directory}")

    mounts = []
    for prefix, directory in table.mounts.items():
        pattern = join_url_path(root_path, prefix) + "/"
        handler = strip_prefix(pattern, FileServer(directory))
        mounts.append(Mount(prefix=prefix, directory=directory, pattern=pattern, handler=handler))
        logger.info(f"Mounted {directory} at {pattern}")

    return fallback, mounts
