"""Server configuration loaded from the environment."""

import hashlib
import logging
import os
import secrets
from functools import lru_cache
from os import getenv
from pathlib import Path
from typing import Iterable, Optional

from pydantic import BaseModel, Field, field_validator

from doodlehall import __version__
from doodlehall.frontend.mounts import StaticMountTable
from doodlehall.frontend.page import BasePageConfig
from doodlehall.utils import normalize_url_path

logger = logging.getLogger("Doodlehall.config")

ENV_FILE_PATHS = [
    Path("/opt/doodlehall/.env"),
    Path(__file__).parent.parent / ".env",
]


def load_env_file(paths: Iterable[Path] = ENV_FILE_PATHS) -> int:
    """
    Load KEY=VALUE lines from the first existing .env file.

    Variables already present in the environment win. Returns the number of
    variables that were set.
    """
    for env_file in paths:
        if not (env_file.exists() and env_file.is_file()):
            continue
        loaded_count = 0
        with open(env_file, "r") as f:
            for line in f:
                line = line.strip()
                # Skip empty lines and comments
                if not line or line.startswith("#") or "=" not in line:
                    continue
                key, value = line.split("=", 1)
                key = key.strip()
                value = value.strip()
                # Remove quotes if present
                if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
                    value = value[1:-1]
                if key and key not in os.environ:
                    os.environ[key] = value
                    loaded_count += 1
        if loaded_count > 0:
            logger.info(f"Loaded {loaded_count} environment variables from {env_file}")
        return loaded_count
    return 0


def parse_serve_directories(value: str) -> dict[str, str]:
    """
    Parse 'prefix=directory' pairs separated by commas.

    An empty prefix ('=/srv/www') configures the generic fallback directory.
    """
    directories = {}
    for item in value.split(","):
        item = item.strip()
        if not item:
            continue
        if "=" not in item:
            raise ValueError(f"Invalid SERVE_DIRECTORIES entry '{item}', expected prefix=directory")
        prefix, directory = item.split("=", 1)
        directories[prefix.strip().strip("/")] = directory.strip()
    return directories


class Settings(BaseModel):
    """Typed container for the server configuration."""

    debug: bool = False
    # URL prefix all routes are mounted under, '' or '/segment'.
    root_path: str = ""
    # Scheme and host, used for metadata tags only.
    root_url: str = ""
    version: str = __version__
    commit: str = ""
    # Explicit cache busting token; derived from version and commit when unset.
    cache_bust: Optional[str] = None
    # Route prefix -> directory. The empty prefix is the generic fallback.
    serve_directories: dict[str, str] = Field(default_factory=dict)
    lobby_max_players_limit: int = Field(default=24, ge=2)

    @field_validator("root_path")
    @classmethod
    def _normalize_root_path(cls, value: str) -> str:
        return normalize_url_path(value)

    @field_validator("root_url")
    @classmethod
    def _strip_root_url(cls, value: str) -> str:
        return value.strip().rstrip("/")

    @classmethod
    def from_env(cls) -> "Settings":
        cache_bust = getenv("CACHE_BUST")
        return cls(
            debug=getenv("APP_DEBUG", "false").lower() == "true",
            root_path=getenv("ROOT_PATH", ""),
            root_url=getenv("ROOT_URL", ""),
            version=getenv("APP_VERSION", __version__),
            commit=getenv("APP_COMMIT", ""),
            cache_bust=cache_bust or None,
            serve_directories=parse_serve_directories(getenv("SERVE_DIRECTORIES", "")),
            lobby_max_players_limit=int(getenv("LOBBY_MAX_PLAYERS_LIMIT", "24")),
        )

    def resolve_cache_bust(self) -> str:
        if self.cache_bust:
            return self.cache_bust
        if self.version or self.commit:
            return hashlib.sha256(f"{self.version}:{self.commit}".encode()).hexdigest()[:12]
        # Dev builds without any version information get a fresh token per
        # process, so every restart invalidates cached assets.
        return secrets.token_hex(6)

    def base_page_config(self) -> BasePageConfig:
        return BasePageConfig(
            version=self.version,
            commit=self.commit,
            root_path=self.root_path,
            root_url=self.root_url,
            cache_bust=self.resolve_cache_bust(),
        )

    def static_mounts(self) -> StaticMountTable:
        return StaticMountTable.from_mapping(self.serve_directories)


@lru_cache
def get_settings() -> Settings:
    load_env_file()
    return Settings.from_env()
