"""Page configuration shared by every server-rendered page."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class BasePageConfig(BaseModel):
    """
    Data that all pages require to function correctly, no matter whether
    error page or lobby page.

    Built once per process and shared read-only by every renderer.
    """

    model_config = ConfigDict(frozen=True)

    # Tagged version of this build. Empty for dev builds.
    version: str = ""
    # Commit that was deployed, if no concrete tag was deployed.
    commit: str = ""
    # Path between the domain and the game's own paths, e.g. '/doodle' when
    # hosted at painting.com/doodle. Empty when hosted at the domain root.
    root_path: str = Field(default="", serialization_alias="rootPath")
    # Protocol and domain only, e.g. 'https://painting.com'. Used for
    # metadata tags.
    root_url: str = Field(default="", serialization_alias="rootUrl")
    # Appended to every resource URL so long lived cache headers never serve
    # assets of a previous deployment.
    cache_bust: str = Field(default="", serialization_alias="cacheBust")

    def template_context(self) -> dict[str, Any]:
        """Fields for templates, plus the camelCase form for the browser."""
        return {
            **self.model_dump(),
            "page_config": self.model_dump(by_alias=True),
        }

    def resource_url(self, file_name: str) -> str:
        """URL of a bundled resource, including the cache busting token."""
        return f"{self.root_path}/resources/{file_name}?v={self.cache_bust}"
