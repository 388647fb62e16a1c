from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class SiteRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    blog_id: int
    domain: str
    path: str = "/"

    @property
    def address(self) -> str:
        """Domain and path, as accepted by wp-cli's --url."""
        return f"{self.domain}{self.path}"


class RequestContext(BaseModel):
    """The blog a request is built and sent for."""

    model_config = ConfigDict(frozen=True)

    blog_id: int | None = None
    # value passed to wp-cli --url, None for the installation default
    wp_url: str | None = None
    site_url: str
    ajax_url: str
