"""Multisite site registry."""
from __future__ import annotations

from typing import Protocol

from lscache_tools.models.site import RequestContext, SiteRecord


class SiteRegistry(Protocol):
    def is_multisite(self) -> bool: ...

    def list_sites(self) -> list[SiteRecord]: ...

    def context(self, blog_id: int | None = None, wp_url: str | None = None) -> RequestContext: ...


def parse_id(raw: str) -> int | None:
    """Parse a strictly all-digits id."""
    if not raw.isascii() or not raw.isdigit():
        return None
    return int(raw)


class MultisiteDirectory:
    """Read-only view of the blogs on an installation.

    Every lookup lists the registry again, nothing is cached between calls.
    Registry failures surface as DirectoryUnavailable.
    """

    def __init__(self, registry: SiteRegistry):
        self.registry = registry

    def is_multisite(self) -> bool:
        return self.registry.is_multisite()

    def list_sites(self) -> list[SiteRecord]:
        return self.registry.list_sites()

    def get_site(self, blog_id: int) -> SiteRecord | None:
        for site in self.list_sites():
            if site.blog_id == blog_id:
                return site
        return None

    def resolve_blog_id(self, raw: str) -> int | None:
        blog_id = parse_id(raw)
        if blog_id is None or blog_id <= 0:
            return None
        site = self.get_site(blog_id)
        return site.blog_id if site else None

    def resolve_domain(self, host: str, path: str = "/") -> int | None:
        host = host.lower()
        for site in self.list_sites():
            if site.domain.lower() == host and site.path == path:
                return site.blog_id
        return None

    def default_context(self) -> RequestContext:
        return self.registry.context()

    def context_for(self, site: SiteRecord) -> RequestContext:
        return self.registry.context(blog_id=site.blog_id, wp_url=site.address)
