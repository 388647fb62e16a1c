"""Purge target validation."""
from __future__ import annotations

import logging
from typing import Callable, Sequence

from lscache_tools.models.targets import (
    AllTarget,
    PurgeKind,
    PurgeTarget,
    SiteTarget,
    TagSetTarget,
    UrlTarget,
)
from lscache_tools.utils import uris
from lscache_tools.utils.directory import MultisiteDirectory, parse_id
from lscache_tools.utils.errors import (
    DomainMismatch,
    EmptyTargetSet,
    InvalidBlogId,
    InvalidUrl,
    NotMultisite,
)

logger = logging.getLogger(__name__)

ExistsCheck = Callable[[PurgeKind, int], bool]


class TargetValidator:
    def __init__(self, directory: MultisiteDirectory, exists: ExistsCheck):
        self.directory = directory
        self.exists = exists

    def validate(self, kind: str, raw_args: Sequence[str]) -> PurgeTarget:
        """Validate raw command arguments into a purge target."""
        if kind == "all":
            return self.validate_all()
        if kind == "site":
            (raw,) = raw_args
            return self.validate_site(raw)
        if kind == "url":
            (raw,) = raw_args
            return self.validate_url(raw)
        return self.validate_tag_set(PurgeKind(kind), raw_args)

    def validate_all(self) -> AllTarget:
        return AllTarget()

    def validate_site(self, raw: str) -> SiteTarget:
        if not self.directory.is_multisite():
            raise NotMultisite()

        blog_id = self.directory.resolve_blog_id(raw)
        if blog_id is None:
            raise InvalidBlogId(raw)
        return SiteTarget(blog_id=blog_id)

    def validate_url(self, raw: str) -> UrlTarget:
        host = uris.host_of(raw)
        if host is None:
            raise InvalidUrl(raw)

        if self.directory.is_multisite():
            if self.directory.resolve_domain(host, "/") is None:
                raise DomainMismatch(host, multisite=True)
        else:
            site_host = uris.host_of(self.directory.default_context().site_url)
            if host != site_host:
                raise DomainMismatch(host, multisite=False)

        return UrlTarget(url=raw.strip())

    def validate_tag_set(self, kind: PurgeKind, raw_ids: Sequence[str]) -> TagSetTarget:
        """Keep the ids that exist, skipping the rest.

        Raises EmptyTargetSet only when no id survives.
        """
        filtered: list[int] = []
        for raw in raw_ids:
            object_id = parse_id(raw)
            if object_id is None or object_id <= 0:
                logger.debug("Skip val, not a number. %s", raw)
                continue
            if object_id in filtered:
                logger.debug("Skip val, duplicate. %s", raw)
                continue
            if not self.exists(kind, object_id):
                logger.debug("Skip val, not a valid %s. %s", kind, raw)
                continue
            filtered.append(object_id)

        if not filtered:
            raise EmptyTargetSet(kind.value)

        return TagSetTarget(kind=kind, ids=tuple(filtered))
