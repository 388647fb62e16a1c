"""Builds wire requests from purge targets."""
from __future__ import annotations

from typing import Callable

from lscache_tools.models.purge_request import PurgeAction, PurgeRequest
from lscache_tools.models.site import RequestContext
from lscache_tools.models.targets import (
    AllTarget,
    PurgeTarget,
    SiteTarget,
    TagSetTarget,
    UrlTarget,
)

NonceProvider = Callable[[str, RequestContext], str]


def build(target: PurgeTarget, nonce_provider: NonceProvider, context: RequestContext) -> PurgeRequest:
    """
    Build the request for a target.
    Site targets expect a context already bound to their blog.
    """
    if isinstance(target, UrlTarget):
        # hits the page itself, no admin-ajax and no nonce
        return PurgeRequest(action=PurgeAction.PURGE, url=target.url)

    if isinstance(target, SiteTarget):
        if context.blog_id != target.blog_id:
            raise ValueError(
                f"Context is bound to blog {context.blog_id}, expected {target.blog_id}"
            )
        action, params = PurgeAction.PURGE_ALL, {}
    elif isinstance(target, AllTarget):
        action, params = PurgeAction.PURGE_ALL, {}
    elif isinstance(target, TagSetTarget):
        action = PurgeAction.PURGE_BY
        params = {"select": target.kind.value, "list": target.id_list}
    else:
        raise TypeError(f"Unknown purge target: {target!r}")

    return PurgeRequest(
        action=action,
        params=params,
        nonce=nonce_provider(action.value, context),
        url=context.ajax_url,
    )
