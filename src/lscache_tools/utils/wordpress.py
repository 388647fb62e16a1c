"""WordPress host access through wp-cli."""
from __future__ import annotations

import json
import re

from lscache_tools.models.settings import EnvSettings, env
from lscache_tools.models.site import RequestContext, SiteRecord
from lscache_tools.models.targets import PurgeKind
from lscache_tools.utils import uris
from lscache_tools.utils.errors import DirectoryUnavailable
from lscache_tools.utils.wp_process import WpCliError, WpCliProcess, WpCliUnavailable


_ACTION_NAME = re.compile(r"^[A-Za-z0-9_\-]+$")

# wp-cli errors for a term or post that is not there
_MISSING_MARKERS = ("doesn't exist", "Could not find", "Invalid term", "Invalid post")


class WordPressHost:
    """Reads the site registry, content and nonces of a WordPress install."""

    def __init__(self, process: WpCliProcess, settings: EnvSettings = env):
        self.process = process
        self.settings = settings

    @classmethod
    def from_settings(cls, settings: EnvSettings = env) -> WordPressHost:
        process = WpCliProcess(
            command=settings.wp_command,
            path=settings.wp_path,
            url=settings.wp_url,
            user=settings.wp_user,
            timeout=settings.wp_timeout,
        )
        return cls(process, settings)

    def _query(self, cmd: str, *args: str, url: str | None = None) -> str:
        try:
            return self.process.run_cmd(cmd, *args, url=url)
        except (WpCliError, WpCliUnavailable) as e:
            raise DirectoryUnavailable(str(e)) from e

    def is_multisite(self) -> bool:
        out = self._query("eval", "echo is_multisite() ? 1 : 0;")
        if out not in ("0", "1"):
            raise DirectoryUnavailable(f"Unexpected multisite check output: {out!r}")
        return out == "1"

    def list_sites(self) -> list[SiteRecord]:
        out = self._query("site", "list", "--fields=blog_id,domain,path", "--format=json")
        try:
            rows = json.loads(out or "[]")
            return [SiteRecord(**row) for row in rows]
        except (ValueError, TypeError) as e:
            raise DirectoryUnavailable(f"Unreadable site list: {e}") from e

    def site_url(self, wp_url: str | None = None) -> str:
        return self._query("option", "get", "siteurl", url=wp_url)

    def context(self, blog_id: int | None = None, wp_url: str | None = None) -> RequestContext:
        """Resolve the urls a request for the given blog is sent to."""
        site_url = self.site_url(wp_url)
        return RequestContext(
            blog_id=blog_id,
            wp_url=wp_url,
            site_url=site_url,
            ajax_url=uris.join(site_url, self.settings.admin_ajax_path),
        )

    def create_nonce(self, action: str, context: RequestContext) -> str:
        """Mint a fresh nonce for an action name."""
        if not _ACTION_NAME.match(action):
            raise ValueError(f"Invalid nonce action: {action!r}")
        return self._query("eval", f"echo wp_create_nonce( '{action}' );", url=context.wp_url)

    def exists(self, kind: PurgeKind, object_id: int) -> bool:
        """Check that a tag, category or post exists."""
        if kind == PurgeKind.TAG:
            args = ("term", "get", "post_tag", str(object_id), "--field=term_id")
        elif kind == PurgeKind.CATEGORY:
            args = ("term", "get", "category", str(object_id), "--field=term_id")
        else:
            args = ("post", "get", str(object_id), "--field=ID")

        try:
            completed = self.process.run(*args)
        except WpCliUnavailable as e:
            raise DirectoryUnavailable(str(e)) from e

        if completed.returncode == 0:
            return bool(completed.stdout.strip())
        if any(marker in completed.stderr for marker in _MISSING_MARKERS):
            return False
        raise DirectoryUnavailable(str(WpCliError(completed.args, completed.returncode, completed.stderr)))
