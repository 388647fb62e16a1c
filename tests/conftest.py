import pytest

from lscache_tools.models.site import RequestContext, SiteRecord
from lscache_tools.models.targets import PurgeKind
from lscache_tools.utils import uris
from lscache_tools.utils.directory import MultisiteDirectory


class FakeHost:
    """In-memory stand-in for WordPressHost."""

    def __init__(self, sites=None, multisite=True, site_url="https://mysite.com", content=None):
        self.sites = sites if sites is not None else []
        self.multisite = multisite
        self.default_site_url = site_url
        self.content = content or {}
        self.nonces = []
        self.exists_calls = []

    def is_multisite(self) -> bool:
        return self.multisite

    def list_sites(self) -> list[SiteRecord]:
        return list(self.sites)

    def context(self, blog_id=None, wp_url=None) -> RequestContext:
        site_url = f"https://{wp_url.rstrip('/')}" if wp_url else self.default_site_url
        return RequestContext(
            blog_id=blog_id,
            wp_url=wp_url,
            site_url=site_url,
            ajax_url=uris.join(site_url, "wp-admin/admin-ajax.php"),
        )

    def create_nonce(self, action: str, context: RequestContext) -> str:
        nonce = f"nonce{len(self.nonces) + 1}"
        self.nonces.append((action, context.blog_id, nonce))
        return nonce

    def exists(self, kind: PurgeKind, object_id: int) -> bool:
        self.exists_calls.append((kind, object_id))
        return object_id in self.content.get(kind, ())


NETWORK = [
    SiteRecord(blog_id=1, domain="mysite.com", path="/"),
    SiteRecord(blog_id=2, domain="shop.mysite.com", path="/"),
    SiteRecord(blog_id=3, domain="mysite.com", path="/blog/"),
]


@pytest.fixture
def network_host() -> FakeHost:
    return FakeHost(
        sites=NETWORK,
        content={
            PurgeKind.TAG: {1, 3, 5},
            PurgeKind.CATEGORY: {1, 3},
            PurgeKind.POST_ID: {10},
        },
    )


@pytest.fixture
def single_host() -> FakeHost:
    return FakeHost(multisite=False, site_url="https://mysite.com")


@pytest.fixture
def network_directory(network_host) -> MultisiteDirectory:
    return MultisiteDirectory(network_host)
