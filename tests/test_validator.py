import logging

import pytest

from conftest import FakeHost
from lscache_tools.models.targets import AllTarget, PurgeKind, SiteTarget, TagSetTarget, UrlTarget
from lscache_tools.utils.directory import MultisiteDirectory
from lscache_tools.utils.errors import (
    DomainMismatch,
    EmptyTargetSet,
    InvalidBlogId,
    InvalidUrl,
    NotMultisite,
)
from lscache_tools.utils.validator import TargetValidator


def make_validator(host: FakeHost) -> TargetValidator:
    return TargetValidator(MultisiteDirectory(host), host.exists)


def test_all_is_always_valid(single_host):
    assert make_validator(single_host).validate("all", []) == AllTarget()


def test_site_existing_blog(network_host):
    assert make_validator(network_host).validate("site", ["2"]) == SiteTarget(blog_id=2)


@pytest.mark.parametrize("raw", ["7", "abc", "0", "-2", "2.0", ""])
def test_site_invalid_blog_id(network_host, raw):
    with pytest.raises(InvalidBlogId):
        make_validator(network_host).validate("site", [raw])


def test_site_requires_multisite(single_host):
    with pytest.raises(NotMultisite):
        make_validator(single_host).validate("site", ["1"])


def test_url_single_site_matching_host(single_host):
    target = make_validator(single_host).validate("url", ["https://mysite.com/"])
    assert target == UrlTarget(url="https://mysite.com/")


def test_url_single_site_other_host():
    host = FakeHost(multisite=False, site_url="https://other.com")
    with pytest.raises(DomainMismatch) as exc_info:
        make_validator(host).validate("url", ["https://mysite.com/"])
    assert exc_info.value.multisite is False


def test_url_host_compare_ignores_case(single_host):
    assert make_validator(single_host).validate_url("https://MYSITE.com/page")


@pytest.mark.parametrize("raw", ["mysite.com/page", "not a url", "https://", "mailto:a@b.c"])
def test_url_invalid(single_host, raw):
    with pytest.raises(InvalidUrl):
        make_validator(single_host).validate("url", [raw])


def test_url_multisite_known_domain(network_host):
    target = make_validator(network_host).validate("url", ["https://shop.mysite.com/cart/"])
    assert target.url == "https://shop.mysite.com/cart/"


def test_url_multisite_unknown_domain(network_host):
    with pytest.raises(DomainMismatch) as exc_info:
        make_validator(network_host).validate("url", ["https://unknown.com/"])
    assert exc_info.value.multisite is True


def test_tag_set_keeps_existing_ids_in_order(network_host):
    target = make_validator(network_host).validate("tag", ["5", "1", "3"])
    assert target == TagSetTarget(kind=PurgeKind.TAG, ids=(5, 1, 3))


def test_tag_set_skips_invalid_ids(network_host, caplog):
    caplog.set_level(logging.DEBUG, logger="lscache_tools")
    target = make_validator(network_host).validate("category", ["1", "abc", "3", "9"])

    assert target.ids == (1, 3)
    assert "not a number. abc" in caplog.text
    assert "not a valid category. 9" in caplog.text


def test_tag_set_drops_duplicates(network_host):
    target = make_validator(network_host).validate("tag", ["1", "1", "3"])
    assert target.ids == (1, 3)


def test_tag_set_only_checks_numeric_ids(network_host):
    make_validator(network_host).validate("post_id", ["10", "x1", "½"])
    assert network_host.exists_calls == [(PurgeKind.POST_ID, 10)]


@pytest.mark.parametrize("raw_ids", [["abc"], ["7", "8"], ["0"], ["abc", "99"]])
def test_tag_set_empty_after_filtering(network_host, raw_ids):
    with pytest.raises(EmptyTargetSet):
        make_validator(network_host).validate("category", raw_ids)
