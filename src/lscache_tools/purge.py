"""LiteSpeed Cache purge commands."""
from __future__ import annotations

import logging
import time
from typing import Any, Callable, NoReturn, Sequence, TypeVar

import rich
import typer
from keyring.errors import KeyringError
from rich.markup import escape
from typer import Option
from typing_extensions import Annotated

from lscache_tools.models.keyring_config import KeyringConfig
from lscache_tools.models.purge_request import PurgeRequest
from lscache_tools.models.settings import env
from lscache_tools.models.site import RequestContext
from lscache_tools.models.targets import PurgeTarget, SiteTarget, TagSetTarget
from lscache_tools.utils.builder import build
from lscache_tools.utils.directory import MultisiteDirectory
from lscache_tools.utils.dispatcher import PurgeDispatcher
from lscache_tools.utils.errors import (
    DomainMismatch,
    InvalidBlogId,
    NetworkError,
    NotMultisite,
    PurgeToolError,
)
from lscache_tools.utils.spinners import spinner
from lscache_tools.utils.validator import TargetValidator
from lscache_tools.utils.wordpress import WordPressHost

T = TypeVar("T")

DryRunType = Annotated[bool, Option("--dry-run", help="Print the request instead of sending it")]
RetriesType = Annotated[int, Option("--retries", min=0, help="Retry network errors this many times")]
IdsType = Annotated[list[str], typer.Argument(help="The ids to purge.")]

RETRY_DELAY = 2.0

app = typer.Typer(no_args_is_help=True)
cp = rich.print
logger = logging.getLogger(__name__)


def get_host() -> WordPressHost:
    return WordPressHost.from_settings(env)


def get_http_auth() -> tuple[str, str] | None:
    """Basic auth from settings, falling back to the keyring."""
    if env.http_auth_user and env.http_auth_password is not None:
        return env.http_auth_user, env.http_auth_password
    try:
        return KeyringConfig.load_from_keyring().http_auth()
    except KeyringError as e:
        logger.debug("Keyring unavailable, sending without auth: %s", e)
        return None


def get_dispatcher() -> PurgeDispatcher:
    return PurgeDispatcher(settings=env, auth=get_http_auth())


def fail(msg: str) -> NoReturn:
    cp(f"❌  {escape(msg)}")
    raise SystemExit(1)


def attempt(func: Callable[..., T], *args: Any) -> T:
    try:
        return func(*args)
    except PurgeToolError as e:
        if env.verbose:
            raise
        fail(str(e))


def print_network_list(directory: MultisiteDirectory):
    lines = ["[cyan]The list of installs:[/cyan]"]
    for site in directory.list_sites():
        lines.append(f"[yellow]{escape(site.address)}:[/yellow] ID {site.blog_id}")
    cp("\n".join(lines))


def send_request(request: PurgeRequest, retries: int):
    """Send once, looping on network errors only."""
    with get_dispatcher() as dispatcher:
        for attempt_no in range(retries + 1):
            try:
                with spinner("Purging..."):
                    return dispatcher.send(request)
            except NetworkError as e:
                if attempt_no >= retries:
                    raise
                logger.warning("%s, retrying (%d/%d)", e, attempt_no + 1, retries)
                time.sleep(RETRY_DELAY)


def show_dry_run(request: PurgeRequest):
    with get_dispatcher() as dispatcher:
        params = dispatcher.query_params(request)
    cp(f"Dry run, would send GET {escape(request.url)}")
    rich.print_json(data=params)


def resolve_context(directory: MultisiteDirectory, target: PurgeTarget) -> RequestContext:
    """Bind Site targets to their blog, everything else to the default site."""
    if isinstance(target, SiteTarget):
        site = directory.get_site(target.blog_id)
        if site is None:
            raise InvalidBlogId(str(target.blog_id))
        return directory.context_for(site)
    return directory.default_context()


def run_purge(kind: str, raw_args: Sequence[str], success_msg: str, dry_run: bool, retries: int):
    host = get_host()
    directory = MultisiteDirectory(host)
    validator = TargetValidator(directory, host.exists)

    try:
        target = validator.validate(kind, raw_args)
        context = resolve_context(directory, target)
    except (InvalidBlogId, DomainMismatch) as e:
        cp(f"[red]Error: {escape(str(e))}[/red]")
        if isinstance(e, InvalidBlogId) or e.multisite:
            print_network_list(directory)
        if env.verbose:
            raise
        raise SystemExit(1)

    if isinstance(target, TagSetTarget):
        cp(f"Will purge the following cache tags: {target.id_list}")

    request = build(target, host.create_nonce, context)

    if dry_run:
        show_dry_run(request)
        return

    result = send_request(request, retries)
    if result.success:
        cp(f"✅  {success_msg}")
    else:
        fail(f"Something went wrong! Got {result.status_code}")


@app.command(name="network_list")
def network_list():
    """List all site domains and ids on the network. For use with the blog subcommand."""

    def run():
        directory = MultisiteDirectory(get_host())
        if not directory.is_multisite():
            raise NotMultisite()
        print_network_list(directory)

    attempt(run)


@app.command(name="all")
def purge_all(dry_run: DryRunType = False, retries: RetriesType = 0):
    """Purges all cache entries for the blog (the entire network if multisite)."""
    attempt(run_purge, "all", (), "Purged All!", dry_run, retries)


@app.command()
def blog(
    blog_id: Annotated[str, typer.Argument(help="The blog id to purge.")],
    dry_run: DryRunType = False,
    retries: RetriesType = 0,
):
    """Purges all cache entries for one blog of a multisite network."""
    attempt(run_purge, "site", (blog_id,), "Purged the blog!", dry_run, retries)


@app.command()
def url(
    url: Annotated[str, typer.Argument(help="The url to purge.")],
    dry_run: DryRunType = False,
    retries: RetriesType = 0,
):
    """Purges all cache tags related to a url."""
    attempt(run_purge, "url", (url,), "Purged the url!", dry_run, retries)


@app.command()
def tag(ids: IdsType, dry_run: DryRunType = False, retries: RetriesType = 0):
    """Purges all cache tags for WordPress tags, by term id."""
    attempt(run_purge, "tag", ids, "Purged the tags!", dry_run, retries)


@app.command()
def category(ids: IdsType, dry_run: DryRunType = False, retries: RetriesType = 0):
    """Purges all cache tags for WordPress categories, by term id."""
    attempt(run_purge, "category", ids, "Purged the tags!", dry_run, retries)


@app.command(name="post_id")
def post_id(ids: IdsType, dry_run: DryRunType = False, retries: RetriesType = 0):
    """Purges all cache tags for WordPress posts or products, by post id."""
    attempt(run_purge, "post_id", ids, "Purged the tags!", dry_run, retries)


app.command(name="product", hidden=True)(post_id)
