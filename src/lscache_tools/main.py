from lscache_tools import purge, config
from lscache_tools.models.settings import env
from lscache_tools.utils.logs import setup_logging
from typing_extensions import Annotated
import typer

app = typer.Typer(no_args_is_help=True)
app.add_typer(purge.app, name="purge", help="Purge the LiteSpeed cache of a WordPress install.")
app.add_typer(config.app, name="config", help="Manage stored credentials.")


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug output and full tracebacks")] = False,
):
    if verbose:
        env.verbose = True
    setup_logging(env.verbose)
