import logging

from rich.logging import RichHandler


def setup_logging(verbose: bool = False):
    """Route package logs through rich, at debug level when verbose."""
    handler = RichHandler(show_path=verbose, rich_tracebacks=True, markup=False)
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger("lscache_tools")
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
