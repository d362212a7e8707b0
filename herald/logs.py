"""
Logging setup for applications embedding herald.

The library itself only emits records through `logging.getLogger(__name__)`
loggers under the "herald" namespace and installs no handlers. Hosts that
want readable console output call configure(), which attaches a single
rich.logging.RichHandler to the "herald" logger.
"""
import logging

from rich.console import Console
from rich.logging import RichHandler


def configure(level=logging.INFO, /, *, console=None):
    """
    route herald's log records to a rich console.

    calling it again replaces the previously installed handler instead of
    stacking a second one. returns the handler.
    """
    if console is not None and not isinstance(console, Console):
        raise TypeError("configure() 'console' must be a rich console")

    logger = logging.getLogger("herald")
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
        log_time_format="%d/%m/%y %H:%M:%S",
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    return handler


__all__ = (
    "configure",
)
