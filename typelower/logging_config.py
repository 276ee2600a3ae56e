"""
Logging setup for typelower.

Library modules call get_logger(__name__) and only ever log; the CLI calls
setup_logging() once to attach a handler.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "typelower"

LOG_FORMAT = "%(message)s"
PLAIN_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Get a logger below the typelower root logger."""
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def setup_logging(
    level: int = logging.WARNING,
    use_rich: bool = True,
    console: Optional[Console] = None,
) -> logging.Logger:
    """
    Configure the typelower root logger.

    Calling it again replaces the previously installed handler.

    Args:
        level: Logging level for the typelower loggers
        use_rich: Use a RichHandler, plain StreamHandler otherwise
        console: Console the RichHandler writes to (stderr by default)

    Returns:
        The configured root logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    if use_rich:
        handler: logging.Handler = RichHandler(
            console=console or Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(PLAIN_LOG_FORMAT))

    logger.addHandler(handler)
    logger.propagate = False
    return logger
