"""Logging setup for storyblok_typegen.

Every module obtains its logger through :func:`get_logger`; the CLI calls
:func:`setup_logging` once to attach a rich handler to the package logger.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "storyblok_typegen"

_configured = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger namespaced under the package logger."""
    if not name.startswith(PACKAGE_LOGGER):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


def setup_logging(
    level: int | str = logging.WARNING,
    rich_output: bool = True,
    console: Console | None = None,
) -> logging.Logger:
    """Configure the package logger.

    Args:
        level: Logging level name or number.
        rich_output: Use a RichHandler instead of a plain stream handler.
        console: Console the rich handler writes to (stderr by default).

    Returns:
        The configured package logger.
    """
    global _configured

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    if _configured:
        for handler in logger.handlers:
            handler.setLevel(level)
        return logger

    if rich_output:
        handler: logging.Handler = RichHandler(
            console=console or Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )

    handler.setLevel(level)
    logger.addHandler(handler)
    _configured = True
    return logger
