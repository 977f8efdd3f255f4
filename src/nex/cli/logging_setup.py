"""Logging configuration for the command line.

Core and infra modules log through ``logging.getLogger(__name__)`` and
never configure handlers themselves; this module attaches one handler
to the ``nex`` logger.  Rich renders records when installed, otherwise
a plain stderr stream handler is used, mirroring the console proxy.
"""

from __future__ import annotations

import logging
import sys

PACKAGE_LOGGER: str = "nex"

_PLAIN_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _level_from_name(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.WARNING


def _build_handler() -> logging.Handler:
    try:
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler: logging.Handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_PLAIN_FORMAT))
        return handler

    from nex.cli.console import get_rich_console

    return RichHandler(
        console=get_rich_console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )


def configure_logging(*, verbose: bool = False, level_name: str = "WARNING") -> logging.Logger:
    """Attach a single handler to the package logger and set its level.

    Calling this again replaces the previously installed handler.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    logger.addHandler(_build_handler())
    logger.setLevel(logging.DEBUG if verbose else _level_from_name(level_name))
    return logger
