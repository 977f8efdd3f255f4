"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``) remain
functional even when Rich is not installed.
"""

from __future__ import annotations

import re
import sys
from typing import Any

from nex.exceptions import EnvironmentError

_MARKUP_TAG = re.compile(r"\[/?(?:bold|dim|italic|red|green|yellow|cyan|blue)(?: \w+)*\]")


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console(*, stderr: bool = True) -> Any:
    """Create a Rich console instance targeting stderr (or stdout)."""
    console_class = _load_rich_console_class()
    return console_class(stderr=stderr)


def strip_markup(text: str) -> str:
    """Remove the style tags this package uses from *text*."""
    return _MARKUP_TAG.sub("", text)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def __init__(self, *, stderr: bool) -> None:
        self._stderr = stderr

    def print(self, *objects: object, markup: bool = True, end: str = "\n") -> None:
        """Render with Rich when available, else plain ``print``.

        Pass ``markup=False`` for text that must appear verbatim, such
        as example names that may contain brackets.
        """
        try:
            rich_console = get_rich_console(stderr=self._stderr)
        except EnvironmentError:
            stream = sys.stderr if self._stderr else sys.stdout
            if markup:
                objects = tuple(
                    strip_markup(obj) if isinstance(obj, str) else obj for obj in objects
                )
            print(*objects, file=stream, end=end)
            return
        rich_console.print(*objects, markup=markup, highlight=markup, end=end)


console = _ConsoleProxy(stderr=True)
stdout_console = _ConsoleProxy(stderr=False)
