"""Shared pytest fixtures and configuration for the nex test suite.

Guidelines
----------
* No real ``dotnet`` invocation — subprocess is mocked at the infra
  boundary.
* Core tests must be pure — no side effects.
* Filesystem layouts are built under ``tmp_path`` only.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from nex.config.settings import NexSettings


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Undo handlers installed by ``configure_logging`` during a test."""
    yield
    logger = logging.getLogger("nex")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def make_files(tmp_path: Path) -> Callable[..., Path]:
    """Create empty files below ``tmp_path`` and return ``tmp_path``.

    Usage::

        root = make_files("examples/Hello/Hello.csproj", "examples/One.cs")
    """

    def _make(*relative_paths: str) -> Path:
        for relative in relative_paths:
            path = tmp_path / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text("", encoding="utf-8")
        return tmp_path

    return _make


@pytest.fixture
def settings(tmp_path: Path) -> NexSettings:
    """Settings rooted at ``tmp_path`` with no environment overrides."""
    return NexSettings.from_environ({}, cwd=tmp_path)
