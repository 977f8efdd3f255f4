"""Infrastructure: locate the repository root that owns the examples.

Starting from a directory, walk up the ancestor chain until one holds
an ``examples`` (or ``Examples``) folder.  The walk is bounded by the
depth of the path and never raises.
"""

from __future__ import annotations

import logging
from pathlib import Path

from nex.infra.example_scanner import find_examples_dir

logger = logging.getLogger(__name__)


def _usable_start(start: Path, cwd: Path) -> Path:
    """Return *start* made absolute, or *cwd* when it is not a directory."""
    candidate = start if start.is_absolute() else cwd / start
    try:
        if candidate.is_dir():
            return candidate.resolve()
    except OSError as exc:
        logger.debug("Cannot inspect %s: %s", candidate, exc)
    logger.debug("%s is not a directory; starting from %s", start, cwd)
    return cwd


def resolve_repo_root(start: Path, *, cwd: Path) -> Path:
    """Return the nearest ancestor of *start* (inclusive) holding examples.

    Falls back to the starting directory itself when no ancestor
    qualifies.  Relative *start* paths are interpreted against *cwd*.
    """
    origin = _usable_start(start, cwd)
    for directory in (origin, *origin.parents):
        if find_examples_dir(directory) is not None:
            logger.debug("Repository root resolved to %s", directory)
            return directory
    return origin
