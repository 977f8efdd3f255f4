"""Filesystem implementation of :class:`~nex.core.protocols.ExampleScanner`.

Rules
-----
* Read-only: nothing under the repository is ever written.
* Traversal errors (permission denied, vanished or broken entries) are
  logged at DEBUG level and skipped — partial results beat none.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

EXAMPLES_DIR_NAMES: tuple[str, ...] = ("examples", "Examples")
"""Accepted spellings, in order of preference."""


def find_examples_dir(root: Path) -> Path | None:
    """Return the first of ``root/examples`` / ``root/Examples`` that exists."""
    for name in EXAMPLES_DIR_NAMES:
        candidate = root / name
        try:
            if candidate.is_dir():
                return candidate
        except OSError as exc:
            logger.debug("Cannot inspect %s: %s", candidate, exc)
    return None


class FileSystemScanner:
    """Concrete :class:`ExampleScanner` walking the local filesystem.

    This class satisfies the :class:`~nex.core.protocols.ExampleScanner`
    protocol structurally — no explicit inheritance required.
    """

    def find_examples_dir(self, root: Path) -> Path | None:
        return find_examples_dir(root)

    def list_files(self, directory: Path, suffix: str) -> list[Path]:
        """Recursively collect regular files under *directory* ending in *suffix*.

        Symlinked directories are not followed, which also rules out
        traversal cycles.
        """
        wanted = suffix.lower()
        found: list[Path] = []

        for dirpath, _dirnames, filenames in os.walk(
            directory,
            onerror=self._log_walk_error,
        ):
            for filename in filenames:
                if not filename.lower().endswith(wanted):
                    continue
                path = Path(dirpath, filename)
                try:
                    if not path.is_file():
                        logger.debug("Skipping %s: not a regular file", path)
                        continue
                except OSError as exc:
                    logger.debug("Skipping %s: %s", path, exc)
                    continue
                found.append(path)

        found.sort()
        return found

    @staticmethod
    def _log_walk_error(exc: OSError) -> None:
        logger.debug("Skipping unreadable entry %s: %s", exc.filename, exc.strerror)
