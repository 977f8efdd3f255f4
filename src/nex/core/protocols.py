"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

import threading
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol


class ExampleScanner(Protocol):
    """Contract for filesystem backends feeding example discovery."""

    def find_examples_dir(self, root: Path) -> Path | None:
        """Return ``root/examples`` or ``root/Examples``, or ``None``.

        The lowercase spelling is preferred when both exist.
        """
        ...  # pragma: no cover

    def list_files(self, directory: Path, suffix: str) -> list[Path]:
        """Recursively list files under *directory* ending in *suffix*.

        Matching on *suffix* is case-insensitive and the result is
        sorted.  Unreadable entries are skipped; implementations must
        never raise for traversal errors.
        """
        ...  # pragma: no cover


class Toolchain(Protocol):
    """Contract for the external build/run tool (``dotnet``).

    Implementations must map all process-level exceptions to
    :class:`~nex.exceptions.NexError` subclasses.
    """

    def get_major_version(self) -> int:
        """Return the toolchain's major version, ``0`` when unknown."""
        ...  # pragma: no cover

    def run(
        self,
        arguments: Sequence[str],
        cwd: Path,
        *,
        cancel: threading.Event | None = None,
    ) -> int:
        """Run the toolchain with *arguments* from *cwd* and wait for it.

        Standard streams are inherited.  Returns the child's exit code.

        Raises
        ------
        ToolchainNotFoundError
            When the executable cannot be started.
        RunCancelledError
            When *cancel* is set before the child exits.
        """
        ...  # pragma: no cover
