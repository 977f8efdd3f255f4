"""Custom exception hierarchy for nex.

All exceptions that cross layer boundaries must inherit from
:class:`NexError`.  Raw OS exceptions (e.g. from :mod:`subprocess`)
must NEVER propagate beyond the infrastructure layer — they must be
caught and re-raised as a typed subclass defined here.

Hierarchy
---------
NexError
├── NoExamplesFoundError
├── ExampleNotFoundError
├── ToolchainNotFoundError
├── RunCancelledError
└── EnvironmentError
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping


class NexError(Exception):
    """Base exception for all nex errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Discovery / resolution ------------------------------------------------

class NoExamplesFoundError(NexError):
    """Raised when the repository has no runnable examples at all."""


class ExampleNotFoundError(NexError):
    """Raised when a requested example name matches nothing."""

    def __init__(
        self,
        requested: str,
        available: Iterable[str],
        *,
        kinds: Mapping[str, str] | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(f"Example '{requested}' was not found.", hint=hint)
        self.requested: str = requested
        self.available: tuple[str, ...] = tuple(available)
        # name -> "project" / "file", for the listing
        self.kinds: dict[str, str] = dict(kinds or {})


# --- Toolchain -------------------------------------------------------------

class ToolchainNotFoundError(NexError):
    """Raised when the ``dotnet`` executable cannot be started."""


class RunCancelledError(NexError):
    """Raised when a running example is cancelled before it exits."""


# --- Environment -----------------------------------------------------------

class EnvironmentError(NexError):
    """Raised when an optional runtime dependency is not available."""
