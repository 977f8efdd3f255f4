"""Domain models for nex.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They carry zero I/O, zero dependencies on
external packages, and must remain pure across the entire lifecycle.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path


SINGLE_FILE_MIN_MAJOR: int = 10
"""First ``dotnet`` major version able to run a bare ``.cs`` file."""


# ---------------------------------------------------------------------------
# Example targets
# ---------------------------------------------------------------------------

class TargetKind(enum.Enum):
    """How the toolchain is asked to run an example."""

    PROJECT = "project"
    """Build and run through a project descriptor (``*.csproj``)."""

    FILE = "file"
    """Run one self-contained source file directly."""


@dataclass(frozen=True, slots=True)
class ExampleTarget:
    """A single runnable example found under the examples directory."""

    kind: TargetKind
    """Whether :attr:`path` is a project descriptor or a source file."""

    path: Path
    """Path to the descriptor or the source file."""

    @property
    def working_directory(self) -> Path:
        """Directory the example is run from: the one holding :attr:`path`."""
        return self.path.parent


# ---------------------------------------------------------------------------
# Resolution outcomes
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ResolvedTo:
    """The requested name designates exactly one target."""

    target: ExampleTarget


@dataclass(frozen=True, slots=True)
class NoNameGiven:
    """No name was requested; carries every known name, sorted."""

    available: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class NotFound:
    """The requested name matched nothing, not even ignoring case."""

    requested: str
    available: tuple[str, ...]


ResolutionOutcome = ResolvedTo | NoNameGiven | NotFound


# ---------------------------------------------------------------------------
# Toolchain invocation
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class RunPlan:
    """One toolchain invocation, minus the executable itself."""

    arguments: tuple[str, ...]
    working_directory: Path


@dataclass(frozen=True, slots=True)
class ToolchainInfo:
    """Result of probing the ``dotnet`` executable.

    Attributes
    ----------
    found : bool
        Whether the executable answered ``--version`` successfully.
    executable : str
        The executable name or path that was probed.
    version : str | None
        Raw version string, or ``None`` when unavailable.
    major : int
        Leading version number, ``0`` when unknown.
    """

    found: bool
    executable: str
    version: str | None
    major: int

    @property
    def supports_single_file(self) -> bool:
        return self.major >= SINGLE_FILE_MIN_MAJOR
