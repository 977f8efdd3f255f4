"""Runtime settings for nex.

The working directory and the environment are read exactly once, by
:meth:`NexSettings.from_environ`, and the resulting frozen object is
passed explicitly to everything that needs it.  Nothing else in the
package touches :data:`os.environ` or :func:`os.getcwd`.

Environment variables
---------------------
``NEX_DOTNET``
    Name or path of the ``dotnet`` executable (default ``dotnet``).
``NEX_CONFIGURATION``
    Default build configuration (default ``Debug``).
``NEX_LOG_LEVEL``
    Default logging level name (default ``WARNING``).
``NEX_PROBE_TIMEOUT``
    Seconds to wait for ``dotnet --version`` (default ``10``).
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

DEFAULT_CONFIGURATION: str = "Debug"
DEFAULT_LOG_LEVEL: str = "WARNING"
DEFAULT_PROBE_TIMEOUT: float = 10.0


def _positive_float(raw: str | None, default: float) -> float:
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value > 0 else default


@dataclass(frozen=True, slots=True)
class NexSettings:
    """Immutable snapshot of the process context nex runs in."""

    cwd: Path
    dotnet_executable: str = "dotnet"
    default_configuration: str = DEFAULT_CONFIGURATION
    log_level: str = DEFAULT_LOG_LEVEL
    probe_timeout: float = DEFAULT_PROBE_TIMEOUT

    @classmethod
    def from_environ(
        cls,
        environ: Mapping[str, str] | None = None,
        cwd: Path | None = None,
    ) -> NexSettings:
        """Build settings from *environ* (default :data:`os.environ`)."""
        env = os.environ if environ is None else environ
        return cls(
            cwd=Path.cwd() if cwd is None else cwd,
            dotnet_executable=env.get("NEX_DOTNET", "").strip() or "dotnet",
            default_configuration=(
                env.get("NEX_CONFIGURATION", "").strip() or DEFAULT_CONFIGURATION
            ),
            log_level=env.get("NEX_LOG_LEVEL", "").strip().upper() or DEFAULT_LOG_LEVEL,
            probe_timeout=_positive_float(
                env.get("NEX_PROBE_TIMEOUT"), DEFAULT_PROBE_TIMEOUT,
            ),
        )
