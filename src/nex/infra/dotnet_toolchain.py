"""``dotnet`` backed implementation of :class:`~nex.core.protocols.Toolchain`.

This module is the **only** place in the codebase that spawns
processes.  Raw :mod:`subprocess` / :class:`OSError` failures are caught
here and re-raised as typed :class:`~nex.exceptions.NexError`
subclasses — nothing raw escapes the infrastructure boundary.

Rules
-----
* Version probing never raises: a missing or confused toolchain is
  reported as major version ``0``.
* Running inherits the parent's standard streams.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import logging
import platform
import re
import shutil
import subprocess
import threading
from collections.abc import Sequence
from pathlib import Path

from nex.core.models import ToolchainInfo
from nex.exceptions import RunCancelledError, ToolchainNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_EXECUTABLE: str = "dotnet"

_LEADING_NUMBER = re.compile(r"\d+")


# ---------------------------------------------------------------------------
# Version parsing (pure)
# ---------------------------------------------------------------------------

def parse_major_version(text: str | None) -> int:
    """Return the leading number of a version string, ``0`` if there is none.

    ``"10.0.100-preview.7"`` → ``10``; ``"8+abc"`` → ``8``; ``"v8"`` → ``0``.
    """
    if not text:
        return 0
    head = re.split(r"[.\-+]", text.strip(), maxsplit=1)[0]
    if _LEADING_NUMBER.fullmatch(head) is None:
        return 0
    return int(head)


# ---------------------------------------------------------------------------
# Toolchain adapter
# ---------------------------------------------------------------------------

class DotnetToolchain:
    """Concrete :class:`Toolchain` driving the ``dotnet`` CLI.

    Usage::

        toolchain = DotnetToolchain()
        if toolchain.get_major_version() >= 10:
            ...
        code = toolchain.run(["run", "--project", "Hello.csproj", "--"], cwd)

    Parameters
    ----------
    executable:
        Name or path of the ``dotnet`` executable.
    probe_timeout:
        Seconds to wait for ``dotnet --version`` before giving up.
    poll_interval:
        Seconds between cancellation checks while a child is running.
    terminate_grace:
        Seconds a cancelled child gets to exit before it is killed.
    """

    def __init__(
        self,
        executable: str = DEFAULT_EXECUTABLE,
        *,
        probe_timeout: float = 10.0,
        poll_interval: float = 0.2,
        terminate_grace: float = 5.0,
    ) -> None:
        self._executable: str = executable
        self._probe_timeout: float = probe_timeout
        self._poll_interval: float = poll_interval
        self._terminate_grace: float = terminate_grace
        self._info: ToolchainInfo | None = None

    @property
    def executable(self) -> str:
        return self._executable

    def locate(self) -> Path | None:
        """Return the resolved executable path, or ``None`` if not on PATH."""
        found = shutil.which(self._executable)
        return Path(found).resolve() if found is not None else None

    # ------------------------------------------------------------------
    # Probe
    # ------------------------------------------------------------------

    def probe(self) -> ToolchainInfo:
        """Ask the toolchain for its version; cached after the first call."""
        if self._info is None:
            version = self._query_version()
            self._info = ToolchainInfo(
                found=version is not None,
                executable=self._executable,
                version=version,
                major=parse_major_version(version),
            )
            logger.debug("Toolchain probe: %s", self._info)
        return self._info

    def get_major_version(self) -> int:
        return self.probe().major

    def _query_version(self) -> str | None:
        try:
            completed = subprocess.run(
                [self._executable, "--version"],
                capture_output=True,
                text=True,
                timeout=self._probe_timeout,
                check=False,
            )
        except (OSError, subprocess.SubprocessError) as exc:
            logger.debug("'%s --version' failed: %s", self._executable, exc)
            return None

        if completed.returncode != 0:
            logger.debug(
                "'%s --version' exited with %d", self._executable, completed.returncode,
            )
            return None

        version = completed.stdout.strip()
        return version or None

    # ------------------------------------------------------------------
    # Protocol method
    # ------------------------------------------------------------------

    def run(
        self,
        arguments: Sequence[str],
        cwd: Path,
        *,
        cancel: threading.Event | None = None,
    ) -> int:
        """Spawn ``dotnet <arguments>`` in *cwd* and wait for it to exit.

        Raises
        ------
        ToolchainNotFoundError
            When the executable cannot be started.
        RunCancelledError
            When *cancel* is set while the child is still running.
        """
        command = [self._executable, *arguments]
        try:
            process = subprocess.Popen(command, cwd=cwd)
        except (FileNotFoundError, PermissionError) as exc:
            raise ToolchainNotFoundError(
                f"Could not start '{self._executable}': {exc.strerror or exc}",
                hint=install_hint(),
            ) from exc
        except OSError as exc:
            raise ToolchainNotFoundError(
                f"Could not start '{self._executable}' in {cwd}: {exc}",
            ) from exc

        try:
            return self._wait(process, cancel)
        except KeyboardInterrupt:
            code = process.poll()
            if code is not None:
                return code
            self._terminate(process)
            raise

    def _wait(
        self,
        process: subprocess.Popen[bytes],
        cancel: threading.Event | None,
    ) -> int:
        if cancel is None:
            return process.wait()

        while True:
            try:
                return process.wait(timeout=self._poll_interval)
            except subprocess.TimeoutExpired:
                pass
            if cancel.is_set():
                code = process.poll()
                if code is not None:
                    return code
                self._terminate(process)
                raise RunCancelledError("The example was cancelled before it exited.")

    def _terminate(self, process: subprocess.Popen[bytes]) -> None:
        """Stop a still-running child, escalating to kill after the grace period."""
        logger.debug("Terminating child process %s", process.pid)
        process.terminate()
        try:
            process.wait(timeout=self._terminate_grace)
        except subprocess.TimeoutExpired:
            logger.debug("Child %s ignored terminate; killing", process.pid)
            process.kill()
            process.wait()


# ---------------------------------------------------------------------------
# Platform-specific install guidance
# ---------------------------------------------------------------------------

def install_commands() -> tuple[str, ...]:
    """Return SDK install commands appropriate for the current OS."""
    system = platform.system().lower()
    if system == "windows":
        return ("winget install Microsoft.DotNet.SDK.10",)
    if system == "linux":
        return (
            "sudo apt install dotnet-sdk-10.0",
            "sudo dnf install dotnet-sdk-10.0",
        )
    if system == "darwin":
        return ("brew install --cask dotnet-sdk",)
    # Fallback — generic guidance.
    return ("Download the SDK from https://dotnet.microsoft.com/download",)


def install_hint() -> str:
    """Multi-line hint listing :func:`install_commands`."""
    lines = ["Install the .NET SDK using one of:"]
    lines.extend(f"  {cmd}" for cmd in install_commands())
    lines.append("or point NEX_DOTNET at an existing dotnet executable.")
    return "\n".join(lines)
