"""Core run service — turns a resolved example into a toolchain call.

This service delegates the actual process handling to a
:class:`~nex.core.protocols.Toolchain` injected at construction time.
It is responsible for:

* Building the ``dotnet run`` argument list.
* Delegating to the toolchain.
* Ensuring only :class:`~nex.exceptions.NexError` subclasses escape.

Guarantees
----------
* Pure orchestration — no I/O of its own, no ``print()``.
* Pass-through arguments are forwarded verbatim and in order.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Sequence

from nex.core.models import ExampleTarget, RunPlan, TargetKind
from nex.core.protocols import Toolchain
from nex.exceptions import NexError

logger = logging.getLogger(__name__)

ARGUMENT_SEPARATOR: str = "--"


class RunService:
    """Stateless service that runs one example through the toolchain.

    Parameters
    ----------
    toolchain:
        Any object satisfying the :class:`Toolchain` protocol.
    """

    def __init__(self, toolchain: Toolchain) -> None:
        self._toolchain: Toolchain = toolchain

    # ------------------------------------------------------------------
    # Invocation planning (pure)
    # ------------------------------------------------------------------

    @staticmethod
    def plan(
        target: ExampleTarget,
        configuration: str,
        framework: str | None,
        passthrough: Sequence[str] = (),
    ) -> RunPlan:
        """Build the ``dotnet`` arguments for *target*.

        Rules
        -----
        * Projects run with ``--project <descriptor>``.
        * Single files are handed to ``run`` as its first argument.
        * ``--configuration`` is always passed.
        * ``--framework`` only when non-blank.
        * ``--`` always precedes the pass-through arguments.
        """
        arguments: list[str] = ["run"]
        if target.kind is TargetKind.PROJECT:
            arguments += ["--project", str(target.path)]
        else:
            arguments.append(str(target.path))

        arguments += ["--configuration", configuration]
        if framework is not None and framework.strip():
            arguments += ["--framework", framework.strip()]

        arguments.append(ARGUMENT_SEPARATOR)
        arguments.extend(passthrough)

        return RunPlan(
            arguments=tuple(arguments),
            working_directory=target.working_directory,
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(
        self,
        target: ExampleTarget,
        configuration: str,
        framework: str | None = None,
        passthrough: Sequence[str] = (),
        *,
        cancel: threading.Event | None = None,
    ) -> int:
        """Run *target* and return the child's exit code unchanged.

        Raises
        ------
        ToolchainNotFoundError
            When the toolchain executable cannot be started.
        RunCancelledError
            When *cancel* fires before the example exits.
        NexError
            For any other unexpected toolchain failure.
        """
        run_plan = self.plan(target, configuration, framework, passthrough)
        logger.debug(
            "Running %s in %s",
            " ".join(run_plan.arguments),
            run_plan.working_directory,
        )
        try:
            return self._toolchain.run(
                run_plan.arguments,
                run_plan.working_directory,
                cancel=cancel,
            )
        except NexError:
            # Already one of ours — propagate unchanged.
            raise
        except Exception as exc:
            raise NexError(f"Unexpected toolchain error: {exc}") from exc
