"""CLI application entry point and command routing for nex.

:func:`guarded_main` is the **sole error boundary** for the entire
application. It catches :class:`~nex.exceptions.NexError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via
Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — discovery, resolution and invocation
  planning are delegated to the core and infrastructure layers.
* ``print()`` is forbidden outside the CLI layer; the console proxies
  are used exclusively.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Mapping, Sequence
from pathlib import Path

from nex.cli import exit_codes
from nex.cli.console import console, stdout_console
from nex.cli.logging_setup import configure_logging
from nex.config.settings import NexSettings
from nex.exceptions import (
    ExampleNotFoundError,
    NexError,
    NoExamplesFoundError,
    RunCancelledError,
    ToolchainNotFoundError,
)
from nex.version import __version__

PASSTHROUGH_SEPARATOR: str = "--"


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The CLI supports:
    * ``nex run --example [NAME] [options] [-- ARGS...]`` — run an example
    * ``nex doctor`` — environment diagnostics
    * ``nex --version``
    """
    parser = argparse.ArgumentParser(
        prog="nex",
        description="The fantastic tool for .NET examples.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log discovery and process details to stderr.",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="<command>")

    run_parser = subparsers.add_parser(
        "run",
        help="Run an example, forwarding arguments given after '--'.",
        description=(
            "Run one example from the repository's examples folder. "
            "Give --example without a name to list what is available."
        ),
    )
    run_parser.add_argument(
        "-e",
        "--example",
        nargs="?",
        const="",
        required=True,
        metavar="NAME",
        help="Example to run (folder, project or file name). Omit NAME to list.",
    )
    _add_root_option(run_parser)
    run_parser.add_argument(
        "--configuration",
        default=None,
        help="Build configuration (default: Debug, or $NEX_CONFIGURATION).",
    )
    run_parser.add_argument(
        "--framework",
        default=None,
        help="Target framework to run, e.g. net10.0.",
    )

    doctor_parser = subparsers.add_parser(
        "doctor",
        help="Check the dotnet toolchain and the examples folder.",
    )
    _add_root_option(doctor_parser)
    return parser


def _add_root_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--root",
        type=Path,
        default=None,
        metavar="DIR",
        help="Directory to start looking for the examples folder (default: cwd).",
    )


def split_passthrough(argv: Sequence[str]) -> tuple[list[str], list[str]]:
    """Split *argv* at the first ``--`` into (own, forwarded) arguments."""
    args = list(argv)
    if PASSTHROUGH_SEPARATOR not in args:
        return args, []
    index = args.index(PASSTHROUGH_SEPARATOR)
    return args[:index], args[index + 1:]


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def print_example_names(
    names: Sequence[str],
    kinds: Mapping[str, str],
    *,
    stderr: bool,
) -> None:
    """List example names one per line, each with its kind, on stderr or stdout."""
    target = console if stderr else stdout_console
    target.print("Available examples:", markup=False)
    for name in names:
        kind = kinds.get(name)
        target.print(f"  {name}  ({kind})" if kind else f"  {name}", markup=False)


def _handle_run(
    args: argparse.Namespace,
    passthrough: list[str],
    settings: NexSettings,
) -> int:
    """Discover examples, resolve the requested one and run it.

    Flow:
    1. Resolve the repository root from ``--root`` or the cwd.
    2. Probe the toolchain to decide on single-file discovery.
    3. Build the catalog and resolve the requested name.
    4. List names, or run the target and return its exit code.
    """
    from nex.core.discovery_service import DiscoveryService
    from nex.core.models import NoNameGiven, NotFound
    from nex.core.resolver import resolve_target
    from nex.core.run_service import RunService
    from nex.infra.dotnet_toolchain import DotnetToolchain
    from nex.infra.example_scanner import FileSystemScanner
    from nex.infra.repo_root import resolve_repo_root

    start: Path = args.root if args.root is not None else settings.cwd
    repo_root = resolve_repo_root(start, cwd=settings.cwd)

    toolchain = DotnetToolchain(
        settings.dotnet_executable,
        probe_timeout=settings.probe_timeout,
    )
    single_file_capable = toolchain.probe().supports_single_file

    catalog = DiscoveryService(FileSystemScanner()).discover(
        repo_root,
        single_file_capable=single_file_capable,
    )
    if not catalog:
        raise NoExamplesFoundError(
            f"No examples found under {repo_root}.",
            hint=(
                "Add an 'examples' folder containing .csproj projects"
                " (or standalone .cs files with .NET 10 or later)."
            ),
        )

    kinds = {name: target.kind.value for name, target in catalog.items()}
    outcome = resolve_target(catalog, args.example)
    if isinstance(outcome, NoNameGiven):
        print_example_names(outcome.available, kinds, stderr=False)
        return exit_codes.SUCCESS
    if isinstance(outcome, NotFound):
        raise ExampleNotFoundError(
            outcome.requested,
            outcome.available,
            kinds=kinds,
            hint="Run 'nex run --example' to list the available examples.",
        )

    configuration: str = args.configuration or settings.default_configuration
    return RunService(toolchain).run(
        outcome.target,
        configuration,
        args.framework,
        passthrough,
    )


def _handle_doctor(args: argparse.Namespace, settings: NexSettings) -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from nex.cli.doctor import run_doctor

    start: Path = args.root if args.root is not None else settings.cwd
    return run_doctor(settings, start)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: Sequence[str] | None = None,
    settings: NexSettings | None = None,
) -> int:
    """Run the nex CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.
    settings:
        Process context.  Read from the environment when ``None``.

    Returns
    -------
    int
        OS process exit code.
    """
    own, passthrough = split_passthrough(sys.argv[1:] if argv is None else argv)
    parser = _build_parser()
    args = parser.parse_args(own)

    if settings is None:
        settings = NexSettings.from_environ()
    configure_logging(verbose=args.verbose, level_name=settings.log_level)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    if args.command == "doctor":
        if passthrough:
            parser.error("arguments after '--' are only accepted by 'run'")
        return _handle_doctor(args, settings)

    return _handle_run(args, passthrough, settings)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def _render_error(exc: NexError) -> None:
    # Messages carry user input and paths: only the prefixes are markup.
    console.print("[bold red]Error:[/bold red] ", end="")
    console.print(str(exc), markup=False)
    if isinstance(exc, ExampleNotFoundError):
        print_example_names(exc.available, exc.kinds, stderr=True)
    if exc.hint:
        console.print("[yellow]Hint:[/yellow] ", end="")
        console.print(exc.hint, markup=False)


def _exit_code_for(exc: NexError) -> int:
    if isinstance(exc, ExampleNotFoundError):
        return exit_codes.EXAMPLE_NOT_FOUND
    if isinstance(exc, ToolchainNotFoundError):
        return exit_codes.COMMAND_NOT_FOUND
    if isinstance(exc, RunCancelledError):
        return exit_codes.KEYBOARD_INTERRUPT
    return exit_codes.GENERAL_ERROR


def guarded_main(
    argv: Sequence[str] | None = None,
    settings: NexSettings | None = None,
) -> int:
    """Run :func:`main` and convert every failure into an exit code.

    ``SystemExit`` raised by argparse (``--help``, usage errors) is left
    to propagate.
    """
    try:
        return main(argv, settings)
    except NexError as exc:
        _render_error(exc)
        return _exit_code_for(exc)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        return exit_codes.KEYBOARD_INTERRUPT
    except Exception as exc:  # noqa: BLE001
        console.print("[bold red]Unexpected error.[/bold red] Please report this issue.")
        console.print(f"  {type(exc).__name__}: {exc}", markup=False)
        return exit_codes.UNEXPECTED_ERROR


def cli() -> None:
    """Top-level entry point invoked by the console script.

    Guarantees the process never exits with a raw stack trace during
    normal usage.
    """
    sys.exit(guarded_main())
