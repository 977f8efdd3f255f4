"""``nex doctor`` — environment diagnostics command.

Gathers system information and renders a Rich table summarising
whether the runtime environment can discover and run examples.

This module lives in the CLI layer — it may import from ``infra``
and ``core``, and it renders via Rich.  No business logic resides
here; it purely collects and displays diagnostic data.
"""

from __future__ import annotations

import platform
import sys
from pathlib import Path

from nex.cli import exit_codes
from nex.cli.console import console
from nex.config.settings import NexSettings
from nex.core.discovery_service import DiscoveryService
from nex.core.models import SINGLE_FILE_MIN_MAJOR, ToolchainInfo
from nex.infra.dotnet_toolchain import DotnetToolchain, install_commands
from nex.infra.example_scanner import FileSystemScanner, find_examples_dir
from nex.infra.repo_root import resolve_repo_root
from nex.version import __version__

Check = tuple[str, str, str]


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _nex_version_check() -> Check:
    """Return (label, value, status) for the nex version row."""
    return "nex", __version__, "[green]OK[/green]"


def _python_version_check() -> Check:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _dotnet_check(toolchain: DotnetToolchain, info: ToolchainInfo) -> Check:
    """Return (label, value, status) for the dotnet row."""
    if not info.found:
        return "dotnet", "not found", "[red]FAIL[/red]"
    location = toolchain.locate()
    where = str(location) if location is not None else info.executable
    return "dotnet", f"{info.version} ({where})", "[green]OK[/green]"


def _single_file_check(info: ToolchainInfo) -> Check:
    """Return (label, value, status) for the single-file support row."""
    if info.supports_single_file:
        return "Single-file", "supported", "[green]OK[/green]"
    return (
        "Single-file",
        f"needs dotnet {SINGLE_FILE_MIN_MAJOR}+",
        "[yellow]WARN[/yellow]",
    )


def _examples_check(start: Path, settings: NexSettings, info: ToolchainInfo) -> Check:
    """Return (label, value, status) for the examples folder row."""
    repo_root = resolve_repo_root(start, cwd=settings.cwd)
    examples_dir = find_examples_dir(repo_root)
    if examples_dir is None:
        return "Examples", f"none under {repo_root}", "[yellow]WARN[/yellow]"

    catalog = DiscoveryService(FileSystemScanner()).discover(
        repo_root,
        single_file_capable=info.supports_single_file,
    )
    targets = set(catalog.values())
    value = f"{examples_dir} ({len(targets)} example(s), {len(catalog)} name(s))"
    status = "[green]OK[/green]" if catalog else "[yellow]WARN[/yellow]"
    return "Examples", value, status


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    if "FAIL" in status:
        return "FAIL"
    if "WARN" in status:
        return "WARN"
    if "OK" in status:
        return "OK"
    return status


def _print_plain_doctor_table(checks: list[Check]) -> None:
    """Render doctor output without Rich."""
    print("\nnex doctor", file=sys.stderr)
    print("=" * 72, file=sys.stderr)
    print(f"{'Component':<12} {'Value':<48} {'Status':<8}", file=sys.stderr)
    print("-" * 72, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<12} {value:<48} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor(settings: NexSettings, start: Path) -> int:
    """Execute all diagnostic checks and render a Rich summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when all critical checks pass,
        :data:`exit_codes.GENERAL_ERROR` if a critical check fails.
    """
    toolchain = DotnetToolchain(
        settings.dotnet_executable,
        probe_timeout=settings.probe_timeout,
    )
    info = toolchain.probe()

    checks = [
        _nex_version_check(),
        _python_version_check(),
        _dotnet_check(toolchain, info),
        _single_file_check(info),
        _examples_check(start, settings, info),
    ]
    has_failure = any("FAIL" in status for _, _, status in checks)

    rich_available = True
    try:
        from rich.markup import escape
        from rich.table import Table
    except ModuleNotFoundError:
        rich_available = False

    if rich_available:
        table = Table(
            title="nex doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=12)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=8)

        for label, value, status in checks:
            table.add_row(label, escape(value), status)

        console.print()
        console.print(table)
        console.print()
    else:
        _print_plain_doctor_table(checks)

    # Show SDK install guidance when dotnet is missing.
    if not info.found:
        console.print("[yellow]The .NET SDK was not found.[/yellow]")
        console.print("Install using one of the following commands:\n")
        for cmd in install_commands():
            console.print(f"  [bold]{cmd}[/bold]")
        console.print()

    if has_failure:
        console.print("[bold red]Some checks failed.[/bold red]")
        return exit_codes.GENERAL_ERROR

    console.print("[bold green]All checks passed.[/bold green]")
    return exit_codes.SUCCESS
