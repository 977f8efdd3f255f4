"""Infrastructure layer — external system integration.

This layer wraps all interaction with the filesystem and the ``dotnet``
executable.  Every raw OS exception must be caught here and either
skipped (discovery) or re-raised as a :class:`~nex.exceptions.NexError`
subclass (process handling).

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from nex.infra.dotnet_toolchain import DotnetToolchain, parse_major_version
from nex.infra.example_scanner import FileSystemScanner, find_examples_dir
from nex.infra.repo_root import resolve_repo_root

__all__: list[str] = [
    "DotnetToolchain",
    "FileSystemScanner",
    "find_examples_dir",
    "parse_major_version",
    "resolve_repo_root",
]
