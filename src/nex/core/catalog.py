"""Pure classification of scanned files into a name → target catalog.

Every function in this module is a **pure** transformation of path
lists — no filesystem access, fully deterministic, and trivially
unit-testable.

Pipeline order (enforced by :func:`build_catalog`):

1. **Projects** — each descriptor claims its folder name and its stem.
2. **Single files** — each eligible source file claims its stem.

A name, once bound, is never rebound (first writer wins).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

from nex.core.models import ExampleTarget, TargetKind

logger = logging.getLogger(__name__)

PROJECT_SUFFIX: str = ".csproj"
SOURCE_SUFFIX: str = ".cs"

BUILD_OUTPUT_DIRS: frozenset[str] = frozenset({"bin", "obj"})
"""Directory names (compared case-insensitively) holding build artefacts."""


# ---------------------------------------------------------------------------
# Registration
# ---------------------------------------------------------------------------

def register(
    catalog: dict[str, ExampleTarget],
    name: str,
    target: ExampleTarget,
) -> bool:
    """Bind *name* to *target* unless the name is already taken.

    Returns ``True`` when the binding was made.  A clash with a
    *different* target is logged as a warning; re-registering the same
    target (folder and project named alike) is silent.
    """
    existing = catalog.get(name)
    if existing is None:
        catalog[name] = target
        return True
    if existing != target:
        logger.warning(
            "Example name %r already refers to %s; ignoring %s",
            name,
            existing.path,
            target.path,
        )
    return False


# ---------------------------------------------------------------------------
# Single-file eligibility
# ---------------------------------------------------------------------------

def is_build_output(path: Path, examples_dir: Path) -> bool:
    """Whether *path* lies inside a ``bin``/``obj`` folder below *examples_dir*."""
    try:
        parts = path.relative_to(examples_dir).parts[:-1]
    except ValueError:
        parts = path.parts[:-1]
    return any(part.lower() in BUILD_OUTPUT_DIRS for part in parts)


def project_directories(project_files: Iterable[Path]) -> frozenset[Path]:
    """Return the set of directories that directly hold a descriptor."""
    return frozenset(path.parent for path in project_files)


# ---------------------------------------------------------------------------
# Composite pipeline
# ---------------------------------------------------------------------------

def build_catalog(
    examples_dir: Path,
    project_files: Sequence[Path],
    source_files: Sequence[Path],
    *,
    single_file_capable: bool,
) -> dict[str, ExampleTarget]:
    """Classify scanned files into a catalog of runnable examples.

    Parameters
    ----------
    examples_dir:
        The examples directory both file lists were scanned from.
    project_files:
        Every ``*.csproj`` found below *examples_dir*.
    source_files:
        Every ``*.cs`` found below *examples_dir*.  Ignored unless
        *single_file_capable*.
    single_file_capable:
        Whether the toolchain can run a bare source file.
    """
    catalog: dict[str, ExampleTarget] = {}

    for descriptor in project_files:
        target = ExampleTarget(kind=TargetKind.PROJECT, path=descriptor)
        register(catalog, descriptor.parent.name, target)
        register(catalog, descriptor.stem, target)

    if not single_file_capable:
        return catalog

    claimed_dirs = project_directories(project_files)
    for source in source_files:
        if is_build_output(source, examples_dir):
            continue
        if source.parent in claimed_dirs:
            continue
        register(catalog, source.stem, ExampleTarget(kind=TargetKind.FILE, path=source))

    return catalog
