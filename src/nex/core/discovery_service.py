"""Core discovery service — turns a repository root into a catalog.

The service depends on an :class:`~nex.core.protocols.ExampleScanner`
injected at construction time (dependency inversion), keeping the core
free of any direct filesystem access.

Guarantees
----------
* Never raises for a missing or empty examples directory: the result
  is simply an empty mapping.
* The catalog is rebuilt from scratch on every call.
"""

from __future__ import annotations

import logging
from pathlib import Path

from nex.core.catalog import PROJECT_SUFFIX, SOURCE_SUFFIX, build_catalog
from nex.core.models import ExampleTarget
from nex.core.protocols import ExampleScanner

logger = logging.getLogger(__name__)


class DiscoveryService:
    """Stateless service that discovers runnable examples.

    Parameters
    ----------
    scanner:
        Any object satisfying the :class:`ExampleScanner` protocol.
    """

    def __init__(self, scanner: ExampleScanner) -> None:
        self._scanner: ExampleScanner = scanner

    def discover(
        self,
        repo_root: Path,
        *,
        single_file_capable: bool,
    ) -> dict[str, ExampleTarget]:
        """Build the name → target catalog for *repo_root*.

        Project descriptors are registered before single source files,
        so a project always wins a name clash.  Single-file discovery is
        skipped entirely when *single_file_capable* is false.
        """
        examples_dir = self._scanner.find_examples_dir(repo_root)
        if examples_dir is None:
            logger.debug("No examples directory under %s", repo_root)
            return {}

        project_files = self._scanner.list_files(examples_dir, PROJECT_SUFFIX)
        source_files = (
            self._scanner.list_files(examples_dir, SOURCE_SUFFIX)
            if single_file_capable
            else []
        )
        logger.debug(
            "Scanned %s: %d project file(s), %d source file(s)",
            examples_dir,
            len(project_files),
            len(source_files),
        )

        return build_catalog(
            examples_dir,
            project_files,
            source_files,
            single_file_capable=single_file_capable,
        )
