"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No direct filesystem or process I/O.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from nex.core.catalog import build_catalog
from nex.core.discovery_service import DiscoveryService
from nex.core.models import (
    ExampleTarget,
    NoNameGiven,
    NotFound,
    ResolutionOutcome,
    ResolvedTo,
    RunPlan,
    TargetKind,
    ToolchainInfo,
)
from nex.core.protocols import ExampleScanner, Toolchain
from nex.core.resolver import resolve_target
from nex.core.run_service import RunService

__all__: list[str] = [
    "DiscoveryService",
    "ExampleScanner",
    "ExampleTarget",
    "NoNameGiven",
    "NotFound",
    "ResolutionOutcome",
    "ResolvedTo",
    "RunPlan",
    "RunService",
    "TargetKind",
    "Toolchain",
    "ToolchainInfo",
    "build_catalog",
    "resolve_target",
]
