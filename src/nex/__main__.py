"""Allow ``python -m nex`` invocation.

Delegates to the CLI error-boundary entry point so that ``python -m nex``
behaves identically to the ``nex`` console script.
"""

from __future__ import annotations

from nex.cli.app import cli

if __name__ == "__main__":
    cli()
