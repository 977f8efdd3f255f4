"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.  A
successful ``run`` exits with the example's own code instead.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit — command completed, or the example list was shown."""

GENERAL_ERROR: int = 1
"""A known NexError was caught, e.g. no examples were discovered."""

EXAMPLE_NOT_FOUND: int = 2
"""The requested example name matched nothing."""

UNEXPECTED_ERROR: int = 70
"""An unhandled exception escaped all known error boundaries (EX_SOFTWARE)."""

COMMAND_NOT_FOUND: int = 127
"""The ``dotnet`` executable could not be started.  Shell convention."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""
