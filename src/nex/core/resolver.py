"""Resolve a requested example name against a discovered catalog.

:func:`resolve_target` is total: whatever the input it returns one of
the three :data:`~nex.core.models.ResolutionOutcome` variants and never
raises.  Name listings are sorted with Python's default ordinal string
order, so uppercase names precede lowercase ones.
"""

from __future__ import annotations

from collections.abc import Mapping

from nex.core.models import (
    ExampleTarget,
    NoNameGiven,
    NotFound,
    ResolutionOutcome,
    ResolvedTo,
)


def sorted_names(catalog: Mapping[str, ExampleTarget]) -> tuple[str, ...]:
    """Return every catalog key in display order."""
    return tuple(sorted(catalog))


def resolve_target(
    catalog: Mapping[str, ExampleTarget],
    requested: str | None,
) -> ResolutionOutcome:
    """Match *requested* against *catalog*.

    Lookup order:

    1. Blank or missing name → :class:`NoNameGiven`.
    2. Exact, case-sensitive key → :class:`ResolvedTo`.
    3. First key (in display order) equal ignoring case → :class:`ResolvedTo`.
    4. Otherwise → :class:`NotFound`.
    """
    if requested is None or not requested.strip():
        return NoNameGiven(available=sorted_names(catalog))

    exact = catalog.get(requested)
    if exact is not None:
        return ResolvedTo(target=exact)

    folded = requested.casefold()
    for name in sorted_names(catalog):
        if name.casefold() == folded:
            return ResolvedTo(target=catalog[name])

    return NotFound(requested=requested, available=sorted_names(catalog))
