"""Tests for name resolution (core/resolver.py).

The resolver is pure and total — every input yields one of the three
outcome variants.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from nex.core.models import ExampleTarget, NoNameGiven, NotFound, ResolvedTo, TargetKind
from nex.core.resolver import resolve_target, sorted_names

HELLO = ExampleTarget(TargetKind.PROJECT, Path("/r/examples/Hello/Hello.csproj"))
BETA = ExampleTarget(TargetKind.FILE, Path("/r/examples/beta.cs"))
ALPHA = ExampleTarget(TargetKind.PROJECT, Path("/r/examples/Alpha/Alpha.csproj"))

CATALOG: dict[str, ExampleTarget] = {"beta": BETA, "Hello": HELLO, "Alpha": ALPHA}


class TestSortedNames:
    def test_ordinal_order(self) -> None:
        assert sorted_names({"beta": BETA, "Zeta": HELLO, "Alpha": ALPHA}) == (
            "Alpha",
            "Zeta",
            "beta",
        )


class TestNoNameGiven:
    @pytest.mark.parametrize("requested", [None, "", "   ", "\t\n"])
    def test_blank_lists_everything(self, requested: str | None) -> None:
        assert resolve_target(CATALOG, requested) == NoNameGiven(("Alpha", "Hello", "beta"))

    def test_empty_catalog(self) -> None:
        assert resolve_target({}, None) == NoNameGiven(())


class TestResolvedTo:
    def test_exact(self) -> None:
        assert resolve_target(CATALOG, "Hello") == ResolvedTo(HELLO)

    @pytest.mark.parametrize("requested", ["hello", "HELLO", "hElLo"])
    def test_case_insensitive(self, requested: str) -> None:
        assert resolve_target(CATALOG, requested) == resolve_target(CATALOG, "Hello")

    def test_exact_preferred_over_case_insensitive(self) -> None:
        other = ExampleTarget(TargetKind.FILE, Path("/r/examples/hello.cs"))
        catalog = {"Hello": HELLO, "hello": other}
        assert resolve_target(catalog, "hello") == ResolvedTo(other)
        assert resolve_target(catalog, "Hello") == ResolvedTo(HELLO)

    def test_case_insensitive_tie_uses_display_order(self) -> None:
        other = ExampleTarget(TargetKind.FILE, Path("/r/examples/hello.cs"))
        catalog = {"hello": other, "Hello": HELLO}
        assert resolve_target(catalog, "HELLO") == ResolvedTo(HELLO)


class TestNotFound:
    def test_unknown_name(self) -> None:
        assert resolve_target(CATALOG, "Missing") == NotFound(
            "Missing", ("Alpha", "Hello", "beta"),
        )

    def test_empty_catalog(self) -> None:
        assert resolve_target({}, "Hello") == NotFound("Hello", ())

    def test_does_not_mutate_catalog(self) -> None:
        catalog = dict(CATALOG)
        resolve_target(catalog, "nope")
        resolve_target(catalog, "hello")
        assert catalog == CATALOG

    @pytest.mark.parametrize("requested", ["Hell", "Hello ", "Hello.csproj", "ß"])
    def test_total_over_odd_input(self, requested: str) -> None:
        outcome = resolve_target(CATALOG, requested)
        assert isinstance(outcome, (ResolvedTo, NoNameGiven, NotFound))
