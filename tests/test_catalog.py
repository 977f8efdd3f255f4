"""Tests for catalog building (core/catalog.py).

Pure functions over path lists — no filesystem access.

Coverage:
* Dual keying of project descriptors (folder + project name).
* First-writer-wins registration and collision warnings.
* Single-file gating, project-folder exclusion, bin/obj exclusion.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from nex.core.catalog import (
    build_catalog,
    is_build_output,
    project_directories,
    register,
)
from nex.core.models import ExampleTarget, TargetKind

EXAMPLES = Path("/repo/examples")


def _project(relative: str) -> ExampleTarget:
    return ExampleTarget(TargetKind.PROJECT, EXAMPLES / relative)


def _file(relative: str) -> ExampleTarget:
    return ExampleTarget(TargetKind.FILE, EXAMPLES / relative)


# ---------------------------------------------------------------------------
# register
# ---------------------------------------------------------------------------

class TestRegister:
    def test_binds_free_name(self) -> None:
        catalog: dict[str, ExampleTarget] = {}
        assert register(catalog, "Hello", _project("Hello/Hello.csproj")) is True
        assert catalog == {"Hello": _project("Hello/Hello.csproj")}

    def test_first_writer_wins(self) -> None:
        catalog = {"Hello": _project("Hello/Hello.csproj")}
        assert register(catalog, "Hello", _file("misc/Hello.cs")) is False
        assert catalog["Hello"] == _project("Hello/Hello.csproj")

    def test_clash_with_other_target_is_logged(
        self, caplog: pytest.LogCaptureFixture,
    ) -> None:
        catalog = {"Hello": _project("Hello/Hello.csproj")}
        with caplog.at_level(logging.WARNING, logger="nex.core.catalog"):
            register(catalog, "Hello", _file("misc/Hello.cs"))
        assert "Hello" in caplog.text
        assert "misc" in caplog.text

    def test_same_target_twice_is_silent(
        self, caplog: pytest.LogCaptureFixture,
    ) -> None:
        catalog = {"Hello": _project("Hello/Hello.csproj")}
        with caplog.at_level(logging.WARNING, logger="nex.core.catalog"):
            register(catalog, "Hello", _project("Hello/Hello.csproj"))
        assert caplog.records == []


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

class TestIsBuildOutput:
    @pytest.mark.parametrize(
        "relative",
        ["Hello/bin/Debug/Gen.cs", "Hello/obj/Gen.cs", "Hello/OBJ/Gen.cs", "Bin/x.cs"],
    )
    def test_build_output_paths(self, relative: str) -> None:
        assert is_build_output(EXAMPLES / relative, EXAMPLES) is True

    @pytest.mark.parametrize(
        "relative",
        ["Hello/Program.cs", "binary/x.cs", "objects/x.cs", "bin.cs"],
    )
    def test_regular_paths(self, relative: str) -> None:
        assert is_build_output(EXAMPLES / relative, EXAMPLES) is False

    def test_only_segments_below_examples_count(self) -> None:
        examples = Path("/home/me/bin/repo/examples")
        assert is_build_output(examples / "One.cs", examples) is False


class TestProjectDirectories:
    def test_parents(self) -> None:
        dirs = project_directories([EXAMPLES / "A/A.csproj", EXAMPLES / "B/x/B.csproj"])
        assert dirs == {EXAMPLES / "A", EXAMPLES / "B/x"}


# ---------------------------------------------------------------------------
# build_catalog
# ---------------------------------------------------------------------------

class TestBuildCatalog:
    def test_folder_and_project_name_coincide(self) -> None:
        catalog = build_catalog(
            EXAMPLES, [EXAMPLES / "Hello/Hello.csproj"], [], single_file_capable=True,
        )
        assert catalog == {"Hello": _project("Hello/Hello.csproj")}

    def test_folder_and_project_name_differ(self) -> None:
        catalog = build_catalog(
            EXAMPLES, [EXAMPLES / "01-basics/Basics.csproj"], [], single_file_capable=False,
        )
        target = _project("01-basics/Basics.csproj")
        assert catalog == {"01-basics": target, "Basics": target}

    def test_at_most_two_keys_per_project(self) -> None:
        projects = [EXAMPLES / f"dir{i}/Proj{i}.csproj" for i in range(5)]
        catalog = build_catalog(EXAMPLES, projects, [], single_file_capable=True)
        assert len(catalog) == 2 * len(projects)

    def test_project_beats_single_file(self) -> None:
        catalog = build_catalog(
            EXAMPLES,
            [EXAMPLES / "Hello/Hello.csproj"],
            [EXAMPLES / "scripts/Hello.cs"],
            single_file_capable=True,
        )
        assert catalog["Hello"].kind is TargetKind.PROJECT

    def test_single_files_ignored_when_not_capable(self) -> None:
        catalog = build_catalog(
            EXAMPLES,
            [],
            [EXAMPLES / "One.cs", EXAMPLES / "scripts/Two.cs"],
            single_file_capable=False,
        )
        assert catalog == {}

    def test_single_files_registered_when_capable(self) -> None:
        catalog = build_catalog(
            EXAMPLES,
            [],
            [EXAMPLES / "One.cs", EXAMPLES / "scripts/Two.cs"],
            single_file_capable=True,
        )
        assert catalog == {"One": _file("One.cs"), "Two": _file("scripts/Two.cs")}

    def test_source_next_to_project_is_skipped(self) -> None:
        catalog = build_catalog(
            EXAMPLES,
            [EXAMPLES / "Hello/Hello.csproj"],
            [EXAMPLES / "Hello/Program.cs", EXAMPLES / "Hello/Util.cs"],
            single_file_capable=True,
        )
        assert set(catalog) == {"Hello"}

    def test_source_in_build_output_is_skipped(self) -> None:
        catalog = build_catalog(
            EXAMPLES,
            [],
            [EXAMPLES / "Hello/obj/Debug/AssemblyInfo.cs", EXAMPLES / "Hello/bin/Gen.cs"],
            single_file_capable=True,
        )
        assert catalog == {}

    def test_first_single_file_wins(self) -> None:
        catalog = build_catalog(
            EXAMPLES,
            [],
            [EXAMPLES / "a/Same.cs", EXAMPLES / "b/Same.cs"],
            single_file_capable=True,
        )
        assert catalog == {"Same": _file("a/Same.cs")}

    def test_empty_inputs(self) -> None:
        assert build_catalog(EXAMPLES, [], [], single_file_capable=True) == {}
