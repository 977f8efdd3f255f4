"""Tests for repository root resolution (infra/repo_root.py)."""

from __future__ import annotations

from pathlib import Path

from nex.infra.repo_root import resolve_repo_root


class TestResolveRepoRoot:
    def test_start_itself_qualifies(self, tmp_path: Path) -> None:
        (tmp_path / "examples").mkdir()
        assert resolve_repo_root(tmp_path, cwd=tmp_path) == tmp_path.resolve()

    def test_walks_up_to_ancestor(self, tmp_path: Path) -> None:
        (tmp_path / "Examples").mkdir()
        nested = tmp_path / "src" / "lib" / "deep"
        nested.mkdir(parents=True)
        assert resolve_repo_root(nested, cwd=tmp_path) == tmp_path.resolve()

    def test_nearest_ancestor_wins(self, tmp_path: Path) -> None:
        (tmp_path / "examples").mkdir()
        inner = tmp_path / "sub"
        (inner / "examples").mkdir(parents=True)
        start = inner / "pkg"
        start.mkdir()
        assert resolve_repo_root(start, cwd=tmp_path) == inner.resolve()

    def test_falls_back_to_start(self, tmp_path: Path) -> None:
        start = tmp_path / "nothing" / "here"
        start.mkdir(parents=True)
        assert resolve_repo_root(start, cwd=tmp_path) == start.resolve()

    def test_missing_start_uses_cwd(self, tmp_path: Path) -> None:
        (tmp_path / "examples").mkdir()
        assert resolve_repo_root(tmp_path / "does-not-exist", cwd=tmp_path) == tmp_path

    def test_relative_start_is_joined_to_cwd(self, tmp_path: Path) -> None:
        (tmp_path / "repo" / "examples").mkdir(parents=True)
        (tmp_path / "repo" / "tools").mkdir()
        result = resolve_repo_root(Path("repo/tools"), cwd=tmp_path)
        assert result == (tmp_path / "repo").resolve()

    def test_examples_file_is_not_a_directory(self, tmp_path: Path) -> None:
        (tmp_path / "examples").write_text("", encoding="utf-8")
        assert resolve_repo_root(tmp_path, cwd=tmp_path) == tmp_path.resolve()
