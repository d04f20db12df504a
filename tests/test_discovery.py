"""Tests for hidden-entry filtering and manifest walking."""

from __future__ import annotations

import os
import stat
from pathlib import Path
from types import SimpleNamespace

from cargo_project_finder.discovery import should_skip, walk_manifests


def test_should_skip_dot_component(tmp_path: Path) -> None:
    assert should_skip(tmp_path / ".cache" / "crate", tmp_path)
    assert not should_skip(tmp_path / "cache" / "crate", tmp_path)


def test_should_skip_disabled_never_skips(tmp_path: Path) -> None:
    assert not should_skip(tmp_path / ".git", tmp_path, skip_hidden=False)


def test_should_skip_ignores_hidden_components_above_root(tmp_path: Path) -> None:
    root = tmp_path / ".config"
    root.mkdir()
    assert not should_skip(root / "crate", root)
    assert should_skip(root / "crate")


def test_should_skip_honours_hidden_attribute(tmp_path: Path, monkeypatch) -> None:
    target = tmp_path / "visible"
    target.mkdir()
    monkeypatch.setattr(
        Path,
        "lstat",
        lambda self: SimpleNamespace(st_file_attributes=stat.FILE_ATTRIBUTE_HIDDEN),
    )
    assert should_skip(target, tmp_path)


def test_should_skip_falls_back_to_name_when_metadata_fails(tmp_path: Path, monkeypatch) -> None:
    def _fail(self):
        raise PermissionError("denied")

    monkeypatch.setattr(Path, "lstat", _fail)
    assert not should_skip(tmp_path / "visible", tmp_path)
    assert should_skip(tmp_path / ".hidden", tmp_path)


def test_walk_manifests_is_preorder_and_sorted(make_manifest, tmp_path: Path) -> None:
    make_manifest("b", "[package]\n")
    make_manifest("a/inner", "[package]\n")
    make_manifest("a", "[package]\n")
    make_manifest("", "[package]\n")

    found = [p.parent for p in walk_manifests(tmp_path)]

    assert found == [tmp_path, tmp_path / "a", tmp_path / "a" / "inner", tmp_path / "b"]


def test_walk_manifests_prunes_hidden_subtrees(make_manifest, tmp_path: Path) -> None:
    make_manifest(".hidden/deep", "[package]\n")
    make_manifest("shown", "[package]\n")

    assert [p.parent for p in walk_manifests(tmp_path)] == [tmp_path / "shown"]
    assert len(list(walk_manifests(tmp_path, skip_hidden=False))) == 2


def test_walk_manifests_matches_exact_filename(tmp_path: Path) -> None:
    (tmp_path / "cargo.toml").write_text("[package]\n", encoding="utf-8")
    (tmp_path / "Cargo.toml.bak").write_text("[package]\n", encoding="utf-8")

    assert list(walk_manifests(tmp_path)) == []


def test_walk_manifests_does_not_follow_symlinks(make_manifest, tmp_path: Path) -> None:
    target = make_manifest("real", "[package]\n").parent
    (tmp_path / "link").symlink_to(target, target_is_directory=True)

    assert [p.parent for p in walk_manifests(tmp_path)] == [target]


def test_walk_manifests_skips_manifest_whose_metadata_is_denied(
    make_manifest, tmp_path: Path, monkeypatch
) -> None:
    blocked = make_manifest("blocked", "[package]\n")
    make_manifest("open", "[package]\n")
    original = Path.lstat

    def _lstat(self):
        if self == blocked:
            raise PermissionError(13, "Permission denied", str(self))
        return original(self)

    monkeypatch.setattr(Path, "lstat", _lstat)

    assert [p.parent.name for p in walk_manifests(tmp_path)] == ["open"]


def test_walk_manifests_continues_past_unlistable_directory(
    make_manifest, tmp_path: Path, monkeypatch
) -> None:
    make_manifest("locked/inner", "[package]\n")
    make_manifest("open", "[package]\n")
    locked = str(tmp_path / "locked")
    original = os.scandir

    def _scandir(top):
        if os.fspath(top) == locked:
            raise PermissionError(13, "Permission denied", locked)
        return original(top)

    monkeypatch.setattr(os, "scandir", _scandir)

    assert [p.parent.name for p in walk_manifests(tmp_path)] == ["open"]


def test_walk_manifests_ignores_symlinked_manifest(make_manifest, tmp_path: Path) -> None:
    real_manifest = make_manifest("real", "[package]\n")
    linked = tmp_path / "p"
    linked.mkdir()
    (linked / "Cargo.toml").symlink_to(real_manifest)

    assert [p.parent for p in walk_manifests(tmp_path)] == [tmp_path / "real"]
