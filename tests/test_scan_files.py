"""Tests for directory traversal."""

import errno
import os

from fitname.core import TruncateOptions, walk_entries, plan_truncation


def test_root_is_yielded_first(tmp_path):
    root = tmp_path / "r"
    (root / "sub").mkdir(parents=True)
    (root / "sub" / "file.txt").write_text("x")

    entries = list(walk_entries(root))

    assert entries[0].path == root and entries[0].is_dir
    assert {e.path for e in entries} == {root, root / "sub", root / "sub" / "file.txt"}
    assert all(e.error is None for e in entries)


def test_symlinked_directory_is_not_followed(tmp_path):
    target = tmp_path / "target"
    target.mkdir()
    (target / "inside.txt").write_text("x")
    root = tmp_path / "r"
    root.mkdir()
    link = root / "link"
    link.symlink_to(target, target_is_directory=True)

    entries = {e.path: e for e in walk_entries(root)}

    assert link in entries
    assert entries[link].is_dir is False
    assert link / "inside.txt" not in entries


def test_symlink_is_renamed_as_a_link(tmp_path):
    target = tmp_path / "target"
    target.mkdir()
    root = tmp_path / "r"
    root.mkdir()
    (root / "a long link name").symlink_to(target, target_is_directory=True)

    file_plan, dir_plan = plan_truncation([root], TruncateOptions(max_len=6))

    assert [op.dst.name for op in file_plan.valid_ops] == ["a long"]
    assert dir_plan.valid_ops == []


def test_unreadable_directory_yields_error_entry(tmp_path, monkeypatch):
    root = tmp_path / "r"
    locked = root / "locked"
    locked.mkdir(parents=True)
    (locked / "hidden.txt").write_text("x")
    (root / "verylongname.txt").write_text("x")

    real_scandir = os.scandir

    def scandir(path="."):
        if os.fspath(path) == str(locked):
            raise PermissionError(errno.EACCES, "Permission denied", str(locked))
        return real_scandir(path)

    monkeypatch.setattr(os, "scandir", scandir)

    entries = list(walk_entries(root))
    failed = [e for e in entries if e.error is not None]

    assert len(failed) == 1
    assert failed[0].path == locked
    assert isinstance(failed[0].error, PermissionError)
    assert locked / "hidden.txt" not in {e.path for e in entries}

    file_plan, _ = plan_truncation([root], TruncateOptions(max_len=8))

    assert len(file_plan.errors) == 1
    assert "locked" in file_plan.errors[0]
    assert [op.dst.name for op in file_plan.valid_ops] == ["very.txt"]
