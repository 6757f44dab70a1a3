"""Tests for sibling grouping and stem budgets."""

from pathlib import Path

from fitname.core import PathEntry, group_siblings, stem_budget


def _entries(*names):
    return [PathEntry(Path(name)) for name in names]


def test_groups_by_parent_and_raw_stem():
    entries = _entries(
        "/a/document.txt",
        "/a/document.tar.gz",
        "/a/document.config",
        "/b/document.txt",
        "/a/other.txt",
    )
    groups = group_siblings(entries, 6)

    assert set(groups) == {
        (Path("/a"), b"document"),
        (Path("/b"), b"document"),
        (Path("/a"), b"other"),
    }
    members = groups[(Path("/a"), b"document")]
    assert [entry.name for entry, _ in members] == [
        "document.txt", "document.tar.gz", "document.config",
    ]


def test_membership_ignores_extensions_but_depends_on_threshold():
    entries = _entries("/a/doc.tar.gz", "/a/doc.gz")
    assert len(group_siblings(entries, 6)) == 1
    # With secondary extensions disabled the raw stems differ
    assert len(group_siblings(entries, 0)) == 2


def test_directories_skipped_and_errors_reported():
    entries = [
        PathEntry(Path("/a/sub"), is_dir=True),
        PathEntry(Path("/a/locked"), is_dir=True, error=PermissionError(13, "Permission denied")),
        PathEntry(Path("/a/file.txt")),
    ]
    errors = []
    groups = group_siblings(entries, 6, errors=errors)

    assert list(groups) == [(Path("/a"), b"file")]
    assert len(errors) == 1
    assert "/a/locked" in errors[0]


def test_budget_uses_largest_overhead():
    groups = group_siblings(
        _entries("/d/document.txt", "/d/document.tar.gz", "/d/document.config"), 6
    )
    (members,) = groups.values()
    assert stem_budget(members, 12) == 5


def test_budget_saturates_at_zero():
    (members,) = group_siblings(_entries("/d/test.tar.gz"), 6).values()
    assert stem_budget(members, 6) == 0


def test_budget_without_extensions_is_max_len():
    (members,) = group_siblings(_entries("/d/README"), 6).values()
    assert stem_budget(members, 140) == 140
