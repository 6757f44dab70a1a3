"""Tests for truncation planning."""

import os
from pathlib import Path

import pytest

from fitname.core import (
    PathEntry, PlanAction, RenamePlan, TruncateOptions,
    plan_files, plan_directories, plan_truncation, validate_plan, split_name,
)


def _files(*names):
    return [PathEntry(Path("/d") / name) for name in names]


def _by_name(plan: RenamePlan):
    return {op.src.name: op for op in plan.ops}


def test_single_file_scenario():
    plan = plan_files(_files("verylongname.txt"), TruncateOptions(max_len=8))

    (op,) = plan.ops
    assert op.action is PlanAction.RENAMED
    assert op.dst == Path("/d/very.txt")


def test_group_shares_truncated_stem():
    plan = plan_files(
        _files("document.txt", "document.tar.gz", "document.config"),
        TruncateOptions(max_len=12),
    )
    ops = _by_name(plan)

    assert ops["document.txt"].dst.name == "docum.txt"
    assert ops["document.tar.gz"].dst.name == "docum.tar.gz"
    assert ops["document.config"].dst.name == "docum.config"
    assert all(op.action is PlanAction.RENAMED for op in plan.ops)


def test_group_members_end_with_equal_stem_length():
    options = TruncateOptions(max_len=20)
    plan = plan_files(
        _files("a long shared stem name.mkv", "a long shared stem name.en.srt", "a long shared stem name.nfo"),
        options,
    )
    stems = {
        split_name(os.fsencode(op.dst.name), options.secondary_ext_len).raw_stem
        for op in plan.ops
    }
    assert len(stems) == 1
    assert all(len(os.fsencode(op.dst.name)) <= 20 for op in plan.ops)


def test_extensions_alone_too_long_is_skipped():
    plan = plan_files(_files("test.tar.gz"), TruncateOptions(max_len=6))

    (op,) = plan.ops
    assert op.action is PlanAction.SKIPPED_OVERSIZED
    assert op.dst == op.src
    assert len(plan.warnings) == 1
    assert "test.tar.gz" in plan.warnings[0]
    assert plan.valid_ops == []


def test_long_dotfile_is_skipped():
    name = "." + "a" * 20
    plan = plan_files(_files(name, ".bashrc"), TruncateOptions(max_len=10))
    ops = _by_name(plan)

    assert ops[name].action is PlanAction.SKIPPED_OVERSIZED
    assert ops[".bashrc"].action is PlanAction.UNCHANGED


def test_word_boundary_scenario():
    plan = plan_files(
        _files("this is a long filename.txt"),
        TruncateOptions(max_len=15, word_boundaries=True),
    )
    assert plan.ops[0].dst.name == "this is a.txt"


def test_short_names_are_unchanged():
    plan = plan_files(_files("a.txt", "b"), TruncateOptions(max_len=8))
    assert [op.action for op in plan.ops] == [PlanAction.UNCHANGED, PlanAction.UNCHANGED]
    assert plan.total_count == 0


def test_primary_extension_preserved():
    plan = plan_files(
        _files("reallylongname.tar.gz", "超長い名前.txt"),
        TruncateOptions(max_len=12),
    )
    ops = _by_name(plan)
    assert ops["reallylongname.tar.gz"].dst.name == "reall.tar.gz"
    assert ops["超長い名前.txt"].dst.name == "超長.txt"


def test_undecodable_name_is_truncated_to_valid_prefix():
    name = os.fsdecode(b"abc\xffdefghij")
    plan = plan_files(_files(name), TruncateOptions(max_len=6))
    assert plan.ops[0].dst.name == "abc"


def test_directories_deepest_first():
    entries = [
        PathEntry(Path("/r/aaaaaaaaaa"), is_dir=True),
        PathEntry(Path("/r/aaaaaaaaaa/bbbbbbbbbb"), is_dir=True),
        PathEntry(Path("/r/aaaaaaaaaa/file.txt")),
    ]
    plan = plan_directories(entries, TruncateOptions(max_len=5))

    assert [op.src for op in plan.ops] == [
        Path("/r/aaaaaaaaaa/bbbbbbbbbb"),
        Path("/r/aaaaaaaaaa"),
    ]
    assert [op.dst.name for op in plan.ops] == ["bbbbb", "aaaaa"]
    assert all(op.is_dir for op in plan.ops)


def test_directory_names_are_extension_agnostic():
    entries = [PathEntry(Path("/r/archive.old"), is_dir=True)]
    plan = plan_directories(entries, TruncateOptions(max_len=7))
    assert plan.ops[0].dst.name == "archive"


def test_directory_without_valid_prefix_is_skipped():
    entries = [PathEntry(Path("/r") / os.fsdecode(b"\xffabcdef"), is_dir=True)]
    plan = plan_directories(entries, TruncateOptions(max_len=3))
    assert plan.ops[0].action is PlanAction.SKIPPED_OVERSIZED
    assert plan.warnings


def test_invalid_options_rejected():
    with pytest.raises(ValueError):
        TruncateOptions(max_len=0)
    with pytest.raises(ValueError):
        TruncateOptions(secondary_ext_len=-1)


def test_unreadable_root_does_not_stop_other_roots(tmp_path):
    good = tmp_path / "good"
    good.mkdir()
    (good / "verylongname.txt").write_text("x")

    file_plan, dir_plan = plan_truncation(
        [tmp_path / "missing", good], TruncateOptions(max_len=8)
    )

    assert len(file_plan.errors) == 1
    assert "missing" in file_plan.errors[0]
    assert [op.dst.name for op in file_plan.valid_ops] == ["very.txt"]
    assert dir_plan.valid_ops == []


def test_root_file_is_planned(tmp_path):
    path = tmp_path / "verylongname.txt"
    path.write_text("x")
    file_plan, _ = plan_truncation([path], TruncateOptions(max_len=8))
    assert file_plan.valid_ops[0].dst == tmp_path / "very.txt"


def test_validate_plan_reports_collisions(tmp_path):
    root = tmp_path / "r"
    root.mkdir()
    (root / "abcdefgh1.txt").write_text("1")
    (root / "abcdefgh2.txt").write_text("2")

    file_plan, _ = plan_truncation([root], TruncateOptions(max_len=8))
    problems = validate_plan(file_plan)

    assert any("same destination" in p and "abcd.txt" in p for p in problems)


@pytest.mark.parametrize("order", ["outer_first", "inner_first"])
def test_nested_roots_planned_once(tmp_path, order):
    outer = tmp_path / "r"
    inner = outer / "s"
    inner.mkdir(parents=True)
    (inner / "verylongname.txt").write_text("x")
    roots = [outer, inner] if order == "outer_first" else [inner, outer]

    file_plan, _ = plan_truncation(roots, TruncateOptions(max_len=8))

    assert [op.src for op in file_plan.valid_ops] == [inner / "verylongname.txt"]
    assert len(file_plan.warnings) == 1
    assert "already covered" in file_plan.warnings[0]
    assert file_plan.errors == []


def test_same_root_twice_planned_once(tmp_path):
    root = tmp_path / "r"
    root.mkdir()
    (root / "verylongname.txt").write_text("x")

    file_plan, _ = plan_truncation([root, root], TruncateOptions(max_len=8))

    assert len(file_plan.valid_ops) == 1
