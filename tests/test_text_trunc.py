"""Tests for UTF-8 safe truncation and word boundary snapping."""

import pytest

from fitname.core import truncate_stem, truncate_dir_name, longest_valid_prefix


def test_fitting_stem_is_unchanged():
    assert truncate_stem(b"short", 5) == b"short"
    assert truncate_stem(b"", 0) == b""


def test_plain_ascii_cut():
    assert truncate_stem(b"verylongname", 4) == b"very"


def test_zero_budget_eliminates_stem():
    assert truncate_stem(b"document", 0) == b""


@pytest.mark.parametrize("text, budget, expected", [
    ("日本語", 8, "日本"),
    ("🌟star", 3, ""),
    ("🌟star", 5, "🌟s"),
    ("αβγ", 5, "αβ"),
])
def test_cut_never_splits_code_point(text, budget, expected):
    assert truncate_stem(text.encode("utf-8"), budget) == expected.encode("utf-8")


def test_result_is_valid_text_for_every_budget():
    stem = "mixé 日本 🌟 ascii".encode("utf-8")
    for budget in range(len(stem) + 1):
        result = truncate_stem(stem, budget)
        assert len(result) <= budget
        result.decode("utf-8")


def test_undecodable_bytes_are_dropped():
    assert longest_valid_prefix(b"ab\xffcd") == b"ab"
    assert truncate_stem(b"ab\xffcdef", 4) == b"ab"
    assert truncate_stem(b"\xff\xfe\xfd", 2) == b""


@pytest.mark.parametrize("stem, budget, expected", [
    (b"this is a long filename", 11, b"this is a"),
    (b"respect these words", 10, b"respect"),
    # Space too far back: snapping would lose more than the tolerance
    (b"ab cdefghijklmnopqrstuvwxyz", 20, b"ab cdefghijklmnopqrs"),
    # No space at all
    (b"no_word_boundaries_here", 8, b"no_word_"),
])
def test_word_boundaries(stem, budget, expected):
    assert truncate_stem(stem, budget, word_boundaries=True) == expected


def test_word_boundaries_only_apply_when_truncating():
    assert truncate_stem(b"hello wor", 20, word_boundaries=True) == b"hello wor"


def test_word_boundaries_never_empty_the_stem():
    assert truncate_stem(b" abcdef", 4, word_boundaries=True) == b" abc"


def test_word_boundaries_off_cuts_exactly():
    assert truncate_stem(b"this is a long filename", 11) == b"this is a l"


@pytest.mark.parametrize("name, max_len, expected", [
    ("very_long_directory", 8, "very_lon"),
    ("日本語ディレクトリ", 12, "日本語デ"),
    ("日本語ディレクトリ", 13, "日本語デ"),
    ("spaces_in_name", 7, "spaces_"),
    ("archive.old.backup", 8, "archive."),
])
def test_directory_truncation(name, max_len, expected):
    assert truncate_dir_name(name.encode("utf-8"), max_len) == expected.encode("utf-8")


def test_directory_word_boundaries():
    assert truncate_dir_name(b"my old photos 2019", 12, word_boundaries=True) == b"my old"
