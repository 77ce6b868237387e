"""Unit tests for character classifiers and shared datatypes."""

from __future__ import annotations

import pytest

from normalign.models.datatypes import NormalizationResult, OffsetRange
from normalign.unicode_utils import (
    is_chinese_char,
    is_combining_mark,
    is_control,
    is_monotonic,
    is_whitespace,
    union_alignment,
)


@pytest.mark.parametrize(
    ("char", "expected"),
    [("\x07", True), ("\u200b", True), ("\t", False), ("\n", False), ("a", False)],
)
def test_is_control_excludes_whitespace_controls(char: str, expected: bool) -> None:
    """Tab, newline, and carriage return count as whitespace, not control."""

    assert is_control(char) is expected


@pytest.mark.parametrize(
    ("char", "expected"),
    [
        (" ", True),
        ("\t", True),
        ("\x85", True),
        ("\u00a0", True),
        ("\u3000", True),
        ("\x1c", False),
        ("\x1f", False),
        ("x", False),
    ],
)
def test_is_whitespace(char: str, expected: bool) -> None:
    assert is_whitespace(char) is expected


@pytest.mark.parametrize(
    ("char", "expected"),
    [
        ("\u4e00", True),
        ("\u3400", True),
        ("\U00020000", True),
        ("\uf900", True),
        ("\u3042", False),
        ("\uac00", False),
        ("a", False),
    ],
)
def test_is_chinese_char_covers_cjk_blocks_only(char: str, expected: bool) -> None:
    """Hiragana and Hangul are not CJK ideographs."""

    assert is_chinese_char(char) is expected


def test_is_combining_mark_matches_nonspacing_marks() -> None:
    assert is_combining_mark("\u0301")
    assert not is_combining_mark("e")


def test_union_alignment_and_monotonic_check() -> None:
    assert union_alignment((2, 4), (1, 3)) == (1, 4)
    assert is_monotonic([(0, 1), (0, 1), (1, 1), (1, 3)])
    assert is_monotonic([(0, 2), (1, 1), (1, 2)])
    assert not is_monotonic([(1, 2), (0, 3)])
    assert not is_monotonic([(2, 1)])
    assert is_monotonic([])


def test_offset_range_rejects_invalid_bounds() -> None:
    """Negative or reversed ranges are not representable."""

    with pytest.raises(ValueError):
        OffsetRange(-1, 2)
    with pytest.raises(ValueError):
        OffsetRange(3, 2)


def test_offset_range_helpers() -> None:
    span = OffsetRange(1, 3)

    assert len(span) == 2
    assert not span.is_empty
    assert span.as_tuple() == (1, 3)
    assert span.slice("abcd") == "bc"
    assert OffsetRange(2, 2).is_empty


def test_normalization_result_to_dict_is_json_ready() -> None:
    result = NormalizationResult(
        original="AB",
        normalized="ab",
        alignments=((0, 1), (1, 2)),
        normalizer_types=("lowercase",),
        extra={"run": "1"},
    )

    assert result.to_dict() == {
        "original": "AB",
        "normalized": "ab",
        "alignments": [[0, 1], [1, 2]],
        "normalizers": ["lowercase"],
        "extra": {"run": "1"},
    }
