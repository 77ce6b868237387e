"""Unit tests for alignment-preserving Unicode normalization forms."""

from __future__ import annotations

import time
import unicodedata

import pytest

from normalign.normalized_string import NormalizedString
from normalign.normalizers import NFC, NFD, NFKC, NFKD, Lowercase, normalize
from normalign.unicode_utils import is_monotonic


def test_nfd_splits_precomposed_character_onto_same_range() -> None:
    """Decomposed parts should all point at the precomposed source."""

    normalized = NormalizedString("\u00e9!")
    normalize(NFD(), normalized)

    assert normalized.get_normalized() == "e\u0301!"
    assert normalized.alignments == [(0, 1), (0, 1), (1, 2)]


def test_nfc_composition_unions_contributing_ranges() -> None:
    """A composed character should cover every input it was built from."""

    normalized = NormalizedString("e\u0301x")
    normalize(NFC(), normalized)

    assert normalized.get_normalized() == "\u00e9x"
    assert normalized.alignments == [(0, 2), (2, 3)]


def test_nfc_composes_hangul_jamo_sequences() -> None:
    """Leading, vowel, and trailing jamo should compose into one syllable."""

    normalized = NormalizedString("\u1100\u1161\u11a8!")
    normalize(NFC(), normalized)

    assert normalized.get_normalized() == "\uac01!"
    assert normalized.alignments == [(0, 3), (3, 4)]


def test_nfkc_expands_compatibility_ligature() -> None:
    """Compatibility ligatures should expand with a shared alignment."""

    normalized = NormalizedString("\ufb01x")
    normalize(NFKC(), normalized)

    assert normalized.get_normalized() == "fix"
    assert normalized.alignments == [(0, 1), (0, 1), (1, 2)]


def test_nfkd_maps_fullwidth_letters() -> None:
    """Fullwidth letters should map to ASCII one to one."""

    normalized = NormalizedString("\uff28\uff49")
    normalize(NFKD(), normalized)

    assert normalized.get_normalized() == "Hi"
    assert normalized.alignments == [(0, 1), (1, 2)]


def test_canonical_reordering_falls_back_to_shared_range() -> None:
    """Reordered marks should share the segment range instead of pointing backward."""

    normalized = NormalizedString("xa\u0301\u0323")
    normalize(NFD(), normalized)

    assert normalized.get_normalized() == "xa\u0323\u0301"
    assert normalized.alignments == [(0, 1), (1, 4), (1, 4), (1, 4)]


def test_already_normalized_text_keeps_alignments() -> None:
    """Normalizing text that is already in form should not touch the mapping."""

    normalized = NormalizedString("plain ascii")
    normalized.replace(0, 5, "simple")
    before = normalized.alignments
    normalize(NFC(), normalized)

    assert normalized.get_normalized() == "simple ascii"
    assert normalized.alignments == before


@pytest.mark.parametrize("form", ["NFC", "NFD", "NFKC", "NFKD"])
def test_forms_match_standard_library_and_stay_monotonic(
    form: str, mixed_script_text: str
) -> None:
    """Output must equal the reference normalization with a forward-only mapping."""

    normalizer = {"NFC": NFC(), "NFD": NFD(), "NFKC": NFKC(), "NFKD": NFKD()}[form]
    normalized = NormalizedString(mixed_script_text)
    normalize(normalizer, normalized)

    assert normalized.get_normalized() == unicodedata.normalize(form, mixed_script_text)
    assert len(normalized.alignments) == len(normalized.get_normalized())
    assert is_monotonic(normalized.alignments)
    assert normalized.get_original() == mixed_script_text


@pytest.mark.parametrize("normalizer", [NFC(), NFD(), NFKC(), NFKD(), Lowercase()])
def test_normalizers_are_idempotent(normalizer: object, mixed_script_text: str) -> None:
    """Applying a form twice should equal applying it once."""

    once = NormalizedString(mixed_script_text)
    normalize(normalizer, once)
    twice = NormalizedString(mixed_script_text)
    normalize(normalizer, twice)
    normalize(normalizer, twice)

    assert twice.get_normalized() == once.get_normalized()
    assert twice.alignments == once.alignments


def test_every_normalized_character_maps_to_non_empty_original_range(
    mixed_script_text: str,
) -> None:
    """Without insertions every normalized character should cover some original text."""

    normalized = NormalizedString(mixed_script_text)
    normalize(NFKD(), normalized)
    normalize(NFC(), normalized)

    for index in range(len(normalized)):
        assert not normalized.normalized_to_original(index, index + 1).is_empty


def test_nfc_handles_long_combining_mark_run_in_linear_time() -> None:
    """A starter followed by thousands of marks should compose without rescanning the run."""

    text = "a" + "\u0323\u0301" * 10000
    normalized = NormalizedString(text)
    started = time.perf_counter()
    normalize(NFC(), normalized)
    elapsed = time.perf_counter() - started

    assert normalized.get_normalized() == unicodedata.normalize("NFC", text)
    assert normalized.get_normalized()[0] == "\u1ea1"
    assert len(normalized.alignments) == len(normalized.get_normalized())
    assert is_monotonic(normalized.alignments)
    assert elapsed < 5.0


def test_nfc_blocks_mark_after_uncomposed_mark_of_same_class() -> None:
    """Only the first of two acute accents can join the base letter."""

    normalized = NormalizedString("a\u0301\u0301b")
    normalize(NFC(), normalized)

    assert normalized.get_normalized() == "\u00e1\u0301b"
    assert normalized.alignments == [(0, 2), (2, 3), (3, 4)]
