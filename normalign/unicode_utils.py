"""Unicode classification and alignment-preserving normalization helpers.

Responsibilities:
- Classify characters the way BERT-style and NMT-style cleaning expects.
- Apply NFC/NFD/NFKC/NFKD while tracking which original ranges produced
  each output character.

Notes:
- Output text always equals `unicodedata.normalize(form, text)`; only the
  alignment bookkeeping is computed here.
"""

from __future__ import annotations

from typing import Iterable, Iterator
import unicodedata

from .models.datatypes import Alignment

UNICODE_FORMS = ("NFC", "NFD", "NFKC", "NFKD")

_DECOMPOSITION_FORMS = {"NFC": "NFD", "NFD": "NFD", "NFKC": "NFKD", "NFKD": "NFKD"}
_COMPOSING_FORMS = frozenset({"NFC", "NFKC"})

_CJK_RANGES = (
    (0x4E00, 0x9FFF),
    (0x3400, 0x4DBF),
    (0x20000, 0x2A6DF),
    (0x2A700, 0x2B73F),
    (0x2B740, 0x2B81F),
    (0x2B820, 0x2CEAF),
    (0xF900, 0xFAFF),
    (0x2F800, 0x2FA1F),
)

_BERT_WHITESPACE_CONTROLS = frozenset("\t\n\r")
_INFORMATION_SEPARATORS = frozenset("\x1c\x1d\x1e\x1f")


def is_control(char: str) -> bool:
    """Return whether `char` is a control/format/unassigned character.

    Tab, newline, and carriage return are treated as whitespace instead.
    """

    if char in _BERT_WHITESPACE_CONTROLS:
        return False
    return unicodedata.category(char).startswith("C")


def is_whitespace(char: str) -> bool:
    """Return whether `char` has the Unicode `White_Space` property.

    `str.isspace` also accepts the information separators U+001C-U+001F,
    which are not whitespace.
    """

    return char.isspace() and char not in _INFORMATION_SEPARATORS


def is_chinese_char(char: str) -> bool:
    """Return whether `char` is in a CJK ideograph block."""

    codepoint = ord(char)
    return any(low <= codepoint <= high for low, high in _CJK_RANGES)


def is_combining_mark(char: str) -> bool:
    """Return whether `char` is a nonspacing combining mark (category Mn)."""

    return unicodedata.category(char) == "Mn"


def union_alignment(first: Alignment, second: Alignment) -> Alignment:
    """Return the smallest range covering both alignments."""

    return (min(first[0], second[0]), max(first[1], second[1]))


def is_monotonic(alignments: Iterable[Alignment]) -> bool:
    """Return whether alignment starts never move backward and no range is reversed."""

    previous_start = 0
    for start, end in alignments:
        if start < previous_start or end < start:
            return False
        previous_start = start
    return True


def normalize_aligned(
    form: str, text: str, alignments: list[Alignment]
) -> list[tuple[str, Alignment]]:
    """Normalize `text` to `form` and return `(char, alignment)` pairs.

    Args:
        form: One of `NFC`, `NFD`, `NFKC`, `NFKD`.
        text: Current normalized buffer.
        alignments: One alignment per character of `text`.

    Returns:
        Output characters paired with the union of the alignments of the input
        characters that produced them.
    """

    if form not in _DECOMPOSITION_FORMS:
        raise ValueError(f"Unsupported Unicode normalization form `{form}`.")
    if unicodedata.is_normalized(form, text):
        return list(zip(text, alignments))

    items: list[tuple[str, Alignment]] = []
    for start, end in _segment_bounds(form, text):
        items.extend(_normalize_segment(form, text[start:end], alignments[start:end]))
    return items


def _segment_bounds(form: str, text: str) -> Iterator[tuple[int, int]]:
    """Yield `(start, end)` bounds of independently normalizable segments."""

    start = 0
    for index in range(1, len(text)):
        char = text[index]
        if unicodedata.combining(char):
            continue
        if _starts_segment(form, text[start:index], char):
            yield start, index
            start = index
    if text:
        yield start, len(text)


def _starts_segment(form: str, segment: str, char: str) -> bool:
    """Return whether starter `char` can open a segment without touching `segment`."""

    head = unicodedata.normalize(form, char)
    if unicodedata.combining(head[0]):
        return False
    return unicodedata.normalize(form, segment + char) == unicodedata.normalize(form, segment) + head


def _normalize_segment(
    form: str, segment: str, alignments: list[Alignment]
) -> list[tuple[str, Alignment]]:
    """Normalize one segment, falling back to a shared union alignment."""

    expected = unicodedata.normalize(form, segment)
    items = _decompose(_DECOMPOSITION_FORMS[form], segment, alignments)
    if form in _COMPOSING_FORMS:
        items = _compose(items)

    produced = "".join(char for char, _ in items)
    if produced == expected and is_monotonic(alignment for _, alignment in items):
        return items

    covering = (
        min(alignment[0] for alignment in alignments),
        max(alignment[1] for alignment in alignments),
    )
    return [(char, covering) for char in expected]


def _decompose(
    form: str, segment: str, alignments: list[Alignment]
) -> list[tuple[str, Alignment]]:
    """Decompose each character on its own, then apply canonical ordering."""

    items: list[tuple[str, Alignment]] = []
    for char, alignment in zip(segment, alignments):
        items.extend((part, alignment) for part in unicodedata.normalize(form, char))

    ordered: list[tuple[str, Alignment]] = []
    run: list[tuple[str, Alignment]] = []
    for item in items:
        if unicodedata.combining(item[0]):
            run.append(item)
            continue
        ordered.extend(sorted(run, key=lambda pair: unicodedata.combining(pair[0])))
        run = []
        ordered.append(item)
    ordered.extend(sorted(run, key=lambda pair: unicodedata.combining(pair[0])))
    return ordered


def _compose(items: list[tuple[str, Alignment]]) -> list[tuple[str, Alignment]]:
    """Apply canonical composition to decomposed, canonically ordered pairs.

    Marks after a starter arrive in non-decreasing combining class, so the
    class of the last uncomposed mark decides whether the next one is blocked.
    """

    composed: list[tuple[str, Alignment]] = []
    last_starter: int | None = None
    # Class of the last mark kept since `last_starter`; None when nothing is between.
    last_class: int | None = None
    for char, alignment in items:
        combining_class = unicodedata.combining(char)
        blocked = last_class is not None and last_class >= combining_class
        if last_starter is not None and not blocked:
            starter, starter_alignment = composed[last_starter]
            pair = unicodedata.normalize("NFC", starter + char)
            if len(pair) == 1:
                composed[last_starter] = (pair, union_alignment(starter_alignment, alignment))
                continue
        composed.append((char, alignment))
        if combining_class == 0:
            last_starter = len(composed) - 1
            last_class = None
        else:
            last_class = combining_class
    return composed
