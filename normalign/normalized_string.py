"""Alignment-preserving normalized string.

Responsibilities:
- Own the original text, the working normalized buffer, and one original
  range per normalized character.
- Provide the edit primitives (`replace`, `filter`, `map`, `transform`) that
  every normalizer is built on.
- Answer offset queries between normalized and original coordinates.

Invariants kept by every edit:
- `len(alignments) == len(normalized)`.
- Alignment starts never move backward from left to right.
- `original` is never modified after construction.
"""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from dataclasses import dataclass
from itertools import accumulate
from typing import Callable, Iterable

from .errors import InvalidEncodingError, OffsetOutOfRangeError
from .models.datatypes import Alignment, OffsetRange
from .unicode_utils import is_whitespace, normalize_aligned


@dataclass(frozen=True, slots=True)
class Edit:
    """One range replacement applied by `NormalizedString.apply_edits`.

    Attributes:
        start: Inclusive normalized start offset.
        end: Exclusive normalized end offset.
        content: Replacement text.
        anchor: Preferred original offset for pure insertions. Defaults to the
            end of the preceding character.
    """

    start: int
    end: int
    content: str
    anchor: int | None = None


class NormalizedString:
    """Original text plus a normalized buffer aligned character by character."""

    __slots__ = ("_original", "_normalized", "_alignments", "_starts", "_reach")

    def __init__(self, original: str | bytes) -> None:
        """Create a store whose normalized buffer starts equal to `original`.

        Raises:
            InvalidEncodingError: If `original` is not valid UTF-8 text.
        """

        if isinstance(original, (bytes, bytearray, memoryview)):
            try:
                original = bytes(original).decode("utf-8")
            except UnicodeDecodeError as exc:
                raise InvalidEncodingError(
                    f"Input is not valid UTF-8: {exc.reason} at byte {exc.start}.",
                    hint="Decode the input with the correct codec before normalizing.",
                ) from exc
        elif isinstance(original, str):
            try:
                original.encode("utf-8")
            except UnicodeEncodeError as exc:
                raise InvalidEncodingError(
                    f"Input contains a lone surrogate at offset {exc.start}.",
                ) from exc
        else:
            raise TypeError(f"Expected `str` or `bytes`, got `{type(original).__name__}`.")

        self._original = original
        self._normalized = original
        self._alignments: list[Alignment] = [(index, index + 1) for index in range(len(original))]
        self._starts: list[int] | None = None
        self._reach: list[int] | None = None

    @property
    def original(self) -> str:
        """Text supplied at construction."""

        return self._original

    @property
    def normalized(self) -> str:
        """Current normalized buffer."""

        return self._normalized

    @property
    def alignments(self) -> list[Alignment]:
        """Copy of the per-character original ranges."""

        return list(self._alignments)

    def get_normalized(self) -> str:
        return self._normalized

    def get_original(self) -> str:
        return self._original

    def is_empty(self) -> bool:
        """Return whether the normalized buffer is empty."""

        return not self._normalized

    def __len__(self) -> int:
        return len(self._normalized)

    def __str__(self) -> str:
        return self._normalized

    def __repr__(self) -> str:
        return (
            f"NormalizedString(original={self._original!r}, "
            f"normalized={self._normalized!r})"
        )

    def transform(self, items: Iterable[tuple[str, Alignment]]) -> None:
        """Replace the whole buffer with `(char, alignment)` pairs.

        Raises:
            ValueError: If a pair is not a single character, an alignment falls
                outside the original text, or alignments move backward.
        """

        original_length = len(self._original)
        chars: list[str] = []
        alignments: list[Alignment] = []
        previous_start = 0
        for char, alignment in items:
            if len(char) != 1:
                raise ValueError(f"Expected a single character, got {char!r}.")
            start, end = alignment
            if not 0 <= start <= end <= original_length:
                raise ValueError(f"Alignment {alignment} is outside the original text.")
            if start < previous_start:
                raise ValueError(
                    f"Alignment {alignment} moves backward after start {previous_start}."
                )
            chars.append(char)
            alignments.append((start, end))
            previous_start = start

        self._normalized = "".join(chars)
        self._alignments = alignments
        self._starts = None
        self._reach = None

    def replace(self, start: int, end: int, content: str, *, anchor: int | None = None) -> None:
        """Replace normalized characters `[start, end)` with `content`.

        Every inserted character is aligned to the union of the removed
        characters' ranges, or to a zero-width range when nothing is removed.
        """

        self.apply_edits([Edit(start, end, content, anchor)])

    def apply_edits(self, edits: Iterable[Edit]) -> None:
        """Apply sorted, non-overlapping range replacements in one rewrite."""

        items: list[tuple[str, Alignment]] = []
        cursor = 0
        for edit in edits:
            self._check_normalized_range(edit.start, edit.end)
            if edit.start < cursor:
                raise ValueError("Edits must be sorted and must not overlap.")
            items.extend(zip(self._normalized[cursor : edit.start], self._alignments[cursor : edit.start]))
            if edit.start == edit.end:
                alignment = self._insertion_alignment(edit.start, edit.anchor)
            else:
                alignment = self._covering_alignment(edit.start, edit.end)
            items.extend((char, alignment) for char in edit.content)
            cursor = edit.end
        items.extend(zip(self._normalized[cursor:], self._alignments[cursor:]))
        self.transform(items)

    def filter(self, predicate: Callable[[str], bool]) -> None:
        """Keep only the characters for which `predicate` returns true."""

        self.transform(
            (char, alignment)
            for char, alignment in zip(self._normalized, self._alignments)
            if predicate(char)
        )

    def map(self, transform: Callable[[str], str]) -> None:
        """Replace each character with `transform(char)`, keeping its alignment."""

        self.transform(
            (output, alignment)
            for char, alignment in zip(self._normalized, self._alignments)
            for output in transform(char)
        )

    def prepend(self, content: str) -> None:
        """Insert `content` before the normalized buffer."""

        self.replace(0, 0, content)

    def append(self, content: str) -> None:
        """Insert `content` after the normalized buffer."""

        self.replace(len(self._normalized), len(self._normalized), content)

    def lstrip(self) -> None:
        self._strip(left=True, right=False)

    def rstrip(self) -> None:
        self._strip(left=False, right=True)

    def strip(self) -> None:
        self._strip(left=True, right=True)

    def nfd(self) -> None:
        self._unicode_normalize("NFD")

    def nfkd(self) -> None:
        self._unicode_normalize("NFKD")

    def nfc(self) -> None:
        self._unicode_normalize("NFC")

    def nfkc(self) -> None:
        self._unicode_normalize("NFKC")

    def lowercase(self) -> None:
        """Lowercase every character; multi-character results share alignment."""

        self.map(str.lower)

    def normalized_to_original(self, start: int, end: int) -> OffsetRange:
        """Return the original range covered by normalized range `[start, end)`.

        Raises:
            OffsetOutOfRangeError: If the range falls outside the normalized text.
        """

        self._check_normalized_range(start, end)
        if start == end:
            if start < len(self._alignments):
                offset = self._alignments[start][0]
            elif start > 0:
                offset = self._alignments[start - 1][1]
            else:
                offset = 0
            return OffsetRange(offset, offset)
        return OffsetRange(*self._covering_alignment(start, end))

    def original_to_normalized(self, start: int, end: int) -> OffsetRange:
        """Return the tightest normalized range derived from original `[start, end)`.

        An empty range marks the position where the original text was removed.

        Raises:
            OffsetOutOfRangeError: If the range falls outside the original text.
        """

        if not 0 <= start <= end <= len(self._original):
            raise OffsetOutOfRangeError(
                f"Original range ({start}, {end}) is outside [0, {len(self._original)}]."
            )
        if self._starts is None or self._reach is None:
            self._starts = [alignment[0] for alignment in self._alignments]
            # Running maximum of ends; zero-width insertions may end before a neighbor.
            self._reach = list(accumulate((alignment[1] for alignment in self._alignments), max))

        first = bisect_right(self._reach, start)
        last = bisect_left(self._starts, end)
        if first < last:
            return OffsetRange(first, last)
        position = min(first, last)
        return OffsetRange(position, position)

    def original_byte_range(self, start: int, end: int) -> OffsetRange:
        """Convert an original character range into a UTF-8 byte range."""

        if not 0 <= start <= end <= len(self._original):
            raise OffsetOutOfRangeError(
                f"Original range ({start}, {end}) is outside [0, {len(self._original)}]."
            )
        byte_start = len(self._original[:start].encode("utf-8"))
        byte_end = byte_start + len(self._original[start:end].encode("utf-8"))
        return OffsetRange(byte_start, byte_end)

    def _strip(self, *, left: bool, right: bool) -> None:
        """Drop the leading and/or trailing whitespace runs."""

        begin = 0
        finish = len(self._normalized)
        if left:
            while begin < finish and is_whitespace(self._normalized[begin]):
                begin += 1
        if right:
            while finish > begin and is_whitespace(self._normalized[finish - 1]):
                finish -= 1
        if begin == 0 and finish == len(self._normalized):
            return
        self.transform(zip(self._normalized[begin:finish], self._alignments[begin:finish]))

    def _unicode_normalize(self, form: str) -> None:
        self.transform(normalize_aligned(form, self._normalized, self._alignments))

    def _check_normalized_range(self, start: int, end: int) -> None:
        if not 0 <= start <= end <= len(self._normalized):
            raise OffsetOutOfRangeError(
                f"Normalized range ({start}, {end}) is outside [0, {len(self._normalized)}]."
            )

    def _covering_alignment(self, start: int, end: int) -> Alignment:
        covered = self._alignments[start:end]
        return (
            min(alignment[0] for alignment in covered),
            max(alignment[1] for alignment in covered),
        )

    def _insertion_alignment(self, position: int, anchor: int | None) -> Alignment:
        """Return a zero-width alignment for an insertion at `position`.

        The anchor is clamped between the starts of the neighboring alignments
        so the inserted characters never point backward.
        """

        before = self._alignments[position - 1] if position > 0 else None
        after = self._alignments[position] if position < len(self._alignments) else None
        if anchor is None:
            if before is not None:
                anchor = before[1]
            elif after is not None:
                anchor = after[0]
            else:
                anchor = 0

        low = before[0] if before is not None else 0
        high = after[0] if after is not None else len(self._original)
        offset = min(max(anchor, low), high)
        return (offset, offset)
