"""Core datatypes shared across normalign modules.

Responsibilities:
- Represent immutable records exchanged between the alignment store and callers.
- Provide explicit typing for offset ranges and normalization outcomes.

Key types:
- `Alignment`, `OffsetRange`, and `NormalizationResult`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

Alignment = tuple[int, int]
"""Half-open `(start, end)` range of original character offsets."""


@dataclass(frozen=True, slots=True)
class OffsetRange:
    """A half-open offset range in either the original or normalized text.

    Attributes:
        start: Inclusive start offset.
        end: Exclusive end offset.
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Reject reversed or negative ranges."""

        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid offset range ({self.start}, {self.end}).")

    def __len__(self) -> int:
        return self.end - self.start

    @property
    def is_empty(self) -> bool:
        """Return whether the range covers no offsets."""

        return self.start == self.end

    def as_tuple(self) -> Alignment:
        """Return the range as a plain `(start, end)` tuple."""

        return (self.start, self.end)

    def slice(self, text: str) -> str:
        """Return the part of `text` covered by this range."""

        return text[self.start : self.end]


@dataclass(frozen=True, slots=True)
class NormalizationResult:
    """Snapshot of one pipeline run over a single input text.

    Attributes:
        original: Text supplied at construction.
        normalized: Final normalized text.
        alignments: One original range per normalized character.
        normalizer_types: Ordered normalizer type names that were applied.
        extra: Additional metadata copied from the pipeline config.
    """

    original: str
    normalized: str
    alignments: tuple[Alignment, ...]
    normalizer_types: tuple[str, ...] = field(default_factory=tuple)
    extra: Mapping[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-serializable representation."""

        return {
            "original": self.original,
            "normalized": self.normalized,
            "alignments": [list(alignment) for alignment in self.alignments],
            "normalizers": list(self.normalizer_types),
            "extra": dict(self.extra),
        }
