"""Normalizer contract and entry points.

Responsibilities:
- Define the protocol every normalizer variant implements.
- Provide the single mutating entry point and a string convenience wrapper.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..normalized_string import NormalizedString


@runtime_checkable
class Normalizer(Protocol):
    """Protocol for alignment-preserving normalizers."""

    def normalize(self, normalized: NormalizedString) -> None:
        """Normalize `normalized` in place."""


def normalize(normalizer: Normalizer, normalized: NormalizedString) -> None:
    """Apply `normalizer` to `normalized` in place.

    Raises:
        NormalizationError: Propagated unchanged from the normalizer.
    """

    normalizer.normalize(normalized)


def normalize_str(normalizer: Normalizer, text: str) -> str:
    """Return `text` normalized by `normalizer`, discarding alignment data."""

    normalized = NormalizedString(text)
    normalizer.normalize(normalized)
    return normalized.get_normalized()
