"""Ordered composition of normalizers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Iterable

from ..normalized_string import NormalizedString
from .base import Normalizer


@dataclass(frozen=True, slots=True, init=False)
class Sequence:
    """Apply member normalizers in order to the same store.

    The first member that raises stops the sequence; later members are not
    applied and the store keeps whatever state the failing member left.
    """

    NAME: ClassVar[str] = "sequence"

    normalizers: tuple[Normalizer, ...]

    def __init__(self, normalizers: Iterable[Normalizer]) -> None:
        object.__setattr__(self, "normalizers", tuple(normalizers))

    def __len__(self) -> int:
        return len(self.normalizers)

    def normalize(self, normalized: NormalizedString) -> None:
        for normalizer in self.normalizers:
            normalizer.normalize(normalized)
