"""Whitespace and accent stripping normalizers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from ..normalized_string import NormalizedString
from ..unicode_utils import is_combining_mark


@dataclass(frozen=True, slots=True)
class Strip:
    """Remove leading and/or trailing whitespace.

    Attributes:
        left: Strip the leading whitespace run.
        right: Strip the trailing whitespace run.
    """

    NAME: ClassVar[str] = "strip"

    left: bool = True
    right: bool = True

    def normalize(self, normalized: NormalizedString) -> None:
        if self.left and self.right:
            normalized.strip()
        elif self.left:
            normalized.lstrip()
        elif self.right:
            normalized.rstrip()


@dataclass(frozen=True, slots=True)
class StripAccents:
    """Decompose canonically, then remove nonspacing combining marks."""

    NAME: ClassVar[str] = "strip_accents"

    def normalize(self, normalized: NormalizedString) -> None:
        strip_accents(normalized)


def strip_accents(normalized: NormalizedString) -> None:
    """Apply NFD and drop every category `Mn` character."""

    normalized.nfd()
    normalized.filter(lambda char: not is_combining_mark(char))
