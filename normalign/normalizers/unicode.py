"""Unicode normalization form, lowercase, and NMT normalizers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from ..normalized_string import NormalizedString


@dataclass(frozen=True, slots=True)
class NFD:
    """Canonical decomposition."""

    NAME: ClassVar[str] = "nfd"

    def normalize(self, normalized: NormalizedString) -> None:
        normalized.nfd()


@dataclass(frozen=True, slots=True)
class NFKD:
    """Compatibility decomposition."""

    NAME: ClassVar[str] = "nfkd"

    def normalize(self, normalized: NormalizedString) -> None:
        normalized.nfkd()


@dataclass(frozen=True, slots=True)
class NFC:
    """Canonical decomposition followed by canonical composition."""

    NAME: ClassVar[str] = "nfc"

    def normalize(self, normalized: NormalizedString) -> None:
        normalized.nfc()


@dataclass(frozen=True, slots=True)
class NFKC:
    """Compatibility decomposition followed by canonical composition."""

    NAME: ClassVar[str] = "nfkc"

    def normalize(self, normalized: NormalizedString) -> None:
        normalized.nfkc()


@dataclass(frozen=True, slots=True)
class Lowercase:
    """Lowercase every character.

    One-to-many mappings (such as `İ` to `i` + combining dot) keep the source
    character's alignment on every produced character.
    """

    NAME: ClassVar[str] = "lowercase"

    def normalize(self, normalized: NormalizedString) -> None:
        normalized.lowercase()


_NMT_REMOVED = frozenset(
    [*range(0x0001, 0x0009), 0x000B, *range(0x000E, 0x0020), 0x007F, 0x008F, 0x009F]
)
_NMT_SPACES = frozenset(
    [
        0x0009,
        0x000A,
        0x000C,
        0x000D,
        0x1680,
        *range(0x200B, 0x2010),
        0x2028,
        0x2029,
        0x2581,
        0xFEFF,
        0xFFFD,
    ]
)


@dataclass(frozen=True, slots=True)
class Nmt:
    """Drop C0 control characters and map invisible separators to spaces."""

    NAME: ClassVar[str] = "nmt"

    def normalize(self, normalized: NormalizedString) -> None:
        normalized.filter(lambda char: ord(char) not in _NMT_REMOVED)
        normalized.map(lambda char: " " if ord(char) in _NMT_SPACES else char)
