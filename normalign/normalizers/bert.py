"""BERT-style composite normalizer.

Responsibilities:
- Clean control characters and unify whitespace.
- Isolate CJK ideographs with surrounding spaces.
- Strip accents and lowercase according to the resolved options.

Notes:
- Steps always run in the order above.
- The strip-accents tri-state is resolved once, at construction.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar

from ..normalized_string import Edit, NormalizedString
from ..unicode_utils import is_chinese_char, is_control, is_whitespace
from .strip import strip_accents


class StripAccentsMode(str, Enum):
    """Tri-state strip-accents option."""

    TRUE = "true"
    FALSE = "false"
    DETERMINED_BY_LOWERCASE = "determined_by_lowercase"

    @classmethod
    def coerce(cls, value: StripAccentsMode | bool | None) -> StripAccentsMode:
        """Map booleans and `None` onto the tri-state."""

        if isinstance(value, cls):
            return value
        if value is None:
            return cls.DETERMINED_BY_LOWERCASE
        return cls.TRUE if value else cls.FALSE

    def resolve(self, lowercase: bool) -> bool:
        """Return the effective flag for a given `lowercase` setting."""

        if self is StripAccentsMode.DETERMINED_BY_LOWERCASE:
            return lowercase
        return self is StripAccentsMode.TRUE


@dataclass(frozen=True, slots=True)
class BertNormalizer:
    """Composite normalizer used ahead of BERT WordPiece tokenization.

    Attributes:
        clean_text: Remove control characters and map whitespace to `" "`.
        handle_chinese_chars: Surround each CJK ideograph with spaces.
        strip_accents: `True`, `False`, or `None`/`DETERMINED_BY_LOWERCASE`
            to strip accents exactly when `lowercase` is set.
        lowercase: Lowercase the text.
    """

    NAME: ClassVar[str] = "bert"

    clean_text: bool = True
    handle_chinese_chars: bool = True
    strip_accents: StripAccentsMode | bool | None = StripAccentsMode.DETERMINED_BY_LOWERCASE
    lowercase: bool = True
    effective_strip_accents: bool = field(init=False)

    def __post_init__(self) -> None:
        mode = StripAccentsMode.coerce(self.strip_accents)
        object.__setattr__(self, "strip_accents", mode)
        object.__setattr__(self, "effective_strip_accents", mode.resolve(self.lowercase))

    def normalize(self, normalized: NormalizedString) -> None:
        if self.clean_text:
            self._clean_text(normalized)
        if self.handle_chinese_chars:
            self._isolate_chinese_chars(normalized)
        if self.effective_strip_accents:
            strip_accents(normalized)
        if self.lowercase:
            normalized.lowercase()

    @staticmethod
    def _clean_text(normalized: NormalizedString) -> None:
        normalized.filter(
            lambda char: not (char == "\0" or char == "\ufffd" or is_control(char))
        )
        normalized.map(lambda char: " " if is_whitespace(char) else char)

    @staticmethod
    def _isolate_chinese_chars(normalized: NormalizedString) -> None:
        alignments = normalized.alignments
        edits: list[Edit] = []
        for index, char in enumerate(normalized.get_normalized()):
            if not is_chinese_char(char):
                continue
            start, end = alignments[index]
            edits.append(Edit(index, index, " ", anchor=start))
            edits.append(Edit(index + 1, index + 1, " ", anchor=end))
        if edits:
            normalized.apply_edits(edits)
