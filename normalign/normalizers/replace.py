"""Literal and regular-expression replacement normalizers.

Responsibilities:
- Substitute non-overlapping matches scanned left to right.
- Validate patterns at construction so misuse fails before any text is touched.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import re
from typing import ClassVar

from ..errors import InvalidConfigurationError, PatternSyntaxError
from ..normalized_string import Edit, NormalizedString


@dataclass(frozen=True, slots=True)
class ReplaceLiteral:
    """Replace every occurrence of a literal string.

    Attributes:
        pattern: Non-empty text to search for.
        content: Replacement text.
    """

    NAME: ClassVar[str] = "replace_literal"

    pattern: str
    content: str

    def __post_init__(self) -> None:
        if not self.pattern:
            raise InvalidConfigurationError(
                "`pattern` must not be empty for literal replacement.",
                hint="Use `replace_regex` to insert text at every position.",
            )

    def normalize(self, normalized: NormalizedString) -> None:
        text = normalized.get_normalized()
        edits: list[Edit] = []
        position = text.find(self.pattern)
        while position != -1:
            end = position + len(self.pattern)
            edits.append(Edit(position, end, self.content))
            position = text.find(self.pattern, end)
        if edits:
            normalized.apply_edits(edits)


@dataclass(frozen=True, slots=True)
class ReplaceRegex:
    """Replace every match of a regular expression.

    Attributes:
        pattern: Regular expression source (Python `re` syntax).
        content: Replacement template; may reference groups as `\\1` or `\\g<name>`.
    """

    NAME: ClassVar[str] = "replace_regex"

    pattern: str
    content: str
    compiled: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        try:
            compiled = re.compile(self.pattern)
        except re.error as exc:
            raise PatternSyntaxError(
                f"Invalid regular expression `{self.pattern}`: {exc}",
                hint="Check the pattern against Python `re` syntax.",
            ) from exc
        try:
            compiled.sub(self.content, "")
        except (re.error, IndexError) as exc:
            raise PatternSyntaxError(
                f"Invalid replacement template `{self.content}`: {exc}",
                hint="Reference only groups defined by the pattern.",
            ) from exc
        object.__setattr__(self, "compiled", compiled)

    def normalize(self, normalized: NormalizedString) -> None:
        edits = [
            Edit(match.start(), match.end(), match.expand(self.content))
            for match in self.compiled.finditer(normalized.get_normalized())
        ]
        if edits:
            normalized.apply_edits(edits)
