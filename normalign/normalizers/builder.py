"""Named-option construction for normalizers.

Responsibilities:
- Provide a fluent builder for the BERT composite normalizer.
- Resolve `{"type": ..., **options}` mappings to concrete normalizer variants.

Notes:
- Factory mappings are explicit; each type lists the options it accepts.
- Builders copy their options into the built normalizer, so later builder
  changes never affect normalizers that were already built.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping

from ..errors import InvalidConfigurationError
from ..parsing import normalize_optional_string, parse_required_boolean, parse_tri_state
from .base import Normalizer
from .bert import BertNormalizer, StripAccentsMode
from .replace import ReplaceLiteral, ReplaceRegex
from .sequence import Sequence
from .strip import Strip, StripAccents
from .unicode import NFC, NFD, NFKC, NFKD, Lowercase, Nmt


@dataclass(slots=True)
class BertNormalizerBuilder:
    """Mutable option holder for `BertNormalizer`.

    Attributes:
        clean_text: Remove control characters and unify whitespace.
        handle_chinese_chars: Isolate CJK ideographs with spaces.
        lowercase: Lowercase the text.
        strip_accents: Tri-state; by default accents are stripped exactly when
            `lowercase` is set.
    """

    clean_text: bool = True
    handle_chinese_chars: bool = True
    lowercase: bool = True
    strip_accents: StripAccentsMode = StripAccentsMode.DETERMINED_BY_LOWERCASE

    def with_clean_text(self, clean_text: bool) -> BertNormalizerBuilder:
        self.clean_text = clean_text
        return self

    def with_handle_chinese_chars(self, handle_chinese_chars: bool) -> BertNormalizerBuilder:
        self.handle_chinese_chars = handle_chinese_chars
        return self

    def with_lowercase(self, lowercase: bool) -> BertNormalizerBuilder:
        self.lowercase = lowercase
        return self

    def with_strip_accents(self, strip_accents: bool | None) -> BertNormalizerBuilder:
        """Set whether accents are stripped; `None` defers to `lowercase`."""

        self.strip_accents = StripAccentsMode.coerce(strip_accents)
        return self

    def build(self) -> BertNormalizer:
        """Build an immutable `BertNormalizer` from the current options."""

        return BertNormalizer(
            clean_text=self.clean_text,
            handle_chinese_chars=self.handle_chinese_chars,
            strip_accents=self.strip_accents,
            lowercase=self.lowercase,
        )


def _no_options(factory: Callable[[], Normalizer]) -> Callable[[Mapping[str, Any]], Normalizer]:
    return lambda options: factory()


class NormalizerFactory:
    """Factory for normalizer variants described by plain mappings."""

    SUPPORTED_OPTIONS: Mapping[str, frozenset[str]] = {
        "bert": frozenset({"clean_text", "handle_chinese_chars", "strip_accents", "lowercase"}),
        "strip": frozenset({"left", "right"}),
        "strip_accents": frozenset(),
        "nfc": frozenset(),
        "nfd": frozenset(),
        "nfkc": frozenset(),
        "nfkd": frozenset(),
        "lowercase": frozenset(),
        "nmt": frozenset(),
        "replace_literal": frozenset({"pattern", "content"}),
        "replace_regex": frozenset({"pattern", "content"}),
        "sequence": frozenset({"normalizers"}),
    }

    @staticmethod
    def supported_types() -> tuple[str, ...]:
        """Return supported normalizer type names in declaration order."""

        return tuple(NormalizerFactory.SUPPORTED_OPTIONS)

    @staticmethod
    def create(spec: Mapping[str, Any]) -> Normalizer:
        """Create a normalizer from a `{"type": ..., **options}` mapping.

        Raises:
            InvalidConfigurationError: On unknown types, unknown options, or
                invalid option values.
            PatternSyntaxError: When a regex pattern does not compile.
        """

        if not isinstance(spec, Mapping):
            raise InvalidConfigurationError(
                f"Normalizer spec must be a mapping, got `{type(spec).__name__}`."
            )
        type_name = normalize_optional_string(spec.get("type"))
        if type_name is None:
            raise InvalidConfigurationError("Normalizer spec is missing `type`.")
        type_name = type_name.lower()
        supported = NormalizerFactory.SUPPORTED_OPTIONS.get(type_name)
        if supported is None:
            raise InvalidConfigurationError(
                f"Unsupported normalizer type `{type_name}`.",
                hint="Supported types: " + ", ".join(NormalizerFactory.supported_types()) + ".",
            )
        options = {key: value for key, value in spec.items() if key != "type"}
        unknown = sorted(set(options) - supported)
        if unknown:
            raise InvalidConfigurationError(
                f"Normalizer `{type_name}` does not accept option(s): {', '.join(unknown)}."
            )
        return _CREATORS[type_name](options)

    @staticmethod
    def create_many(specs: list[Mapping[str, Any]]) -> Normalizer:
        """Create one normalizer, wrapping several specs in a `Sequence`."""

        normalizers = [NormalizerFactory.create(spec) for spec in specs]
        if len(normalizers) == 1:
            return normalizers[0]
        return Sequence(normalizers)


def _bool_option(options: Mapping[str, Any], key: str, default: bool) -> bool:
    if key not in options or options[key] is None:
        return default
    return parse_required_boolean(options[key], key)


def _text_option(options: Mapping[str, Any], key: str, type_name: str) -> str:
    value = options.get(key)
    if value is None:
        raise InvalidConfigurationError(f"Normalizer `{type_name}` requires option `{key}`.")
    if not isinstance(value, str):
        raise InvalidConfigurationError(f"Option `{key}` of `{type_name}` must be a string.")
    return value


def _create_bert(options: Mapping[str, Any]) -> Normalizer:
    builder = BertNormalizerBuilder()
    builder.with_clean_text(_bool_option(options, "clean_text", True))
    builder.with_handle_chinese_chars(_bool_option(options, "handle_chinese_chars", True))
    builder.with_lowercase(_bool_option(options, "lowercase", True))
    builder.with_strip_accents(parse_tri_state(options.get("strip_accents"), "strip_accents"))
    return builder.build()


def _create_strip(options: Mapping[str, Any]) -> Normalizer:
    return Strip(
        left=_bool_option(options, "left", True),
        right=_bool_option(options, "right", True),
    )


def _create_replace_literal(options: Mapping[str, Any]) -> Normalizer:
    return ReplaceLiteral(
        pattern=_text_option(options, "pattern", "replace_literal"),
        content=_text_option(options, "content", "replace_literal"),
    )


def _create_replace_regex(options: Mapping[str, Any]) -> Normalizer:
    return ReplaceRegex(
        pattern=_text_option(options, "pattern", "replace_regex"),
        content=_text_option(options, "content", "replace_regex"),
    )


def _create_sequence(options: Mapping[str, Any]) -> Normalizer:
    members = options.get("normalizers")
    if not isinstance(members, list):
        raise InvalidConfigurationError("Normalizer `sequence` requires a `normalizers` list.")
    return Sequence(NormalizerFactory.create(member) for member in members)


_CREATORS: dict[str, Callable[[Mapping[str, Any]], Normalizer]] = {
    "bert": _create_bert,
    "strip": _create_strip,
    "strip_accents": _no_options(StripAccents),
    "nfc": _no_options(NFC),
    "nfd": _no_options(NFD),
    "nfkc": _no_options(NFKC),
    "nfkd": _no_options(NFKD),
    "lowercase": _no_options(Lowercase),
    "nmt": _no_options(Nmt),
    "replace_literal": _create_replace_literal,
    "replace_regex": _create_replace_regex,
    "sequence": _create_sequence,
}
