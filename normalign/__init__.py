"""Top-level package for normalign.

This package normalizes text for tokenization while keeping an exact mapping
from every normalized character back to the original input. The core types are
`NormalizedString` and the normalizers in `normalign.normalizers`.
"""

from .errors import (
    InvalidConfigurationError,
    InvalidEncodingError,
    NormalizationError,
    OffsetOutOfRangeError,
    PatternSyntaxError,
    PipelineStageError,
)
from .normalized_string import Edit, NormalizedString
from .normalizers import (
    NFC,
    NFD,
    NFKC,
    NFKD,
    BertNormalizer,
    BertNormalizerBuilder,
    Lowercase,
    Nmt,
    Normalizer,
    NormalizerFactory,
    ReplaceLiteral,
    ReplaceRegex,
    Sequence,
    Strip,
    StripAccents,
    StripAccentsMode,
    normalize,
    normalize_str,
)
from .pipeline import NormalizationPipeline

__all__ = [
    "NormalizedString",
    "Edit",
    "Normalizer",
    "normalize",
    "normalize_str",
    "BertNormalizer",
    "BertNormalizerBuilder",
    "StripAccentsMode",
    "NormalizerFactory",
    "Strip",
    "StripAccents",
    "NFC",
    "NFD",
    "NFKC",
    "NFKD",
    "Lowercase",
    "Nmt",
    "ReplaceLiteral",
    "ReplaceRegex",
    "Sequence",
    "NormalizationPipeline",
    "NormalizationError",
    "InvalidEncodingError",
    "PatternSyntaxError",
    "OffsetOutOfRangeError",
    "InvalidConfigurationError",
    "PipelineStageError",
    "__version__",
]

__version__ = "0.1.0"
