"""Alignment-preserving normalizer variants.

This package provides the normalizer protocol, every concrete variant, the
`Sequence` combinator, and the builder/factory layer used by configuration.
"""

from .base import Normalizer, normalize, normalize_str
from .bert import BertNormalizer, StripAccentsMode
from .builder import BertNormalizerBuilder, NormalizerFactory
from .replace import ReplaceLiteral, ReplaceRegex
from .sequence import Sequence
from .strip import Strip, StripAccents
from .unicode import NFC, NFD, NFKC, NFKD, Lowercase, Nmt

__all__ = [
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
]
