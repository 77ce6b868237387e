"""Shared typed data models for normalign.

This package contains dataclasses used across modules to avoid cross-module
coupling and circular imports.
"""

from .datatypes import Alignment, NormalizationResult, OffsetRange

__all__ = [
    "Alignment",
    "NormalizationResult",
    "OffsetRange",
]
