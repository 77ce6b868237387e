"""Domain exceptions for normalization, offset queries, and CLI diagnostics."""

from __future__ import annotations


class NormalizationError(RuntimeError):
    """Base error for every failure raised by this package."""

    def __init__(self, detail: str, *, hint: str | None = None) -> None:
        """Initialize an error with a user-facing detail and optional hint."""

        super().__init__(detail)
        self.detail = detail
        self.hint = hint


class InvalidEncodingError(NormalizationError):
    """Raised when a byte buffer is not valid UTF-8."""


class PatternSyntaxError(NormalizationError, ValueError):
    """Raised when a regular expression cannot be compiled."""


class OffsetOutOfRangeError(NormalizationError, IndexError):
    """Raised when an offset query falls outside the buffer bounds."""


class InvalidConfigurationError(NormalizationError, ValueError):
    """Raised when a normalizer is constructed with unusable options."""


class PipelineStageError(NormalizationError):
    """Raised when a specific pipeline stage fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped pipeline error."""

        super().__init__(detail, hint=hint)
        self.stage = stage
