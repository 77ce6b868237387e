"""Pipeline orchestration for configured normalization runs.

Responsibilities:
- Build one normalizer from a `PipelineConfig` before touching any input.
- Normalize inputs and snapshot results with alignment data.
- Emit stage telemetry and map failures to stage-aware errors.

Key types:
- `NormalizationPipeline`: orchestration facade used by the CLI.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Iterable, TypeVar

from .config import PipelineConfig
from .errors import NormalizationError, PipelineStageError
from .models.datatypes import NormalizationResult, OffsetRange
from .normalized_string import NormalizedString
from .normalizers.base import Normalizer
from .normalizers.builder import NormalizerFactory
from .telemetry.logger import RunLogger

_StageResult = TypeVar("_StageResult")


class NormalizationPipeline:
    """Build configured normalizers and apply them to input texts."""

    def __init__(self, run_logger: RunLogger | None = None) -> None:
        """Initialize optional runtime logging."""

        self._run_logger = run_logger

    def build(self, config: PipelineConfig) -> Normalizer:
        """Validate `config` and build its normalizer."""

        def _build() -> Normalizer:
            config.validate()
            return NormalizerFactory.create_many([spec.as_mapping() for spec in config.normalizers])

        return self._run_stage("build", _build, count=len(config.normalizers))

    def run(self, config: PipelineConfig, text: str | bytes) -> NormalizationResult:
        """Normalize one input and return its result snapshot."""

        return self.run_many(config, [text])[0]

    def run_many(
        self, config: PipelineConfig, texts: Iterable[str | bytes]
    ) -> list[NormalizationResult]:
        """Normalize several inputs with one shared normalizer."""

        normalizer = self.build(config)
        inputs = list(texts)

        def _normalize() -> list[NormalizationResult]:
            results: list[NormalizationResult] = []
            for text in inputs:
                normalized = NormalizedString(text)
                normalizer.normalize(normalized)
                results.append(self._snapshot(config, normalized))
            return results

        return self._run_stage("normalize", _normalize, inputs=len(inputs))

    def map_offsets(
        self,
        config: PipelineConfig,
        text: str | bytes,
        start: int,
        end: int,
        *,
        reverse: bool = False,
    ) -> tuple[NormalizationResult, OffsetRange]:
        """Normalize `text` and map a range between coordinate spaces.

        Args:
            config: Pipeline configuration.
            text: Input text.
            start: Range start.
            end: Range end.
            reverse: Map an original range to normalized offsets instead of
                a normalized range to original offsets.
        """

        normalizer = self.build(config)

        def _map() -> tuple[NormalizationResult, OffsetRange]:
            normalized = NormalizedString(text)
            normalizer.normalize(normalized)
            if reverse:
                mapped = normalized.original_to_normalized(start, end)
            else:
                mapped = normalized.normalized_to_original(start, end)
            return self._snapshot(config, normalized), mapped

        return self._run_stage("map_offsets", _map)

    @staticmethod
    def _snapshot(config: PipelineConfig, normalized: NormalizedString) -> NormalizationResult:
        return NormalizationResult(
            original=normalized.get_original(),
            normalized=normalized.get_normalized(),
            alignments=tuple(normalized.alignments),
            normalizer_types=config.normalizer_types,
            extra=dict(config.extra),
        )

    def _run_stage(
        self,
        stage_name: str,
        action: Callable[[], _StageResult],
        **context: object,
    ) -> _StageResult:
        """Run one named stage and emit start/complete/failure telemetry events."""

        if self._run_logger is not None:
            self._run_logger.log_stage_start(stage_name, **context)
        try:
            result = action()
        except NormalizationError as exc:
            if self._run_logger is not None:
                self._run_logger.log_stage_failure(stage_name, type(exc).__name__)
            if isinstance(exc, PipelineStageError):
                raise
            raise PipelineStageError(stage=stage_name, detail=exc.detail, hint=exc.hint) from exc
        if self._run_logger is not None:
            self._run_logger.log_stage_complete(stage_name, **context)
        return result
