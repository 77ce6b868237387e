"""Command-line interface for normalign.

Responsibilities:
- Expose user-facing commands for normalization and offset mapping.
- Convert CLI arguments into `PipelineConfig` and run the pipeline.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import (
    echo_offset_mapping,
    echo_result,
    echo_result_json,
    echo_supported_types,
    exit_with_command_error,
)
from .config import ConfigLoader, PipelineConfig
from .errors import NormalizationError, PipelineStageError
from .models.datatypes import OffsetRange
from .normalizers.builder import NormalizerFactory
from .pipeline import NormalizationPipeline
from .telemetry.logger import RunLogger

app = typer.Typer(
    name="normalign",
    no_args_is_help=True,
    help="Alignment-preserving text normalization CLI.",
)

ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="Path to YAML pipeline config."),
]
PresetOption = Annotated[
    str | None,
    typer.Option("--preset", help="Named preset (`bert`, `bert-cased`, `nfkc-lower`)."),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Emit stage logs on stderr."),
]


def _load_config(config_file: Path | None, preset: str | None) -> PipelineConfig:
    """Resolve the pipeline config and map failures to stage errors.

    Precedence: `--config`, then `--preset`, then environment variables.
    """

    if config_file is not None and preset is not None:
        raise PipelineStageError(
            stage="config",
            detail="`--config` and `--preset` cannot be combined.",
            hint="Pass only one of them.",
        )
    try:
        if config_file is not None:
            return ConfigLoader.from_yaml(config_file)
        if preset is not None:
            return ConfigLoader.from_preset(preset)
        return ConfigLoader.from_env()
    except FileNotFoundError as exc:
        raise PipelineStageError(
            stage="config",
            detail=f"Config file not found: `{exc.filename}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except NormalizationError as exc:
        raise PipelineStageError(
            stage="config",
            detail=exc.detail,
            hint=exc.hint or "Fix config schema/values and rerun.",
        ) from exc


def _read_input(text: str | None, input_file: Path | None) -> str | bytes:
    """Return inline text or raw file bytes."""

    if text is not None and input_file is not None:
        raise PipelineStageError(
            stage="input",
            detail="Pass either inline text or `--file`, not both.",
        )
    if input_file is not None:
        try:
            return input_file.read_bytes()
        except OSError as exc:
            raise PipelineStageError(
                stage="input",
                detail=f"Failed to read input file `{input_file}`: {exc.strerror or exc}",
                hint="Verify the file exists and is readable.",
            ) from exc
    if text is None:
        raise PipelineStageError(
            stage="input",
            detail="Input text is required.",
            hint="Pass `<text>` or `--file <path>`.",
        )
    return text


@app.command("normalize")
def normalize_command(
    text: Annotated[
        str | None,
        typer.Argument(help="Text to normalize. Required unless `--file` is given."),
    ] = None,
    input_file: Annotated[
        Path | None,
        typer.Option("--file", help="Read UTF-8 input from a file."),
    ] = None,
    config_file: ConfigOption = None,
    preset: PresetOption = None,
    show_alignments: Annotated[
        bool,
        typer.Option("--show-alignments", help="Print one alignment row per character."),
    ] = False,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the result as JSON."),
    ] = False,
    verbose: VerboseOption = False,
) -> None:
    """Normalize text and print the result."""

    try:
        config = _load_config(config_file, preset)
        payload = _read_input(text, input_file)
        pipeline = NormalizationPipeline(run_logger=RunLogger() if verbose else None)
        result = pipeline.run(config, payload)
    except Exception as exc:
        exit_with_command_error("normalize", exc)

    if as_json:
        echo_result_json(result)
    else:
        echo_result(result, show_alignments=show_alignments)


@app.command("map-offsets")
def map_offsets_command(
    text: Annotated[str, typer.Argument(help="Text to normalize.")],
    start: Annotated[int, typer.Argument(help="Range start offset.")],
    end: Annotated[int, typer.Argument(help="Range end offset (exclusive).")],
    config_file: ConfigOption = None,
    preset: PresetOption = None,
    reverse: Annotated[
        bool,
        typer.Option(
            "--reverse",
            help="Map an original range to normalized offsets instead.",
        ),
    ] = False,
    verbose: VerboseOption = False,
) -> None:
    """Map a normalized range to the original text (or back with `--reverse`)."""

    try:
        config = _load_config(config_file, preset)
        pipeline = NormalizationPipeline(run_logger=RunLogger() if verbose else None)
        result, mapped = pipeline.map_offsets(config, text, start, end, reverse=reverse)
    except Exception as exc:
        exit_with_command_error("map-offsets", exc)

    echo_offset_mapping(result, OffsetRange(start, end), mapped, reverse=reverse)


@app.command("list-normalizers")
def list_normalizers_command() -> None:
    """List supported normalizer types and presets."""

    echo_supported_types(NormalizerFactory.supported_types(), ConfigLoader.presets())


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
