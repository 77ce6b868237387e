"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics,
normalization results, alignment tables, and offset mappings.
"""

from __future__ import annotations

import json
from typing import NoReturn

import typer

from .errors import NormalizationError, PipelineStageError
from .models.datatypes import NormalizationResult, OffsetRange


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, PipelineStageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    elif isinstance(exc, NormalizationError):
        typer.secho(f"{command_name} failed: {exc.detail}", fg=typer.colors.RED, err=True)
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_result(result: NormalizationResult, *, show_alignments: bool) -> None:
    """Print normalized text and optionally one alignment row per character."""

    typer.echo(result.normalized)
    if not show_alignments:
        return
    for index, (char, (start, end)) in enumerate(zip(result.normalized, result.alignments)):
        source = result.original[start:end]
        typer.echo(f"{index}\t{char!r}\t[{start}, {end})\t{source!r}")


def echo_result_json(result: NormalizationResult) -> None:
    """Print the result as one JSON document."""

    typer.echo(json.dumps(result.to_dict(), ensure_ascii=False, sort_keys=True))


def echo_offset_mapping(
    result: NormalizationResult, source: OffsetRange, mapped: OffsetRange, *, reverse: bool
) -> None:
    """Print a mapped range together with the text it covers on both sides."""

    if reverse:
        source_text, mapped_text = result.original, result.normalized
        source_label, mapped_label = "original", "normalized"
    else:
        source_text, mapped_text = result.normalized, result.original
        source_label, mapped_label = "normalized", "original"
    typer.echo(f"{source_label} [{source.start}, {source.end}) {source.slice(source_text)!r}")
    typer.echo(f"{mapped_label} [{mapped.start}, {mapped.end}) {mapped.slice(mapped_text)!r}")


def echo_supported_types(types: tuple[str, ...], presets: tuple[str, ...]) -> None:
    """Print supported normalizer types and preset names."""

    typer.echo("Normalizers:")
    for type_name in types:
        typer.echo(f"  {type_name}")
    typer.echo("Presets:")
    for preset in presets:
        typer.echo(f"  {preset}")
