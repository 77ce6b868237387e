"""Configuration model and loaders for normalization pipelines.

Responsibilities:
- Define pipeline configuration as typed, immutable dataclasses.
- Provide loader entry points for YAML files, plain mappings, environment
  variables, and named presets.

Key types:
- `NormalizerSpec`: one normalizer type plus its options.
- `PipelineConfig`: ordered normalizer specs for one pipeline.
- `ConfigLoader`: static construction helpers for `PipelineConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .errors import InvalidConfigurationError
from .parsing import normalize_optional_string


_PRESETS: Mapping[str, tuple[Mapping[str, Any], ...]] = {
    "bert": ({"type": "bert"},),
    "bert-cased": ({"type": "bert", "lowercase": False},),
    "nfkc-lower": ({"type": "nfkc"}, {"type": "lowercase"}),
}
DEFAULT_PRESET = "bert"


@dataclass(frozen=True, slots=True)
class NormalizerSpec:
    """One configured normalizer.

    Attributes:
        type: Normalizer type name understood by `NormalizerFactory`.
        options: Type-specific options.
    """

    type: str
    options: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, payload: object, source_label: str) -> NormalizerSpec:
        """Build a spec from a `{"type": ..., **options}` mapping."""

        if not isinstance(payload, Mapping):
            raise InvalidConfigurationError(
                f"{source_label} normalizer entries must be mappings with a `type` key."
            )
        type_name = normalize_optional_string(payload.get("type"))
        if type_name is None:
            raise InvalidConfigurationError(f"{source_label} normalizer entry is missing `type`.")
        options = {key: value for key, value in payload.items() if key != "type"}
        return cls(type=type_name.lower(), options=options)

    def as_mapping(self) -> dict[str, Any]:
        """Return the spec in factory mapping form."""

        return {"type": self.type, **self.options}


@dataclass(frozen=True, slots=True)
class PipelineConfig:
    """Configuration for one normalization pipeline.

    Attributes:
        normalizers: Ordered normalizer specs applied to each input.
        extra: Additional string metadata copied into results.
    """

    normalizers: tuple[NormalizerSpec, ...]
    extra: Mapping[str, str] = field(default_factory=dict)

    def validate(self) -> None:
        """Validate configuration values before building normalizers."""

        if not self.normalizers:
            raise InvalidConfigurationError("At least one normalizer must be configured.")

    @property
    def normalizer_types(self) -> tuple[str, ...]:
        """Configured type names in application order."""

        return tuple(spec.type for spec in self.normalizers)


class ConfigLoader:
    """Factory methods for creating `PipelineConfig` from external sources."""

    _SUPPORTED_KEYS = frozenset({"normalizers", "preset", "extra"})

    @staticmethod
    def presets() -> tuple[str, ...]:
        """Return preset names in declaration order."""

        return tuple(_PRESETS)

    @staticmethod
    def from_preset(name: str) -> PipelineConfig:
        """Create a config from a named preset."""

        preset = _PRESETS.get(name.strip().lower())
        if preset is None:
            raise InvalidConfigurationError(
                f"Unknown preset `{name}`.",
                hint="Available presets: " + ", ".join(_PRESETS) + ".",
            )
        config = PipelineConfig(
            normalizers=tuple(
                NormalizerSpec.from_mapping(entry, f"Preset `{name}`") for entry in preset
            )
        )
        config.validate()
        return config

    @staticmethod
    def from_yaml(path: Path) -> PipelineConfig:
        """Create a validated config from a YAML file."""

        raw_text = path.read_text(encoding="utf-8")
        try:
            payload = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise InvalidConfigurationError(f"YAML config `{path}` is not valid YAML: {exc}") from exc
        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise InvalidConfigurationError(
                f"YAML config `{path}` must contain a top-level mapping/object."
            )
        return ConfigLoader.from_mapping(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def from_mapping(payload: Mapping[str, Any], source_label: str = "Config") -> PipelineConfig:
        """Create a validated config from a mapping payload."""

        unknown = sorted(str(key) for key in payload if key not in ConfigLoader._SUPPORTED_KEYS)
        if unknown:
            raise InvalidConfigurationError(
                f"{source_label} contains unsupported key(s): {', '.join(unknown)}."
            )

        preset = normalize_optional_string(payload.get("preset"))
        entries = payload.get("normalizers")
        if preset is not None and entries is not None:
            raise InvalidConfigurationError(
                f"{source_label} must set either `preset` or `normalizers`, not both."
            )

        if preset is not None:
            normalizers = ConfigLoader.from_preset(preset).normalizers
        elif entries is None:
            raise InvalidConfigurationError(
                f"{source_label} is missing required key `normalizers` (or `preset`)."
            )
        elif not isinstance(entries, list):
            raise InvalidConfigurationError(f"{source_label} `normalizers` must be a list.")
        else:
            normalizers = tuple(NormalizerSpec.from_mapping(entry, source_label) for entry in entries)

        config = PipelineConfig(
            normalizers=normalizers,
            extra=ConfigLoader._optional_string_map(payload, "extra", source_label),
        )
        config.validate()
        return config

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> PipelineConfig:
        """Create a validated config from environment variables.

        Lookup order: `NORMALIGN_CONFIG` (YAML path), `NORMALIGN_NORMALIZERS`
        (comma-separated option-free types), `NORMALIGN_PRESET`, then the
        default preset.
        """

        env_map: Mapping[str, str] = os.environ if env is None else env

        config_path = normalize_optional_string(env_map.get("NORMALIGN_CONFIG"))
        if config_path is not None:
            return ConfigLoader.from_yaml(Path(config_path))

        types = normalize_optional_string(env_map.get("NORMALIGN_NORMALIZERS"))
        if types is not None:
            entries = [{"type": token.strip()} for token in types.split(",") if token.strip()]
            return ConfigLoader.from_mapping(
                {"normalizers": entries}, source_label="Environment `NORMALIGN_NORMALIZERS`"
            )

        preset = normalize_optional_string(env_map.get("NORMALIGN_PRESET")) or DEFAULT_PRESET
        return ConfigLoader.from_preset(preset)

    @staticmethod
    def _optional_string_map(
        payload: Mapping[str, Any], key: str, source_label: str
    ) -> dict[str, str]:
        """Parse an optional mapping of non-empty string values."""

        value = payload.get(key)
        if value is None:
            return {}
        if not isinstance(value, Mapping):
            raise InvalidConfigurationError(f"{source_label} `{key}` must be a mapping.")
        parsed: dict[str, str] = {}
        for item_key, item_value in value.items():
            normalized_value = normalize_optional_string(item_value)
            if normalized_value is None:
                continue
            parsed[str(item_key)] = normalized_value
        return parsed
