"""Unit tests for YAML/environment/preset configuration loader behavior."""

from __future__ import annotations

from pathlib import Path

import pytest

from normalign.config import ConfigLoader, NormalizerSpec, PipelineConfig
from normalign.errors import InvalidConfigurationError


def test_config_loader_from_yaml_loads_normalizers_and_extra(tmp_path: Path) -> None:
    """YAML loader should keep normalizer order, options, and trimmed extras."""

    config_path = tmp_path / "normalign.yml"
    config_path.write_text(
        """
normalizers:
  - type: " NFKC "
  - type: replace_regex
    pattern: '\\s+'
    content: " "
  - type: bert
    lowercase: false
    strip_accents: auto
extra:
  profile: " nightly "
  empty: "   "
""".strip(),
        encoding="utf-8",
    )

    config = ConfigLoader.from_yaml(config_path)

    assert config.normalizer_types == ("nfkc", "replace_regex", "bert")
    assert config.normalizers[1].options == {"pattern": "\\s+", "content": " "}
    assert config.normalizers[2].as_mapping() == {
        "type": "bert",
        "lowercase": False,
        "strip_accents": "auto",
    }
    assert config.extra == {"profile": "nightly"}


def test_config_loader_from_yaml_accepts_preset(tmp_path: Path) -> None:
    """A YAML file may name a preset instead of listing normalizers."""

    config_path = tmp_path / "preset.yml"
    config_path.write_text("preset: nfkc-lower\n", encoding="utf-8")

    config = ConfigLoader.from_yaml(config_path)

    assert config.normalizer_types == ("nfkc", "lowercase")


def test_config_loader_from_yaml_rejects_malformed_yaml(tmp_path: Path) -> None:
    """YAML syntax errors should surface as configuration errors."""

    config_path = tmp_path / "broken.yml"
    config_path.write_text("normalizers: [\n", encoding="utf-8")

    with pytest.raises(InvalidConfigurationError, match="is not valid YAML"):
        ConfigLoader.from_yaml(config_path)


def test_config_loader_from_yaml_rejects_non_mapping_root(tmp_path: Path) -> None:
    """The YAML document root must be a mapping."""

    config_path = tmp_path / "list.yml"
    config_path.write_text("- type: nfc\n", encoding="utf-8")

    with pytest.raises(InvalidConfigurationError, match="top-level mapping"):
        ConfigLoader.from_yaml(config_path)


@pytest.mark.parametrize(
    ("payload", "message"),
    [
        ({"normalizers": [{"type": "nfc"}], "stages": []}, "unsupported key\\(s\\): stages"),
        ({}, "missing required key `normalizers`"),
        ({"normalizers": []}, "At least one normalizer"),
        ({"normalizers": "nfc"}, "`normalizers` must be a list"),
        ({"normalizers": ["nfc"]}, "entries must be mappings"),
        ({"normalizers": [{"lowercase": True}]}, "missing `type`"),
        ({"preset": "bert", "normalizers": [{"type": "nfc"}]}, "not both"),
        ({"preset": "roberta"}, "Unknown preset `roberta`"),
        ({"normalizers": [{"type": "nfc"}], "extra": ["x"]}, "`extra` must be a mapping"),
    ],
)
def test_config_loader_from_mapping_rejects_invalid_payloads(
    payload: dict[str, object], message: str
) -> None:
    """Mapping loader should fail fast with actionable messages."""

    with pytest.raises(InvalidConfigurationError, match=message):
        ConfigLoader.from_mapping(payload)


def test_config_loader_presets_are_listed() -> None:
    """Preset names should be discoverable for the CLI."""

    assert ConfigLoader.presets() == ("bert", "bert-cased", "nfkc-lower")
    assert ConfigLoader.from_preset(" BERT-Cased ").normalizers == (
        NormalizerSpec(type="bert", options={"lowercase": False}),
    )


def test_config_loader_from_env_defaults_to_bert_preset() -> None:
    """Without environment overrides the default preset should apply."""

    config = ConfigLoader.from_env(env={})

    assert config.normalizer_types == ("bert",)


def test_config_loader_from_env_reads_normalizer_list() -> None:
    """Comma-separated types should build an ordered config."""

    config = ConfigLoader.from_env(env={"NORMALIGN_NORMALIZERS": " nfkc, ,lowercase "})

    assert config.normalizer_types == ("nfkc", "lowercase")


def test_config_loader_from_env_prefers_config_file(tmp_path: Path) -> None:
    """A config path should win over the other environment variables."""

    config_path = tmp_path / "env.yml"
    config_path.write_text("normalizers:\n  - type: nfd\n", encoding="utf-8")

    config = ConfigLoader.from_env(
        env={
            "NORMALIGN_CONFIG": str(config_path),
            "NORMALIGN_NORMALIZERS": "nfc",
            "NORMALIGN_PRESET": "bert",
        }
    )

    assert config.normalizer_types == ("nfd",)


def test_config_loader_from_env_reads_process_environment(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Without an explicit mapping the process environment should be used."""

    monkeypatch.setenv("NORMALIGN_PRESET", "nfkc-lower")

    assert ConfigLoader.from_env().normalizer_types == ("nfkc", "lowercase")


def test_pipeline_config_validate_rejects_empty_normalizers() -> None:
    """Direct construction should still be validated before use."""

    with pytest.raises(InvalidConfigurationError):
        PipelineConfig(normalizers=()).validate()
