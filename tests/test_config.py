"""Tests for configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from polyskill.config import (
    DEFAULT_REGISTRY_URL,
    Config,
    generate_default_config,
    load_config,
)

ENV_VARS = ["POLYSKILL_REGISTRY", "SKILLSTORE_REGISTRY", "POLYSKILL_TOKEN"]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def write_config(path: Path, text: str) -> Path:
    path.write_text(text)
    return path


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path: Path):
        config = load_config(tmp_path / "missing.yaml")

        assert isinstance(config, Config)
        assert config.registry.url == DEFAULT_REGISTRY_URL
        assert config.registry.token == ""
        assert config.registry.timeout_seconds == 30.0
        assert config.registry.download_timeout_seconds == 5.0
        assert config.logging.level == "WARNING"
        assert config.logging.format == "text"

    def test_empty_file_gives_defaults(self, tmp_path: Path):
        config = load_config(write_config(tmp_path / "c.yaml", ""))
        assert config.registry.url == DEFAULT_REGISTRY_URL

    def test_reads_yaml(self, tmp_path: Path):
        path = write_config(tmp_path / "c.yaml", (
            "registry:\n"
            "  url: https://registry.example/\n"
            "  token: abc\n"
            "  timeout_seconds: 12\n"
            "logging:\n"
            "  level: DEBUG\n"
            "  format: json\n"
        ))
        config = load_config(path)

        assert config.registry.url == "https://registry.example/"
        assert config.registry.base_url == "https://registry.example"
        assert config.registry.token == "abc"
        assert config.registry.timeout_seconds == 12.0
        assert config.logging.level == "DEBUG"
        assert config.logging.format == "json"

    def test_substitutes_env_vars(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("MY_REGISTRY_HOST", "mirror.example")
        path = write_config(tmp_path / "c.yaml", (
            "registry:\n"
            '  url: "https://${MY_REGISTRY_HOST}"\n'
            '  token: "${UNSET_TOKEN_VAR:-fallback}"\n'
        ))
        config = load_config(path)

        assert config.registry.url == "https://mirror.example"
        assert config.registry.token == "fallback"

    def test_env_overrides_file(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("POLYSKILL_REGISTRY", "https://env.example")
        monkeypatch.setenv("POLYSKILL_TOKEN", "env-token")
        path = write_config(tmp_path / "c.yaml", (
            "registry:\n"
            "  url: https://file.example\n"
            "  token: file-token\n"
        ))
        config = load_config(path)

        assert config.registry.url == "https://env.example"
        assert config.registry.token == "env-token"

    def test_skillstore_registry_fallback(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("SKILLSTORE_REGISTRY", "https://legacy.example")
        config = load_config(tmp_path / "missing.yaml")
        assert config.registry.url == "https://legacy.example"

    def test_polyskill_registry_preferred_over_fallback(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("SKILLSTORE_REGISTRY", "https://legacy.example")
        monkeypatch.setenv("POLYSKILL_REGISTRY", "https://new.example")
        config = load_config(tmp_path / "missing.yaml")
        assert config.registry.url == "https://new.example"

    def test_ignores_unknown_sections(self, tmp_path: Path):
        path = write_config(tmp_path / "c.yaml", "agent:\n  name: x\n")
        assert load_config(path).registry.url == DEFAULT_REGISTRY_URL


class TestGenerateDefaultConfig:
    def test_writes_loadable_config(self, tmp_path: Path):
        path = generate_default_config(tmp_path / "nested" / "config.yaml")

        assert path.is_file()
        config = load_config(path)
        assert config.registry.url == DEFAULT_REGISTRY_URL
        assert config.registry.token == ""
        assert config.logging.level == "WARNING"

    def test_generated_config_follows_env(self, tmp_path: Path, monkeypatch):
        path = generate_default_config(tmp_path / "config.yaml")
        monkeypatch.setenv("POLYSKILL_TOKEN", "from-env")
        assert load_config(path).registry.token == "from-env"


def test_rejects_non_mapping_file(tmp_path: Path):
    path = write_config(tmp_path / "c.yaml", "- a\n- b\n")
    with pytest.raises(ValueError, match="must contain a YAML mapping"):
        load_config(path)


def test_rejects_invalid_values(tmp_path: Path):
    path = write_config(tmp_path / "c.yaml", "registry:\n  timeout_seconds: soon\n")
    with pytest.raises(ValidationError):
        load_config(path)
