"""Configuration management for PolySkill.

Values are populated in priority order:
  1. Environment variables
  2. ``~/.polyskill/config.yaml`` (or the file passed with ``--config``)
  3. Field defaults

Env var mapping:
  registry.url    <- POLYSKILL_REGISTRY, SKILLSTORE_REGISTRY
  registry.token  <- POLYSKILL_TOKEN
"""

import os
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings

DEFAULT_REGISTRY_URL = "https://polyskill.ai"
DEFAULT_CONFIG_PATH = Path.home() / ".polyskill" / "config.yaml"

# First variable set wins.
ENV_OVERRIDES: dict[str, tuple[str, ...]] = {
    "url": ("POLYSKILL_REGISTRY", "SKILLSTORE_REGISTRY"),
    "token": ("POLYSKILL_TOKEN",),
}


def _substitute_env_vars(value: Any) -> Any:
    """Recursively substitute environment variables in config values.

    Supports ${VAR_NAME} and ${VAR_NAME:-default} syntax.
    """
    if isinstance(value, str):
        pattern = r'\$\{([^}:]+)(?::-([^}]*))?\}'

        def replacer(match: re.Match) -> str:
            var_name = match.group(1)
            default = match.group(2) if match.group(2) is not None else ""
            return os.environ.get(var_name, default)

        return re.sub(pattern, replacer, value)
    elif isinstance(value, dict):
        return {k: _substitute_env_vars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [_substitute_env_vars(v) for v in value]
    return value


def _apply_env_overrides(registry: dict[str, Any]) -> dict[str, Any]:
    """Overlay registry settings taken from the environment."""
    registry = dict(registry)
    for key, env_vars in ENV_OVERRIDES.items():
        for env_var in env_vars:
            value = os.environ.get(env_var)
            if value:
                registry[key] = value
                break
    return registry


class RegistryConfig(BaseModel):
    """Skill registry service configuration."""
    url: str = DEFAULT_REGISTRY_URL
    token: str = ""
    timeout_seconds: float = 30.0
    download_timeout_seconds: float = 5.0

    @property
    def base_url(self) -> str:
        return self.url.rstrip("/")


class LoggingConfig(BaseModel):
    """Logging configuration."""
    level: str = "WARNING"
    format: str = "text"


class Config(BaseSettings):
    """Main PolySkill configuration."""
    model_config = {"extra": "ignore"}

    registry: RegistryConfig = Field(default_factory=RegistryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_config(config_path: str | Path | None = None) -> Config:
    """Load configuration from YAML file with environment variable substitution.

    Args:
        config_path: Path to the YAML configuration file. Defaults to
            ``~/.polyskill/config.yaml``.

    Returns:
        Loaded and validated Config object.

    Raises:
        ValueError: The file is not a mapping or holds invalid values
        yaml.YAMLError: The file is not valid YAML
    """
    config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH

    raw_config = None
    if config_path.exists():
        with open(config_path, encoding="utf-8") as f:
            raw_config = yaml.safe_load(f)

    if raw_config is not None and not isinstance(raw_config, dict):
        raise ValueError(f"{config_path} must contain a YAML mapping")

    config_data = _substitute_env_vars(raw_config or {})
    config_data["registry"] = _apply_env_overrides(config_data.get("registry") or {})

    return Config(**config_data)


def generate_default_config(path: str | Path = DEFAULT_CONFIG_PATH) -> Path:
    """Write a default configuration file.

    Args:
        path: Path to write the configuration file.

    Returns:
        The path that was written.
    """
    default_config = f"""\
# PolySkill Configuration
# Environment variables can be substituted with ${{VAR_NAME}} syntax

registry:
  url: "${{POLYSKILL_REGISTRY:-{DEFAULT_REGISTRY_URL}}}"
  token: "${{POLYSKILL_TOKEN:-}}"
  timeout_seconds: 30
  download_timeout_seconds: 5

logging:
  level: "WARNING"
  format: "text"
"""

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(default_config, encoding="utf-8")
    return path
