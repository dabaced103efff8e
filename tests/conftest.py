"""Shared fixtures for PolySkill tests."""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any

import pytest

WEATHER_MANIFEST: dict[str, Any] = {
    "name": "@test/weather-skill",
    "version": "1.0.0",
    "description": "Get weather data",
    "type": "tool",
    "license": "MIT",
    "author": {"name": "Test Author"},
    "skill": {
        "instructions": "./instructions.md",
        "tools": "./tools.json",
    },
    "adapters": ["openai", "anthropic"],
}

WEATHER_TOOLS: dict[str, Any] = {
    "tools": [
        {
            "name": "get_weather",
            "description": "Get current weather for a location",
            "parameters": {
                "type": "object",
                "properties": {
                    "location": {"type": "string", "description": "City name"},
                    "units": {
                        "type": "string",
                        "enum": ["celsius", "fahrenheit"],
                    },
                },
                "required": ["location"],
            },
        },
        {
            "name": "get_forecast",
            "description": "Get a multi-day forecast",
            "parameters": {
                "type": "object",
                "properties": {
                    "location": {"type": "string"},
                    "days": {"type": "integer", "minimum": 1, "maximum": 14},
                    "fields": {
                        "type": "array",
                        "items": {"type": "string", "enum": ["temp", "rain", "wind"]},
                    },
                },
                "required": ["location"],
            },
            "returns": {
                "type": "object",
                "properties": {"days": {"type": "array", "items": {"type": "object"}}},
            },
        },
    ],
}

WEATHER_INSTRUCTIONS = "You are a weather assistant.\nAlways state the units.\n"


@pytest.fixture
def valid_manifest() -> dict[str, Any]:
    return copy.deepcopy(WEATHER_MANIFEST)


@pytest.fixture
def valid_tools() -> dict[str, Any]:
    return copy.deepcopy(WEATHER_TOOLS)


def write_skill(
    skill_dir: Path,
    manifest: Any,
    tools: Any = None,
    instructions: str | None = None,
) -> Path:
    """Write a skill package; ``manifest``/``tools`` may be dicts or raw strings."""
    skill_dir.mkdir(parents=True, exist_ok=True)

    def dump(value: Any) -> str:
        return value if isinstance(value, str) else json.dumps(value, indent=2)

    (skill_dir / "skill.json").write_text(dump(manifest))
    if tools is not None:
        (skill_dir / "tools.json").write_text(dump(tools))
    if instructions is not None:
        (skill_dir / "instructions.md").write_text(instructions)
    return skill_dir


@pytest.fixture
def weather_skill_dir(tmp_path: Path) -> Path:
    """A valid two-tool skill package on disk."""
    return write_skill(
        tmp_path / "weather-skill",
        WEATHER_MANIFEST,
        WEATHER_TOOLS,
        WEATHER_INSTRUCTIONS,
    )


@pytest.fixture
def make_skill(tmp_path: Path):
    """Factory writing a skill package named ``name`` under tmp_path."""

    def _make(name: str, manifest: Any, tools: Any = None, instructions: str | None = None) -> Path:
        return write_skill(tmp_path / name, manifest, tools, instructions)

    return _make
