"""Scaffold a new skill project."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

from polyskill.adapters import list_adapters
from polyskill.skills import SKILL_NAME_PATTERN
from polyskill.utils import get_logger, write_json

logger = get_logger(__name__)

SKILL_NAME_RE = re.compile(SKILL_NAME_PATTERN)

INITIAL_VERSION = "0.1.0"

INSTRUCTIONS_FILE = "instructions.md"
TOOLS_FILE = "tools.json"

TOOLS_TEMPLATE: dict[str, Any] = {
    "tools": [
        {
            "name": "example_tool",
            "description": "Describe what this tool does",
            "parameters": {
                "type": "object",
                "properties": {
                    "input": {
                        "type": "string",
                        "description": "Input for the tool",
                    },
                },
                "required": ["input"],
            },
        },
    ],
}

INSTRUCTIONS_TEMPLATE = """\
# Instructions

You are a helpful assistant. Describe here how the model should behave
when this skill is active and when it should call the tools in tools.json.
"""


def check_skill_name(name: str) -> str | None:
    """Return an error message if ``name`` is not a scoped skill name."""
    if not SKILL_NAME_RE.fullmatch(name):
        return "Must be scoped: @scope/name (lowercase, hyphens)"
    return None


def build_manifest(name: str, description: str, author_name: str) -> dict[str, Any]:
    """Build the initial ``skill.json`` contents."""
    return {
        "name": name,
        "version": INITIAL_VERSION,
        "description": description,
        "type": "tool",
        "license": "MIT",
        "author": {"name": author_name},
        "skill": {
            "instructions": f"./{INSTRUCTIONS_FILE}",
            "tools": f"./{TOOLS_FILE}",
        },
        "adapters": list_adapters(),
    }


def scaffold_skill(
    target_dir: str | Path,
    name: str,
    description: str,
    author_name: str,
) -> list[Path]:
    """Create a skill project with a manifest, tools and instructions.

    Args:
        target_dir: Directory to create (parents included)
        name: Scoped skill name, e.g. ``@me/my-skill``
        description: One-line description
        author_name: Author shown in the registry

    Returns:
        Paths of the files written

    Raises:
        ValueError: A field is empty or the name is not scoped
    """
    error = check_skill_name(name)
    if error:
        raise ValueError(f"Invalid skill name {name!r}: {error}")
    if not description.strip():
        raise ValueError("Description is required")
    if not author_name.strip():
        raise ValueError("Author name is required")

    target_dir = Path(target_dir)
    target_dir.mkdir(parents=True, exist_ok=True)

    written = [
        write_json(target_dir / "skill.json", build_manifest(name, description, author_name)),
        write_json(target_dir / TOOLS_FILE, TOOLS_TEMPLATE),
    ]
    instructions_path = target_dir / INSTRUCTIONS_FILE
    instructions_path.write_text(INSTRUCTIONS_TEMPLATE, encoding="utf-8")
    written.append(instructions_path)

    logger.info(f"Scaffolded skill {name} in {target_dir}")
    return written
