"""Skill loader: read a skill directory into a validated SkillDefinition."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from polyskill.skills.models import CanonicalTool, SkillDefinition, SkillManifest, ToolsFile
from polyskill.skills.validator import validate_manifest, validate_tools
from polyskill.utils import get_logger

logger = get_logger(__name__)

MANIFEST_FILE = "skill.json"


class SkillLoadError(Exception):
    """A skill directory could not be loaded."""


def _read_text(path: Path) -> str:
    # Bytes first: text mode would normalise line endings.
    try:
        data = path.read_bytes()
    except OSError as e:
        raise SkillLoadError(f"Cannot read {path}: {e.strerror or e}") from e
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise SkillLoadError(f"Cannot decode {path} as UTF-8: {e}") from e


def _read_json(path: Path) -> Any:
    raw = _read_text(path)
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise SkillLoadError(f"Invalid JSON in {path}: {e}") from e


def _invalid(header: str, errors: list[str]) -> SkillLoadError:
    return SkillLoadError("\n".join([header, *errors]))


def _skill_file(skill_dir: Path, relative: str) -> Path:
    """Resolve a manifest file reference, which must stay inside the skill."""
    path = (skill_dir / relative).resolve()
    if not path.is_relative_to(skill_dir.resolve()):
        raise SkillLoadError(f"File reference escapes the skill directory: {relative}")
    return path


def load_skill(skill_dir: str | Path) -> SkillDefinition:
    """Load a skill from a directory on disk.

    The manifest is validated before any file it references is read, so a
    broken ``skill.json`` is reported on its own.

    Args:
        skill_dir: Directory containing ``skill.json``

    Returns:
        Fully resolved SkillDefinition

    Raises:
        SkillLoadError: A file is missing or unreadable, is not valid JSON,
            or fails schema validation
    """
    skill_dir = Path(skill_dir)
    manifest_path = skill_dir / MANIFEST_FILE
    logger.debug("Loading skill manifest from %s", manifest_path)

    manifest_data = _read_json(manifest_path)
    manifest_result = validate_manifest(manifest_data)
    if not manifest_result.valid:
        raise _invalid("Invalid skill.json:", manifest_result.errors)

    try:
        manifest = SkillManifest.model_validate(manifest_data)
    except ValidationError as e:
        raise SkillLoadError(f"Invalid skill.json:\n{e}") from e

    tools: tuple[CanonicalTool, ...] = ()
    if manifest.skill.tools:
        tools_path = _skill_file(skill_dir, manifest.skill.tools)
        logger.debug("Loading tool definitions from %s", tools_path)
        tools_data = _read_json(tools_path)
        tools_result = validate_tools(tools_data)
        if not tools_result.valid:
            raise _invalid("Invalid tools.json:", tools_result.errors)
        try:
            tools = ToolsFile.model_validate(tools_data).tools
        except ValidationError as e:
            raise SkillLoadError(f"Invalid tools.json:\n{e}") from e

    instructions: str | None = None
    if manifest.skill.instructions:
        instructions_path = _skill_file(skill_dir, manifest.skill.instructions)
        logger.debug("Loading instructions from %s", instructions_path)
        instructions = _read_text(instructions_path)

    logger.info(
        f"Loaded skill {manifest.name}@{manifest.version}",
        extra={"tools": [t.name for t in tools], "adapters": list(manifest.adapters)},
    )
    return SkillDefinition(manifest=manifest, tools=tools, instructions=instructions)
