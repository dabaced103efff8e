"""Skill packages: canonical models, schema validation and loading."""

from polyskill.skills.loader import SkillLoadError, load_skill
from polyskill.skills.models import (
    CanonicalTool,
    JsonSchemaProperty,
    SkillAuthor,
    SkillDefinition,
    SkillFiles,
    SkillManifest,
    SkillType,
    ToolParameterSchema,
    ToolsFile,
    TranspileResult,
)
from polyskill.skills.validator import (
    SKILL_NAME_PATTERN,
    ValidationResult,
    validate_manifest,
    validate_tools,
)

__all__ = [
    "CanonicalTool",
    "JsonSchemaProperty",
    "SkillAuthor",
    "SkillDefinition",
    "SkillFiles",
    "SkillManifest",
    "SkillType",
    "ToolParameterSchema",
    "ToolsFile",
    "TranspileResult",
    "SKILL_NAME_PATTERN",
    "ValidationResult",
    "validate_manifest",
    "validate_tools",
    "SkillLoadError",
    "load_skill",
]
