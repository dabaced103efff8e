"""PolySkill - package manager and adapter transpiler for AI agent skills."""

__version__ = "0.1.10"

from polyskill.adapters import BaseAdapter, get_adapter, list_adapters
from polyskill.skills import (
    CanonicalTool,
    SkillDefinition,
    SkillLoadError,
    SkillManifest,
    TranspileResult,
    ValidationResult,
    load_skill,
    validate_manifest,
    validate_tools,
)

__all__ = [
    "__version__",
    "BaseAdapter",
    "get_adapter",
    "list_adapters",
    "CanonicalTool",
    "SkillDefinition",
    "SkillLoadError",
    "SkillManifest",
    "TranspileResult",
    "ValidationResult",
    "load_skill",
    "validate_manifest",
    "validate_tools",
]
