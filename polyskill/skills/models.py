"""Data models for PolySkill packages.

These are the canonical shapes every other component works on: the
``skill.json`` manifest, the platform-neutral tool definitions from
``tools.json``, the loaded :class:`SkillDefinition` aggregate, and the
per-platform :class:`TranspileResult`.
"""

from __future__ import annotations

import copy
import json
from enum import Enum
from typing import Any, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PrivateAttr,
    ValidatorFunctionWrapHandler,
    model_validator,
)


class SkillType(str, Enum):
    """Kind of skill package."""
    PROMPT = "prompt"
    TOOL = "tool"
    WORKFLOW = "workflow"
    COMPOSITE = "composite"


class SkillAuthor(BaseModel):
    """Author metadata."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    email: str | None = None
    url: str | None = None


class SkillFiles(BaseModel):
    """File references inside the manifest, relative to the skill directory."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    instructions: str | None = None
    tools: str | None = None
    examples: str | None = None


class SkillManifest(BaseModel):
    """The ``skill.json`` manifest, the root descriptor of every skill package."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    version: str
    description: str
    type: SkillType
    license: str
    author: SkillAuthor
    main: str | None = None
    skill: SkillFiles
    adapters: tuple[str, ...]
    dependencies: dict[str, str] | None = None
    keywords: tuple[str, ...] | None = None
    repository: str | None = None
    evals: str | None = None
    category: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the manifest as authored (only keys that were present)."""
        return self.model_dump(mode="json", exclude_unset=True)


class JsonSchemaProperty(BaseModel):
    """A JSON Schema node describing one parameter or return value.

    Extra JSON Schema keywords (``default``, ``minimum``...) are kept so the
    node can be handed to a provider unchanged.
    """
    model_config = ConfigDict(extra="allow", frozen=True)

    type: str
    description: str | None = None
    enum: list[str] | None = None
    items: JsonSchemaProperty | None = None
    properties: dict[str, JsonSchemaProperty] | None = None
    required: list[str] | None = None


class ToolParameterSchema(BaseModel):
    """Parameter schema of a tool: a JSON Schema ``object`` node."""
    model_config = ConfigDict(extra="allow", frozen=True)

    type: Literal["object"] = "object"
    properties: dict[str, JsonSchemaProperty]
    required: list[str] | None = None


class CanonicalTool(BaseModel):
    """Platform-neutral definition of a single callable tool.

    The decoded ``tools.json`` entry is kept alongside the parsed fields so
    schemas are handed to providers with their authored key order.
    """
    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    description: str
    parameters: ToolParameterSchema
    returns: JsonSchemaProperty | None = None

    _source: dict[str, Any] | None = PrivateAttr(default=None)

    @model_validator(mode="wrap")
    @classmethod
    def _keep_source(cls, data: Any, handler: ValidatorFunctionWrapHandler) -> CanonicalTool:
        tool = handler(data)
        # Only plain decoded JSON is kept; keyword construction with models is not.
        if (
            isinstance(data, dict)
            and isinstance(data.get("parameters"), dict)
            and isinstance(data.get("returns"), (dict, type(None)))
        ):
            tool._source = copy.deepcopy(data)
        return tool

    def parameters_schema(self) -> dict[str, Any]:
        """Get the parameter schema as a fresh JSON Schema dict.

        Returns:
            The schema exactly as it appeared in ``tools.json``
        """
        if self._source is not None:
            return copy.deepcopy(self._source["parameters"])
        return self.parameters.model_dump(exclude_unset=True)

    def to_dict(self) -> dict[str, Any]:
        """Return the tool as authored in ``tools.json``."""
        if self._source is not None:
            return copy.deepcopy(self._source)
        return self.model_dump(exclude_unset=True)


class ToolsFile(BaseModel):
    """The ``tools.json`` file structure."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    tools: tuple[CanonicalTool, ...]


class SkillDefinition(BaseModel):
    """A fully loaded and validated skill, ready for transpilation."""
    model_config = ConfigDict(frozen=True)

    manifest: SkillManifest
    tools: tuple[CanonicalTool, ...] = ()
    instructions: str | None = None

    @property
    def name(self) -> str:
        """Scoped skill name from the manifest."""
        return self.manifest.name

    @property
    def version(self) -> str:
        """Skill version from the manifest."""
        return self.manifest.version


class TranspileResult(BaseModel):
    """Output of one adapter for one skill."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    platform: str
    system_prompt: str | None = Field(default=None, alias="systemPrompt")
    tools: list[dict[str, Any]] = Field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Wire shape: ``{"platform", "systemPrompt", "tools"}``."""
        return self.model_dump(by_alias=True)

    def to_json(self) -> str:
        """Pretty-printed JSON, as written to ``dist/<platform>.json``."""
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)
