"""Response models for the skill registry API."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SkillSummary(BaseModel):
    """One search hit."""
    model_config = ConfigDict(extra="ignore")

    name: str
    version: str
    description: str = ""
    type: str = ""
    author_name: str = ""
    verified: bool = False
    downloads: int = 0
    category: str | None = None


class SearchResponse(BaseModel):
    """Result page of ``GET /api/skills``."""
    model_config = ConfigDict(extra="ignore")

    skills: list[SkillSummary] = Field(default_factory=list)
    total: int = 0


class RegistrySkill(BaseModel):
    """A published skill as returned by ``GET /api/skills/<name>``.

    ``tools`` is the published ``tools.json`` document and ``adapters`` maps
    platform name to its serialized TranspileResult.
    """
    model_config = ConfigDict(extra="ignore")

    name: str
    version: str
    manifest: dict[str, Any]
    tools: dict[str, Any] | None = None
    instructions: str | None = None
    adapters: dict[str, Any] = Field(default_factory=dict)
    verified: bool = False
