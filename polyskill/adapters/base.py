"""Base adapter interface for PolySkill."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from polyskill.skills.models import CanonicalTool, SkillDefinition, TranspileResult


class BaseAdapter(ABC):
    """Abstract base class for platform adapters.

    An adapter maps a skill's canonical tools onto one provider's native
    function-calling format. Adapters are stateless: ``transpile`` depends
    only on its argument and never mutates it.

    Example:
        >>> class EchoAdapter(BaseAdapter):
        ...     platform = "echo"
        ...
        ...     def transpile_tool(self, tool: CanonicalTool) -> dict[str, Any]:
        ...         return {"name": tool.name}
    """

    platform: str

    @abstractmethod
    def transpile_tool(self, tool: CanonicalTool) -> dict[str, Any]:
        """Convert one canonical tool to the platform's tool format.

        Args:
            tool: Validated canonical tool

        Returns:
            Tool definition in the platform's format
        """
        pass

    def transpile(self, skill: SkillDefinition) -> TranspileResult:
        """Transpile a whole skill for this platform.

        Args:
            skill: Loaded skill definition

        Returns:
            TranspileResult with the skill instructions as system prompt
        """
        return TranspileResult(
            platform=self.platform,
            system_prompt=skill.instructions,
            tools=[self.transpile_tool(tool) for tool in skill.tools],
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(platform={self.platform!r})"
