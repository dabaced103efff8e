"""OpenAI function-calling adapter."""

from __future__ import annotations

from typing import Any

from polyskill.adapters.base import BaseAdapter
from polyskill.skills.models import CanonicalTool


class OpenAIAdapter(BaseAdapter):
    """Emit OpenAI ``tools`` entries.

    Shape::

        {"type": "function", "function": {"name", "description", "parameters"}}
    """

    platform = "openai"

    def transpile_tool(self, tool: CanonicalTool) -> dict[str, Any]:
        return {
            "type": "function",
            "function": {
                "name": tool.name,
                "description": tool.description,
                "parameters": tool.parameters_schema(),
            },
        }
