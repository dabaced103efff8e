"""Google Gemini adapter."""

from __future__ import annotations

from typing import Any

from polyskill.adapters.base import BaseAdapter
from polyskill.skills.models import CanonicalTool


class GeminiAdapter(BaseAdapter):
    """Emit Gemini ``functionDeclarations`` entries."""

    platform = "gemini"

    def transpile_tool(self, tool: CanonicalTool) -> dict[str, Any]:
        return {
            "name": tool.name,
            "description": tool.description,
            "parameters": tool.parameters_schema(),
        }
