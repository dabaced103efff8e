"""Anthropic Claude tool-use adapter."""

from __future__ import annotations

from typing import Any

from polyskill.adapters.base import BaseAdapter
from polyskill.skills.models import CanonicalTool


class AnthropicAdapter(BaseAdapter):
    """Emit Anthropic ``tools`` entries: flat, schema under ``input_schema``."""

    platform = "anthropic"

    def transpile_tool(self, tool: CanonicalTool) -> dict[str, Any]:
        return {
            "name": tool.name,
            "description": tool.description,
            "input_schema": tool.parameters_schema(),
        }
