"""Platform adapters for PolySkill."""

from polyskill.adapters.anthropic import AnthropicAdapter
from polyskill.adapters.base import BaseAdapter
from polyskill.adapters.gemini import GeminiAdapter
from polyskill.adapters.grok import GrokAdapter
from polyskill.adapters.kimi import KimiAdapter
from polyskill.adapters.openai import OpenAIAdapter
from polyskill.adapters.registry import (
    BUILTIN_ADAPTERS,
    get_adapter,
    list_adapters,
    resolve_adapters,
)

__all__ = [
    "BaseAdapter",
    "OpenAIAdapter",
    "AnthropicAdapter",
    "GrokAdapter",
    "GeminiAdapter",
    "KimiAdapter",
    "BUILTIN_ADAPTERS",
    "get_adapter",
    "list_adapters",
    "resolve_adapters",
]
