"""Kimi (Moonshot) adapter. The Moonshot API is OpenAI-compatible."""

from polyskill.adapters.openai import OpenAIAdapter


class KimiAdapter(OpenAIAdapter):
    """Emit Kimi function-calling tools (same shape as OpenAI)."""

    platform = "kimi"
