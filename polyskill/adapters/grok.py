"""Grok (xAI) adapter. The xAI API is OpenAI-compatible."""

from polyskill.adapters.openai import OpenAIAdapter


class GrokAdapter(OpenAIAdapter):
    """Emit Grok function-calling tools (same shape as OpenAI)."""

    platform = "grok"
