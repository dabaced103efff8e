"""Adapter registry: platform name -> adapter instance.

Populated once at import with the built-in adapters and read-only
afterwards. Lookups of unknown platforms return ``None``; whether that is a
warning or an error is up to the caller.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from polyskill.adapters.anthropic import AnthropicAdapter
from polyskill.adapters.base import BaseAdapter
from polyskill.adapters.gemini import GeminiAdapter
from polyskill.adapters.grok import GrokAdapter
from polyskill.adapters.kimi import KimiAdapter
from polyskill.adapters.openai import OpenAIAdapter

BUILTIN_ADAPTERS: Mapping[str, BaseAdapter] = MappingProxyType({
    adapter.platform: adapter
    for adapter in (
        OpenAIAdapter(),
        AnthropicAdapter(),
        GrokAdapter(),
        GeminiAdapter(),
        KimiAdapter(),
    )
})


def get_adapter(platform: str) -> BaseAdapter | None:
    """Get an adapter by platform name.

    Args:
        platform: Platform key, e.g. ``"openai"``

    Returns:
        Adapter instance or None if the platform is unknown
    """
    return BUILTIN_ADAPTERS.get(platform)


def list_adapters() -> list[str]:
    """List registered platform names in registration order."""
    return list(BUILTIN_ADAPTERS.keys())


def resolve_adapters(platforms: Iterable[str]) -> tuple[list[BaseAdapter], list[str]]:
    """Resolve platform names, keeping their order.

    Args:
        platforms: Platform names, typically ``manifest.adapters``

    Returns:
        (adapters, unknown): resolved adapters and the names with no adapter
    """
    adapters: list[BaseAdapter] = []
    unknown: list[str] = []
    for platform in platforms:
        adapter = get_adapter(platform)
        if adapter is None:
            unknown.append(platform)
        else:
            adapters.append(adapter)
    return adapters, unknown
