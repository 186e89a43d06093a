"""
Provider adapters for the file-organization assistant.

Provides:
- OpenAI chat-completion and structured-output adapters
- Anthropic Messages adapter
- Gemini adapter
- create_provider factory
"""

from typing import Any

from ..config import ProviderConfig
from ..errors import ConfigError
from .base import ProviderAdapter
from .anthropic_provider import AnthropicProvider
from .gemini_provider import GeminiProvider
from .openai_provider import OpenAIProvider, OpenAIStructuredProvider

PROVIDERS = {
    "openai": OpenAIProvider,
    "anthropic": AnthropicProvider,
    "gemini": GeminiProvider,
}


def create_provider(config: ProviderConfig, client: Any = None) -> ProviderAdapter:
    """
    Create the adapter selected by a configuration.

    Args:
        config: Resolved provider configuration.
        client: Optional pre-built SDK client.

    Returns:
        The provider adapter.

    Raises:
        ConfigError: If the provider is unknown.
    """
    provider = config.provider.lower()
    if provider == "openai" and config.structured:
        return OpenAIStructuredProvider(config, client=client)

    provider_class = PROVIDERS.get(provider)
    if provider_class is None:
        raise ConfigError(f"Unsupported AI provider: {config.provider}")
    return provider_class(config, client=client)


__all__ = [
    "ProviderAdapter",
    "OpenAIProvider",
    "OpenAIStructuredProvider",
    "AnthropicProvider",
    "GeminiProvider",
    "PROVIDERS",
    "create_provider",
]
