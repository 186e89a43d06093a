"""
LLM model configurations.
"""

# Default model identifier for each provider
DEFAULT_MODELS = {
    "openai": "gpt-4",
    "anthropic": "claude-3-sonnet-20240229",
    "gemini": "gemini-2.0-flash",
}

SUPPORTED_PROVIDERS = tuple(DEFAULT_MODELS)

DEFAULT_PROVIDER = "openai"

# Generation defaults shared by all providers
DEFAULT_MAX_TOKENS = 1000
DEFAULT_TEMPERATURE = 0.3
DEFAULT_TIMEOUT = 30.0  # seconds, passed to the SDK as a connect/read limit

# Files listed in full in a conversational prompt before the rest are summarized
DEFAULT_PREVIEW_LIMIT = 20

# System instruction for chat-style providers
SYSTEM_INSTRUCTION = (
    "You are an expert file organization assistant. "
    "Always respond with valid JSON only."
)


def get_default_model(provider: str) -> str:
    """
    Get the default model identifier for a provider.

    Args:
        provider: Provider key (openai, anthropic, gemini).

    Returns:
        The provider's default model identifier.
    """
    return DEFAULT_MODELS.get(provider, DEFAULT_MODELS[DEFAULT_PROVIDER])
