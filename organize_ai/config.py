"""
Provider configuration for the file-organization assistant.

Adapters receive a resolved ProviderConfig; only load_provider_config
reads the environment (and an optional .env file via python-dotenv).
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .errors import ConfigError
from .llm.models import (
    DEFAULT_MAX_TOKENS,
    DEFAULT_PREVIEW_LIMIT,
    DEFAULT_PROVIDER,
    DEFAULT_TEMPERATURE,
    DEFAULT_TIMEOUT,
    SUPPORTED_PROVIDERS,
)

API_KEY_VARIABLES = {
    "openai": "OPENAI_API_KEY",
    "anthropic": "ANTHROPIC_API_KEY",
    "gemini": "GEMINI_API_KEY",
}


@dataclass
class ProviderConfig:
    """
    Resolved settings for one provider adapter.

    `model` None selects the provider's default model. `preview_limit`
    None lists every file in conversational prompts. `structured` selects
    the schema-guided variant where the provider has one.
    """
    provider: str
    api_key: str
    model: str | None = None
    max_tokens: int = DEFAULT_MAX_TOKENS
    temperature: float = DEFAULT_TEMPERATURE
    timeout: float = DEFAULT_TIMEOUT
    preview_limit: int | None = DEFAULT_PREVIEW_LIMIT
    structured: bool = False


def _env_number(name: str, default, cast):
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw)
    except ValueError:
        raise ConfigError(f"Invalid value for {name}: {raw!r}")


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").lower() in ("1", "true", "yes", "on")


def load_provider_config(env_path: str | None = None, provider: str | None = None) -> ProviderConfig:
    """
    Build a ProviderConfig from environment variables.

    Args:
        env_path: Optional .env file to load first. When omitted, the
            default .env lookup of python-dotenv is used.
        provider: Provider key; defaults to ORGANIZE_AI_PROVIDER or "openai".

    Returns:
        The resolved configuration.

    Raises:
        ConfigError: If the provider is unknown, its API key is missing,
            or a numeric variable cannot be parsed.
    """
    if env_path:
        load_dotenv(dotenv_path=env_path)
    else:
        load_dotenv()

    provider = (provider or os.environ.get("ORGANIZE_AI_PROVIDER") or DEFAULT_PROVIDER).lower()
    if provider not in SUPPORTED_PROVIDERS:
        raise ConfigError(
            f"Unsupported AI provider: {provider} (expected one of {', '.join(SUPPORTED_PROVIDERS)})"
        )

    key_variable = API_KEY_VARIABLES[provider]
    api_key = os.environ.get(key_variable)
    if not api_key:
        raise ConfigError(f"{key_variable} environment variable not set. Create a .env file with: {key_variable}=your-key-here")

    preview_limit = _env_number("ORGANIZE_AI_PREVIEW_LIMIT", DEFAULT_PREVIEW_LIMIT, int)
    if preview_limit is not None and preview_limit <= 0:
        preview_limit = None

    return ProviderConfig(
        provider=provider,
        api_key=api_key,
        model=os.environ.get("ORGANIZE_AI_MODEL") or None,
        max_tokens=_env_number("ORGANIZE_AI_MAX_TOKENS", DEFAULT_MAX_TOKENS, int),
        temperature=_env_number("ORGANIZE_AI_TEMPERATURE", DEFAULT_TEMPERATURE, float),
        timeout=_env_number("ORGANIZE_AI_TIMEOUT", DEFAULT_TIMEOUT, float),
        preview_limit=preview_limit,
        structured=_env_flag("ORGANIZE_AI_STRUCTURED"),
    )
