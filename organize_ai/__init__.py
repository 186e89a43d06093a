"""
Organize AI
===========

Normalizes file-organization requests across LLM providers: builds the
prompt, calls the provider, and turns the reply into structured
file-placement suggestions.
"""

__version__ = "1.0.0"

from .config import ProviderConfig, load_provider_config
from .errors import (
    OrganizerError,
    ConfigError,
    PromptError,
    TransportError,
    ParseError,
    ProviderError,
)
from .models import (
    FileDescriptor,
    AnalysisRequest,
    Suggestion,
    ClarificationRequest,
    AnalysisResponse,
)
from .providers import create_provider

__all__ = [
    "ProviderConfig",
    "load_provider_config",
    "OrganizerError",
    "ConfigError",
    "PromptError",
    "TransportError",
    "ParseError",
    "ProviderError",
    "FileDescriptor",
    "AnalysisRequest",
    "Suggestion",
    "ClarificationRequest",
    "AnalysisResponse",
    "create_provider",
]
