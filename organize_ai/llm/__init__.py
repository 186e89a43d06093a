"""
LLM integration module for the file-organization assistant.

Provides:
- Prompt builders for standard, conversational and custom modes
- Response parsing with truncated-reply recovery
- Reconciliation of suggestions with the original files
- Model defaults and the structured-output schema
"""

from .models import DEFAULT_MODELS, SUPPORTED_PROVIDERS, get_default_model
from .parser import parse_response, try_recover_partial, clamp_confidence
from .prompts import (
    build_prompt,
    build_standard_prompt,
    build_conversational_prompt,
)
from .reconcile import attach_files, filter_suggestions
from .schema import SuggestionsSchema

__all__ = [
    "DEFAULT_MODELS",
    "SUPPORTED_PROVIDERS",
    "get_default_model",
    "parse_response",
    "try_recover_partial",
    "clamp_confidence",
    "build_prompt",
    "build_standard_prompt",
    "build_conversational_prompt",
    "attach_files",
    "filter_suggestions",
    "SuggestionsSchema",
]
