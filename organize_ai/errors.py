"""
Error types for the file-organization assistant.

Every failure inside a provider call surfaces to the caller as a
ProviderError; the other types describe where the failure started.
"""


class OrganizerError(Exception):
    """Base class for all organizer errors."""


class ConfigError(OrganizerError):
    """Raised when provider configuration is missing or invalid."""


class PromptError(OrganizerError):
    """Raised when a request cannot be turned into a prompt."""


class TransportError(OrganizerError):
    """Raised when the provider SDK call fails or returns nothing usable."""


class ParseError(OrganizerError):
    """
    Raised when no usable JSON object can be found in a model reply.

    Attributes:
        excerpt: The first 500 characters of the offending text.
    """

    EXCERPT_LENGTH = 500

    def __init__(self, message: str, text: str = ""):
        self.excerpt = text[:self.EXCERPT_LENGTH]
        if self.excerpt:
            message = f"{message}. Response: {self.excerpt}..."
        super().__init__(message)


class ProviderError(OrganizerError):
    """
    Uniform error surfaced by every provider adapter.

    Attributes:
        provider: Display name of the provider ("OpenAI", "Anthropic", ...).
        message: The original failure message.
    """

    def __init__(self, provider: str, message: str):
        self.provider = provider
        self.message = message
        super().__init__(f"{provider} API error: {message}")
