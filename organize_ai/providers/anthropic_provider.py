"""
Anthropic provider: a single user message through the Messages API.
"""

import anthropic

from ..errors import TransportError
from .base import ProviderAdapter


class AnthropicProvider(ProviderAdapter):
    name = "Anthropic"
    provider_key = "anthropic"

    def _create_client(self) -> anthropic.Anthropic:
        return anthropic.Anthropic(api_key=self.api_key, timeout=self.timeout)

    def _invoke(self, prompt: str, max_tokens: int, temperature: float) -> str:
        try:
            message = self.client.messages.create(
                model=self.model,
                max_tokens=max_tokens,
                temperature=temperature,
                messages=[{"role": "user", "content": prompt}],
            )
        except anthropic.AnthropicError as e:
            raise TransportError(str(e)) from e

        if not message.content:
            raise TransportError("No response content from Anthropic")

        content = message.content[0]
        if content.type != "text":
            raise TransportError(f"Unexpected response type from Anthropic: {content.type}")
        return content.text
