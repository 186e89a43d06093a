"""
Gemini provider: a single prompt through the google-genai client.
"""

from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from ..errors import TransportError
from .base import ProviderAdapter


class GeminiProvider(ProviderAdapter):
    """
    Each adapter owns a genai.Client bound to its own API key and
    timeout, so adapters with different keys do not share credentials.
    """

    name = "Gemini"
    provider_key = "gemini"

    def _create_client(self) -> genai.Client:
        return genai.Client(
            api_key=self.api_key,
            http_options=types.HttpOptions(timeout=int(self.timeout * 1000)),  # milliseconds
        )

    def _invoke(self, prompt: str, max_tokens: int, temperature: float) -> str:
        config = types.GenerateContentConfig(
            max_output_tokens=max_tokens,
            temperature=temperature,
        )

        try:
            response = self.client.models.generate_content(
                model=self.model,
                contents=prompt,
                config=config,
            )
        except genai_errors.APIError as e:
            raise TransportError(str(e)) from e

        text = response.text
        if not text:
            raise TransportError("No response content from Gemini")
        return text
