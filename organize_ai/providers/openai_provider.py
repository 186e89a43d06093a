"""
OpenAI providers: plain chat completion and schema-guided parsing.
"""

import openai

from ..errors import ProviderError, TransportError
from ..llm.models import SYSTEM_INSTRUCTION
from ..llm.prompts import build_prompt
from ..llm.reconcile import attach_files
from ..llm.schema import SuggestionsSchema
from ..models import AnalysisRequest, AnalysisResponse
from ..utils import print_debug
from .base import ProviderAdapter


def build_messages(prompt: str) -> list[dict]:
    return [
        {"role": "system", "content": SYSTEM_INSTRUCTION},
        {"role": "user", "content": prompt},
    ]


class OpenAIProvider(ProviderAdapter):
    """Chat-completion provider: system instruction plus the prompt as user message."""

    name = "OpenAI"
    provider_key = "openai"

    def _create_client(self) -> openai.OpenAI:
        return openai.OpenAI(api_key=self.api_key, timeout=self.timeout)

    def _invoke(self, prompt: str, max_tokens: int, temperature: float) -> str:
        try:
            completion = self.client.chat.completions.create(
                model=self.model,
                messages=build_messages(prompt),
                max_tokens=max_tokens,
                temperature=temperature,
            )
        except openai.OpenAIError as e:
            raise TransportError(str(e)) from e

        content = completion.choices[0].message.content if completion.choices else None
        if not content:
            raise TransportError("No response content from OpenAI")
        return content


class OpenAIStructuredProvider(OpenAIProvider):
    """
    Schema-guided provider.

    The SDK validates the reply against SuggestionsSchema, so no text
    recovery runs; suggestions are still reconciled with the request's
    files. Custom prompts take the plain chat-completion path.
    """

    def _invoke_structured(
        self,
        messages: list[dict],
        max_tokens: int,
        temperature: float,
    ) -> SuggestionsSchema:
        try:
            completion = self.client.chat.completions.parse(
                model=self.model,
                messages=messages,
                response_format=SuggestionsSchema,
                max_tokens=max_tokens,
                temperature=temperature,
            )
        except openai.OpenAIError as e:
            raise TransportError(str(e)) from e

        message = completion.choices[0].message if completion.choices else None
        parsed = message.parsed if message is not None else None
        if parsed is None:
            refusal = getattr(message, "refusal", None)
            if refusal:
                raise TransportError(f"Model refused the request: {refusal}")
            raise TransportError("No parsed content from OpenAI")
        return parsed

    def analyze(self, request: AnalysisRequest, messages: list[dict] | None = None) -> AnalysisResponse:
        """
        Ask for suggestions using structured output.

        Args:
            request: The analysis request.
            messages: Optional conversation history to send instead of a
                freshly built prompt.

        Returns:
            The structured response with files attached.

        Raises:
            ProviderError: On any transport failure or missing parsed content.
        """
        if request.custom_prompt:
            return super().analyze(request)

        try:
            if messages is None:
                messages = build_messages(build_prompt(request, self.preview_limit))
            max_tokens, temperature = self.generation_settings(request)
            print_debug(
                f"{self.name} structured call: model={self.model}, "
                f"messages={len(messages)}, files={len(request.files)}"
            )

            parsed = self._invoke_structured(messages, max_tokens, temperature)
            return attach_files(parsed.to_response(), request.files)

        except ProviderError:
            raise
        except Exception as e:
            raise self._provider_error(e) from e
