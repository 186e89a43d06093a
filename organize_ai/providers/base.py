"""
Provider adapter base for the file-organization assistant.

An adapter owns one provider's transport call. Prompt construction,
reply parsing and reconciliation are shared; every failure leaves
analyze() as a ProviderError.
"""

from abc import ABC, abstractmethod
from typing import Any

from ..config import ProviderConfig
from ..errors import ProviderError
from ..llm.models import get_default_model
from ..llm.parser import parse_response
from ..llm.prompts import build_prompt
from ..llm.reconcile import attach_files
from ..models import AnalysisRequest, AnalysisResponse
from ..utils import print_debug, print_error


class ProviderAdapter(ABC):
    """
    Common contract for all providers.

    Subclasses set `name` (used in error messages) and `provider_key`
    (used to look up the default model), and implement _create_client
    and _invoke.
    """

    name = "Provider"
    provider_key = ""

    def __init__(self, config: ProviderConfig, client: Any = None):
        self.api_key = config.api_key
        self.model = config.model or self.get_default_model()
        self.max_tokens = config.max_tokens
        self.temperature = config.temperature
        self.timeout = config.timeout
        self.preview_limit = config.preview_limit
        self.client = client if client is not None else self._create_client()

    def get_default_model(self) -> str:
        return get_default_model(self.provider_key)

    @abstractmethod
    def _create_client(self) -> Any:
        """Create the SDK client for this provider."""

    @abstractmethod
    def _invoke(self, prompt: str, max_tokens: int, temperature: float) -> str:
        """
        Send a prompt and return the raw reply text.

        Raises:
            TransportError: If the SDK call fails or returns no text.
        """

    def generation_settings(self, request: AnalysisRequest) -> tuple[int, float]:
        """Return (max_tokens, temperature), with request overrides applied."""
        prefs = request.preferences
        max_tokens = prefs.get("maxTokens")
        temperature = prefs.get("temperature")
        return (
            self.max_tokens if max_tokens is None else int(max_tokens),
            self.temperature if temperature is None else float(temperature),
        )

    def _provider_error(self, error: Exception) -> ProviderError:
        print_error(f"{self.name} provider failed (model {self.model}): {error}")
        return ProviderError(self.name, str(error))

    def analyze(self, request: AnalysisRequest) -> AnalysisResponse:
        """
        Ask the provider for organization suggestions.

        Custom-prompt requests return the raw reply as `reasoning` with no
        suggestions; all other replies are parsed and reconciled.

        Args:
            request: The analysis request.

        Returns:
            The structured response.

        Raises:
            ProviderError: On any prompt, transport or parse failure.
        """
        try:
            prompt = build_prompt(request, self.preview_limit)
            max_tokens, temperature = self.generation_settings(request)
            print_debug(
                f"{self.name} call: model={self.model}, max_tokens={max_tokens}, "
                f"temperature={temperature}, files={len(request.files)}"
            )

            response_text = self._invoke(prompt, max_tokens, temperature)

            if request.custom_prompt:
                return AnalysisResponse(suggestions=[], reasoning=response_text)

            return attach_files(parse_response(response_text), request.files)

        except ProviderError:
            raise
        except Exception as e:
            raise self._provider_error(e) from e
