"""
Pydantic schema used by schema-guided (structured output) providers.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from ..models import AnalysisResponse, ClarificationRequest, Suggestion
from .parser import clamp_confidence


class SuggestionItem(BaseModel):
    """One suggestion as returned by a structured-output call."""

    fileName: str = Field(..., description="Exact name of the file from the request")
    suggestedPath: str = Field(..., description="Proposed path, ending with the file name")
    reason: str = Field(..., description="Why this location fits the file")
    confidence: float = Field(..., description="Confidence score between 0.0 and 1.0")
    category: Optional[str] = Field(default=None, description="File category")


class ClarificationItem(BaseModel):
    questions: List[str]
    reason: str


class SuggestionsSchema(BaseModel):
    """Top-level structured reply: suggestions plus overall reasoning."""

    suggestions: List[SuggestionItem]
    reasoning: str = Field(..., description="Overall organization strategy")
    clarificationNeeded: Optional[ClarificationItem] = None

    def to_response(self) -> AnalysisResponse:
        """Convert to an AnalysisResponse with files left unresolved."""
        clarification = None
        if self.clarificationNeeded is not None:
            clarification = ClarificationRequest(
                questions=list(self.clarificationNeeded.questions),
                reason=self.clarificationNeeded.reason,
            )
        return AnalysisResponse(
            suggestions=[
                Suggestion(
                    suggested_path=item.suggestedPath,
                    reason=item.reason,
                    confidence=clamp_confidence(item.confidence),
                    category=item.category,
                )
                for item in self.suggestions
            ],
            reasoning=self.reasoning,
            clarification_needed=clarification,
        )
