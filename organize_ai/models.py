"""
Data model shared by the prompt builder, response parser, reconciler
and provider adapters.

All entities are request-scoped values. Dict-shaped input (e.g. decoded
JSON from a caller) is accepted through the from_dict classmethods and
uses the camelCase keys of the wire format.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class FileDescriptor:
    """
    A file offered for organization.

    `name` is the identity key used when reattaching suggestions.
    """
    name: str
    extension: str
    size: int
    modified: datetime
    path: str = ""

    def __post_init__(self):
        if self.size < 0:
            raise ValueError(f"File size must be non-negative: {self.name} ({self.size})")

    @classmethod
    def from_dict(cls, data: dict) -> "FileDescriptor":
        """Create a FileDescriptor from a dict; `modified` may be an ISO 8601 string."""
        modified = data["modified"]
        if isinstance(modified, str):
            # fromisoformat only accepts a "Z" suffix from Python 3.11
            if modified.endswith(("Z", "z")):
                modified = modified[:-1] + "+00:00"
            modified = datetime.fromisoformat(modified)
        return cls(
            name=data["name"],
            extension=data.get("extension", ""),
            size=int(data.get("size", 0)),
            modified=modified,
            path=data.get("path", ""),
        )

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "extension": self.extension,
            "size": self.size,
            "modified": self.modified.isoformat(),
            "path": self.path,
        }


@dataclass
class AnalysisRequest:
    """
    Input to a provider adapter.

    Recognized `user_preferences` keys:
    - customPrompt: sent verbatim, the reply is returned unparsed
    - intent: switches to the conversational prompt
    - clarifications, rejectedPatterns, approvedPatterns: conversational context
    - maxTokens, temperature: per-request overrides
    """
    files: list[FileDescriptor]
    base_directory: str
    existing_structure: list[str] | None = None
    user_preferences: dict[str, Any] | None = None

    @property
    def preferences(self) -> dict[str, Any]:
        return self.user_preferences or {}

    @property
    def custom_prompt(self) -> str | None:
        return self.preferences.get("customPrompt") or None

    @property
    def intent(self) -> str | None:
        return self.preferences.get("intent") or None

    @classmethod
    def from_dict(cls, data: dict) -> "AnalysisRequest":
        return cls(
            files=[FileDescriptor.from_dict(f) for f in data.get("files", [])],
            base_directory=data.get("baseDirectory", ""),
            existing_structure=data.get("existingStructure"),
            user_preferences=data.get("userPreferences"),
        )


@dataclass
class Suggestion:
    """One proposed destination path for one file."""
    suggested_path: str
    reason: str
    confidence: float
    file: FileDescriptor | None = None
    category: str | None = None
    metadata: dict[str, Any] | None = None

    def to_dict(self) -> dict:
        return {
            "file": self.file.to_dict() if self.file else None,
            "suggestedPath": self.suggested_path,
            "reason": self.reason,
            "confidence": self.confidence,
            "category": self.category,
            "metadata": self.metadata,
        }


@dataclass
class ClarificationRequest:
    """Questions the model wants answered before it commits to a layout."""
    questions: list[str]
    reason: str

    @classmethod
    def from_dict(cls, data: dict) -> "ClarificationRequest":
        questions = data.get("questions") or []
        if not isinstance(questions, list):
            questions = [questions]
        return cls(
            questions=[str(q) for q in questions],
            reason=str(data.get("reason", "")),
        )


@dataclass
class AnalysisResponse:
    """Structured result of one analyze call."""
    suggestions: list[Suggestion] = field(default_factory=list)
    reasoning: str = ""
    clarification_needed: ClarificationRequest | None = None

    def with_suggestions(self, suggestions: list[Suggestion]) -> "AnalysisResponse":
        """Return a copy of this response with a different suggestion list."""
        return replace(self, suggestions=suggestions)

    def to_dict(self) -> dict:
        data = {
            "suggestions": [s.to_dict() for s in self.suggestions],
            "reasoning": self.reasoning,
        }
        if self.clarification_needed is not None:
            data["clarificationNeeded"] = {
                "questions": list(self.clarification_needed.questions),
                "reason": self.clarification_needed.reason,
            }
        return data
