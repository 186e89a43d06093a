"""
Response parsing for LLM file-organization replies.

Turns raw model text into an AnalysisResponse, recovering complete
suggestion objects when the reply was cut off before its closing brace.
"""

import json
import math
import re
from typing import Any

from ..errors import ParseError
from ..models import AnalysisResponse, ClarificationRequest, Suggestion
from ..utils import print_info, print_warning

DEFAULT_CONFIDENCE = 0.5
DEFAULT_REASONING = "No reasoning provided"
RECOVERED_REASONING = "Recovered from truncated response"

# Opening brace of a suggestion object whose first key is "fileName"
SUGGESTION_START = re.compile(r'\{\s*"fileName"\s*:')


def clamp_confidence(value: Any) -> float:
    """
    Clamp a model-supplied confidence into [0, 1].

    Missing, non-numeric and NaN values become DEFAULT_CONFIDENCE.
    """
    if value is None or isinstance(value, bool):
        return DEFAULT_CONFIDENCE
    try:
        confidence = float(value)
    except (TypeError, ValueError):
        return DEFAULT_CONFIDENCE
    if math.isnan(confidence):
        return DEFAULT_CONFIDENCE
    return min(max(confidence, 0.0), 1.0)


def build_suggestion(item: dict) -> Suggestion:
    """
    Convert one raw suggestion dict into a Suggestion.

    The `file` field is left unresolved; see reconcile.attach_files.
    """
    return Suggestion(
        file=None,
        suggested_path=str(item.get("suggestedPath") or ""),
        reason=str(item.get("reason") or ""),
        confidence=clamp_confidence(item.get("confidence")),
        category=item.get("category"),
        metadata=item.get("metadata"),
    )


def _strip_trailing_fence(text: str) -> str:
    """Remove surrounding whitespace and a closing markdown code fence."""
    text = text.strip()
    if text.endswith("```"):
        text = text[:-3].rstrip()
    return text


def try_recover_partial(text: str) -> list[dict]:
    """
    Collect every complete suggestion object from a truncated reply.

    Each object whose first key is "fileName" is decoded from its opening
    brace up to its matching closing brace, so nested objects and braces
    inside strings are kept. Objects that fail to decode are skipped.

    Args:
        text: Raw (possibly truncated) response text.

    Returns:
        The parsed suggestion dicts, in order of appearance.
    """
    decoder = json.JSONDecoder()
    recovered = []
    pos = 0

    while True:
        match = SUGGESTION_START.search(text, pos)
        if match is None:
            break
        try:
            item, end = decoder.raw_decode(text, match.start())
        except json.JSONDecodeError as e:
            # The cut-off tail fails at end of input; anything earlier is malformed
            if e.pos < len(text):
                print_warning("Skipping malformed suggestion in truncated response")
            pos = match.start() + 1
            continue
        recovered.append(item)
        pos = end

    return recovered


def parse_response(response_text: str) -> AnalysisResponse:
    """
    Parse an LLM reply into an AnalysisResponse.

    Args:
        response_text: Raw response text from the LLM.

    Returns:
        The parsed response. Suggestions have `file` unset.

    Raises:
        ParseError: If no usable JSON object can be found or recovered.
    """
    text = _strip_trailing_fence(response_text)

    start = text.find("{")
    end = text.rfind("}")
    candidate = text[start:end + 1] if start != -1 and end > start else None

    if not text.endswith("}"):
        print_warning("Detected truncated JSON response, attempting recovery...")
        recovered = try_recover_partial(text)
        if recovered:
            print_info(f"Recovered {len(recovered)} suggestions from truncated response")
            return AnalysisResponse(
                suggestions=[build_suggestion(item) for item in recovered],
                reasoning=RECOVERED_REASONING,
            )

    if candidate is None:
        raise ParseError("No JSON object found in AI response", response_text)

    try:
        parsed = json.loads(candidate)
    except json.JSONDecodeError as e:
        raise ParseError(f"Failed to parse AI response: {e}", response_text) from e

    if not isinstance(parsed, dict):
        raise ParseError("Invalid response format: expected a JSON object", response_text)

    raw_suggestions = parsed.get("suggestions")
    if not isinstance(raw_suggestions, list):
        raise ParseError("Invalid response format: missing suggestions array", response_text)

    suggestions = []
    for item in raw_suggestions:
        if not isinstance(item, dict):
            print_warning(f"Skipping non-object suggestion: {item!r}"[:200])
            continue
        suggestions.append(build_suggestion(item))

    clarification = parsed.get("clarificationNeeded")

    return AnalysisResponse(
        suggestions=suggestions,
        reasoning=str(parsed.get("reasoning") or DEFAULT_REASONING),
        clarification_needed=(
            ClarificationRequest.from_dict(clarification) if isinstance(clarification, dict) else None
        ),
    )
