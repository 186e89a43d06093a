"""
Prompt builders for LLM-based file organization.

Provides prompts for:
- Standard mode: one-shot listing of every file with its metadata
- Conversational mode: intent plus clarification and pattern history
- Custom mode: the caller's prompt, sent verbatim

All builders are pure: identical requests produce identical prompts.
"""

import json
from datetime import datetime, timezone

from ..errors import PromptError
from ..models import AnalysisRequest, FileDescriptor
from ..utils import format_file_size
from .models import DEFAULT_PREVIEW_LIMIT


def build_prompt(request: AnalysisRequest, preview_limit: int | None = DEFAULT_PREVIEW_LIMIT) -> str:
    """
    Build the prompt for a request, choosing the mode from its preferences.

    Args:
        request: The analysis request.
        preview_limit: Files listed in full by the conversational prompt
            before the remainder is summarized. None lists every file.

    Returns:
        Prompt string for the LLM.

    Raises:
        PromptError: If a standard prompt is requested for zero files.
    """
    custom_prompt = request.custom_prompt
    if custom_prompt:
        return custom_prompt

    if request.intent:
        return build_conversational_prompt(request, preview_limit)

    return build_standard_prompt(request)


def format_modified_date(modified: datetime) -> str:
    """Render a timestamp as a calendar date (UTC for aware timestamps)."""
    if modified.tzinfo is not None:
        modified = modified.astimezone(timezone.utc)
    return modified.date().isoformat()


def format_file_line(file: FileDescriptor) -> str:
    return (
        f"{file.name} ({file.extension}, {format_file_size(file.size)}, "
        f"modified: {format_modified_date(file.modified)})"
    )


def _bullet_list(items: list[str] | None, empty_text: str) -> str:
    if not items:
        return empty_text
    return "\n".join(f"- {item}" for item in items)


def build_output_format(file_count: int) -> str:
    """
    Build the output-format contract appended to every templated prompt.

    Args:
        file_count: Number of files the model must answer for.
    """
    return f"""## Output Format

Return ONLY a valid JSON object with this structure:

{{
  "suggestions": [
    {{
      "fileName": "example.jpg",
      "suggestedPath": "Photos/2024/03/Vacation/example.jpg",
      "reason": "Image from March 2024, vacation-related based on its name",
      "confidence": 0.85,
      "category": "photos"
    }}
  ],
  "reasoning": "Overall explanation of the organization strategy used",
  "clarificationNeeded": {{
    "questions": ["Question 1?"],
    "reason": "Why the answer changes the organization"
  }}
}}

## Output Rules

1. Return valid JSON only. Do not include any text outside the JSON object.
2. Every input file must receive exactly one suggestion.
3. There are {file_count} files to organize: return exactly {file_count} suggestions, one per numbered file.
4. "fileName" must be the exact file name from the list. "suggestedPath" must end with the file name.
5. Apply ONE consistent organizational pattern per file category: files of the same type use the same folder structure and naming format.
6. Expand informal abbreviations to their canonical names (e.g. "got" -> "Game of Thrones"), but keep literal multi-letter acronyms (e.g. "NASA", "HTML") exactly as written.
7. "confidence" is a number between 0.0 and 1.0.
8. Include "clarificationNeeded" only when the organization is genuinely ambiguous. Otherwise omit it and make your best suggestion."""


def build_standard_prompt(request: AnalysisRequest) -> str:
    """
    Build the one-shot prompt listing every file.

    Args:
        request: The analysis request.

    Returns:
        Prompt string for the LLM.

    Raises:
        PromptError: If the request has no files.
    """
    files = request.files
    if not files:
        raise PromptError("Cannot build a prompt for an empty file list")

    files_text = "\n".join(
        f"{index}. {format_file_line(file)}" for index, file in enumerate(files, 1)
    )

    if request.existing_structure:
        structure_text = "\n".join(request.existing_structure)
    else:
        structure_text = "No existing structure provided"

    if request.user_preferences:
        preferences_text = json.dumps(request.user_preferences, indent=2, default=str)
    else:
        preferences_text = "No specific preferences provided"

    return f"""You are an intelligent file organizer. Analyze the following files and suggest an optimal organization structure.

## Base Directory: {request.base_directory}

## Files to Organize ({len(files)} total):
{files_text}

## Existing Directory Structure:
{structure_text}

## User Preferences:
{preferences_text}

## Guidelines

1. Analyze each file's name, extension, size, and modification date.
2. Consider the existing directory structure to maintain consistency.
3. Suggest logical organization paths that group related files.
4. Provide clear reasoning for each suggestion.
5. Assign confidence scores (0.0 to 1.0) based on how certain you are about each suggestion.
6. Consider common organization patterns (by date, type, project, category).

{build_output_format(len(files))}
"""


def build_conversational_prompt(
    request: AnalysisRequest,
    preview_limit: int | None = DEFAULT_PREVIEW_LIMIT,
) -> str:
    """
    Build the prompt for an ongoing conversation with the user.

    Only the first `preview_limit` files are listed; the rest are
    summarized as a count.

    Args:
        request: The analysis request; its preferences carry `intent`.
        preview_limit: Maximum number of files listed by name. None, zero or
            a negative value lists every file.

    Returns:
        Prompt string for the LLM.
    """
    prefs = request.preferences
    files = request.files

    if preview_limit is not None and preview_limit <= 0:
        preview_limit = None

    shown = files if preview_limit is None else files[:preview_limit]
    files_text = "\n".join(
        f"{index}. {format_file_line(file)}" for index, file in enumerate(shown, 1)
    )
    remaining = len(files) - len(shown)
    if remaining > 0:
        files_text += f"\n... and {remaining} more files"

    clarifications = _bullet_list(prefs.get("clarifications"), "No additional clarifications yet.")
    rejected = _bullet_list(prefs.get("rejectedPatterns"), "No rejected patterns yet.")
    approved = _bullet_list(prefs.get("approvedPatterns"), "No approved patterns yet.")

    return f"""You are an intelligent file organizer having a conversation with a user about organizing their files.

## User's Intent: {prefs.get('intent')}

## Additional Context from Conversation:
{clarifications}

## Previously Rejected Organization Patterns:
{rejected}

## Approved Organization Patterns:
{approved}

## Base Directory: {request.base_directory}

## Files to Organize ({len(files)} total):
{files_text}

## Guidelines

1. Analyze the user's intent and the conversation context.
2. Create an organization structure that matches their specific requirements.
3. Avoid anything similar to the rejected patterns.
4. Incorporate the approved patterns into your suggestions.

## Consistency Rules

- **NAMING**: Normalize names the same way across files: consistent capitalization, separators, and placement of years, seasons, and episode numbers.
- **SAME TYPE = SAME FORMAT**: Once a naming pattern is established for a category, apply it to ALL files of that category (e.g. if one movie uses "Movies/Genre/Title (Year)", every movie does).
- **SERIES**: Keep episodes of the same series under one series folder with one season layout.
- **PROJECTS**: Identify files that belong to the same project (shared name prefixes, version numbers, matching source/config files) and keep them together. Never split a recognized project's structure.

{build_output_format(len(files))}
"""
