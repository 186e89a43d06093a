"""
Reattaching parsed suggestions to the files they describe, and
post-processing filters applied to a finished response.
"""

from dataclasses import replace

from ..models import AnalysisResponse, FileDescriptor, Suggestion
from ..utils import path_basename


def resolve_file(
    suggestion: Suggestion,
    index: int,
    files: list[FileDescriptor],
    by_name: dict[str, FileDescriptor] | None = None,
) -> FileDescriptor | None:
    """
    Find the file a suggestion most likely refers to.

    Resolution order:
    1. The file whose name equals the last segment of suggested_path
    2. files[index], when in range
    3. files[0], when any file exists
    """
    if by_name is None:
        by_name = {f.name: f for f in reversed(files)}

    match = by_name.get(path_basename(suggestion.suggested_path))
    if match is not None:
        return match
    if index < len(files):
        return files[index]
    if files:
        return files[0]
    return None


def attach_files(response: AnalysisResponse, files: list[FileDescriptor]) -> AnalysisResponse:
    """
    Return a copy of the response with every suggestion's `file` resolved.

    Args:
        response: Parsed response whose suggestions may lack files.
        files: The request's files, in their original order.

    Returns:
        A new AnalysisResponse. `file` is None only when `files` is empty.
    """
    # First occurrence wins for duplicate names
    by_name = {f.name: f for f in reversed(files)}

    suggestions = [
        replace(suggestion, file=resolve_file(suggestion, index, files, by_name))
        for index, suggestion in enumerate(response.suggestions)
    ]
    return response.with_suggestions(suggestions)


def filter_suggestions(
    response: AnalysisResponse,
    confidence_threshold: float = 0.0,
    preserve_original_names: bool = False,
) -> AnalysisResponse:
    """
    Apply user-facing filters to a reconciled response.

    Args:
        response: A response whose suggestions have files attached.
        confidence_threshold: Drop suggestions below this confidence.
        preserve_original_names: Replace the last path segment with the
            attached file's original name.

    Returns:
        A new AnalysisResponse with the filtered suggestions.
    """
    kept = []
    for suggestion in response.suggestions:
        if suggestion.confidence < confidence_threshold:
            continue

        if preserve_original_names and suggestion.file is not None:
            parts = suggestion.suggested_path.replace("\\", "/").split("/")
            parts[-1] = suggestion.file.name
            suggestion = replace(suggestion, suggested_path="/".join(parts))

        kept.append(suggestion)

    return response.with_suggestions(kept)
