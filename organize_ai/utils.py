"""
Utility functions for the file-organization assistant.

Includes:
- Console output helpers
- File size formatting
- Path helpers
"""

import os

from rich.console import Console
from rich.markup import escape

# Diagnostics go to stderr
console = Console(stderr=True)

SIZE_UNITS = ("B", "KB", "MB", "GB")


def debug_enabled() -> bool:
    """Check whether ORGANIZE_AI_DEBUG is set to a truthy value."""
    return os.environ.get("ORGANIZE_AI_DEBUG", "").lower() in ("1", "true", "yes", "on")


def print_info(msg: str):
    console.print(f"[bold blue]INFO:[/bold blue] {escape(msg)}")


def print_debug(msg: str):
    if debug_enabled():
        console.print(f"[dim]DEBUG: {escape(msg)}[/dim]")


def print_error(msg: str):
    console.print(f"[bold red]ERROR:[/bold red] {escape(msg)}")


def print_warning(msg: str):
    console.print(f"[bold yellow]WARNING:[/bold yellow] {escape(msg)}")


def format_file_size(size_bytes: int) -> str:
    """
    Format a byte count using the largest unit that keeps the value below 1024.

    GB is the ceiling unit, so very large sizes stay in GB.

    Args:
        size_bytes: Non-negative byte count.

    Returns:
        A string such as "500.0 B", "2.0 KB" or "4.8 MB".
    """
    size = float(size_bytes)
    unit_index = 0

    while size >= 1024 and unit_index < len(SIZE_UNITS) - 1:
        size /= 1024
        unit_index += 1

    return f"{size:.1f} {SIZE_UNITS[unit_index]}"


def path_basename(path: str) -> str:
    """
    Return the last segment of a slash-separated path.

    Backslashes are treated as separators too, and trailing separators
    are ignored.
    """
    parts = path.replace("\\", "/").rstrip("/").split("/")
    return parts[-1]
