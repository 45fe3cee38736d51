"""
Common Utilities

String helpers used by the renderers, with no external dependencies.
This module is intentionally kept minimal to avoid circular imports.
"""

import logging

logger = logging.getLogger(__name__)


def repeat(text: str, count: int) -> str:
    """
    Repeat a string, treating non-positive counts as zero.

    Args:
        text: String to repeat
        count: Number of copies (negative values yield an empty string)

    Returns:
        The concatenated copies
    """
    if count <= 0:
        return ""
    return text * count


def clamp(value: int, lower: int, upper: int) -> int:
    """Clamp value into the closed range [lower, upper]."""
    return max(lower, min(value, upper))


def format_percent(percent: int) -> str:
    """
    Format the percentage label shown before the bar.

    Out-of-range values are rendered verbatim.

    Example:
        >>> format_percent(42)
        '42% '
    """
    return f"{percent}% "


def log_section_header(title: str, width: int = 70) -> None:
    """
    Log a section header with visual separator.

    Args:
        title: Section title to display
        width: Width of separator line in characters (default: 70)
    """
    separator = repeat("=", width)
    logger.info(separator)
    logger.info(title)
    logger.info(separator)
