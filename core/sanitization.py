"""
Input sanitization utilities.

Shared sanitization functions for user text that is interpolated into
LLM prompts. This module has no dependencies on models or services to
avoid circular imports.
"""

import re

from core.constants import MAX_PHILOSOPHY_LENGTH


def sanitize_user_input(value: str, max_length: int = MAX_PHILOSOPHY_LENGTH) -> str:
    """
    Sanitize user input by removing control characters and limiting length.

    - Removes newlines, carriage returns, tabs, and control characters
    - Collapses multiple spaces into one
    - Strips leading/trailing whitespace
    - Truncates to a maximum length

    Args:
        value: Raw user-provided string
        max_length: Maximum allowed length (default: MAX_PHILOSOPHY_LENGTH)

    Returns:
        Sanitized string safe for prompt inclusion
    """
    sanitized = re.sub(r"[\n\r\t\x00-\x1f\x7f-\x9f]", " ", value)
    sanitized = re.sub(r" +", " ", sanitized)
    sanitized = sanitized.strip()
    # Double quotes would terminate the quoted block in the prompt templates
    sanitized = sanitized.replace('"', "'")
    return sanitized[:max_length]
