"""
Core Utilities.

Shared utility functions used across the backend.
All modules should import utilities from this module.
"""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """
    Return current UTC time as timezone-naive datetime.

    All datetime values in the application should be timezone-naive
    and assumed to be UTC. This ensures consistent behavior across
    the codebase and simplifies database storage.

    Returns:
        Current UTC time with tzinfo stripped
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)


def derive_title(content: str, max_length: int) -> str:
    """
    Derive a note title from its content.

    The title is the first line of the content, cut to max_length characters.

    >>> derive_title("Buy milk\\nand eggs", 255)
    'Buy milk'
    """
    first_line = content.split("\n")[0]
    if len(first_line) > max_length:
        return first_line[:max_length]
    return first_line
