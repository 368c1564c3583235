"""
Enum conversion utilities.

Tokens such as alignments and formats may arrive either as enum members
or as plain strings; the URL only ever contains the string value.
"""

from typing import Any


def enum_to_string(value: Any) -> str:
    """
    Convert enum to string value, or pass through if already string.

    Args:
        value: Enum instance or string

    Returns:
        String value (enum.value if enum, otherwise str(value))

    Example:
        >>> enum_to_string(HAlign.LEFT)
        'left'
        >>> enum_to_string("left")
        'left'
    """
    return str(value.value) if hasattr(value, "value") else str(value)
