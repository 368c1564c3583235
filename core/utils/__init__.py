"""
Utility modules for core functionality.

Modules:
- enum_converter: Enum to URL token conversion
"""

from .enum_converter import enum_to_string

__all__ = [
    "enum_to_string",
]
