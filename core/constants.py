"""
Constants and configuration values for the Thumbor URL builder.
Centralizes all URL tokens and default values.
"""


# URL Segment Constants
class UrlConstants:
    """Tokens emitted into the operation path."""

    # Signature token used when no security key is configured
    UNSAFE = "unsafe"

    # Operation segments
    META = "meta"
    FIT_IN = "fit-in"
    SMART = "smart"
    FILTERS_PREFIX = "filters:"

    # Separators
    PATH_SEPARATOR = "/"
    FILTER_SEPARATOR = ":"
    SIZE_SEPARATOR = "x"
    FLIP_MARKER = "-"

    # Dimension token meaning "keep the original size for this axis"
    ORIGINAL_DIMENSION = "orig"
    PROPORTIONAL_DIMENSION = 0


# Thumbor Server Constants
class ThumborConstants:
    """Defaults for the remote image service."""

    DEFAULT_SERVER_URL = "http://localhost:8888"
    SIGNATURE_DIGEST = "sha1"


# API Constants
class APIConstants:
    """Constants for API endpoints."""

    DEFAULT_HOST = "0.0.0.0"
    DEFAULT_PORT = 8000
    API_VERSION = "v1"


# System Constants
class SystemConstants:
    """Constants for system operations."""

    LOG_LEVEL_DEFAULT = "INFO"
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    REDACTED = "***"


# Error Messages
class ErrorMessages:
    """Standard error messages."""

    IMAGE_PATH_REQUIRED = "The image url can't be null or empty."
    INVALID_LOG_LEVEL = "Invalid log level {level} (expected one of {levels})"
