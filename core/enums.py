"""
Enumerated tokens understood by the image service.

The builder serializes these by value and accepts plain strings as well,
so membership is never enforced at build time.
"""

from enum import Enum


class HAlign(str, Enum):
    """Horizontal alignment used when cropping alters the width"""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class VAlign(str, Enum):
    """Vertical alignment used when cropping alters the height"""

    TOP = "top"
    MIDDLE = "middle"
    BOTTOM = "bottom"


class ImageFormat(str, Enum):
    """Output formats accepted by the format() filter"""

    WEBP = "webp"
    JPEG = "jpeg"
    PNG = "png"
    GIF = "gif"


__all__ = ["HAlign", "VAlign", "ImageFormat"]
