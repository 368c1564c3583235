"""
Common data structures shared by the builder and the API layer.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, ValidationError


class CropWindow(BaseModel):
    """
    Manual crop window.

    The image service interprets the four coordinates as the top-left and
    bottom-right corners of the region to keep, rendered as
    ``{left}x{top}:{right}x{bottom}``.
    """

    left: int = Field(..., gt=0, description="Left edge")
    top: int = Field(..., gt=0, description="Top edge")
    right: int = Field(..., gt=0, description="Right edge")
    bottom: int = Field(..., gt=0, description="Bottom edge")

    @classmethod
    def from_coordinates(
        cls, left: int, top: int, right: int, bottom: int
    ) -> Optional["CropWindow"]:
        """
        Create a crop window, or None when any coordinate is not a positive integer.

        Non-positive or fractional coordinates mean "no crop" to callers of the
        builder, so they are not treated as an error.
        """
        if not (left > 0 and top > 0 and right > 0 and bottom > 0):
            return None
        try:
            return cls(left=left, top=top, right=right, bottom=bottom)
        except ValidationError:
            return None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Optional["CropWindow"]:
        """Create crop window from dictionary."""
        return cls.from_coordinates(
            int(data.get("left", 0)),
            int(data.get("top", 0)),
            int(data.get("right", 0)),
            int(data.get("bottom", 0)),
        )

    def to_dict(self) -> Dict[str, int]:
        """Convert to dictionary."""
        return {"left": self.left, "top": self.top, "right": self.right, "bottom": self.bottom}

    def to_segment(self) -> str:
        """Render as an operation path segment."""
        return f"{self.left}x{self.top}:{self.right}x{self.bottom}"
