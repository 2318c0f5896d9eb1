"""Pydantic value objects for filter configuration, plus filter exceptions."""

from pydantic import BaseModel, Field
from typing import Optional
from ..core.types import ExprValue, Position


class CoordinateSpec(BaseModel):
    """Where an overlay is placed on the base frame."""

    position: Position = Position.ABSOLUTE
    # Absolute mode
    x: Optional[ExprValue] = None
    y: Optional[ExprValue] = None
    # Relative mode: top/left are offsets, bottom/right are measured from the far edge
    top: Optional[ExprValue] = None
    bottom: Optional[ExprValue] = None
    left: Optional[ExprValue] = None
    right: Optional[ExprValue] = None

    model_config = {"frozen": True}

    @staticmethod
    def absolute(
        x: Optional[ExprValue] = None, y: Optional[ExprValue] = None
    ) -> "CoordinateSpec":
        """
        Absolute coordinates.

        Args:
            x: Horizontal offset or FFmpeg expression (defaults to 0)
            y: Vertical offset or FFmpeg expression (defaults to 0)

        Returns:
            Absolute coordinate spec
        """
        return CoordinateSpec(position=Position.ABSOLUTE, x=x, y=y)

    @staticmethod
    def relative(
        top: Optional[ExprValue] = None,
        bottom: Optional[ExprValue] = None,
        left: Optional[ExprValue] = None,
        right: Optional[ExprValue] = None,
    ) -> "CoordinateSpec":
        """
        Edge-relative coordinates.

        If both top and bottom are given, top wins; same for left over right.

        Returns:
            Relative coordinate spec
        """
        return CoordinateSpec(
            position=Position.RELATIVE, top=top, bottom=bottom, left=left, right=right
        )


class ScaleSpec(BaseModel):
    """Target size for the overlay. Only applied when both sides are set."""

    width: Optional[int] = Field(default=None, alias="w")
    height: Optional[int] = Field(default=None, alias="h")

    model_config = {"frozen": True, "populate_by_name": True}

    @property
    def is_complete(self) -> bool:
        return self.width is not None and self.height is not None


class TimeWindow(BaseModel):
    """Playback window during which a filter is enabled."""

    start: Optional[ExprValue] = None
    end: Optional[ExprValue] = None

    model_config = {"frozen": True}


class InvalidConfiguration(ValueError):
    """Exception raised when a filter is constructed with an unusable configuration."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class ToolVersionError(InvalidConfiguration):
    """Exception raised when FFmpeg is older than a filter requires."""

    def __init__(self, message: str, required: str, found: str):
        super().__init__(message)
        self.required = required
        self.found = found
