"""Core types and enums for the ffmpegfilters package."""

from enum import Enum
from typing import Union

# Coordinate / time value: a literal number or an FFmpeg expression string
ExprValue = Union[int, float, str]


class Position(str, Enum):
    """Positioning modes for overlay coordinates."""

    ABSOLUTE = "absolute"  # Plain x/y, passed through verbatim
    RELATIVE = "relative"  # Distances from the top/bottom/left/right edges
