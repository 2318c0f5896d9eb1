"""Core module for ffmpegfilters."""

from .types import ExprValue, Position

__all__ = [
    "ExprValue",
    "Position",
]
