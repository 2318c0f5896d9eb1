"""Inputs that filters are applied to: one video, or several inputs at once."""

from pydantic import BaseModel
from typing import List, Optional
from .asset import MediaAsset
from .context import MediaContext, default_context
from .formats import OutputFormat


class Video(BaseModel):
    """A single input video."""

    src: str

    @staticmethod
    def open(src: str) -> "Video":
        """
        Open a video by path (nothing is read yet).

        Args:
            src: Video file path or URL

        Returns:
            Video instance
        """
        return Video(src=str(src))

    def asset(self, ctx: Optional[MediaContext] = None) -> MediaAsset:
        """Probe dimensions and duration of this video."""
        return MediaAsset.probe(self.src, ctx or default_context())


class AdvancedMedia(BaseModel):
    """Several inputs combined in one complex filter graph."""

    inputs: List[str]
    fmt: Optional[OutputFormat] = None

    def input_args(self) -> List[str]:
        """``-i`` arguments for every input, in order."""
        args: List[str] = []
        for src in self.inputs:
            args.extend(["-i", src])
        return args
