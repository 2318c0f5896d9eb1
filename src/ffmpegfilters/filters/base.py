"""Abstract base class shared by every filter kind."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from ..media.formats import OutputFormat
    from ..media.video import AdvancedMedia, Video


class Filter(ABC):
    """A named, prioritized unit that contributes FFmpeg arguments."""

    # Oldest supported FFmpeg, shared by every filter kind;
    # subclasses raise it when they need newer syntax
    minimum_tool_version: str = "0.8"

    def __init__(self, priority: int = 0):
        self._priority = priority

    @property
    @abstractmethod
    def name(self) -> str:
        """Filter name."""
        pass

    @property
    def priority(self) -> int:
        """Ordering key; lower priorities are emitted first."""
        return self._priority

    @abstractmethod
    def compile_fragment(self, fmt: Optional["OutputFormat"] = None) -> List[str]:
        """Get the FFmpeg arguments this filter contributes."""
        pass

    def apply(self, video: "Video", fmt: Optional["OutputFormat"] = None) -> List[str]:
        """Arguments for a single-input command."""
        return self.compile_fragment(fmt)

    def apply_complex(self, media: "AdvancedMedia") -> List[str]:
        """Arguments for a multi-input command."""
        return self.compile_fragment(media.fmt)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, priority={self.priority})"
