"""Media module: FFmpeg context, inputs and output formats."""

from .context import (
    MediaContext,
    Invoker,
    InvocationResult,
    default_context,
    set_default_context,
)
from .asset import MediaAsset
from .formats import OutputFormat
from .video import Video, AdvancedMedia

__all__ = [
    "MediaContext",
    "Invoker",
    "InvocationResult",
    "default_context",
    "set_default_context",
    "MediaAsset",
    "OutputFormat",
    "Video",
    "AdvancedMedia",
]
