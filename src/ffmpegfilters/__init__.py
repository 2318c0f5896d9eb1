"""ffmpegfilters - compose prioritized FFmpeg filters into filter-graph arguments."""

from .__version__ import __version__
from .filters import (
    CoordinateSpec,
    ScaleSpec,
    TimeWindow,
    InvalidConfiguration,
    ToolVersionError,
    Filter,
    WatermarkFilter,
    FilterPipeline,
    compile_filters,
)
from .media import (
    MediaContext,
    Invoker,
    InvocationResult,
    MediaAsset,
    OutputFormat,
    Video,
    AdvancedMedia,
    default_context,
    set_default_context,
)
from .core import Position


__all__ = [
    "__version__",
    "CoordinateSpec",
    "ScaleSpec",
    "TimeWindow",
    "InvalidConfiguration",
    "ToolVersionError",
    "Filter",
    "WatermarkFilter",
    "FilterPipeline",
    "compile_filters",
    "MediaContext",
    "Invoker",
    "InvocationResult",
    "MediaAsset",
    "OutputFormat",
    "Video",
    "AdvancedMedia",
    "default_context",
    "set_default_context",
    "Position",
]
