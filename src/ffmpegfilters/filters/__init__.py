"""Filters module: watermark filter, expression builders and the filter pipeline."""

from .models import (
    CoordinateSpec,
    ScaleSpec,
    TimeWindow,
    InvalidConfiguration,
    ToolVersionError,
)
from .expressions import (
    resolve_coordinates,
    compile_time_gate,
    enable_clause,
    build_scale_fragment,
)
from .base import Filter
from .watermark import WatermarkFilter
from .pipeline import FilterPipeline, compile_filters, parse_version, version_at_least

__all__ = [
    "CoordinateSpec",
    "ScaleSpec",
    "TimeWindow",
    "InvalidConfiguration",
    "ToolVersionError",
    "resolve_coordinates",
    "compile_time_gate",
    "enable_clause",
    "build_scale_fragment",
    "Filter",
    "WatermarkFilter",
    "FilterPipeline",
    "compile_filters",
    "parse_version",
    "version_at_least",
]
