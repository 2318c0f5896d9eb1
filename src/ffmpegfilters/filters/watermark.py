"""Watermark filter: overlay an image file on the video."""

import os
from pydantic import BaseModel, ValidationError
from typing import Any, Dict, List, Optional, Type, TypeVar, Union
from .base import Filter
from .expressions import (
    build_scale_fragment,
    compile_time_gate,
    enable_clause,
    resolve_coordinates,
)
from .models import CoordinateSpec, InvalidConfiguration, ScaleSpec, TimeWindow

_M = TypeVar("_M", bound=BaseModel)


def _coerce(
    model: Type[_M], value: Union[_M, Dict[str, Any], None], field: str
) -> Optional[_M]:
    """Validate dict config into a value object."""
    if value is None or isinstance(value, model):
        return value
    try:
        return model.model_validate(value)
    except ValidationError as e:
        raise InvalidConfiguration(f"Invalid {field} configuration: {e}") from e


class WatermarkFilter(Filter):
    """Overlay a watermark image, optionally scaled and limited to a time window."""

    def __init__(
        self,
        watermark_path: str,
        coordinates: Union[CoordinateSpec, Dict[str, Any], None] = None,
        scale: Union[ScaleSpec, Dict[str, Any], None] = None,
        time: Union[TimeWindow, Dict[str, Any], None] = None,
        priority: int = 0,
    ):
        """
        Initialize watermark filter.

        Args:
            watermark_path: Path to the watermark image (must exist)
            coordinates: Where to place the watermark (default top-left corner)
            scale: Optional width/height for the watermark
            time: Optional start/end window during which it is shown
            priority: Ordering key within a pipeline

        Raises:
            InvalidConfiguration: If the file does not exist or a config dict is invalid
        """
        if not os.path.isfile(watermark_path):
            raise InvalidConfiguration(
                f"File {watermark_path} does not exist", path=watermark_path
            )

        super().__init__(priority)
        self._watermark_path = watermark_path
        self._coordinates = (
            _coerce(CoordinateSpec, coordinates, "coordinates") or CoordinateSpec()
        )
        self._scale = _coerce(ScaleSpec, scale, "scale")
        self._time = _coerce(TimeWindow, time, "time") or TimeWindow()

    @property
    def name(self) -> str:
        return "watermark"

    @property
    def watermark_path(self) -> str:
        return self._watermark_path

    @property
    def coordinates(self) -> CoordinateSpec:
        return self._coordinates

    @property
    def scale(self) -> Optional[ScaleSpec]:
        return self._scale

    @property
    def time(self) -> TimeWindow:
        return self._time

    def compile_fragment(self, fmt=None) -> List[str]:
        """
        Build the ``-vf`` argument pair for this watermark.

        Args:
            fmt: Target output format (does not affect the watermark graph)

        Returns:
            ``["-vf", "movie=... [watermark]; [in][watermark] overlay=... [out]"]``
        """
        x_expr, y_expr = resolve_coordinates(self._coordinates)
        enable = enable_clause(compile_time_gate(self._time))
        scale = build_scale_fragment(self._scale)

        return [
            "-vf",
            f"movie={self._watermark_path}{scale} [watermark]; "
            f"[in][watermark] overlay={x_expr}:{y_expr}{enable} [out]",
        ]
