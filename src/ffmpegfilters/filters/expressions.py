"""Builders for FFmpeg filter-graph expression fragments.

Everything that knows the exact syntax of the overlay/scale/enable grammar
lives here, so filters only assemble the pieces.
"""

from typing import Optional, Tuple
from ..core.types import ExprValue, Position
from .models import CoordinateSpec, ScaleSpec, TimeWindow

# FFmpeg overlay variables: base (main) frame and overlay frame dimensions
MAIN_W = "main_w"
MAIN_H = "main_h"
OVERLAY_W = "overlay_w"
OVERLAY_H = "overlay_h"


def _is_set(value: Optional[ExprValue]) -> bool:
    # 0 is a real offset; None and blank strings are not
    if value is None:
        return False
    return not (isinstance(value, str) and not value.strip())


def _expr(value: Optional[ExprValue]) -> str:
    return str(value) if _is_set(value) else "0"


def _from_far_edge(main: str, distance: ExprValue, overlay: str) -> str:
    return f"{main} - {distance} - {overlay}"


def resolve_coordinates(coordinates: CoordinateSpec) -> Tuple[str, str]:
    """
    Turn a coordinate spec into overlay x/y expressions.

    Values are passed through verbatim, so callers may use FFmpeg's own
    variables (e.g. ``"main_w/2"``). No arithmetic is evaluated here.

    Args:
        coordinates: Coordinate spec

    Returns:
        (x_expr, y_expr) ready for ``overlay=X:Y``
    """
    if coordinates.position != Position.RELATIVE:
        return _expr(coordinates.x), _expr(coordinates.y)

    # Vertical axis: top wins over bottom
    if _is_set(coordinates.top):
        y_expr = str(coordinates.top)
    elif _is_set(coordinates.bottom):
        y_expr = _from_far_edge(MAIN_H, coordinates.bottom, OVERLAY_H)
    else:
        y_expr = "0"

    # Horizontal axis: left wins over right
    if _is_set(coordinates.left):
        x_expr = str(coordinates.left)
    elif _is_set(coordinates.right):
        x_expr = _from_far_edge(MAIN_W, coordinates.right, OVERLAY_W)
    else:
        x_expr = "0"

    return x_expr, y_expr


def compile_time_gate(window: Optional[TimeWindow]) -> str:
    """
    Compile a time window into an FFmpeg boolean predicate over ``t``.

    An ``end`` without a ``start`` produces no gate at all.

    Returns:
        ``between(t,S,E)``, ``gte(t,S)`` or an empty string
    """
    if window is None or not _is_set(window.start):
        return ""
    if _is_set(window.end):
        return f"between(t,{window.start},{window.end})"
    return f"gte(t,{window.start})"


def enable_clause(predicate: str) -> str:
    """Wrap a predicate as an overlay ``enable`` option (empty stays empty)."""
    return f" :enable='{predicate}'" if predicate else ""


def build_scale_fragment(scale: Optional[ScaleSpec]) -> str:
    """Return ``,scale=W:H`` to chain onto a node, or ``""`` when unscaled."""
    if scale is None or not scale.is_complete:
        return ""
    return f",scale={scale.width}:{scale.height}"
