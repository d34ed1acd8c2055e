"""fit_view: viewport transform that fits every node box into a canvas.

A renderer applies the returned Viewport as ``screen = world * zoom + (x, y)``.
The zoom is the largest one at which the padded bounding box of all nodes
fits the canvas, clamped to ``[min_zoom, max_zoom]``, and the bounding box is
centred in the canvas.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from json_orbit.result import GraphLayout

__all__ = ["Viewport", "fit_view", "layout_bounds"]


@dataclass(frozen=True, slots=True)
class Viewport:
    """Pan offset (x, y) in screen pixels and zoom factor."""

    x: float
    y: float
    zoom: float


def layout_bounds(layout: GraphLayout) -> tuple[float, float, float, float] | None:
    """Return ``(x, y, width, height)`` of the box enclosing all nodes.

    Returns None for a layout with no nodes.
    """
    if not layout.nodes:
        return None
    boxes = np.array(
        [
            (n.position.x, n.position.y, n.position.x + n.width, n.position.y + n.height)
            for n in layout.nodes
        ],
        dtype=float,
    )
    x0, y0 = boxes[:, :2].min(axis=0)
    x1, y1 = boxes[:, 2:].max(axis=0)
    return float(x0), float(y0), float(x1 - x0), float(y1 - y0)


def fit_view(
    layout: GraphLayout,
    width: float,
    height: float,
    padding: float = 0.2,
    min_zoom: float = 0.1,
    max_zoom: float = 2.0,
) -> Viewport:
    """Compute the viewport that shows every node of ``layout``.

    Args:
        layout:   The flattened layout.
        width:    Canvas width in pixels (> 0).
        height:   Canvas height in pixels (> 0).
        padding:  Fraction of the bounds added as margin (>= 0).
        min_zoom: Lower zoom clamp (> 0).
        max_zoom: Upper zoom clamp (>= min_zoom).

    Returns:
        The Viewport. An empty layout yields the identity ``Viewport(0, 0, 1)``.

    Raises:
        ValueError: On a non-positive canvas size, negative padding or
            inconsistent zoom bounds.
    """
    if width <= 0 or height <= 0:
        msg = f"canvas size must be positive, got {width}x{height}"
        raise ValueError(msg)
    if padding < 0:
        msg = f"padding must be >= 0, got {padding}"
        raise ValueError(msg)
    if min_zoom <= 0 or max_zoom < min_zoom:
        msg = f"zoom bounds must satisfy 0 < min_zoom <= max_zoom, got [{min_zoom}, {max_zoom}]"
        raise ValueError(msg)

    bounds = layout_bounds(layout)
    if bounds is None:
        return Viewport(0.0, 0.0, 1.0)
    bx, by, bw, bh = bounds

    scale = 1.0 + padding
    zoom_x = width / (bw * scale) if bw > 0 else max_zoom
    zoom_y = height / (bh * scale) if bh > 0 else max_zoom
    zoom = float(np.clip(min(zoom_x, zoom_y), min_zoom, max_zoom))

    center_x = bx + bw / 2
    center_y = by + bh / 2
    return Viewport(
        x=width / 2 - center_x * zoom,
        y=height / 2 - center_y * zoom,
        zoom=zoom,
    )
