"""Screen regions assigned to bulbs and widget/frame coordinate mapping."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle in widget space."""

    x: float
    y: float
    width: float
    height: float


@dataclass
class Region:
    """A frame-space rectangle (in pixels) whose colour drives one bulb."""

    id: int
    x: float
    y: float
    width: float
    height: float
    bulb_mac: str
    sampled_color: tuple[int, int, int] | None = None
    strategy: Any = None


def _fit(bounds: Rect, frame_w: int, frame_h: int) -> tuple[float, float, float, float]:
    """Return rendered width, height and offsets of a contained frame."""
    frame_aspect = frame_w / frame_h
    bounds_aspect = bounds.width / bounds.height
    if frame_aspect > bounds_aspect:
        scale_x, scale_y = 1.0, bounds_aspect / frame_aspect
    else:
        scale_x, scale_y = frame_aspect / bounds_aspect, 1.0
    rendered_w = bounds.width * scale_x
    rendered_h = bounds.height * scale_y
    offset_x = (bounds.width - rendered_w) * 0.5
    offset_y = (bounds.height - rendered_h) * 0.5
    return rendered_w, rendered_h, offset_x, offset_y


def widget_to_frame(
    widget_x: float, widget_y: float, widget_bounds: Rect, frame_w: int, frame_h: int
) -> tuple[float, float] | None:
    """Map a widget point to frame pixels, or None outside the shown frame.

    The frame is drawn scaled to fit the widget with its aspect ratio kept.
    """
    rendered_w, rendered_h, offset_x, offset_y = _fit(widget_bounds, frame_w, frame_h)
    local_x = widget_x - offset_x
    local_y = widget_y - offset_y
    if local_x < 0.0 or local_y < 0.0 or local_x > rendered_w or local_y > rendered_h:
        return None
    return (local_x / rendered_w) * frame_w, (local_y / rendered_h) * frame_h


def widget_to_frame_unclamped(
    widget_x: float, widget_y: float, widget_bounds: Rect, frame_w: int, frame_h: int
) -> tuple[float, float]:
    """Map a widget point to frame pixels without checking it lies on the frame."""
    rendered_w, rendered_h, offset_x, offset_y = _fit(widget_bounds, frame_w, frame_h)
    local_x = widget_x - offset_x
    local_y = widget_y - offset_y
    return (local_x / rendered_w) * frame_w, (local_y / rendered_h) * frame_h


def frame_to_widget(region: Region, widget_bounds: Rect, frame_w: int, frame_h: int) -> Rect:
    """Map a frame-space region to the widget rectangle it is drawn in."""
    rendered_w, rendered_h, offset_x, offset_y = _fit(widget_bounds, frame_w, frame_h)
    return Rect(
        offset_x + (region.x / frame_w) * rendered_w,
        offset_y + (region.y / frame_h) * rendered_h,
        (region.width / frame_w) * rendered_w,
        (region.height / frame_h) * rendered_h,
    )