"""Window kinds, their titles, and placing default regions for selected bulbs."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import Enum

from .region import Region

DEFAULT_FRAME_SIZE = (1920.0, 1080.0)

_MAX_WIDTH_FRACTION = 0.3
_HEIGHT_FRACTION = 0.4


class WindowKind(Enum):
    """The windows the application can open."""

    MAIN = "main"
    SETTINGS = "settings"
    BULB_SETUP = "bulb_setup"
    CAPTURE_PICKER = "capture_picker"


_WINDOW_TITLES = {
    WindowKind.MAIN: "Cocuyo",
    WindowKind.SETTINGS: "Cocuyo - Settings",
    WindowKind.BULB_SETUP: "Cocuyo - Bulb Setup",
    WindowKind.CAPTURE_PICKER: "Cocuyo - Select Target",
}

_VIEW_TITLES = {
    WindowKind.MAIN: "Cocuyo",
    WindowKind.SETTINGS: "Settings",
    WindowKind.BULB_SETUP: "Bulb Setup",
    WindowKind.CAPTURE_PICKER: "Select Capture Target",
}


def window_title(kind: WindowKind | None) -> str:
    """The operating-system title of a window; empty for an unknown window."""
    if kind is None:
        return ""
    return _WINDOW_TITLES[kind]


def view_title(kind: WindowKind | None) -> str:
    """The title shown in a window's own title bar; empty for an unknown window."""
    if kind is None:
        return ""
    return _VIEW_TITLES[kind]


def sync_regions(
    regions: Iterable[Region],
    selected_macs: Sequence[str],
    next_region_id: int,
    frame_size: tuple[float, float] | None = None,
) -> tuple[list[Region], int]:
    """Keep one region per selected bulb.

    Regions of bulbs no longer selected are dropped. Each selected bulb
    without a region gets a default one, spread evenly across the frame and
    centred vertically. Returns the regions and the next free region id.
    """
    selected = set(selected_macs)
    kept = [region for region in regions if region.bulb_mac in selected]
    covered = {region.bulb_mac for region in kept}

    frame_w, frame_h = (
        (float(frame_size[0]), float(frame_size[1])) if frame_size else DEFAULT_FRAME_SIZE
    )
    slots = len(selected_macs) + 1.0
    default_w = min(frame_w / slots, frame_w * _MAX_WIDTH_FRACTION)
    default_h = frame_h * _HEIGHT_FRACTION
    cy = frame_h / 2.0
    y = min(max(cy - default_h / 2.0, 0.0), frame_h - default_h)

    for index, mac in enumerate(selected_macs):
        if mac in covered:
            continue
        cx = frame_w * (index + 1.0) / slots
        kept.append(
            Region(
                id=next_region_id,
                x=cx - default_w / 2.0,
                y=y,
                width=default_w,
                height=default_h,
                bulb_mac=mac,
            )
        )
        covered.add(mac)
        next_region_id += 1
    return kept, next_region_id


def should_update_bulbs(last_update: float | None, interval_ms: int, now: float) -> bool:
    """Whether enough time has passed since the last bulb update.

    Times are in seconds on one monotonic clock; no previous update means yes.
    """
    if last_update is None:
        return True
    return (now - last_update) * 1000.0 >= interval_ms