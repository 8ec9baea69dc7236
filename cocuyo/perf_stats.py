"""Smoothed performance metrics for the capture and bulb pipeline."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable

_ALPHA = 0.05


@dataclass
class Ema:
    """Exponential moving average; an alpha of 0.05 smooths over about 20 samples."""

    alpha: float
    value: float = 0.0
    initialized: bool = False

    def update(self, sample: float) -> None:
        if self.initialized:
            self.value = self.alpha * sample + (1.0 - self.alpha) * self.value
        else:
            self.value = sample
            self.initialized = True


class PerfStats:
    """Tracks frame rate, sampling time and bulb dispatch time with EMA smoothing."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self.reset()

    def reset(self) -> None:
        """Forget every measurement."""
        self._last_frame_time: float | None = None
        self._frame_interval = Ema(_ALPHA)
        self._sampling_start: float | None = None
        self._sampling_time = Ema(_ALPHA)
        self._bulb_dispatch = Ema(_ALPHA)

    def record_frame_arrival(self) -> None:
        """Record a frame arriving and measure the interval since the last one."""
        now = self._clock()
        if self._last_frame_time is not None:
            self._frame_interval.update((now - self._last_frame_time) * 1000.0)
        self._last_frame_time = now

    def mark_sampling_start(self) -> None:
        self._sampling_start = self._clock()

    def record_sampling_complete(self) -> None:
        """Record the time since the last sampling start, if one is pending."""
        if self._sampling_start is None:
            return
        elapsed_ms = (self._clock() - self._sampling_start) * 1000.0
        self._sampling_start = None
        self._sampling_time.update(elapsed_ms)

    def record_sampling_time(self, elapsed_ms: float) -> None:
        self._sampling_time.update(elapsed_ms)

    def record_bulb_dispatch(self, elapsed_ms: float) -> None:
        self._bulb_dispatch.update(elapsed_ms)

    def effective_fps(self) -> float:
        interval = self._frame_interval.value
        return 1000.0 / interval if interval > 0.0 else 0.0

    def frame_interval_ms(self) -> float:
        return self._frame_interval.value

    def sampling_time_ms(self) -> float:
        return self._sampling_time.value

    def bulb_dispatch_ms(self) -> float:
        return self._bulb_dispatch.value

    def has_frame_data(self) -> bool:
        return self._frame_interval.initialized

    def has_sampling_data(self) -> bool:
        return self._sampling_time.initialized

    def has_bulb_data(self) -> bool:
        return self._bulb_dispatch.initialized

    def fingerprint(self) -> int:
        """Hash of the metrics rounded down to integers, for redraw invalidation."""
        return hash(
            (
                int(self.effective_fps()),
                int(self.frame_interval_ms()),
                int(self.sampling_time_ms()),
                int(self.bulb_dispatch_ms()),
            )
        )