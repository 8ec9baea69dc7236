"""Recording session states, events and capture pacing."""

from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Union

from .frame import FrameData

_PHASES = ("idle", "starting", "recording", "error")
_DEFAULT_CAPTURE_FPS = 60
_MIN_SCALE = 25
_MAX_SCALE = 100


@dataclass(frozen=True)
class RecordingState:
    """Phase of the recording session; errors carry a message."""

    phase: str = "idle"
    message: str | None = None

    def __post_init__(self) -> None:
        if self.phase not in _PHASES:
            raise ValueError(f"unknown recording phase: {self.phase!r}")

    @classmethod
    def idle(cls) -> RecordingState:
        return cls("idle")

    @classmethod
    def starting(cls) -> RecordingState:
        return cls("starting")

    @classmethod
    def recording(cls) -> RecordingState:
        return cls("recording")

    @classmethod
    def error(cls, message: str) -> RecordingState:
        return cls("error", message)

    def is_finished(self) -> bool:
        """Whether the session has ended, normally or with an error."""
        return self.phase in ("idle", "error")

    def __str__(self) -> str:
        if self.phase == "error":
            return f"Error: {self.message}"
        return self.phase.capitalize()


class RecordingCommand(Enum):
    """Commands the application sends to a running capture."""

    STOP = "stop"


@dataclass(frozen=True)
class Ready:
    """The capture has started; commands go into this queue."""

    commands: asyncio.Queue[RecordingCommand] | Any


@dataclass(frozen=True)
class StateChanged:
    state: RecordingState


@dataclass(frozen=True)
class FrameArrived:
    frame: FrameData


RecordingEvent = Union[Ready, StateChanged, FrameArrived]


class FrameGate:
    """Drops frames arriving faster than a frame-rate limit; 0 means no limit."""

    def __init__(self, fps_limit: int, clock: Callable[[], float] = time.monotonic) -> None:
        if fps_limit < 0:
            raise ValueError(f"negative frame rate limit: {fps_limit}")
        self.interval = None if fps_limit == 0 else 1.0 / fps_limit
        self._clock = clock
        self._last: float | None = None

    def should_forward(self) -> bool:
        """Whether the frame arriving now passes the limit; records it if so."""
        now = self._clock()
        if self.interval is not None and self._last is not None:
            if now - self._last < self.interval:
                return False
        self._last = now
        return True


def scaled_capture_size(width: int, height: int, resolution_scale: int) -> tuple[int, int]:
    """Scale a capture size by a percentage kept between 25 and 100."""
    scale = min(max(resolution_scale, _MIN_SCALE), _MAX_SCALE)
    if scale >= _MAX_SCALE:
        return width, height
    return width * scale // 100, height * scale // 100


def capture_fps(fps_limit: int) -> int:
    """Frame rate to request from the capture source; 0 asks for the default."""
    return _DEFAULT_CAPTURE_FPS if fps_limit == 0 else fps_limit