"""Captured frames held in CPU memory as BGRA pixels."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class FrameData:
    """A frame of tightly packed BGRA pixels."""

    data: bytes = field(repr=False)
    width: int
    height: int

    @property
    def pixels(self) -> bytes:
        """The BGRA pixel bytes."""
        return self.data

    def convert_to_cpu(self) -> FrameData:
        """Return a frame readable on the CPU; this frame already is one."""
        return self

    def pixel_at(self, x: int, y: int) -> tuple[int, int, int]:
        """Return the (r, g, b) colour at a pixel.

        Raises IndexError when the pixel lies outside the frame or its data.
        """
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} frame")
        start = (y * self.width + x) * 4
        if start + 4 > len(self.data):
            raise IndexError(f"pixel ({x}, {y}) beyond frame data")
        b, g, r = self.data[start : start + 3]
        return r, g, b