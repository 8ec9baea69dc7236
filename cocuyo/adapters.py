"""GPU adapter descriptions and the adapter picker's selection logic."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence


class Backend(Enum):
    """Graphics API backend of a GPU adapter; the value is its stored name."""

    NOOP = "Noop"
    VULKAN = "Vulkan"
    METAL = "Metal"
    DX12 = "Dx12"
    GL = "Gl"
    BROWSER_WEBGPU = "BrowserWebGpu"

    def __str__(self) -> str:
        return _BACKEND_DISPLAY[self]


_BACKEND_DISPLAY = {
    Backend.NOOP: "noop",
    Backend.VULKAN: "vulkan",
    Backend.METAL: "metal",
    Backend.DX12: "dx12",
    Backend.GL: "gl",
    Backend.BROWSER_WEBGPU: "webgpu",
}


@dataclass(frozen=True)
class GpuAdapter:
    """A GPU adapter identified by its reported name and backend."""

    name: str
    backend: Backend

    def __str__(self) -> str:
        return f"{self.name} ({self.backend})"


@dataclass(frozen=True)
class GpuAdapterSelection:
    """Either automatic adapter choice or one specific adapter."""

    adapter: GpuAdapter | None = None

    @classmethod
    def auto(cls) -> GpuAdapterSelection:
        return cls(None)

    @classmethod
    def named(cls, adapter: GpuAdapter) -> GpuAdapterSelection:
        return cls(adapter)

    @property
    def is_auto(self) -> bool:
        return self.adapter is None

    def __str__(self) -> str:
        if self.adapter is None:
            return "Auto (wgpu default)"
        return str(self.adapter)


def build_picker_options(adapters: Iterable[GpuAdapter]) -> list[GpuAdapterSelection]:
    """Return the picker entries: automatic first, then each adapter."""
    return [GpuAdapterSelection.auto(), *map(GpuAdapterSelection.named, adapters)]


def resolve_selection(
    preferred: GpuAdapter | None, adapters: Sequence[GpuAdapter]
) -> GpuAdapterSelection:
    """Find the adapter matching a saved preference.

    The name matches case-insensitively as a substring and the backend must be
    equal; anything unmatched falls back to automatic selection.
    """
    if preferred is None:
        return GpuAdapterSelection.auto()
    wanted = preferred.name.lower()
    match = next(
        (
            adapter
            for adapter in adapters
            if wanted in adapter.name.lower() and adapter.backend == preferred.backend
        ),
        None,
    )
    if match is None:
        return GpuAdapterSelection.auto()
    return GpuAdapterSelection.named(match)