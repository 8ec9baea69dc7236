"""Video conversion backends and picking one for the compositor's GPU."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

log = logging.getLogger(__name__)

DRM_CLASS_DIR = "/sys/class/drm"
FDINFO_DIR = "/proc/self/fdinfo"

_NVIDIA_VENDOR_ID = "0x10de"
_DRIVER_PREFIX = "drm-driver:"


class BackendKind(Enum):
    """The kind of conversion backend."""

    AUTO = "auto"
    CUDA = "cuda"
    OPENGL = "opengl"
    CPU = "cpu"


@dataclass(frozen=True)
class CudaDevice:
    """A CUDA-capable GPU."""

    index: int
    name: str


@dataclass(frozen=True)
class GpuBackend:
    """A conversion backend; CUDA backends name their device."""

    kind: BackendKind
    device: CudaDevice | None = None

    def __post_init__(self) -> None:
        if (self.kind is BackendKind.CUDA) != (self.device is not None):
            raise ValueError("a CUDA backend needs a device and no other backend takes one")

    @classmethod
    def auto(cls) -> GpuBackend:
        return cls(BackendKind.AUTO)

    @classmethod
    def cuda(cls, device: CudaDevice) -> GpuBackend:
        return cls(BackendKind.CUDA, device)

    @classmethod
    def opengl(cls) -> GpuBackend:
        return cls(BackendKind.OPENGL)

    @classmethod
    def cpu(cls) -> GpuBackend:
        return cls(BackendKind.CPU)

    def config_key(self) -> str:
        """The key under which this backend is stored in the settings."""
        if self.device is not None:
            return f"cuda:{self.device.index}"
        return self.kind.value

    def __str__(self) -> str:
        if self.device is not None:
            return self.device.name
        return {
            BackendKind.AUTO: "Auto",
            BackendKind.OPENGL: "OpenGL (GPU)",
            BackendKind.CPU: "CPU (Software)",
        }[self.kind]


def get_nvidia_gpu_name(drm_dir: Path | str = DRM_CLASS_DIR) -> str | None:
    """Return a name for an NVIDIA render node, if one is present.

    Gives None when the directory cannot be read, no render node belongs to
    NVIDIA, or a render node's vendor file cannot be read.
    """
    try:
        entries = sorted(Path(drm_dir).iterdir())
    except OSError:
        return None
    for path in entries:
        if not path.name.startswith("renderD"):
            continue
        try:
            vendor = (path / "device" / "vendor").read_text().strip().lower()
        except (OSError, UnicodeDecodeError):
            return None
        if vendor == _NVIDIA_VENDOR_ID:
            return "NVIDIA GPU"
    return None


def read_drm_driver(fd: int, fdinfo_dir: Path | str = FDINFO_DIR) -> str | None:
    """Return the lower-cased DRM driver named in a descriptor's fdinfo."""
    try:
        content = (Path(fdinfo_dir) / str(fd)).read_text()
    except (OSError, UnicodeDecodeError):
        return None
    for line in content.splitlines():
        line = line.strip()
        if line.startswith(_DRIVER_PREFIX):
            return line[len(_DRIVER_PREFIX) :].strip().lower()
    return None


def _first_cuda(available: Iterable[GpuBackend]) -> GpuBackend | None:
    return next((b for b in available if b.kind is BackendKind.CUDA), None)


def _has_opengl(available: Iterable[GpuBackend]) -> bool:
    return any(b.kind is BackendKind.OPENGL for b in available)


def best_available_backend(available: Sequence[GpuBackend]) -> GpuBackend:
    """Pick CUDA, then OpenGL, then the CPU."""
    cuda = _first_cuda(available)
    if cuda is not None:
        return cuda
    if _has_opengl(available):
        return GpuBackend.opengl()
    return GpuBackend.cpu()


def resolve_auto_backend(
    dmabuf_fd: int | None,
    available: Sequence[GpuBackend],
    fdinfo_dir: Path | str = FDINFO_DIR,
) -> GpuBackend:
    """Turn the automatic choice into a concrete backend.

    With a DMA-BUF descriptor the compositor's DRM driver decides: NVIDIA
    prefers CUDA, other drivers prefer OpenGL. Otherwise the best available
    backend is used.
    """
    if dmabuf_fd is not None:
        driver = read_drm_driver(dmabuf_fd, fdinfo_dir)
        if driver is not None:
            log.info("Detected DRM driver from DMA-BUF fd: %s", driver)
            if "nvidia" in driver:
                cuda = _first_cuda(available)
                if cuda is not None:
                    return cuda
            if _has_opengl(available):
                return GpuBackend.opengl()
    return best_available_backend(available)