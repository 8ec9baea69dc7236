import pytest

from cocuyo.adapters import (
    Backend,
    GpuAdapter,
    GpuAdapterSelection,
    build_picker_options,
    resolve_selection,
)

NVIDIA_VK = GpuAdapter("NVIDIA GeForce RTX", Backend.VULKAN)
NVIDIA_DX = GpuAdapter("NVIDIA GeForce RTX", Backend.DX12)
INTEL_VK = GpuAdapter("Intel UHD Graphics", Backend.VULKAN)


def test_adapter_display():
    assert str(NVIDIA_VK) == "NVIDIA GeForce RTX (vulkan)"


@pytest.mark.parametrize(
    "backend, text",
    [(Backend.VULKAN, "vulkan"), (Backend.DX12, "dx12"), (Backend.METAL, "metal"), (Backend.GL, "gl")],
)
def test_backend_display(backend, text):
    assert str(backend) == text


def test_backend_value_round_trip():
    for backend in Backend:
        assert Backend(backend.value) is backend


def test_selection_display():
    assert str(GpuAdapterSelection.auto()) == "Auto (wgpu default)"
    assert str(GpuAdapterSelection.named(INTEL_VK)) == str(INTEL_VK)


def test_selection_equality():
    assert GpuAdapterSelection.auto() == GpuAdapterSelection.auto()
    assert GpuAdapterSelection.named(INTEL_VK) == GpuAdapterSelection.named(
        GpuAdapter("Intel UHD Graphics", Backend.VULKAN)
    )
    assert GpuAdapterSelection.auto().is_auto
    assert not GpuAdapterSelection.named(INTEL_VK).is_auto


def test_build_picker_options_order():
    options = build_picker_options([NVIDIA_VK, INTEL_VK])
    assert options == [
        GpuAdapterSelection.auto(),
        GpuAdapterSelection.named(NVIDIA_VK),
        GpuAdapterSelection.named(INTEL_VK),
    ]


def test_build_picker_options_empty():
    assert build_picker_options([]) == [GpuAdapterSelection.auto()]


def test_resolve_none_is_auto():
    assert resolve_selection(None, [NVIDIA_VK]) == GpuAdapterSelection.auto()


def test_resolve_case_insensitive_substring():
    pref = GpuAdapter("geforce", Backend.VULKAN)
    assert resolve_selection(pref, [INTEL_VK, NVIDIA_VK]) == GpuAdapterSelection.named(NVIDIA_VK)


def test_resolve_requires_same_backend():
    pref = GpuAdapter("NVIDIA", Backend.DX12)
    assert resolve_selection(pref, [NVIDIA_VK, NVIDIA_DX]).adapter == NVIDIA_DX
    assert resolve_selection(pref, [NVIDIA_VK]) == GpuAdapterSelection.auto()


def test_resolve_no_match_is_auto():
    pref = GpuAdapter("Radeon", Backend.VULKAN)
    assert resolve_selection(pref, [NVIDIA_VK, INTEL_VK]).is_auto


def test_resolve_first_match_wins():
    pref = GpuAdapter("", Backend.VULKAN)
    assert resolve_selection(pref, [INTEL_VK, NVIDIA_VK]).adapter == INTEL_VK