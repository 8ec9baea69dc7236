# cocuyo

cocuyo holds the building blocks of a screen-driven ambient lighting
application for WiZ smart bulbs. It covers stored settings, screen
regions and their coordinate mapping, captured frames, recording
states and frame pacing, the choice of a video conversion backend,
GPU adapter preferences, and performance statistics.

## Installation

```
pip install cocuyo
```

To run the test suite as well:

```
pip install "cocuyo[test]"
pytest
```

## Configuration: `cocuyo.config`

Settings are kept in a TOML file in the user's configuration
directory. `config_path()` returns its location. Every field of
`AppConfig` has a default, so a missing or partial file is fine:

| Setting                    | Default      |
|----------------------------|--------------|
| `bulb_update_interval_ms`  | 150          |
| `min_brightness_percent`   | 10           |
| `white_color_temp`         | 6500         |
| `minimize_to_tray`         | true         |
| `capture_fps_limit`        | 0 (no limit) |
| `capture_resolution_scale` | 100          |
| `force_cpu_sampling`       | false        |
| `show_perf_overlay`        | false        |

It also holds `preferred_adapter`, `preferred_backend`, `saved_bulbs`
(each with `mac`, `ip` and an optional `name`) and `selected_bulb_macs`.

```python
from cocuyo.config import AppConfig

config = AppConfig.load()
config.bulb_update_interval_ms = 200
config.save()
```

`AppConfig.load` and `AppConfig.save` take an optional path. If the
file cannot be read or parsed, `load` returns the defaults. `save`
creates the directory and logs a warning when writing fails.
`AppConfig.from_dict` raises `ValueError` for values of the wrong type
or out of range; `to_dict` leaves out unset optional values.

## Regions: `cocuyo.region` and `cocuyo.layout`

A `Region` is a rectangle in frame pixels tied to one bulb's MAC
address. `widget_to_frame`, `widget_to_frame_unclamped` and
`frame_to_widget` convert between widget and frame coordinates. The
frame is drawn scaled to fit its widget with its aspect ratio kept.
`widget_to_frame` returns `None` for points on the letterbox bars.

```python
from cocuyo.region import Rect, widget_to_frame

widget_to_frame(400.0, 300.0, Rect(0, 0, 800, 600), 1920, 1080)
```

`layout.sync_regions` keeps one region per selected bulb. It drops
regions of bulbs no longer selected. Each newly selected bulb gets a
default region, spread evenly across the frame (1920×1080 when no size
is given). `should_update_bulbs` tells whether the update interval has
passed. `WindowKind`, `window_title` and `view_title` name the
application's windows.

```python
from cocuyo.layout import sync_regions

regions, next_id = sync_regions([], ["00:00:00:00:00:01"], 1)
```

## Frames and recording: `cocuyo.frame` and `cocuyo.recording`

`FrameData` holds tightly packed BGRA pixels. `pixel_at(x, y)` returns
an `(r, g, b)` tuple, or raises `IndexError` outside the frame.

`RecordingState` is one of idle, starting, recording or error (with a
message). `Ready`, `StateChanged` and `FrameArrived` are the events a
capture produces. `RecordingCommand.STOP` ends a capture. `FrameGate`
drops frames that arrive faster than a frame-rate limit; 0 means no
limit. `scaled_capture_size` scales a capture size by a percentage
kept between 25 and 100. `capture_fps` asks for 60 frames per second
when no limit is set.

## Backends and adapters: `cocuyo.backends` and `cocuyo.adapters`

`GpuBackend` is Auto, CUDA (with a `CudaDevice`), OpenGL or CPU.
`config_key()` gives its stored name, such as `"cuda:0"` or `"cpu"`.
`best_available_backend` prefers CUDA, then OpenGL, then the CPU.
`resolve_auto_backend` reads a DMA-BUF descriptor's DRM driver from
fdinfo: NVIDIA prefers CUDA, other drivers prefer OpenGL.
`get_nvidia_gpu_name` looks for an NVIDIA render node.

`GpuAdapter` and `GpuAdapterSelection` describe GPU adapters.
`build_picker_options` lists "Auto" followed by each adapter.
`resolve_selection` matches a saved preference by case-insensitive
name substring and equal `Backend`, and falls back to Auto.

## Performance: `cocuyo.perf_stats`

`PerfStats` smooths the frame interval, the sampling time and the bulb
dispatch time with an exponential moving average (`Ema`, alpha 0.05).
It reports `effective_fps()` and gives a `fingerprint()` for deciding
when to redraw.

## What this package does not do

It has no command-line program and no windows. It does not capture the
screen, sample colours from frames, or talk to WiZ bulbs over the
network. It offers only the pieces listed above, for an application
that supplies those parts itself.