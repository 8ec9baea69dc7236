"""Persistent application settings stored as TOML."""

from __future__ import annotations

import ipaddress
import logging
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import platformdirs
import tomli_w

from .adapters import Backend, GpuAdapter

log = logging.getLogger(__name__)

_U8 = 0xFF
_U16 = 0xFFFF
_U32 = 0xFFFF_FFFF
_U64 = 0xFFFF_FFFF_FFFF_FFFF


def config_path() -> Path:
    """Return the path of the configuration file."""
    return Path(platformdirs.user_config_dir("cocuyo", appauthor=False)) / "config.toml"


def _int(data: Mapping[str, Any], key: str, default: int, maximum: int) -> int:
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= maximum:
        raise ValueError(f"invalid {key}: {value!r}")
    return value


def _bool(data: Mapping[str, Any], key: str, default: bool) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise ValueError(f"invalid {key}: {value!r}")
    return value


def _optional_str(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"invalid {key}: {value!r}")
    return value


def _adapter_from(value: Any) -> GpuAdapter | None:
    if value is None:
        return None
    if not isinstance(value, Mapping):
        raise ValueError(f"invalid preferred_adapter: {value!r}")
    name = value.get("name")
    if not isinstance(name, str):
        raise ValueError(f"invalid adapter name: {name!r}")
    return GpuAdapter(name, Backend(value.get("backend")))


def _bulb_from(value: Any) -> dict[str, str]:
    if not isinstance(value, Mapping):
        raise ValueError(f"invalid saved bulb: {value!r}")
    mac = value.get("mac")
    if not isinstance(mac, str):
        raise ValueError(f"invalid bulb mac: {mac!r}")
    bulb = {"mac": mac, "ip": str(ipaddress.ip_address(value.get("ip")))}
    name = _optional_str(value, "name")
    if name is not None:
        bulb["name"] = name
    return bulb


def _bulb_to_dict(bulb: Any) -> dict[str, str]:
    """Serialise a bulb given as a mapping or as an object with mac/ip/name."""
    if isinstance(bulb, Mapping):
        mac, ip, name = bulb["mac"], bulb["ip"], bulb.get("name")
    else:
        mac, ip, name = bulb.mac, bulb.ip, getattr(bulb, "name", None)
    out = {"mac": str(mac), "ip": str(ip)}
    if name is not None:
        out["name"] = str(name)
    return out


@dataclass
class AppConfig:
    """User settings; every field has a default so partial files load."""

    preferred_adapter: GpuAdapter | None = None
    preferred_backend: str | None = None
    saved_bulbs: list[Any] = field(default_factory=list)
    selected_bulb_macs: list[str] = field(default_factory=list)
    force_cpu_sampling: bool = False
    bulb_update_interval_ms: int = 150
    min_brightness_percent: int = 10
    white_color_temp: int = 6500
    minimize_to_tray: bool = True
    capture_fps_limit: int = 0
    show_perf_overlay: bool = False
    capture_resolution_scale: int = 100

    def to_dict(self) -> dict[str, Any]:
        """Return the TOML-ready mapping; unset optional values are omitted."""
        data: dict[str, Any] = {}
        if self.preferred_adapter is not None:
            data["preferred_adapter"] = {
                "name": self.preferred_adapter.name,
                "backend": self.preferred_adapter.backend.value,
            }
        if self.preferred_backend is not None:
            data["preferred_backend"] = self.preferred_backend
        data["saved_bulbs"] = [_bulb_to_dict(bulb) for bulb in self.saved_bulbs]
        data["selected_bulb_macs"] = list(self.selected_bulb_macs)
        data["force_cpu_sampling"] = self.force_cpu_sampling
        data["bulb_update_interval_ms"] = self.bulb_update_interval_ms
        data["min_brightness_percent"] = self.min_brightness_percent
        data["white_color_temp"] = self.white_color_temp
        data["minimize_to_tray"] = self.minimize_to_tray
        data["capture_fps_limit"] = self.capture_fps_limit
        data["show_perf_overlay"] = self.show_perf_overlay
        data["capture_resolution_scale"] = self.capture_resolution_scale
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> AppConfig:
        """Build a config from a mapping, filling in defaults.

        Raises ValueError when a value has the wrong type or range.
        """
        defaults = cls()
        bulbs = data.get("saved_bulbs", [])
        macs = data.get("selected_bulb_macs", [])
        if not isinstance(bulbs, list):
            raise ValueError(f"invalid saved_bulbs: {bulbs!r}")
        if not isinstance(macs, list) or not all(isinstance(mac, str) for mac in macs):
            raise ValueError(f"invalid selected_bulb_macs: {macs!r}")
        return cls(
            preferred_adapter=_adapter_from(data.get("preferred_adapter")),
            preferred_backend=_optional_str(data, "preferred_backend"),
            saved_bulbs=[_bulb_from(bulb) for bulb in bulbs],
            selected_bulb_macs=list(macs),
            force_cpu_sampling=_bool(data, "force_cpu_sampling", defaults.force_cpu_sampling),
            bulb_update_interval_ms=_int(
                data, "bulb_update_interval_ms", defaults.bulb_update_interval_ms, _U64
            ),
            min_brightness_percent=_int(
                data, "min_brightness_percent", defaults.min_brightness_percent, _U8
            ),
            white_color_temp=_int(data, "white_color_temp", defaults.white_color_temp, _U16),
            minimize_to_tray=_bool(data, "minimize_to_tray", defaults.minimize_to_tray),
            capture_fps_limit=_int(data, "capture_fps_limit", defaults.capture_fps_limit, _U32),
            show_perf_overlay=_bool(data, "show_perf_overlay", defaults.show_perf_overlay),
            capture_resolution_scale=_int(
                data, "capture_resolution_scale", defaults.capture_resolution_scale, _U32
            ),
        )

    @classmethod
    def load(cls, path: Path | str | None = None) -> AppConfig:
        """Load the config file, returning defaults if it is missing or invalid."""
        target = Path(path) if path is not None else config_path()
        try:
            content = target.read_text(encoding="utf-8")
        except OSError:
            return cls()
        try:
            return cls.from_dict(tomllib.loads(content))
        except (tomllib.TOMLDecodeError, ValueError, TypeError) as exc:
            log.warning("Failed to parse config: %s", exc)
            return cls()

    def save(self, path: Path | str | None = None) -> None:
        """Write the config file, creating its directory; failures are logged."""
        target = Path(path) if path is not None else config_path()
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            log.warning("Failed to create config dir: %s", exc)
            return
        try:
            content = tomli_w.dumps(self.to_dict())
        except (TypeError, ValueError) as exc:
            log.warning("Failed to serialize config: %s", exc)
            return
        try:
            target.write_text(content, encoding="utf-8")
        except OSError as exc:
            log.warning("Failed to write config: %s", exc)