"""Fixed fastfetch module layout themed by a single accent color."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ModuleSpec:
    type: str
    key: str
    extras: dict[str, Any] = field(default_factory=dict)


# Keys are padded so values line up in one column.
CATEGORY_MODULES: tuple[ModuleSpec, ...] = (
    ModuleSpec("os", "os    "),
    ModuleSpec("kernel", "kernel"),
    ModuleSpec("uptime", "uptime"),
    ModuleSpec("processes", "proc  "),
    ModuleSpec("packages", "pkgs  "),
    ModuleSpec("shell", "shell "),
    ModuleSpec("monitor", "mon   "),
    ModuleSpec("terminal", "term  "),
    ModuleSpec("cpu", "cpu   ", {"showPeCoreCount": False, "temp": True}),
    ModuleSpec("cpuusage", "usage "),
    ModuleSpec("gpu", "gpu   ", {"driverSpecific": True, "temp": True}),
    ModuleSpec("memory", "memory"),
    ModuleSpec("disk", "disk  "),
    ModuleSpec("media", "media "),
    ModuleSpec("datetime", "time "),
    ModuleSpec("version", "ver   "),
)

CUSTOM_KEY = "pokemon"


def module_entry(spec: ModuleSpec, accent: str) -> dict[str, Any]:
    entry: dict[str, Any] = {
        "type": spec.type,
        "key": spec.key,
        "keyColor": accent,
        "valueColor": accent,
    }
    entry.update(spec.extras)
    return entry


def custom_entry(display_text: str, accent: str) -> dict[str, Any]:
    return {
        "type": "custom",
        "key": CUSTOM_KEY,
        "format": display_text,
        "keyColor": accent,
        "valueColor": accent,
    }


def build_modules(accent: str, display_text: str) -> list[Any]:
    """Return a fresh module list; the same inputs always give the same list."""
    return [
        "title",
        "separator",
        *(module_entry(spec, accent) for spec in CATEGORY_MODULES),
        "separator",
        custom_entry(display_text, accent),
        "break",
        "colors",
    ]
