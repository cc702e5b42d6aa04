"""Doctor payload for troubleshooting a local install."""

from __future__ import annotations

import json
import platform
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import psutil

from pokefetch_tools import discover

from .config import AppConfig, config_path
from .logging_setup import log_dir


def _host_facts() -> dict[str, Any]:
    vm = psutil.virtual_memory()
    return {
        "cpu_count": psutil.cpu_count(logical=True),
        "memory_total_gb": round(vm.total / (1024**3), 2),
        "boot_time_utc": datetime.fromtimestamp(psutil.boot_time(), tz=timezone.utc).isoformat(),
    }


def _file_status(path: Path, parse_json: bool = False) -> dict[str, Any]:
    status: dict[str, Any] = {"path": str(path), "exists": path.exists()}
    if parse_json and status["exists"]:
        try:
            json.loads(path.read_text(encoding="utf-8"))
            status["valid_json"] = True
        except (OSError, ValueError):
            status["valid_json"] = False
    return status


def build_doctor_payload(cfg: AppConfig) -> dict[str, Any]:
    tools = discover(colorscripts=cfg.artwork.command, fastfetch=cfg.fastfetch.command)
    return {
        "ts_utc": datetime.now(timezone.utc).isoformat(),
        "platform": platform.platform(),
        "python": platform.python_version(),
        "host": _host_facts(),
        "settings_path": str(config_path()),
        "log_dir": str(log_dir()),
        "config": asdict(cfg),
        "tools": [
            {"name": t.name, "command": t.command, "path": t.path, "available": t.available}
            for t in tools
        ],
        "artwork_cache": _file_status(cfg.artwork_path),
        "fastfetch_config": _file_status(cfg.fastfetch_config_path, parse_json=True),
    }
