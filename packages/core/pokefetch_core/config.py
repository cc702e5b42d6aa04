"""Persistent app settings schema and load/save helpers."""

from __future__ import annotations

import json
import os
import platform
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any


CONFIG_VERSION = 1


def _default_artwork_cache() -> str:
    return str(Path.home() / ".cache" / "pokemon.txt")


def _default_fastfetch_config() -> str:
    return str(Path.home() / ".config" / "fastfetch" / "config.jsonc")


@dataclass
class PathsConfig:
    artwork_cache: str = field(default_factory=_default_artwork_cache)
    fastfetch_config: str = field(default_factory=_default_fastfetch_config)


@dataclass
class ArtworkConfig:
    command: str = "pokemon-colorscripts"
    shiny_odds: int = 4
    max_pokemon_id: int = 904
    timeout_s: int = 30


@dataclass
class ApiConfig:
    base_url: str = "https://pokeapi.co/api/v2"
    timeout_s: int = 30


@dataclass
class FastfetchConfig:
    command: str = "fastfetch"
    launch: bool = True


@dataclass
class DiagnosticsConfig:
    keep_log_files: int = 7


@dataclass
class AppConfig:
    config_version: int = CONFIG_VERSION
    paths: PathsConfig = field(default_factory=PathsConfig)
    artwork: ArtworkConfig = field(default_factory=ArtworkConfig)
    api: ApiConfig = field(default_factory=ApiConfig)
    fastfetch: FastfetchConfig = field(default_factory=FastfetchConfig)
    diagnostics: DiagnosticsConfig = field(default_factory=DiagnosticsConfig)

    @property
    def artwork_path(self) -> Path:
        return Path(self.paths.artwork_cache).expanduser()

    @property
    def fastfetch_config_path(self) -> Path:
        return Path(self.paths.fastfetch_config).expanduser()


def config_root() -> Path:
    system = platform.system()
    if system == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return base / "Pokefetch"
    if system == "Darwin":
        return Path.home() / "Library" / "Application Support" / "Pokefetch"
    return Path.home() / ".config" / "pokefetch"


def config_path() -> Path:
    override = os.environ.get("POKEFETCH_CONFIG", "").strip()
    if override:
        return Path(override).expanduser()
    return config_root() / "config.json"


def _merge(dataclass_type, raw: dict[str, Any]):
    defaults = dataclass_type()  # type: ignore[misc]
    if not isinstance(raw, dict):
        return defaults
    for k, v in raw.items():
        if hasattr(defaults, k):
            setattr(defaults, k, v)
    return defaults


def _normalize_artwork(cfg: AppConfig) -> None:
    cfg.artwork.shiny_odds = max(1, int(cfg.artwork.shiny_odds))
    cfg.artwork.max_pokemon_id = max(1, int(cfg.artwork.max_pokemon_id))
    cfg.artwork.timeout_s = max(1, int(cfg.artwork.timeout_s))


def _normalize_api(cfg: AppConfig) -> None:
    cfg.api.timeout_s = max(1, int(cfg.api.timeout_s))
    cfg.api.base_url = str(cfg.api.base_url).rstrip("/")


def load_config(path: Path | None = None) -> AppConfig:
    path = path or config_path()
    if not path.exists():
        return AppConfig()

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return AppConfig()
    if not isinstance(raw, dict):
        return AppConfig()

    cfg = AppConfig(
        config_version=int(raw.get("config_version", CONFIG_VERSION)),
        paths=_merge(PathsConfig, raw.get("paths", {})),
        artwork=_merge(ArtworkConfig, raw.get("artwork", {})),
        api=_merge(ApiConfig, raw.get("api", {})),
        fastfetch=_merge(FastfetchConfig, raw.get("fastfetch", {})),
        diagnostics=_merge(DiagnosticsConfig, raw.get("diagnostics", {})),
    )

    _normalize_artwork(cfg)
    _normalize_api(cfg)
    return cfg


def save_config(cfg: AppConfig, path: Path | None = None) -> Path:
    cfg.config_version = CONFIG_VERSION
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(cfg), indent=2, sort_keys=True), encoding="utf-8")
    return path
