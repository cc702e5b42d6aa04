"""Core services: config synthesis, settings, errors, diagnostics, and the run pipeline."""

from .config import AppConfig, load_config, save_config
from .errors import ArtworkError, ConfigLoadError, IoError, PokefetchError, SynthesisError
from .layout import CATEGORY_MODULES, ModuleSpec, build_modules
from .synthesizer import apply_theme, ensure_object, synthesize

__all__ = [
    "AppConfig",
    "ArtworkError",
    "CATEGORY_MODULES",
    "ConfigLoadError",
    "IoError",
    "ModuleSpec",
    "PokefetchError",
    "SynthesisError",
    "apply_theme",
    "build_modules",
    "ensure_object",
    "load_config",
    "save_config",
    "synthesize",
]
