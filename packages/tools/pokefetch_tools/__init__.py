"""Wrappers around the external artwork and display executables."""

from .colorscripts import ColorscriptsRunner, build_command
from .discovery import discover
from .fastfetch import run_fastfetch
from .models import ArtworkResult, ToolInfo

__all__ = [
    "ArtworkResult",
    "ColorscriptsRunner",
    "ToolInfo",
    "build_command",
    "discover",
    "run_fastfetch",
]
