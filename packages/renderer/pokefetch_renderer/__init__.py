"""Renderer package: accent color extraction and display badges."""

from .accent import (
    DARK_THRESHOLD,
    LIGHT_THRESHOLD,
    LINE_OFFSET,
    QUANTIZE_STEP,
    ColorParseError,
    ExtractionError,
    NoDominantColor,
    extract_accent,
    quantize,
)
from .badges import TYPE_COLORS, format_display, type_color
from .models import ExtractionResult, RgbColor

__all__ = [
    "DARK_THRESHOLD",
    "LIGHT_THRESHOLD",
    "LINE_OFFSET",
    "QUANTIZE_STEP",
    "TYPE_COLORS",
    "ColorParseError",
    "ExtractionError",
    "ExtractionResult",
    "NoDominantColor",
    "RgbColor",
    "extract_accent",
    "format_display",
    "quantize",
    "type_color",
]
