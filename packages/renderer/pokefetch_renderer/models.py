"""Typed renderer models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RgbColor:
    r: int
    g: int
    b: int

    @property
    def escape(self) -> str:
        """Foreground truecolor parameters, e.g. ``38;2;248;8;8``."""
        return f"38;2;{self.r};{self.g};{self.b}"


@dataclass(frozen=True)
class ExtractionResult:
    color: RgbColor
    content_lines: int
    votes: int

    @property
    def accent(self) -> str:
        return self.color.escape
