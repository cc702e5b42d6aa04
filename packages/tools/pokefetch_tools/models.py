"""Typed models for external tool invocations."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ToolInfo:
    name: str
    command: str
    path: str | None

    @property
    def available(self) -> bool:
        return self.path is not None


@dataclass(frozen=True)
class ArtworkResult:
    success: bool
    path: Path
    name: str
    shiny: bool
    error: str | None = None
