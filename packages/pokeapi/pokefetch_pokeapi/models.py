"""Typed creature metadata models."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Pokemon:
    id: int
    name: str
    types: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Selection:
    id: int
    shiny: bool
