"""256-color badge formatting for the creature name and its types."""

from __future__ import annotations

from typing import Iterable


SHINY_TEXT = "★ Shiny! ★"

NAME_BG = 15
SHINY_BG = 220
LIGHT_FG = 255
DARK_FG = 232

TYPE_COLORS: dict[str, int] = {
    "normal": 101,
    "fire": 202,
    "water": 31,
    "electric": 226,
    "grass": 76,
    "ice": 81,
    "fighting": 124,
    "poison": 127,
    "ground": 178,
    "flying": 98,
    "psychic": 170,
    "bug": 142,
    "rock": 101,
    "ghost": 55,
    "dragon": 21,
    "dark": 236,
    "steel": 247,
    "fairy": 219,
}

# Backgrounds dark enough to need light text.
_DARK_BACKGROUNDS = frozenset({1, 5, 8, 21, 55, 99, 236})

_RESET = "\x1b[0m"
_BOLD = "\x1b[1m"


def ansi_fg(color: int) -> str:
    return f"\x1b[38;5;{color}m"


def ansi_bg(color: int) -> str:
    return f"\x1b[48;5;{color}m"


def foreground_for(bg: int) -> int:
    return LIGHT_FG if bg in _DARK_BACKGROUNDS else DARK_FG


def type_color(name: str) -> int:
    return TYPE_COLORS.get(name, 0)


def text_badge(text: str, bg: int, bold: bool = False) -> str:
    prefix = _BOLD if bold else ""
    return f"{prefix}{ansi_fg(foreground_for(bg))}{ansi_bg(bg)} {text} {_RESET}{_RESET}"


def type_badges(types: Iterable[str]) -> str:
    return " ".join(text_badge(t.upper(), type_color(t)) for t in types)


def capitalize(name: str) -> str:
    return name[:1].upper() + name[1:]


def format_display(name: str, types: Iterable[str], shiny: bool = False) -> str:
    """Single-line label: name badge, optional shiny badge, then type badges."""
    parts = [text_badge(capitalize(name), NAME_BG, bold=True)]
    if shiny:
        parts.append(text_badge(SHINY_TEXT, SHINY_BG, bold=True))
    parts.append(type_badges(types))
    return " ".join(parts)
