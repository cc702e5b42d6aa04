"""End-to-end run: pick a creature, render it, theme fastfetch, launch it."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from pathlib import Path

from pokefetch_pokeapi import PokeApiClient, Pokemon, Selection, artwork_name, pick_random
from pokefetch_renderer import ExtractionError, ExtractionResult, extract_accent, format_display
from pokefetch_tools import ArtworkResult, ColorscriptsRunner, run_fastfetch

from .config import AppConfig
from .errors import ArtworkError, IoError
from .synthesizer import synthesize


logger = logging.getLogger("pokefetch.core")


@dataclass(frozen=True)
class PipelineResult:
    pokemon: Pokemon
    selection: Selection
    display: str
    artwork: ArtworkResult
    extraction: ExtractionResult
    fastfetch_exit: int | None = None


def read_artwork(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise IoError(f"cannot read artwork: {exc.strerror or exc}", stage="extract", path=path) from exc
    except UnicodeDecodeError as exc:
        raise IoError("artwork is not valid UTF-8", stage="extract", path=path) from exc


def extract_from_file(path: Path) -> ExtractionResult:
    text = read_artwork(path)
    try:
        result = extract_accent(text)
    except ExtractionError as exc:
        raise ArtworkError(str(exc), stage="extract", path=path) from exc
    logger.info(
        f"accent {result.accent} from {path} ({result.votes} votes, {result.content_lines} lines)",
        extra={
            "event": "accent_extracted",
            "stage": "extract",
            "path": path,
            "accent": result.accent,
            "votes": result.votes,
            "content_lines": result.content_lines,
        },
    )
    return result


def theme_config(cfg: AppConfig, display_text: str, accent: str | None = None) -> ExtractionResult | None:
    """Extract (unless ``accent`` is given) and synthesize, without network or subprocesses."""
    extraction = None
    if accent is None:
        extraction = extract_from_file(cfg.artwork_path)
        accent = extraction.accent
    synthesize(accent, cfg.artwork_path, display_text, cfg.fastfetch_config_path)
    return extraction


def run_pipeline(
    cfg: AppConfig,
    *,
    pokemon_id: int | None = None,
    shiny: bool | None = None,
    launch: bool | None = None,
    client: PokeApiClient | None = None,
    runner: ColorscriptsRunner | None = None,
    rng: random.Random | None = None,
) -> PipelineResult:
    selection = pick_random(cfg.artwork.max_pokemon_id, cfg.artwork.shiny_odds, rng)
    if pokemon_id is not None or shiny is not None:
        selection = Selection(
            id=selection.id if pokemon_id is None else pokemon_id,
            shiny=selection.shiny if shiny is None else shiny,
        )

    client = client or PokeApiClient(base_url=cfg.api.base_url, timeout_s=cfg.api.timeout_s)
    pokemon = client.fetch(selection.id)
    name = artwork_name(pokemon.id, pokemon.name)
    logger.info(
        f"selected #{pokemon.id} {name}{' (shiny)' if selection.shiny else ''}",
        extra={"event": "pokemon_selected", "pokemon": name, "shiny": selection.shiny},
    )

    display = format_display(name, pokemon.types, selection.shiny)

    runner = runner or ColorscriptsRunner(command=cfg.artwork.command, timeout_s=cfg.artwork.timeout_s)
    artwork = runner.generate(name, selection.shiny, cfg.artwork_path)

    extraction = extract_from_file(cfg.artwork_path)
    synthesize(extraction.accent, cfg.artwork_path, display, cfg.fastfetch_config_path)

    fastfetch_exit = None
    should_launch = cfg.fastfetch.launch if launch is None else launch
    if should_launch:
        fastfetch_exit = run_fastfetch(cfg.fastfetch.command, cfg.fastfetch_config_path)

    return PipelineResult(
        pokemon=pokemon,
        selection=selection,
        display=display,
        artwork=artwork,
        extraction=extraction,
        fastfetch_exit=fastfetch_exit,
    )
