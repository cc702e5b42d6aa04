"""CLI entrypoints for pokefetch: run, extract, apply, types, and doctor."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import replace
from pathlib import Path

from pokefetch_core import PokefetchError, load_config
from pokefetch_core.diagnostics import build_doctor_payload
from pokefetch_core.logging_setup import configure_logging, get_logger, install_crash_hooks
from pokefetch_core.pipeline import extract_from_file, run_pipeline, theme_config
from pokefetch_pokeapi import PokeApiError
from pokefetch_renderer import TYPE_COLORS


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, sort_keys=True, default=str))


def _with_paths(cfg, art: str | None = None, config: str | None = None):
    paths = cfg.paths
    if art:
        paths = replace(paths, artwork_cache=str(Path(art).expanduser()))
    if config:
        paths = replace(paths, fastfetch_config=str(Path(config).expanduser()))
    return replace(cfg, paths=paths)


def cmd_run(args: argparse.Namespace) -> int:
    cfg = args.cfg
    result = run_pipeline(
        cfg,
        pokemon_id=args.id,
        shiny=args.shiny,
        launch=(False if args.no_launch else None),
    )
    if result.fastfetch_exit is None:
        _print_json(
            {
                "id": result.pokemon.id,
                "name": result.pokemon.name,
                "shiny": result.selection.shiny,
                "types": result.pokemon.types,
                "accent": result.extraction.accent,
                "content_lines": result.extraction.content_lines,
                "artwork_generated": result.artwork.success,
            }
        )
        return 0
    return 0 if result.fastfetch_exit == 0 else 1


def cmd_extract(args: argparse.Namespace) -> int:
    cfg = _with_paths(args.cfg, art=args.art)
    result = extract_from_file(cfg.artwork_path)
    _print_json(
        {
            "accent": result.accent,
            "content_lines": result.content_lines,
            "votes": result.votes,
        }
    )
    return 0


def cmd_apply(args: argparse.Namespace) -> int:
    cfg = _with_paths(args.cfg, art=args.art, config=args.config)
    extraction = theme_config(cfg, args.display, accent=args.accent)
    _print_json(
        {
            "config": str(cfg.fastfetch_config_path),
            "accent": args.accent if extraction is None else extraction.accent,
        }
    )
    return 0


def cmd_types(_args: argparse.Namespace) -> int:
    _print_json(TYPE_COLORS)
    return 0


def cmd_doctor(args: argparse.Namespace) -> int:
    _print_json(build_doctor_payload(args.cfg))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pokefetch", description="Theme fastfetch with a random Pokémon")
    sub = parser.add_subparsers(dest="command", required=True)

    run_cmd = sub.add_parser("run", help="Pick a Pokémon, theme the fastfetch config, and launch fastfetch")
    run_cmd.add_argument("--id", type=int, default=None, help="Use this Pokédex id instead of a random one")
    shiny_group = run_cmd.add_mutually_exclusive_group()
    shiny_group.add_argument("--shiny", dest="shiny", action="store_true", default=None)
    shiny_group.add_argument("--no-shiny", dest="shiny", action="store_false")
    run_cmd.add_argument("--no-launch", action="store_true", help="Update the config without running fastfetch")
    run_cmd.set_defaults(func=cmd_run)

    extract_cmd = sub.add_parser("extract", help="Print the accent color of cached artwork")
    extract_cmd.add_argument("--art", default=None, help="Artwork file (defaults to the cache path)")
    extract_cmd.set_defaults(func=cmd_extract)

    apply_cmd = sub.add_parser("apply", help="Theme a fastfetch config from artwork without fetching")
    apply_cmd.add_argument("--display", required=True, help="Text for the custom pokemon module")
    apply_cmd.add_argument("--art", default=None, help="Artwork file (defaults to the cache path)")
    apply_cmd.add_argument("--config", default=None, help="fastfetch config to rewrite")
    apply_cmd.add_argument("--accent", default=None, help="Use this color (e.g. 38;2;248;8;8) instead of extracting")
    apply_cmd.set_defaults(func=cmd_apply)

    types_cmd = sub.add_parser("types", help="Print the type badge color table")
    types_cmd.set_defaults(func=cmd_types)

    doctor_cmd = sub.add_parser("doctor", help="Print diagnostics, tools, and config status")
    doctor_cmd.set_defaults(func=cmd_doctor)

    return parser


def main(argv: list[str] | None = None) -> int:
    cfg = load_config()
    configure_logging(keep_files=cfg.diagnostics.keep_log_files, console=False)
    install_crash_hooks()
    parser = build_parser()
    args = parser.parse_args(argv)
    args.cfg = cfg
    try:
        return int(args.func(args))
    except PokefetchError as exc:
        get_logger().error(
            exc.describe(),
            extra={"event": "pipeline_failed", "stage": exc.stage, "path": exc.path},
        )
        print(exc.describe(), file=sys.stderr)
        return 2
    except PokeApiError as exc:
        get_logger().error(f"error [fetch]: {exc}", extra={"event": "fetch_failed", "stage": "fetch"})
        print(f"error [fetch]: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
