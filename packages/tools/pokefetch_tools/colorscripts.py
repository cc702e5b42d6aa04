"""Artwork generation through the ``pokemon-colorscripts`` executable."""

from __future__ import annotations

import logging
import os
import subprocess
import tempfile
from pathlib import Path

from .models import ArtworkResult


logger = logging.getLogger("pokefetch.tools")

DEFAULT_COMMAND = "pokemon-colorscripts"


def build_command(name: str, shiny: bool, command: str = DEFAULT_COMMAND) -> list[str]:
    args = [command, "-n", name]
    if shiny:
        args.append("--shiny")
    args.append("--no-title")
    return args


def _write_cache(dest: Path, text: str) -> None:
    if dest.is_symlink():
        dest = dest.resolve()
    dest.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{dest.name}.", dir=str(dest.parent))
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(text)
        os.replace(tmp_name, dest)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


class ColorscriptsRunner:
    """Renders a creature to the artwork cache, leaving the old cache on failure."""

    def __init__(self, command: str = DEFAULT_COMMAND, timeout_s: int = 30) -> None:
        self.command = command
        self.timeout_s = timeout_s

    def _failed(self, dest: Path, name: str, shiny: bool, error: str) -> ArtworkResult:
        logger.error(
            f"artwork generation failed for {name}: {error}",
            extra={"event": "artwork_failed", "stage": "artwork", "path": dest, "pokemon": name},
        )
        return ArtworkResult(success=False, path=dest, name=name, shiny=shiny, error=error)

    def generate(self, name: str, shiny: bool, dest: Path) -> ArtworkResult:
        args = build_command(name, shiny, self.command)
        try:
            proc = subprocess.run(
                args,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                timeout=self.timeout_s,
                check=False,
            )
        except FileNotFoundError:
            return self._failed(dest, name, shiny, f"{self.command} not found")
        except subprocess.TimeoutExpired:
            return self._failed(dest, name, shiny, f"timed out after {self.timeout_s}s")

        if proc.returncode != 0:
            detail = (proc.stderr or "").strip() or f"exit code {proc.returncode}"
            return self._failed(dest, name, shiny, detail)
        if not proc.stdout:
            return self._failed(dest, name, shiny, "empty output")

        try:
            _write_cache(dest, proc.stdout)
        except OSError as exc:
            return self._failed(dest, name, shiny, f"cannot write cache: {exc.strerror or exc}")
        logger.info(
            f"artwork for {name} written to {dest}",
            extra={"event": "artwork_generated", "stage": "artwork", "path": dest, "pokemon": name},
        )
        return ArtworkResult(success=True, path=dest, name=name, shiny=shiny)
