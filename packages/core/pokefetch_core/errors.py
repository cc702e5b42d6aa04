"""Pipeline error taxonomy."""

from __future__ import annotations

from pathlib import Path


class PokefetchError(Exception):
    """Terminal pipeline failure tagged with the stage and file involved."""

    def __init__(self, message: str, *, stage: str, path: Path | str | None = None) -> None:
        super().__init__(message)
        self.stage = stage
        self.path = Path(path) if path is not None else None

    def describe(self) -> str:
        where = f" {self.path}" if self.path is not None else ""
        return f"error [{self.stage}]{where}: {self}"


class IoError(PokefetchError):
    pass


class ArtworkError(PokefetchError):
    pass


class SynthesisError(PokefetchError):
    pass


class ConfigLoadError(SynthesisError):
    pass
