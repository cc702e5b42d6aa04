"""Rewrite a fastfetch config document around an accent color and artwork."""

from __future__ import annotations

import copy
import json
import logging
import os
import shlex
import stat
import tempfile
from pathlib import Path
from typing import Any, Iterable

from .errors import ConfigLoadError, IoError, SynthesisError
from .layout import build_modules


logger = logging.getLogger("pokefetch.core")

LOGO_PADDING_TOP = 2
STAGE = "synthesize"


def ensure_object(doc: dict[str, Any], keys: Iterable[str]) -> dict[str, Any]:
    """Walk ``keys`` from ``doc``, creating empty objects where absent.

    Raises :class:`ConfigLoadError` if an existing value on the path is not an object.
    """
    node = doc
    walked: list[str] = []
    for key in keys:
        walked.append(key)
        child = node.get(key)
        if child is None:
            child = {}
            node[key] = child
        elif not isinstance(child, dict):
            raise ConfigLoadError(f"'{'.'.join(walked)}' is not an object", stage=STAGE)
        node = child
    return node


def logo_entry(artwork_path: Path) -> dict[str, Any]:
    return {
        "type": "command-raw",
        "source": f"cat {shlex.quote(str(artwork_path))}",
        "padding": {"top": LOGO_PADDING_TOP},
    }


def apply_theme(doc: dict[str, Any], accent: str, artwork_path: Path, display_text: str) -> dict[str, Any]:
    """Return a themed deep copy of ``doc``; the input is left untouched."""
    if not isinstance(doc, dict):
        raise ConfigLoadError("config document is not a JSON object", stage=STAGE)

    out = copy.deepcopy(doc)
    out["logo"] = logo_entry(artwork_path)

    colors = ensure_object(out, ("display", "color"))
    colors["title"] = accent
    colors["keys"] = accent

    out["modules"] = build_modules(accent, display_text)
    return out


def load_document(path: Path) -> dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ConfigLoadError("config file does not exist", stage=STAGE, path=path) from exc
    except UnicodeDecodeError as exc:
        raise ConfigLoadError("config file is not valid UTF-8", stage=STAGE, path=path) from exc
    except OSError as exc:
        raise IoError(f"cannot read config: {exc.strerror or exc}", stage=STAGE, path=path) from exc

    try:
        doc = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigLoadError(f"malformed JSON: {exc}", stage=STAGE, path=path) from exc
    if not isinstance(doc, dict):
        raise ConfigLoadError("config document is not a JSON object", stage=STAGE, path=path)
    return doc


def dump_document(doc: dict[str, Any]) -> str:
    try:
        return json.dumps(doc, indent=2, ensure_ascii=False) + "\n"
    except (TypeError, ValueError) as exc:
        raise SynthesisError(f"cannot serialize config: {exc}", stage=STAGE) from exc


def write_document(path: Path, text: str) -> None:
    """Replace ``path`` atomically with ``text``, writing through a symlink to its target."""
    target = path.resolve() if path.is_symlink() else path
    try:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", dir=str(target.parent))
    except OSError as exc:
        raise IoError(f"cannot write config: {exc.strerror or exc}", stage=STAGE, path=path) from exc
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(text)
        if target.exists():
            os.chmod(tmp_name, stat.S_IMODE(target.stat().st_mode))
        os.replace(tmp_name, target)
    except OSError as exc:
        Path(tmp_name).unlink(missing_ok=True)
        raise IoError(f"cannot write config: {exc.strerror or exc}", stage=STAGE, path=path) from exc


def synthesize(accent: str, artwork_path: Path, display_text: str, config_path: Path) -> dict[str, Any]:
    doc = load_document(config_path)
    try:
        themed = apply_theme(doc, accent, artwork_path, display_text)
    except ConfigLoadError as exc:
        exc.path = config_path
        raise
    write_document(config_path, dump_document(themed))
    logger.info(
        f"config {config_path} themed with {accent}",
        extra={"event": "config_synthesized", "stage": STAGE, "path": config_path, "accent": accent},
    )
    return themed
