"""Locate the external executables pokefetch drives."""

from __future__ import annotations

import shutil

from .colorscripts import DEFAULT_COMMAND as COLORSCRIPTS_COMMAND
from .fastfetch import DEFAULT_COMMAND as FASTFETCH_COMMAND
from .models import ToolInfo


def discover(
    colorscripts: str = COLORSCRIPTS_COMMAND,
    fastfetch: str = FASTFETCH_COMMAND,
) -> list[ToolInfo]:
    return [
        ToolInfo(name="colorscripts", command=colorscripts, path=shutil.which(colorscripts)),
        ToolInfo(name="fastfetch", command=fastfetch, path=shutil.which(fastfetch)),
    ]
