"""Launch the ``fastfetch`` system information display."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path


logger = logging.getLogger("pokefetch.tools")

DEFAULT_COMMAND = "fastfetch"


def run_fastfetch(command: str = DEFAULT_COMMAND, config: Path | None = None) -> int:
    args = [command]
    if config is not None:
        args += ["--config", str(config)]
    try:
        code = subprocess.call(args)
    except FileNotFoundError:
        logger.error(f"{command} not found", extra={"event": "fastfetch_missing"})
        return 127
    if code != 0:
        logger.error(f"{command} exited with {code}", extra={"event": "fastfetch_failed"})
    return code
