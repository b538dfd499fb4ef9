# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py"""
from __future__ import annotations

import logging
import os
import shutil
import sys

import pythonjsonlogger.json
from rich.logging import RichHandler


def get_program_invocation() -> str:
    """Returns the recommended program invocation prefix."""
    script = sys.argv[0] if sys.argv and sys.argv[0] else "argtree"
    program = shutil.which(script)
    if program:
        return os.path.basename(program)
    return os.path.basename(script)


def setup_logging(
    mode: str | None = None,
    level: int = logging.WARNING,
    log_filename: str | None = None,
) -> None:
    """
    Route log records to the console, Rich formatted ("cli") or as JSON lines ("json").

    `mode` defaults to the `ARGTREE_LOG_MODE` environment variable, then "cli".
    With `log_filename` the same records are also appended to that file, in the
    format of the chosen mode.

    Raises:
        ValueError: If `mode` is neither "cli" nor "json".
    """
    mode = mode or os.getenv("ARGTREE_LOG_MODE") or "cli"
    if mode == "cli":
        handler: logging.Handler = RichHandler(show_path=False, markup=False)
        formatter = logging.Formatter("%(asctime)s [%(name)s] %(levelname)s %(message)s")
    elif mode == "json":
        handler = logging.StreamHandler()
        formatter = pythonjsonlogger.json.JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s"
        )
        handler.setFormatter(formatter)
    else:
        raise ValueError(f"Invalid log mode: {mode}")

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    root.handlers.clear()
    handler.setLevel(level)
    root.addHandler(handler)

    if log_filename:
        file_handler = logging.FileHandler(log_filename, "a", "UTF-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    logging.getLogger("argtree").debug("Logging initialized in '%s' mode.", mode)
