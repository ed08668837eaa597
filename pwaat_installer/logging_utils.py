from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Tuple

from .lib.env import PATHS

DEFAULT_LOG_PATH = PATHS.log_default

FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
CONSOLE_FORMAT = "%(levelname)s: %(message)s"

_active_log_path: Optional[str] = None


def _open_log_file(log_path: str) -> Tuple[logging.Handler, str]:
    try:
        Path(log_path).parent.mkdir(parents=True, exist_ok=True)
        return logging.FileHandler(log_path, encoding="utf-8"), log_path
    except OSError:
        fallback = str(Path.cwd() / PATHS.log_fallback_name)
        return logging.FileHandler(fallback, encoding="utf-8"), fallback


def configure_logging(
    log_path: str = DEFAULT_LOG_PATH,
    *,
    verbose: bool = False,
    also_console: bool = True,
) -> str:
    """Send installer logs to a file (always DEBUG) and the console.

    The console shows INFO unless ``verbose``. If the requested log file cannot
    be opened, ``PATHS.log_fallback_name`` in the working directory is used.
    Only the first call in a process installs handlers.

    Returns the actual file path being used.
    """

    global _active_log_path
    if _active_log_path is not None:
        return _active_log_path

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    file_handler, chosen_path = _open_log_file(log_path)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S%z"))
    setattr(file_handler, "_pwaat_handler", True)
    root.addHandler(file_handler)

    if also_console:
        console = logging.StreamHandler()
        console.setLevel(logging.DEBUG if verbose else logging.INFO)
        console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        setattr(console, "_pwaat_handler", True)
        root.addHandler(console)

    # urllib3 logs every connection at DEBUG.
    logging.getLogger("urllib3").setLevel(logging.INFO)

    _active_log_path = chosen_path
    logging.getLogger(__name__).info("Logging to %s (requested %s)", chosen_path, log_path)
    return chosen_path


def reset_logging() -> None:
    """Remove the handlers installed by configure_logging (used by embedders and tests)."""

    global _active_log_path
    root = logging.getLogger()
    for h in root.handlers[:]:
        if getattr(h, "_pwaat_handler", False):
            root.removeHandler(h)
            h.close()
    _active_log_path = None
