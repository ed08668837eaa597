from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


def _app_dir() -> Path:
    return Path.home() / ".pwaat-installer"


@dataclass(frozen=True)
class Paths:
    state_default: str = str(_app_dir() / "state.json")
    log_default: str = str(_app_dir() / "installer.log")
    log_fallback_name: str = "pwaat-installer.log"


PATHS = Paths()
