from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Iterator, List, Optional, Tuple

from ..installer_config import InstallerConfig
from .registry import RegistryLookup, default_registry, read_value_quiet
from .vdf import parse_library_folders

logger = logging.getLogger(__name__)

_UNSET = object()


@dataclass(frozen=True)
class Candidate:
    source: str
    path: str


class GameLocator:
    """Find the game directory under Steam's ``steamapps/common`` convention.

    Stages run cheapest first and stop at the first valid directory:
    the default Steam root, the Steam root from the registry, then every
    library listed in ``steamapps/libraryfolders.vdf``.
    """

    def __init__(
        self,
        cfg: Optional[InstallerConfig] = None,
        *,
        registry: Optional[RegistryLookup] = None,
    ) -> None:
        self.cfg = cfg or InstallerConfig()
        self.registry = registry if registry is not None else default_registry()
        self._steam_root: object = _UNSET

    @property
    def stages(self) -> List[Tuple[str, Callable[[], Iterable[str]]]]:
        return [
            ("default", self._default_stage),
            ("registry", self._registry_stage),
            ("libraryfolders", self._library_stage),
        ]

    def game_dir_under(self, steam_root: str) -> str:
        return str(Path(steam_root) / "steamapps" / "common" / self.cfg.game_folder)

    def validate(self, path: Optional[str]) -> bool:
        """True if ``path`` is a directory holding the game executable."""
        if not path or not os.path.isdir(path):
            return False
        return os.path.isfile(os.path.join(path, self.cfg.game_executable))

    def iter_candidates(self) -> Iterator[Candidate]:
        self._steam_root = _UNSET
        for source, stage in self.stages:
            for path in stage():
                yield Candidate(source=source, path=path)

    def locate_candidate(self) -> Optional[Candidate]:
        for cand in self.iter_candidates():
            if self.validate(cand.path):
                logger.info("Game found via %s: %s", cand.source, cand.path)
                return cand
            logger.debug("Rejected %s candidate %s", cand.source, cand.path)
        logger.info("Game not found in any Steam library")
        return None

    def locate(self) -> Optional[str]:
        cand = self.locate_candidate()
        return cand.path if cand else None

    def steam_root_from_registry(self) -> Optional[str]:
        if self._steam_root is _UNSET:
            self._steam_root = self._query_registry()
        return self._steam_root  # type: ignore[return-value]

    def _query_registry(self) -> Optional[str]:
        value_name = self.cfg.steam_registry_value
        for key_path in self.cfg.steam_registry_keys:
            value = read_value_quiet(self.registry, key_path, value_name)
            if value and os.path.isdir(value):
                logger.info("Steam root from registry (%s): %s", key_path, value)
                return value
        return None

    def _default_stage(self) -> Iterable[str]:
        yield self.game_dir_under(self.cfg.steam_default_path)

    def _registry_stage(self) -> Iterable[str]:
        steam_root = self.steam_root_from_registry()
        if steam_root:
            yield self.game_dir_under(steam_root)

    def _library_stage(self) -> Iterable[str]:
        steam_root = self.steam_root_from_registry()
        if not steam_root:
            return

        vdf_path = Path(steam_root) / "steamapps" / "libraryfolders.vdf"
        if not vdf_path.is_file():
            return
        try:
            text = vdf_path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            logger.warning("Unable to read %s: %s", vdf_path, e)
            return

        for library in parse_library_folders(text):
            yield self.game_dir_under(library)
