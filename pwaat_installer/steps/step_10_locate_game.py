from __future__ import annotations

import logging
from typing import Any, Dict

from ..errors import GameNotFoundError
from ..pipeline import InstallCtx

logger = logging.getLogger(__name__)


class LocateGameStep:
    step_id = "10_locate_game"

    def run(self, ctx: InstallCtx, state: Dict[str, Any]) -> Dict[str, Any]:
        cfg = state.get("config") or {}
        explicit = cfg.get("game_path") or ctx.cfg.game_path
        state["game"] = {}

        if explicit:
            if not ctx.locator.validate(explicit):
                raise GameNotFoundError(
                    f"{explicit} is not a game directory ({ctx.cfg.game_executable} not found)"
                )
            state["game"] = {"path": explicit, "source": "explicit"}
            logger.info("Using game directory %s", explicit)
            return state

        ctx.notify("Searching for the game installation...")
        cand = ctx.locator.locate_candidate()
        if cand is None:
            raise GameNotFoundError(
                f"Could not find {ctx.cfg.game_folder} in any Steam library. "
                "Pass --game-path with the folder containing "
                f"{ctx.cfg.game_executable}."
            )

        state["game"] = {"path": cand.path, "source": cand.source}
        ctx.notify(f"Found game at {cand.path}")
        return state
