from __future__ import annotations

import logging
from typing import Any, Dict

from ..pipeline import InstallCtx

logger = logging.getLogger(__name__)


class InstallMelonLoaderStep:
    step_id = "20_install_melonloader"

    def run(self, ctx: InstallCtx, state: Dict[str, Any]) -> Dict[str, Any]:
        cfg = state.get("config") or {}
        game_dir = (state.get("game") or {}).get("path")
        if not game_dir:
            raise RuntimeError("game.path missing")

        ml = state.setdefault("melonloader", {})
        ml["version"] = ctx.cfg.melonloader_version

        already = ctx.installer.is_installed(game_dir)
        reinstall = bool(cfg.get("reinstall", False))

        if bool(cfg.get("dry_run", False)):
            ml["action"] = "none" if already and not reinstall else "would_install"
            logger.info("Dry run: MelonLoader action=%s", ml["action"])
            return state

        ran = ctx.installer.ensure_installed(game_dir, ctx.status, force=reinstall)
        ml["action"] = "installed" if ran else "already_installed"
        if not ran:
            ctx.notify("MelonLoader is already installed.")
        return state
