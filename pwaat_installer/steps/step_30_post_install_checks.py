from __future__ import annotations

import logging
from typing import Any, Dict

from ..errors import VerificationError
from ..pipeline import InstallCtx

logger = logging.getLogger(__name__)


class PostInstallChecksStep:
    step_id = "30_post_install_checks"

    def run(self, ctx: InstallCtx, state: Dict[str, Any]) -> Dict[str, Any]:
        cfg = state.get("config") or {}
        game_dir = (state.get("game") or {}).get("path")
        if not game_dir:
            raise RuntimeError("game.path missing")

        if not ctx.locator.validate(game_dir):
            raise VerificationError(f"Post-install check failed: {game_dir} is no longer a game directory")

        if bool(cfg.get("dry_run", False)):
            logger.info("Dry run: skipping MelonLoader checks")
            return state

        if not ctx.installer.is_installed(game_dir):
            raise VerificationError(
                f"Post-install check failed: MelonLoader missing from {game_dir}. "
                f"Please try installing MelonLoader manually from: {ctx.cfg.melonloader_release_page}"
            )

        logger.info("Post-install checks passed")
        return state
