from __future__ import annotations

import argparse
import logging
from typing import Any, Callable, Dict, Optional

from .installer_config import load_installer_config
from .lib.env import PATHS
from .lib.locator import GameLocator
from .lib.melonloader import MelonLoaderInstaller
from .lib.registry import RegistryLookup
from .logging_utils import DEFAULT_LOG_PATH, configure_logging
from .pipeline import InstallCtx, run_pipeline
from .state_store import ensure_defaults, load_state, save_state
from .steps import InstallMelonLoaderStep, LocateGameStep, PostInstallChecksStep

logger = logging.getLogger(__name__)


DEFAULT_STATE_PATH = PATHS.state_default


def build_steps():
    return [
        LocateGameStep(),
        InstallMelonLoaderStep(),
        PostInstallChecksStep(),
    ]


def run(
    *,
    state_path: str = DEFAULT_STATE_PATH,
    log_path: str = DEFAULT_LOG_PATH,
    config_path: Optional[str] = None,
    game_path: Optional[str] = None,
    dry_run: bool = False,
    reinstall: bool = False,
    start_at: Optional[str] = None,
    stop_after: Optional[str] = None,
    verbose: bool = False,
    status: Optional[Callable[[str], None]] = None,
    registry: Optional[RegistryLookup] = None,
    session: Optional[Any] = None,
) -> Dict[str, Any]:
    """Locate the game and install MelonLoader if it is missing.

    The state file records the outcome of the last run; it never causes a
    step to be skipped.
    """

    actual_log_path = configure_logging(log_path=log_path, verbose=verbose)

    cfg = load_installer_config(config_path)
    state = ensure_defaults(load_state(state_path))
    paths = state["execution"].setdefault("paths", {})
    paths["log_path_requested"] = log_path
    paths["log_path_actual"] = actual_log_path

    run_cfg = state["config"]
    run_cfg["game_path"] = game_path
    run_cfg["dry_run"] = dry_run
    run_cfg["reinstall"] = reinstall

    ctx = InstallCtx(
        cfg=cfg,
        locator=GameLocator(cfg, registry=registry),
        installer=MelonLoaderInstaller(cfg, session=session),
        status=status,
    )

    try:
        result = run_pipeline(
            ctx=ctx,
            state=state,
            steps=build_steps(),
            start_at=start_at,
            stop_after=stop_after,
        )
        state = result.state
        summary = state["execution"].setdefault("summary", {})
        summary["ran_steps"] = result.ran_steps
        summary["skipped_steps"] = result.skipped_steps
        return state
    except Exception as e:
        logger.exception("Installer failed")
        state["execution"].setdefault("errors", []).append(
            {
                "step": state["execution"].get("current_step"),
                "error": str(e),
            }
        )
        raise
    finally:
        save_state(state_path, state)


def main(argv: Optional[list[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="pwaat-installer")
    p.add_argument("--state", default=DEFAULT_STATE_PATH, help="Path to installer state (json|yaml)")
    p.add_argument("--log", default=DEFAULT_LOG_PATH, help="Path to installer log")
    p.add_argument("--config", default=None, help="Optional YAML config overriding paths/URLs")
    p.add_argument("--game-path", default=None, help="Game folder (skips auto-detection)")
    p.add_argument("--dry-run", action="store_true", help="Locate the game but do not download")
    p.add_argument("--reinstall", action="store_true", help="Reinstall MelonLoader even if present")
    p.add_argument("--start-at", default=None, help="Start at step_id (e.g. 20_install_melonloader)")
    p.add_argument("--stop-after", default=None, help="Stop after step_id")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug output on the console")

    args = p.parse_args(argv)

    state = run(
        state_path=args.state,
        log_path=args.log,
        config_path=args.config,
        game_path=args.game_path,
        dry_run=bool(args.dry_run),
        reinstall=bool(args.reinstall),
        start_at=args.start_at,
        stop_after=args.stop_after,
        verbose=bool(args.verbose),
        status=print,
    )
    print(f"Game directory: {state['game'].get('path')}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
