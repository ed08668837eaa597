from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Protocol, Sequence

from .installer_config import InstallerConfig
from .lib.locator import GameLocator
from .lib.melonloader import MelonLoaderInstaller
from .state_store import mark_step_completed

logger = logging.getLogger(__name__)


@dataclass
class InstallCtx:
    cfg: InstallerConfig
    locator: GameLocator
    installer: MelonLoaderInstaller
    status: Optional[Callable[[str], None]] = None

    def notify(self, msg: str) -> None:
        if self.status is not None:
            self.status(msg)


class Step(Protocol):
    """A single idempotent step."""

    step_id: str

    def run(self, ctx: InstallCtx, state: Dict[str, Any]) -> Dict[str, Any]:
        ...


@dataclass(frozen=True)
class PipelineResult:
    state: Dict[str, Any]
    ran_steps: List[str]
    skipped_steps: List[str]


def run_pipeline(
    *,
    ctx: InstallCtx,
    state: Dict[str, Any],
    steps: Sequence[Step],
    start_at: Optional[str] = None,
    stop_after: Optional[str] = None,
) -> PipelineResult:
    """Run steps in order between ``start_at`` and ``stop_after``.

    Every step re-checks the filesystem on each run; ``completed_steps`` only
    records what this run got through. Steps before ``start_at`` reuse what
    the saved state already holds (e.g. ``game.path``).
    """

    ran: List[str] = []
    skipped: List[str] = []
    started = start_at is None
    state.setdefault("execution", {})["completed_steps"] = []

    for step in steps:
        if not started:
            if step.step_id != start_at:
                skipped.append(step.step_id)
                continue
            started = True

        state.setdefault("execution", {})["current_step"] = step.step_id
        logger.info("Running step %s", step.step_id)
        state = step.run(ctx, state)
        mark_step_completed(state, step.step_id)
        ran.append(step.step_id)

        if stop_after is not None and step.step_id == stop_after:
            logger.info("Stopping after %s", stop_after)
            break

    if not started:
        raise ValueError(f"Unknown step_id for start_at: {start_at}")

    state.setdefault("execution", {})["current_step"] = None
    return PipelineResult(state=state, ran_steps=ran, skipped_steps=skipped)
