"""GUI wrapper stub.

A real GUI should:
- Let the user pick or confirm the game folder
- Call pwaat_installer.main.run(...) off the UI thread
- Show the status messages it receives through ``status``

This module exists to document the integration boundary.
"""

from __future__ import annotations

import threading
from typing import Any, Callable, Dict, Optional

from pwaat_installer.main import run


def run_from_gui(
    *,
    state_path: str,
    log_path: str,
    status: Callable[[str], None],
    done: Callable[[Optional[Dict[str, Any]], Optional[BaseException]], None],
    game_path: Optional[str] = None,
    **kwargs: Any,
) -> threading.Thread:
    """Run the installer on a worker thread; ``done`` gets (state, error)."""

    def _worker() -> None:
        try:
            state = run(state_path=state_path, log_path=log_path, game_path=game_path, status=status, **kwargs)
        except Exception as e:
            done(None, e)
            return
        done(state, None)

    t = threading.Thread(target=_worker, name="pwaat-installer", daemon=True)
    t.start()
    return t
