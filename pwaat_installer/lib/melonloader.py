from __future__ import annotations

import logging
import os
import tempfile
from typing import Any, Callable, Optional

from ..errors import InstallError, VerificationError
from ..installer_config import InstallerConfig
from .archive import extract_zip
from .download import download_file

logger = logging.getLogger(__name__)

StatusCallback = Callable[[str], None]


class MelonLoaderInstaller:
    """Download and unpack MelonLoader into a game directory.

    Installed means both the proxy DLL and the MelonLoader folder are present;
    either alone is treated as a broken install.
    """

    def __init__(
        self,
        cfg: Optional[InstallerConfig] = None,
        *,
        session: Optional[Any] = None,
        temp_dir: Optional[str] = None,
    ) -> None:
        self.cfg = cfg or InstallerConfig()
        self.session = session
        self.temp_dir = temp_dir

    def is_installed(self, game_dir: str) -> bool:
        proxy = os.path.join(game_dir, self.cfg.melonloader_proxy_file)
        folder = os.path.join(game_dir, self.cfg.melonloader_folder)
        return os.path.isfile(proxy) and os.path.isdir(folder)

    def _manual_hint(self) -> str:
        return f"Please try installing MelonLoader manually from: {self.cfg.melonloader_release_page}"

    def install(self, game_dir: str, status_callback: Optional[StatusCallback] = None) -> None:
        def status(msg: str) -> None:
            logger.info(msg)
            if status_callback is not None:
                status_callback(msg)

        fd, archive = tempfile.mkstemp(prefix="MelonLoader.x86-", suffix=".zip", dir=self.temp_dir)
        os.close(fd)

        try:
            status(f"Downloading MelonLoader {self.cfg.melonloader_version}...")
            try:
                download_file(
                    self.cfg.melonloader_url,
                    archive,
                    user_agent=self.cfg.user_agent,
                    timeout_s=self.cfg.timeout_s,
                    session=self.session,
                )

                status("Extracting MelonLoader files...")
                extract_zip(archive, game_dir)
            except InstallError as e:
                raise type(e)(f"{e}. {self._manual_hint()}") from e

            if not self.is_installed(game_dir):
                raise VerificationError(
                    "MelonLoader extraction completed but verification failed. " + self._manual_hint()
                )

            status("MelonLoader installed successfully.")
        finally:
            try:
                if os.path.exists(archive):
                    os.remove(archive)
            except OSError as e:
                logger.warning("Unable to remove temporary archive %s: %s", archive, e)

    def ensure_installed(
        self,
        game_dir: str,
        status_callback: Optional[StatusCallback] = None,
        *,
        force: bool = False,
    ) -> bool:
        """Install unless already present. Returns True if an install ran."""
        if not force and self.is_installed(game_dir):
            logger.info("MelonLoader already installed in %s", game_dir)
            return False
        self.install(game_dir, status_callback)
        return True
