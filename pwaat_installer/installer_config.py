from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

DEFAULT_STEAM_PATH = "C:\\Program Files (x86)\\Steam"
DEFAULT_REGISTRY_KEYS = [
    "SOFTWARE\\WOW6432Node\\Valve\\Steam",
    "SOFTWARE\\Valve\\Steam",
]
DEFAULT_MELONLOADER_VERSION = "v0.7.1"
MELONLOADER_RELEASES = "https://github.com/LavaGang/MelonLoader/releases"


@dataclass(frozen=True)
class InstallerConfig:
    raw: Dict[str, Any] = field(default_factory=dict)

    def _section(self, name: str) -> Dict[str, Any]:
        return self.raw.get(name) or {}

    @property
    def steam_default_path(self) -> str:
        return str(self._section("steam").get("default_path") or DEFAULT_STEAM_PATH)

    @property
    def steam_registry_keys(self) -> List[str]:
        return [str(k) for k in (self._section("steam").get("registry_keys") or DEFAULT_REGISTRY_KEYS)]

    @property
    def steam_registry_value(self) -> str:
        return str(self._section("steam").get("registry_value") or "InstallPath")

    @property
    def game_folder(self) -> str:
        return str(self._section("game").get("folder") or "Phoenix Wright Ace Attorney Trilogy")

    @property
    def game_executable(self) -> str:
        return str(self._section("game").get("executable") or "PWAAT.exe")

    @property
    def game_path(self) -> Optional[str]:
        """Explicit game directory; skips auto-detection when set."""
        value = self._section("game").get("path")
        return str(value) if value else None

    @property
    def melonloader_version(self) -> str:
        return str(self._section("melonloader").get("version") or DEFAULT_MELONLOADER_VERSION)

    @property
    def melonloader_url(self) -> str:
        url = self._section("melonloader").get("download_url")
        if url:
            return str(url)
        return f"{MELONLOADER_RELEASES}/download/{self.melonloader_version}/MelonLoader.x86.zip"

    @property
    def melonloader_release_page(self) -> str:
        return f"{MELONLOADER_RELEASES}/tag/{self.melonloader_version}"

    @property
    def melonloader_proxy_file(self) -> str:
        return str(self._section("melonloader").get("proxy_file") or "version.dll")

    @property
    def melonloader_folder(self) -> str:
        return str(self._section("melonloader").get("folder") or "MelonLoader")

    @property
    def user_agent(self) -> str:
        return str(self._section("http").get("user_agent") or "PWAATAccessibilityInstaller/1.0")

    @property
    def timeout_s(self) -> float:
        return float(self._section("http").get("timeout_s") or 60.0)


def load_installer_config(path: Optional[str]) -> InstallerConfig:
    """Load the optional YAML config; no path means built-in defaults."""

    if not path:
        return InstallerConfig()

    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(path)

    if p.suffix.lower() not in {".yaml", ".yml"}:
        raise ValueError("installer config must be YAML")

    try:
        import yaml  # type: ignore
    except Exception as e:
        raise RuntimeError("PyYAML is required to read the installer config") from e

    raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if not isinstance(raw, dict):
        raise ValueError("installer config must contain a mapping/object")

    return InstallerConfig(raw=raw)
