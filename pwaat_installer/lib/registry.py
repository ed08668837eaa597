from __future__ import annotations

import logging
import sys
from typing import Optional, Protocol

logger = logging.getLogger(__name__)


class RegistryLookup(Protocol):
    """Read-only access to string values under HKEY_LOCAL_MACHINE."""

    def read_value(self, key_path: str, value_name: str) -> Optional[str]:
        ...


class WindowsRegistry:
    def read_value(self, key_path: str, value_name: str) -> Optional[str]:
        import winreg  # type: ignore

        with winreg.OpenKey(winreg.HKEY_LOCAL_MACHINE, key_path) as key:
            value, _kind = winreg.QueryValueEx(key, value_name)
        return value if isinstance(value, str) else None


class NullRegistry:
    """Registry stand-in for hosts without one (Linux/Proton, macOS)."""

    def read_value(self, key_path: str, value_name: str) -> Optional[str]:
        return None


def default_registry() -> RegistryLookup:
    if sys.platform == "win32":
        return WindowsRegistry()
    return NullRegistry()


def read_value_quiet(registry: RegistryLookup, key_path: str, value_name: str) -> Optional[str]:
    """Best-effort lookup: missing keys and access errors both read as None."""

    try:
        return registry.read_value(key_path, value_name)
    except Exception as e:
        logger.debug("Registry lookup failed (%s\\%s): %s", key_path, value_name, e)
        return None
