from .step_10_locate_game import LocateGameStep
from .step_20_install_melonloader import InstallMelonLoaderStep
from .step_30_post_install_checks import PostInstallChecksStep

__all__ = [
    "LocateGameStep",
    "InstallMelonLoaderStep",
    "PostInstallChecksStep",
]
