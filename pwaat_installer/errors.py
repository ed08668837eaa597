from __future__ import annotations


class GameNotFoundError(RuntimeError):
    pass


class InstallError(RuntimeError):
    pass


class DownloadError(InstallError):
    pass


class ExtractionError(InstallError):
    pass


class VerificationError(InstallError):
    pass
