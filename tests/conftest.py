"""Shared fixtures and fakes; also puts the repo root on sys.path for ``ui``."""

import io
import logging
import os
import sys
import zipfile

import pytest
import requests

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from pwaat_installer.logging_utils import reset_logging  # noqa: E402


def make_zip(entries):
    """Build zip bytes from {name: bytes}; names ending in '/' become dir entries."""
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w") as zf:
        for name, data in entries.items():
            if name.endswith("/"):
                zf.writestr(zipfile.ZipInfo(name), b"")
            else:
                zf.writestr(name, data)
    return buf.getvalue()


MELONLOADER_ZIP = {
    "version.dll": b"proxy",
    "MelonLoader/": b"",
    "MelonLoader/net35/MelonLoader.dll": b"core",
    "MelonLoader/Dependencies/Bootstrap.dll": b"boot",
    "dobby.dll": b"dobby",
}


class FakeResponse:
    def __init__(self, body=b"", status_code=200):
        self.body = body
        self.status_code = status_code

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error")

    def iter_content(self, chunk_size=1):
        for i in range(0, len(self.body), chunk_size):
            yield self.body[i : i + chunk_size]


class FakeSession:
    def __init__(self, body=b"", status_code=200, exc=None):
        self.body = body
        self.status_code = status_code
        self.exc = exc
        self.calls = []

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.exc is not None:
            raise self.exc
        return FakeResponse(self.body, self.status_code)


class FakeRegistry:
    def __init__(self, values=None, fail=()):
        self.values = values or {}
        self.fail = set(fail)
        self.calls = []

    def read_value(self, key_path, value_name):
        self.calls.append((key_path, value_name))
        if key_path in self.fail:
            raise OSError("access denied")
        return self.values.get(key_path)


@pytest.fixture(autouse=True)
def reset_root_logging():
    root = logging.getLogger()
    level = root.level
    yield
    reset_logging()
    root.setLevel(level)


@pytest.fixture
def melonloader_zip():
    return make_zip(MELONLOADER_ZIP)


@pytest.fixture
def game_dir(tmp_path):
    d = tmp_path / "Phoenix Wright Ace Attorney Trilogy"
    d.mkdir()
    (d / "PWAAT.exe").write_bytes(b"MZ")
    return d


@pytest.fixture
def temp_dir(tmp_path):
    d = tmp_path / "tmp"
    d.mkdir()
    return d
