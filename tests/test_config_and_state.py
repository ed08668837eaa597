import logging

import pytest

from pwaat_installer.installer_config import InstallerConfig, load_installer_config
from pwaat_installer.lib.registry import NullRegistry, read_value_quiet
from pwaat_installer.logging_utils import configure_logging
from pwaat_installer.state_store import ensure_defaults, load_state, mark_step_completed, save_state


def test_config_defaults():
    cfg = load_installer_config(None)
    assert cfg.steam_default_path == "C:\\Program Files (x86)\\Steam"
    assert cfg.game_executable == "PWAAT.exe"
    assert cfg.game_path is None
    assert cfg.melonloader_release_page == "https://github.com/LavaGang/MelonLoader/releases/tag/v0.7.1"


def test_config_yaml_overrides(tmp_path):
    p = tmp_path / "cfg.yml"
    p.write_text(
        "melonloader:\n  version: v0.6.1\nhttp:\n  timeout_s: 5\ngame:\n  path: /games/pwaat\n",
        encoding="utf-8",
    )
    cfg = load_installer_config(str(p))
    assert cfg.melonloader_url.endswith("/download/v0.6.1/MelonLoader.x86.zip")
    assert cfg.timeout_s == 5.0
    assert cfg.game_path == "/games/pwaat"


def test_config_rejects_bad_files(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_installer_config(str(tmp_path / "missing.yaml"))

    txt = tmp_path / "cfg.txt"
    txt.write_text("x", encoding="utf-8")
    with pytest.raises(ValueError):
        load_installer_config(str(txt))

    lst = tmp_path / "cfg.yaml"
    lst.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_installer_config(str(lst))


@pytest.mark.parametrize("name", ["state.json", "state.yaml"])
def test_state_roundtrip(tmp_path, name):
    path = str(tmp_path / "nested" / name)
    assert load_state(path) == {}

    state = ensure_defaults({"config": {"reinstall": True}})
    mark_step_completed(state, "10_locate_game")
    mark_step_completed(state, "10_locate_game")
    save_state(path, state)

    loaded = load_state(path)
    assert loaded["config"]["reinstall"] is True
    assert loaded["execution"]["completed_steps"] == ["10_locate_game"]


def test_state_must_be_mapping(tmp_path):
    p = tmp_path / "state.json"
    p.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ValueError):
        load_state(str(p))


def test_logging_falls_back_when_dir_unusable(tmp_path, monkeypatch):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a dir", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    actual = configure_logging(log_path=str(blocker / "installer.log"), also_console=False)

    assert actual == str(tmp_path / "pwaat-installer.log")
    assert configure_logging(log_path=str(tmp_path / "other.log")) == actual
    logging.getLogger("pwaat_installer.test").info("hello")
    assert "hello" in (tmp_path / "pwaat-installer.log").read_text(encoding="utf-8")


@pytest.mark.parametrize("verbose, level", [(False, logging.INFO), (True, logging.DEBUG)])
def test_console_level_follows_verbose(tmp_path, verbose, level):
    configure_logging(log_path=str(tmp_path / "installer.log"), verbose=verbose)

    ours = [h for h in logging.getLogger().handlers if getattr(h, "_pwaat_handler", False)]
    console = [h for h in ours if not isinstance(h, logging.FileHandler)]
    files = [h for h in ours if isinstance(h, logging.FileHandler)]
    assert [h.level for h in console] == [level]
    assert [h.level for h in files] == [logging.DEBUG]


def test_registry_quiet_read():
    class Exploding:
        def read_value(self, key_path, value_name):
            raise PermissionError("nope")

    assert read_value_quiet(Exploding(), "SOFTWARE\\Valve\\Steam", "InstallPath") is None
    assert read_value_quiet(NullRegistry(), "SOFTWARE\\Valve\\Steam", "InstallPath") is None
    assert InstallerConfig().steam_registry_keys[0] == "SOFTWARE\\WOW6432Node\\Valve\\Steam"
