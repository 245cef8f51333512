import os
from pathlib import Path

import pytest

from configstore import paths
from configstore.errors import PlatformError
from configstore.paths import AppUI, base_config_dir, resolve_config_dir


def test_parse_ui_type():
    assert AppUI.parse("cli") is AppUI.COMMAND_LINE
    assert AppUI.parse("GUI") is AppUI.GRAPHICAL
    assert AppUI.parse("command_line") is AppUI.COMMAND_LINE
    assert AppUI.GUI is AppUI.GRAPHICAL
    with pytest.raises(ValueError):
        AppUI.parse("tui")


@pytest.mark.skipif(os.name == "nt", reason="XDG layout")
def test_linux_uses_xdg_config_home(monkeypatch, tmp_path):
    monkeypatch.setattr(paths, "_is_macos", lambda: False)
    monkeypatch.setattr(paths.platformdirs, "user_config_dir", lambda name, **kw: str(tmp_path / "xdg" / name))
    assert base_config_dir("myApp", AppUI.COMMAND_LINE) == tmp_path / "xdg" / "myApp"
    assert base_config_dir("myApp", AppUI.GRAPHICAL) == tmp_path / "xdg" / "myApp"


@pytest.mark.skipif(os.name == "nt", reason="XDG layout")
def test_macos_command_line_uses_xdg_layout(monkeypatch, tmp_path):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.setattr(paths, "_is_macos", lambda: True)
    monkeypatch.setattr(paths, "_native_config_dir", lambda name: str(tmp_path / "Library" / "Application Support" / name))
    assert base_config_dir("myApp", AppUI.COMMAND_LINE) == tmp_path / "xdg" / "myApp"
    assert base_config_dir("myApp", AppUI.GRAPHICAL) == tmp_path / "Library" / "Application Support" / "myApp"


def test_native_dir_has_no_author_segment():
    native = Path(paths._native_config_dir("someApp"))
    assert native.name == "someApp"
    assert native.parent.name != "someApp"


def test_empty_app_name_rejected():
    with pytest.raises(ValueError):
        base_config_dir("", AppUI.COMMAND_LINE)


def test_unknown_home_is_platform_error(monkeypatch):
    def boom(name):
        raise RuntimeError("Could not determine home directory.")

    monkeypatch.setattr(paths, "_native_config_dir", boom)
    monkeypatch.setattr(paths, "_xdg_config_dir", boom)
    with pytest.raises(PlatformError):
        base_config_dir("myApp", AppUI.COMMAND_LINE)


def test_resolve_creates_missing_parents(tmp_path):
    root = tmp_path / "a" / "b"
    d = resolve_config_dir("myApp", AppUI.COMMAND_LINE, base_dir=root)
    assert d == root / "myApp"
    assert d.is_dir()
    # idempotent
    assert resolve_config_dir("myApp", AppUI.COMMAND_LINE, base_dir=root) == d


def test_resolve_platform_dir_is_created(monkeypatch, tmp_path):
    monkeypatch.setattr(paths, "base_config_dir", lambda name, ui: tmp_path / "platform" / name)
    d = resolve_config_dir("myApp", AppUI.GRAPHICAL)
    assert d == tmp_path / "platform" / "myApp"
    assert d.is_dir()


def test_non_member_ui_type_is_type_error():
    with pytest.raises(TypeError):
        base_config_dir("myApp", "cli")
