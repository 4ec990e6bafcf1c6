#!/usr/bin/env python3
"""
Tests for configuration path resolution and default data.
"""

from pathlib import Path

import pytest

from configfile import (
    HomeDirectoryNotSetError,
    Mode,
    config_base,
    config_dir,
    config_file,
    default_config_data,
    list_modes,
    mode_name,
)


def test_config_base_uses_home_variable(home):
    assert config_base() == home / ".config"


def test_config_base_with_explicit_home(tmp_path):
    assert config_base(str(tmp_path)) == tmp_path / ".config"


def test_config_base_without_home(monkeypatch):
    monkeypatch.delenv("HOME", raising=False)
    with pytest.raises(HomeDirectoryNotSetError):
        config_base()
    # Also an EnvironmentError for callers that only know the builtin
    with pytest.raises(EnvironmentError):
        config_base()


def test_explicit_home_does_not_need_variable(monkeypatch):
    monkeypatch.delenv("HOME", raising=False)
    assert config_base("/srv/app") == Path("/srv/app/.config")


def test_empty_home_variable_is_used_as_is(monkeypatch):
    monkeypatch.setenv("HOME", "")
    assert config_base() == Path(".config")


def test_config_dir_and_file(home):
    assert config_dir("TestApp") == config_base() / "TestApp"
    assert config_file("TestApp", "test") == config_dir("TestApp") / "test.yaml"


@pytest.mark.parametrize("app_name", ["TestApp", "my app", "nested/app"])
def test_app_name_is_not_normalized(home, app_name):
    assert config_dir(app_name) == home / ".config" / app_name


def test_mode_rendering():
    assert mode_name("prod") == "prod"
    assert mode_name(Mode.DEV) == "dev"
    assert mode_name(3) == "3"


def test_config_file_with_enum_mode(home):
    assert config_file("TestApp", Mode.TEST) == home / ".config" / "TestApp" / "test.yaml"


def test_path_functions_do_not_touch_filesystem(home):
    config_file("TestApp", "dev")
    assert not (home / ".config").exists()


def test_list_modes(home):
    assert list_modes("TestApp") == []

    app_dir = home / ".config" / "TestApp"
    app_dir.mkdir(parents=True)
    for name in ("prod.yaml", "dev.yaml", "notes.txt"):
        (app_dir / name).write_text("url: x\n")
    (app_dir / "old.yaml").mkdir()

    assert list_modes("TestApp") == ["dev", "prod"]


def test_default_config_data_values():
    data = default_config_data()
    assert set(data) == {"url", "key", "secret", "timeout"}
    assert data["url"] == "https://api.example.com"
    assert data["key"] == "abc123"
    assert data["secret"] == "def456"
    assert data["timeout"] == 10


def test_default_config_data_returns_independent_copies():
    first = default_config_data()
    first["url"] = "changed"
    first["extra"] = True
    second = default_config_data()
    assert second["url"] == "https://api.example.com"
    assert "extra" not in second
