import logging

import pytest


@pytest.fixture
def home(tmp_path, monkeypatch):
    """An isolated home directory, also exported as HOME."""
    home_path = tmp_path / "home"
    home_path.mkdir()
    monkeypatch.setenv("HOME", str(home_path))
    return home_path


@pytest.fixture
def restore_logging():
    """Undo the root logger setup done by the command-line tools."""
    root = logging.getLogger()
    level = root.level
    yield
    # basicConfig installs a plain StreamHandler
    for handler in root.handlers[:]:
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(level)
