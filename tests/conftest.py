"""
Shared pytest fixtures. Every test gets its own config file location so no
run reads or writes the real cfg/config.json.
"""
import pytest

from wordwrap_lib import config_manager


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    path = tmp_path / "cfg" / "config.json"
    monkeypatch.setattr(config_manager, "CONFIG_PATH", path)
    return path
