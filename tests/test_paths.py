# file: tests/test_paths.py
from __future__ import annotations

from pathlib import Path

import pytest

from generic_save_manager import paths
from generic_save_manager.errors import InvalidName


def test_data_dir_env_override(monkeypatch, tmp_path):
    monkeypatch.setenv(paths.HOME_ENV_VAR, str(tmp_path))
    assert paths.get_data_dir() == tmp_path


def test_data_dir_linux_default(monkeypatch):
    monkeypatch.delenv(paths.HOME_ENV_VAR, raising=False)
    monkeypatch.setattr(paths.platform, "system", lambda: "Linux")
    assert paths.get_data_dir() == Path.home() / ".local" / "share" / paths.APP_NAME


def test_clean_name_trims():
    assert paths.clean_name("  My Save  ") == "My Save"


@pytest.mark.parametrize("ch", list(paths.RESERVED_CHARS))
def test_clean_name_rejects_each_reserved_char(ch):
    with pytest.raises(InvalidName):
        paths.clean_name(f"bad{ch}name")
