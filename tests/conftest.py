from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace
from typing import List

import pytest

from generic_save_manager.manager import SaveManager


class RecordingNotifier:
    """Stands in for Notifier; keeps every message instead of timing it out."""

    def __init__(self) -> None:
        self.messages: List[str] = []

    def notify(self, message: str) -> None:
        self.messages.append(message)


@pytest.fixture
def dirs(tmp_path: Path) -> SimpleNamespace:
    """Data home, origin (with a.txt / b.txt) and an empty destination."""
    home = tmp_path / "home"
    origin = tmp_path / "origin"
    dest = tmp_path / "dest"
    for d in (home, origin, dest):
        d.mkdir()
    (origin / "a.txt").write_bytes(b"alpha\n")
    (origin / "b.txt").write_bytes(b"bravo\x00\xff")
    return SimpleNamespace(home=home, origin=origin, dest=dest)


@pytest.fixture
def make_manager(dirs):
    """
    Factory returning a SaveManager on ``dirs.home``.

    By default the current profile points at ``dirs.origin`` / ``dirs.dest``
    and copies a.txt and b.txt.
    """
    def _make(configured: bool = True, files=("a.txt", "b.txt")) -> SaveManager:
        notifier = RecordingNotifier()
        manager = SaveManager.open(dirs.home, notifier=notifier)
        if configured:
            assert manager.set_origin(str(dirs.origin)).ok
            assert manager.set_destination(str(dirs.dest)).ok
            assert manager.set_files(list(files)).ok
        return manager

    return _make
