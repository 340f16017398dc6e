#!/usr/bin/env python3
"""
Generic Save Manager

Snapshots and restores a chosen set of files between an application's
working folder (origin) and an archive folder (destination), per profile.

Run headless:
  python -m generic_save_manager
F5  = Import Save (new save_NNNNNNNN snapshot of the origin files)
F9  = Load Save   (restores the selected snapshot, newest by default)

Profiles and settings are stored in:
  Windows : %APPDATA%/GenericSaveManager/
  Linux   : ~/.local/share/GenericSaveManager/
  (override with $GENERIC_SAVE_MANAGER_HOME)
"""

import sys

from generic_save_manager.hotkeys import QuickKeys
from generic_save_manager.log import setup_logging
from generic_save_manager.manager import SaveManager
from generic_save_manager.notify import Notifier
from generic_save_manager.paths import get_data_dir


def main() -> int:
    logger = setup_logging()

    def _show(message: str) -> None:
        if message:
            logger.info(message)

    data_dir = get_data_dir()
    manager  = SaveManager.open(data_dir, notifier=Notifier(on_change=_show))
    logger.info("Data directory: %s", data_dir)
    logger.info("Profile %r  —  %d save(s) in %s",
                manager.profile_name, len(manager.saves),
                manager.profile.destination_path or "(destination not set)")

    keys = QuickKeys(manager)
    if not keys.start():
        return 1
    logger.info("Ready  —  F5: Import Save  |  F9: Load Save  (Ctrl+C to quit)")
    try:
        keys.join()
    except KeyboardInterrupt:
        keys.stop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
