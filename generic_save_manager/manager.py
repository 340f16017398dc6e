"""
User-facing operations on snapshots and profiles.

``SaveManager`` owns the session state: the current profile, the snapshot
listing of its destination and the selected snapshot.  Every public
operation returns an ``Outcome``; nothing raised by the lower layers gets
past this module.  Confirmation prompts, folder pickers and list rendering
belong to whatever front end drives it.
"""

import functools
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from . import snapshots
from .errors import (
    ConfigIncomplete,
    NoSelection,
    SaveManagerError,
    StageError,
)
from .notify import Notifier
from .paths import clean_name
from .profiles import Profile, ProfileStore
from .selection import resolve_selection
from .snapshots import CopyReport

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Outcome:
    ok: bool
    kind: str = "ok"
    message: str = ""
    notices: tuple[str, ...] = ()
    items: tuple[str, ...] = ()

    @classmethod
    def success(cls, message: str = "", notices: Iterable[str] = (),
                items: Iterable[str] = ()) -> "Outcome":
        return cls(ok=True, message=message, notices=tuple(notices), items=tuple(items))

    @classmethod
    def failure(cls, exc: Exception) -> "Outcome":
        kind = getattr(exc, "kind", StageError.kind)
        return cls(ok=False, kind=kind, message=str(exc))


def _reported(action: str):
    """Turn errors raised by a manager operation into a failed ``Outcome``."""
    def deco(method):
        @functools.wraps(method)
        def wrapper(self, *args, **kwargs) -> Outcome:
            try:
                return method(self, *args, **kwargs)
            except NoSelection as exc:
                logger.info("%s: %s", action, exc)
                return Outcome.failure(exc)
            except StageError as exc:
                logger.error("%s: %s", action, exc)
                return Outcome.failure(exc)
            except SaveManagerError as exc:
                logger.warning("%s: %s", action, exc)
                return Outcome.failure(exc)
            except OSError as exc:
                logger.error("%s failed: %s", action, exc)
                return Outcome(ok=False, kind=StageError.kind, message=f"{action} failed: {exc}")
        return wrapper
    return deco


class SaveManager:

    def __init__(self, store: ProfileStore, notifier: Notifier | None = None):
        self.store    = store
        self.notifier = notifier if notifier is not None else Notifier()

        self.profile_name: str          = ""
        self.profile: Profile           = Profile()
        self.saves: list[str]           = []
        self.selected_index: int | None = None

    @classmethod
    def open(cls, base_dir: Path, notifier: Notifier | None = None) -> "SaveManager":
        """Build a manager on ``base_dir`` and load the persisted current profile."""
        manager = cls(ProfileStore(base_dir), notifier)
        outcome = manager.startup()
        if not outcome.ok:
            logger.warning("Startup: %s", outcome.message)
        return manager

    @_reported("Startup")
    def startup(self) -> Outcome:
        self.store.profiles_dir.mkdir(parents=True, exist_ok=True)
        self._activate(self.store.get_current())
        return Outcome.success()

    # ------------------------------------------------------------------
    # Session helpers
    # ------------------------------------------------------------------

    @property
    def selected_name(self) -> str | None:
        if self.selected_index is None or not 0 <= self.selected_index < len(self.saves):
            return None
        return self.saves[self.selected_index]

    def _activate(self, name: str) -> None:
        self.store.set_current(name)
        self.profile = self.store.load(name)
        self.profile_name = name
        self.selected_index = None
        self.refresh_saves()

    def _save_profile(self) -> None:
        self.store.save(self.profile, self.profile_name)

    def _require_complete(self) -> None:
        if not self.profile.is_complete:
            raise ConfigIncomplete("Origin and destination folders must be set.")

    def _require_selection(self, verb: str) -> str:
        name = self.selected_name
        if name is None:
            raise NoSelection(f"Please select a save to {verb}.")
        return name

    def refresh_saves(self, prefer: str | None = None) -> None:
        """
        Re-read the destination listing and re-resolve the selection by name.

        ``prefer`` overrides the name to keep selected (used after create
        and rename).  An unreadable destination empties the listing and
        raises StageError.
        """
        previous = prefer if prefer is not None else self.selected_name
        try:
            self.saves = snapshots.list_snapshots(self.profile.destination_path)
        except StageError:
            self.saves = []
            self.selected_index = None
            raise
        self.selected_index = resolve_selection(self.saves, previous)

    def _refresh_after_failure(self, prefer: str | None = None) -> None:
        """Refresh after a failed mutation without hiding the original error."""
        try:
            self.refresh_saves(prefer=prefer)
        except StageError as exc:
            logger.error("Listing refresh failed: %s", exc)

    @_reported("Refresh")
    def refresh(self) -> Outcome:
        self.refresh_saves()
        return Outcome.success()

    def select(self, index: int | None) -> None:
        """Record the front end's selection; out-of-range indexes clear it."""
        if index is not None and not 0 <= index < len(self.saves):
            index = None
        self.selected_index = index

    def select_name(self, name: str) -> None:
        self.select(self.saves.index(name) if name in self.saves else None)

    @staticmethod
    def _missing_notices(report: CopyReport, where: Path, template: str) -> list[str]:
        return [template.format(path=where / f) for f in report.missing]

    # ------------------------------------------------------------------
    # Snapshot operations
    # ------------------------------------------------------------------

    @_reported("Import save")
    def import_save(self) -> Outcome:
        self._require_complete()
        p = self.profile
        name = snapshots.allocate_name(p.destination_path)
        try:
            report = snapshots.create(p.origin_path, p.destination_path, name, p.files_to_copy)
        except StageError:
            self._refresh_after_failure(prefer=name)
            raise
        self.refresh_saves(prefer=name)

        msg = f"Save {name} successfully imported ✔️"
        self.notifier.notify(msg)
        return Outcome.success(
            msg, self._missing_notices(report, Path(p.origin_path), "File {path} not found"),
        )

    @_reported("Load save")
    def load_save(self) -> Outcome:
        name = self._require_selection("load")
        self._require_complete()
        p = self.profile
        report = snapshots.restore(p.origin_path, p.destination_path, name, p.files_to_copy)

        self.notifier.notify("Save loaded ✓")
        return Outcome.success(
            f"Save {name} loaded",
            self._missing_notices(report, Path(p.destination_path) / name,
                                  "Missing file in save: {path}"),
        )

    @_reported("Replace save")
    def replace_save(self) -> Outcome:
        name = self._require_selection("replace")
        self._require_complete()
        p = self.profile
        try:
            report = snapshots.replace(p.origin_path, p.destination_path, name, p.files_to_copy)
        except StageError:
            self._refresh_after_failure(prefer=name)
            raise
        self.refresh_saves(prefer=name)

        msg = f"{name} successfully replaced ✔️"
        self.notifier.notify(msg)
        return Outcome.success(
            msg, self._missing_notices(report, Path(p.origin_path), "File {path} not found"),
        )

    @_reported("Delete save")
    def delete_save(self) -> Outcome:
        name = self._require_selection("delete")
        try:
            snapshots.delete(self.profile.destination_path, name)
        except StageError:
            self._refresh_after_failure()
            raise
        self.selected_index = None
        self.refresh_saves()

        msg = f"{name} successfully deleted ✔️"
        self.notifier.notify(msg)
        return Outcome.success(msg)

    @_reported("Rename save")
    def rename_save(self, new_name: str) -> Outcome:
        old_name = self._require_selection("rename")
        new_name = snapshots.rename(self.profile.destination_path, old_name, new_name)
        if new_name == old_name:
            return Outcome.success()
        self.refresh_saves(prefer=new_name)
        return Outcome.success(f"Renamed {old_name} to {new_name}")

    # ------------------------------------------------------------------
    # Profile configuration
    # ------------------------------------------------------------------

    @_reported("Set origin")
    def set_origin(self, path: str) -> Outcome:
        path = str(path)
        if path != self.profile.origin_path:
            # The old file selection belongs to the old folder.
            self.profile.files_to_copy = []
        self.profile.origin_path = path
        self._save_profile()
        return Outcome.success(f"Origin folder: {path}")

    @_reported("Set destination")
    def set_destination(self, path: str) -> Outcome:
        self.profile.destination_path = str(path)
        self._save_profile()
        self.refresh_saves()
        return Outcome.success(f"Destination folder: {path}")

    @_reported("List origin files")
    def available_files(self) -> Outcome:
        if not self.profile.origin_path:
            raise ConfigIncomplete("Set Origin folder first.")
        names = sorted(
            e.name for e in Path(self.profile.origin_path).iterdir() if not e.is_dir()
        )
        return Outcome.success(items=names)

    @_reported("Select files")
    def set_files(self, names: Iterable[str]) -> Outcome:
        self.profile.files_to_copy = list(dict.fromkeys(names))
        self._save_profile()
        return Outcome.success(items=self.profile.files_to_copy)

    @_reported("Clear files")
    def clear_files(self) -> Outcome:
        self.profile.files_to_copy = []
        self._save_profile()
        return Outcome.success()

    # ------------------------------------------------------------------
    # Profile management
    # ------------------------------------------------------------------

    def profile_names(self) -> list[str]:
        return self.store.list_profiles()

    @_reported("Switch profile")
    def switch_profile(self, name: str) -> Outcome:
        name = clean_name(name)
        self._save_profile()
        self._activate(name)
        return Outcome.success(f"Profile {name} loaded")

    @_reported("New profile")
    def new_profile(self) -> Outcome:
        self._save_profile()
        name = self.store.next_new_name()
        self.store.save(Profile(), name)
        self._activate(name)
        return Outcome.success(f"Profile {name} created")

    @_reported("Rename profile")
    def rename_profile(self, new_name: str) -> Outcome:
        old_name = self.profile_name
        new_name = self.store.rename(old_name, new_name)
        self.profile_name = new_name
        self.store.set_current(new_name)
        self._save_profile()
        return Outcome.success(f"Profile {old_name} renamed to {new_name}")

    @_reported("Delete profile")
    def delete_profile(self) -> Outcome:
        old_name = self.profile_name
        next_name = self.store.delete(old_name)
        self._activate(next_name)
        return Outcome.success(f"Profile {old_name} deleted")
