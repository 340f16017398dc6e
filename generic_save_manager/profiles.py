"""
Profile records and the process-wide "current profile" pointer.

Layout under the data directory::

    save_manager_config.json      {"current_profile": "default"}
    profiles/<name>.json          {"origin_path": ..., "destination_path": ...,
                                   "files_to_copy": [...]}

The profile name is the file stem, so names go through ``paths.clean_name``
before they reach the filesystem.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .errors import InvalidName, LastProfileError, NameConflict, ProfileNotFound
from .paths import CONFIG_FILENAME, PROFILE_DIRNAME, clean_name

logger = logging.getLogger(__name__)

DEFAULT_PROFILE  = "default"
NEW_PROFILE_BASE = "New Profile "


@dataclass
class Profile:
    origin_path: str = ""
    destination_path: str = ""
    files_to_copy: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "origin_path": self.origin_path,
            "destination_path": self.destination_path,
            "files_to_copy": list(self.files_to_copy),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Profile":
        # Older records wrote an empty file list as null.
        files = data.get("files_to_copy")
        if not isinstance(files, list):
            files = []
        return cls(
            origin_path=str(data.get("origin_path") or ""),
            destination_path=str(data.get("destination_path") or ""),
            files_to_copy=[str(f) for f in files],
        )

    @property
    def is_complete(self) -> bool:
        return bool(self.origin_path and self.destination_path)


def _read_json(path: Path) -> dict[str, Any]:
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except ValueError as exc:
        logger.warning("Ignoring unreadable record %s: %s", path, exc)
        return {}
    return raw if isinstance(raw, dict) else {}


def _write_json(path: Path, data: dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")


class ProfileStore:
    """JSON-backed profile records rooted at ``base_dir``."""

    def __init__(self, base_dir: Path):
        self.base_dir     = Path(base_dir)
        self.profiles_dir = self.base_dir / PROFILE_DIRNAME
        self.config_path  = self.base_dir / CONFIG_FILENAME

    def _path_for(self, name: str) -> Path:
        return self.profiles_dir / f"{name}.json"

    # ------------------------------------------------------------------
    # Profile records
    # ------------------------------------------------------------------

    def list_profiles(self) -> list[str]:
        if not self.profiles_dir.is_dir():
            return []
        return sorted(
            p.stem for p in self.profiles_dir.iterdir()
            if p.is_file() and p.suffix == ".json"
        )

    def exists(self, name: str) -> bool:
        return self._path_for(name).is_file()

    def load(self, name: str) -> Profile:
        """Load ``name``, creating an empty record on first use."""
        path = self._path_for(name)
        if not path.exists():
            logger.info("Creating empty profile %r", name)
            profile = Profile()
            self.save(profile, name)
            return profile
        return Profile.from_dict(_read_json(path))

    def save(self, profile: Profile, name: str) -> None:
        _write_json(self._path_for(name), profile.to_dict())

    def rename(self, old_name: str, new_name: str) -> str:
        new_name = clean_name(new_name)
        if self.exists(new_name):
            raise NameConflict(f"Profile {new_name!r} already exists")
        old_path = self._path_for(old_name)
        if not old_path.exists():
            raise ProfileNotFound(f"Profile {old_name!r} not found")
        old_path.rename(self._path_for(new_name))
        logger.info("Renamed profile %r -> %r", old_name, new_name)
        return new_name

    def delete(self, name: str) -> str:
        """
        Delete ``name`` and return the profile that should become current.

        The last remaining profile can never be deleted.
        """
        names = self.list_profiles()
        if len(names) <= 1:
            raise LastProfileError("You must have at least one profile.")
        path = self._path_for(name)
        if not path.exists():
            raise ProfileNotFound(f"Profile {name!r} not found")
        path.unlink()
        logger.info("Deleted profile %r", name)
        return self.list_profiles()[0]

    def next_new_name(self) -> str:
        existing = set(self.list_profiles())
        counter = 1
        while f"{NEW_PROFILE_BASE}{counter}" in existing:
            counter += 1
        return f"{NEW_PROFILE_BASE}{counter}"

    # ------------------------------------------------------------------
    # Current-profile pointer
    # ------------------------------------------------------------------

    def get_current(self) -> str:
        """Return the persisted current profile, writing the default on first run."""
        if not self.config_path.exists():
            self.set_current(DEFAULT_PROFILE)
            return DEFAULT_PROFILE
        name = _read_json(self.config_path).get("current_profile")
        if not isinstance(name, str):
            return DEFAULT_PROFILE
        try:
            return clean_name(name)
        except InvalidName:
            logger.warning("Ignoring invalid current profile %r", name)
            return DEFAULT_PROFILE

    def set_current(self, name: str) -> None:
        _write_json(self.config_path, {"current_profile": name})
