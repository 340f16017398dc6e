import os
import platform
from pathlib import Path

from .errors import InvalidName

APP_NAME        = "GenericSaveManager"
HOME_ENV_VAR    = "GENERIC_SAVE_MANAGER_HOME"
CONFIG_FILENAME = "save_manager_config.json"
PROFILE_DIRNAME = "profiles"


def get_data_dir() -> Path:
    override = os.environ.get(HOME_ENV_VAR)
    if override:
        return Path(override)
    if platform.system() == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
    else:
        base = Path.home() / ".local" / "share"
    return base / APP_NAME


# ---------------------------------------------------------------------------
# Name validation (snapshot folders and profile files)
# ---------------------------------------------------------------------------

RESERVED_CHARS = '\\/:*?"<>|'


def has_reserved_chars(name: str) -> bool:
    return any(c in RESERVED_CHARS for c in name)


def clean_name(name: str) -> str:
    """
    Trim ``name`` and check it can be used as a file or folder name.

    Raises InvalidName when it is empty or contains a reserved character.
    """
    cleaned = (name or "").strip()
    if not cleaned:
        raise InvalidName("Name cannot be empty")
    if has_reserved_chars(cleaned):
        raise InvalidName("Name contains invalid characters")
    return cleaned
