"""
Snapshot folders under a profile's destination directory.

Each snapshot is a direct subdirectory of the destination.  Fresh snapshots
are named ``save_NNNNNNNN`` using the lowest free index; users may rename
them to anything without reserved characters.

Nothing here is atomic: a create/restore/replace that fails part-way leaves
whatever was already written and raises ``StageError`` naming the step.
"""

import logging
import re
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from .errors import ConfigIncomplete, NameConflict, NoSlotAvailable, StageError
from .fileops import DIR_MODE, copy_file
from .paths import clean_name

logger = logging.getLogger(__name__)

SAVE_PREFIX = "save_"
SLOT_COUNT  = 100_000_000          # save_00000000 .. save_99999999
_SLOT_RE    = re.compile(r"save_([0-9]{8})")


@dataclass
class CopyReport:
    """Files copied and files skipped because they were missing at the source."""

    copied: list[str] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)


def _require_paths(origin_path: str, destination_path: str) -> None:
    if not origin_path or not destination_path:
        raise ConfigIncomplete("Origin and destination folders must be set.")


def slot_name(index: int) -> str:
    return f"{SAVE_PREFIX}{index:08d}"


# ---------------------------------------------------------------------------
# Listing / naming
# ---------------------------------------------------------------------------

def list_snapshots(destination_path: str) -> list[str]:
    """Sorted names of every subdirectory of ``destination_path`` ([] if unset)."""
    if not destination_path:
        return []
    try:
        return sorted(p.name for p in Path(destination_path).iterdir() if p.is_dir())
    except OSError as exc:
        raise StageError("list", exc) from exc


def allocate_name(destination_path: str) -> str:
    """Return the lowest unused ``save_NNNNNNNN`` name."""
    used = set()
    for name in list_snapshots(destination_path):
        m = _SLOT_RE.fullmatch(name)
        if m:
            used.add(int(m.group(1)))

    # The first free index can be at most len(used).
    for i in range(min(len(used) + 1, SLOT_COUNT)):
        if i not in used:
            return slot_name(i)
    raise NoSlotAvailable("No available save slot found")


# ---------------------------------------------------------------------------
# Copying
# ---------------------------------------------------------------------------

def _copy_files(src_dir: Path, dst_dir: Path, files: Iterable[str], stage: str) -> CopyReport:
    report = CopyReport()
    for filename in files:
        src = src_dir / filename
        if not src.exists():
            logger.warning("File %s not found, skipping", src)
            report.missing.append(filename)
            continue
        try:
            copy_file(src, dst_dir / filename)
        except OSError as exc:
            logger.error("%s of %s failed: %s", stage, filename, exc)
            raise StageError(stage, exc) from exc
        report.copied.append(filename)
    return report


def create(origin_path: str, destination_path: str, name: str, files: Iterable[str]) -> CopyReport:
    """Create snapshot ``name`` from the origin.  Fails if the folder already exists."""
    _require_paths(origin_path, destination_path)
    snap_dir = Path(destination_path) / name
    try:
        snap_dir.mkdir(mode=DIR_MODE)
    except OSError as exc:
        raise StageError("create", exc) from exc

    report = _copy_files(Path(origin_path), snap_dir, files, "copy")
    logger.info("Created snapshot %s (%d copied, %d missing)",
                name, len(report.copied), len(report.missing))
    return report


def restore(origin_path: str, destination_path: str, name: str, files: Iterable[str]) -> CopyReport:
    """Copy the configured files from snapshot ``name`` back into the origin."""
    _require_paths(origin_path, destination_path)
    report = _copy_files(Path(destination_path) / name, Path(origin_path), files, "restore")
    logger.info("Restored snapshot %s (%d copied, %d missing)",
                name, len(report.copied), len(report.missing))
    return report


def delete(destination_path: str, name: str) -> None:
    try:
        shutil.rmtree(Path(destination_path) / name)
    except OSError as exc:
        raise StageError("delete", exc) from exc
    logger.info("Deleted snapshot %s", name)


def replace(origin_path: str, destination_path: str, name: str, files: Iterable[str]) -> CopyReport:
    """Delete snapshot ``name`` then create it again from the current origin."""
    _require_paths(origin_path, destination_path)
    delete(destination_path, name)
    return create(origin_path, destination_path, name, files)


def rename(destination_path: str, old_name: str, new_name: str) -> str:
    """
    Rename snapshot ``old_name`` and return the (trimmed) new name.

    Validation happens before anything on disk changes.  Renaming to the
    current name is a no-op.
    """
    new_name = clean_name(new_name)
    if new_name == old_name:
        return new_name
    dest = Path(destination_path)
    if (dest / new_name).exists():
        raise NameConflict("A save with this name already exists")
    try:
        (dest / old_name).rename(dest / new_name)
    except OSError as exc:
        raise StageError("rename", exc) from exc
    logger.info("Renamed snapshot %s -> %s", old_name, new_name)
    return new_name
