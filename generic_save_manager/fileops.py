import os
import shutil
from pathlib import Path

FILE_MODE = 0o644
DIR_MODE  = 0o755


def copy_file(src: Path, dst: Path, mode: int = FILE_MODE) -> None:
    """
    Stream ``src`` into ``dst`` (created or truncated) and chmod it to ``mode``.

    Raises FileNotFoundError when ``src`` is absent and OSError for any other
    failure.  A copy that fails part-way leaves the truncated ``dst`` behind.
    """
    with open(src, "rb") as fin, open(dst, "wb") as fout:
        shutil.copyfileobj(fin, fout)
    os.chmod(dst, mode)
