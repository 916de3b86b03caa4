"""Copy-on-write helpers for promoting lower-layer files to the upper layer."""

from __future__ import annotations

import os
import shutil
import stat

_CHUNK = 8192


def _dirname(path: str) -> str:
    stripped = path.rstrip("/") or "/"
    parent = os.path.dirname(stripped)
    if not parent:
        return "."
    return parent.rstrip("/") or "/"


def ensure_dir_path(upper_dir: str, path: str) -> None:
    """Create in ``upper_dir`` every directory leading to ``path``.

    Directories that cannot be created (usually because they exist) are
    left as they are.
    """
    parent = _dirname(path)
    if parent in ("/", "."):
        return
    ensure_dir_path(upper_dir, parent)
    try:
        os.mkdir(f"{upper_dir}{parent}", 0o777)
    except OSError:
        pass


def copy_file(src: str, dst: str) -> None:
    """Copy ``src`` to a new file ``dst`` with the same permissions.

    Raises FileExistsError if ``dst`` already exists, and OSError on any
    other failure.
    """
    with open(src, "rb") as source:
        mode = stat.S_IMODE(os.fstat(source.fileno()).st_mode)
        fd = os.open(dst, os.O_WRONLY | os.O_CREAT | os.O_EXCL, mode)
        with os.fdopen(fd, "wb") as target:
            shutil.copyfileobj(source, target, _CHUNK)