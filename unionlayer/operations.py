"""File system operations over a two-layer union with whiteouts."""

from __future__ import annotations

import errno
import os

from .cow import copy_file, ensure_dir_path
from .paths import WHITEOUT_PREFIX, Layers

_ACCMODE = os.O_RDONLY | os.O_WRONLY | os.O_RDWR


def _exists(physical: str) -> bool:
    return os.access(physical, os.F_OK)


def _make_whiteout(physical: str) -> None:
    fd = os.open(physical, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o666)
    os.close(fd)


def _clear_directory(physical: str) -> None:
    """Remove everything below ``physical``, ignoring failures."""
    try:
        entries = list(os.scandir(physical))
    except OSError:
        return
    for entry in entries:
        if entry.is_dir(follow_symlinks=False):
            _clear_directory(entry.path)
        for remove in (os.unlink, os.rmdir):
            try:
                remove(entry.path)
            except OSError:
                pass


class UnionFS:
    """Union of a read-only lower directory and a writable upper directory.

    Errors are reported by raising OSError subclasses carrying the errno the
    underlying operation failed with.
    """

    def __init__(self, lower_dir, upper_dir):
        self.layers = Layers(
            os.path.realpath(os.fspath(lower_dir)),
            os.path.realpath(os.fspath(upper_dir)),
        )

    def getattr(self, path: str) -> os.stat_result:
        """Stat the visible file at ``path`` without following symlinks."""
        return os.lstat(self.layers.resolve(path))

    def readdir(self, path: str) -> list[str]:
        """List the merged directory, upper entries first, whiteouts applied."""
        names = [".", ".."]
        seen: set[str] = set()
        for is_upper, directory in (
            (True, self.layers.upper(path)),
            (False, self.layers.lower(path)),
        ):
            try:
                entries = os.listdir(directory)
            except OSError:
                continue
            for name in entries:
                if is_upper:
                    if name.startswith(WHITEOUT_PREFIX):
                        seen.add(name[len(WHITEOUT_PREFIX):])
                        continue
                    seen.add(name)
                    names.append(name)
                elif name not in seen:
                    names.append(name)
        return names

    def open(self, path: str, flags: int) -> int:
        """Open ``path``, copying it up first if it is opened for writing."""
        upper = self.layers.upper(path)
        lower = self.layers.lower(path)
        writing = (flags & _ACCMODE) != os.O_RDONLY
        if writing and not _exists(upper) and _exists(lower):
            ensure_dir_path(self.layers.upper_dir, path)
            copy_file(lower, upper)
        return os.open(self.layers.resolve(path), flags)

    def read(self, fh: int, size: int, offset: int) -> bytes:
        """Read up to ``size`` bytes at ``offset`` from an open handle."""
        return os.pread(fh, size, offset)

    def write(self, fh: int, data: bytes, offset: int) -> int:
        """Write ``data`` at ``offset`` and return the number of bytes written."""
        return os.pwrite(fh, data, offset)

    def create(self, path: str, mode: int, flags: int) -> int:
        """Create ``path`` in the upper layer, lifting any whiteout on it."""
        try:
            os.unlink(self.layers.whiteout(path))
        except OSError:
            pass
        return os.open(self.layers.upper(path), flags | os.O_CREAT, mode)

    def mkdir(self, path: str, mode: int) -> None:
        """Create the directory ``path`` in the upper layer."""
        os.mkdir(self.layers.upper(path), mode)

    def unlink(self, path: str) -> None:
        """Remove ``path``; a lower-layer copy is hidden with a whiteout."""
        upper = self.layers.upper(path)
        if _exists(upper):
            os.unlink(upper)
        if _exists(self.layers.lower(path)):
            _make_whiteout(self.layers.whiteout(path))

    def rmdir(self, path: str) -> None:
        """Remove the directory ``path``; a lower-layer copy gets a whiteout."""
        upper = self.layers.upper(path)
        if _exists(upper):
            try:
                os.rmdir(upper)
            except OSError as exc:
                if exc.errno != errno.ENOTEMPTY:
                    raise
                _clear_directory(upper)
                os.rmdir(upper)
        if _exists(self.layers.lower(path)):
            _make_whiteout(self.layers.whiteout(path))

    def release(self, fh: int) -> None:
        """Close a handle returned by open or create."""
        try:
            os.close(fh)
        except OSError:
            pass