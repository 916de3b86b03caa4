"""Layer directories and resolution of union paths onto them."""

from __future__ import annotations

import errno
import os
from dataclasses import dataclass

WHITEOUT_PREFIX = ".wh."


def _exists(physical: str) -> bool:
    return os.access(physical, os.F_OK)


def _not_found(path: str) -> FileNotFoundError:
    return FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), path)


@dataclass(frozen=True)
class Layers:
    """A read-only lower directory overlaid by a writable upper directory.

    Union paths are absolute paths inside the mount, such as ``/dir/file``.
    """

    lower_dir: str
    upper_dir: str

    def upper(self, path: str) -> str:
        """Physical location of ``path`` in the upper layer."""
        return f"{self.upper_dir}{path}"

    def lower(self, path: str) -> str:
        """Physical location of ``path`` in the lower layer."""
        return f"{self.lower_dir}{path}"

    def whiteout(self, path: str) -> str:
        """Physical location of the whiteout marker that hides ``path``."""
        head, sep, name = path.rpartition("/")
        if not sep:
            raise ValueError(f"union path must be absolute: {path!r}")
        return f"{self.upper_dir}{head}/{WHITEOUT_PREFIX}{name}"

    def resolve(self, path: str) -> str:
        """Return the physical file that ``path`` refers to.

        A whiteout hides the path entirely; otherwise the upper layer takes
        precedence over the lower one. Raises FileNotFoundError when the
        path is hidden or present in neither layer.
        """
        if _exists(self.whiteout(path)):
            raise _not_found(path)
        for candidate in (self.upper(path), self.lower(path)):
            if _exists(candidate):
                return candidate
        raise _not_found(path)