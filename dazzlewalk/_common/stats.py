"""Entry metadata passed to the worker.

Adapters produce one EntryStats per visited entry. It is never cached:
every walk stats every entry it reaches exactly once.
"""

import os
import stat as stat_module  # To avoid name collision with stat results
from dataclasses import dataclass


@dataclass(frozen=True)
class EntryStats:
    """Metadata describing one filesystem object.

    Wraps an ``os.stat_result`` and exposes the predicates a worker needs
    to decide whether to descend.
    """

    path: str
    stat_result: os.stat_result

    def is_dir(self) -> bool:
        """Check if the entry is a directory."""
        return stat_module.S_ISDIR(self.stat_result.st_mode)

    def is_file(self) -> bool:
        """Check if the entry is a regular file."""
        return stat_module.S_ISREG(self.stat_result.st_mode)

    def is_symlink(self) -> bool:
        """Check if the entry is a symbolic link.

        Only ever true when the walk does not follow symlinks, since a
        followed link reports the type of its target.
        """
        return stat_module.S_ISLNK(self.stat_result.st_mode)

    @property
    def size(self) -> int:
        return self.stat_result.st_size

    @property
    def mtime(self) -> float:
        return self.stat_result.st_mtime

    @property
    def mode(self) -> int:
        return self.stat_result.st_mode

    def __repr__(self) -> str:
        kind = 'dir' if self.is_dir() else 'file' if self.is_file() else 'other'
        return f"EntryStats({self.path!r}, {kind})"
