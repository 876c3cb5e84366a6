"""Filesystem adapter for the threaded walker."""

import os
import threading
from typing import List

from ..._common.stats import EntryStats
from ..core.adapter import WalkAdapter


class FileSystemAdapter(WalkAdapter):
    """Blocking adapter over the local filesystem.

    Safe to call from many threads at once; only the call counters are
    shared and they are updated under a lock.
    """

    def __init__(self, follow_symlinks: bool = True):
        """Initialize filesystem adapter.

        Args:
            follow_symlinks: Use os.stat (True) or os.lstat (False)
        """
        self.follow_symlinks = follow_symlinks
        self.stat_calls = 0
        self.list_dir_calls = 0
        self._counter_lock = threading.Lock()

    def stat(self, path: str) -> EntryStats:
        with self._counter_lock:
            self.stat_calls += 1
        if self.follow_symlinks:
            return EntryStats(path, os.stat(path))
        return EntryStats(path, os.lstat(path))

    def list_dir(self, path: str) -> List[str]:
        with self._counter_lock:
            self.list_dir_calls += 1
        return os.listdir(path)

    def get_stats(self) -> dict:
        """Get adapter statistics.

        Returns:
            Statistics dictionary
        """
        stats = super().get_stats()
        with self._counter_lock:
            stats.update({
                'stat_calls': self.stat_calls,
                'list_dir_calls': self.list_dir_calls,
                'follow_symlinks': self.follow_symlinks,
            })
        return stats

    def __repr__(self) -> str:
        return f"FileSystemAdapter(follow_symlinks={self.follow_symlinks})"
