"""Async filesystem adapter for walking.

Blocking os calls are offloaded with asyncio.to_thread so the event loop
can keep many stat and listdir operations in flight.
"""

import asyncio
import os
from typing import List

from ..._common.stats import EntryStats
from ..core import AsyncWalkAdapter


class AsyncFileSystemAdapter(AsyncWalkAdapter):
    """Async adapter over the local filesystem.

    Every call hits the filesystem; nothing is cached between calls.
    """

    def __init__(self, follow_symlinks: bool = True):
        """Initialize filesystem adapter.

        Args:
            follow_symlinks: Use os.stat (True) or os.lstat (False)
        """
        self.follow_symlinks = follow_symlinks
        self.stat_calls = 0
        self.list_dir_calls = 0

    async def stat(self, path: str) -> EntryStats:
        """Stat one entry in a worker thread.

        Args:
            path: Full path of the entry

        Returns:
            EntryStats for the entry (or the link, without follow_symlinks)
        """
        self.stat_calls += 1
        stat_fn = os.stat if self.follow_symlinks else os.lstat
        result = await asyncio.to_thread(stat_fn, path)
        return EntryStats(path, result)

    async def list_dir(self, path: str) -> List[str]:
        """List a directory's child names in a worker thread."""
        self.list_dir_calls += 1
        return await asyncio.to_thread(os.listdir, path)

    async def get_stats(self) -> dict:
        """Get adapter statistics.

        Returns:
            Statistics dictionary
        """
        stats = await super().get_stats()
        stats.update({
            'stat_calls': self.stat_calls,
            'list_dir_calls': self.list_dir_calls,
            'follow_symlinks': self.follow_symlinks,
        })
        return stats

    def __repr__(self) -> str:
        return f"AsyncFileSystemAdapter(follow_symlinks={self.follow_symlinks})"
