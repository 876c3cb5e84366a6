"""Async walk adapter abstraction.

Defines the filesystem collaborators the walker consumes: stat an entry,
list a directory, join a child name onto its parent.
"""

import os
from abc import ABC, abstractmethod
from typing import List

from ..._common.stats import EntryStats


class AsyncWalkAdapter(ABC):
    """Abstract base class for async walk adapters.

    Adapters bridge between the generic walk logic and a concrete
    storage. Both I/O operations are awaitable so a single event loop can
    keep many of them in flight at once.
    """

    @abstractmethod
    async def stat(self, path: str) -> EntryStats:
        """Fetch metadata for one entry.

        Args:
            path: Full path of the entry

        Returns:
            Fresh EntryStats for the entry

        Raises:
            OSError: If the entry cannot be stat'ed
        """
        pass

    @abstractmethod
    async def list_dir(self, path: str) -> List[str]:
        """List the names of a directory's immediate children.

        Args:
            path: Full path of the directory

        Returns:
            Child names, not full paths, in no particular order

        Raises:
            OSError: If the directory cannot be read
        """
        pass

    def join(self, parent: str, name: str) -> str:
        """Build a child's full path from its parent and name."""
        return os.path.join(parent, name)

    async def get_stats(self) -> dict:
        """Get adapter statistics.

        Returns:
            Dictionary of statistics (I/O counts etc.)
        """
        return {}
