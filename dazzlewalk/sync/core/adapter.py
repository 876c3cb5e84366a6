"""Walk adapter abstraction for the threaded walker.

Same collaborators as the async adapter, as plain blocking calls. They
are invoked concurrently from pool threads, so implementations must be
thread-safe.
"""

import os
from abc import ABC, abstractmethod
from typing import List

from ..._common.stats import EntryStats


class WalkAdapter(ABC):
    """Abstract base class for blocking walk adapters."""

    @abstractmethod
    def stat(self, path: str) -> EntryStats:
        """Fetch metadata for one entry.

        Raises:
            OSError: If the entry cannot be stat'ed
        """
        pass

    @abstractmethod
    def list_dir(self, path: str) -> List[str]:
        """List the names of a directory's immediate children.

        Raises:
            OSError: If the directory cannot be read
        """
        pass

    def join(self, parent: str, name: str) -> str:
        """Build a child's full path from its parent and name."""
        return os.path.join(parent, name)

    def get_stats(self) -> dict:
        """Get adapter statistics."""
        return {}
