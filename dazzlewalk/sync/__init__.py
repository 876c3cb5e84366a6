"""Threaded implementation of DazzleWalk.

Steps run in parallel on a thread pool. The worker may therefore be
called from several threads at once.
"""

# Core components
from .core import (
    WalkAdapter,
    ThreadedWalker,
    LockedPendingCount,
)

# Adapters
from .adapters import FileSystemAdapter

# High-level API
from .api import (
    walk,
    walk_sync,
)

__all__ = [
    'WalkAdapter',
    'ThreadedWalker',
    'LockedPendingCount',
    'FileSystemAdapter',
    'walk',
    'walk_sync',
]
