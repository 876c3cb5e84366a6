"""Core abstractions for the threaded walker."""

from .adapter import WalkAdapter
from .walker import ThreadedWalker, LockedPendingCount

__all__ = [
    'WalkAdapter',
    'ThreadedWalker',
    'LockedPendingCount',
]
