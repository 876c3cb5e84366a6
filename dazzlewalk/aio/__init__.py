"""Asynchronous implementation of DazzleWalk.

This package contains the native async/await walker. Every stat and
directory listing is an await point, so sibling branches overlap their
I/O on a single event loop.
"""

# Core abstractions
from .core import (
    AsyncWalkAdapter,
    AsyncWalker,
)

# Adapters
from .adapters import AsyncFileSystemAdapter

# High-level API
from .api import (
    walk,
    walk_async,
)

# Shared components (re-exported from _common)
from .._common import (
    EntryStats,
    WalkConfig,
    ErrorMode,
    ErrorPolicy,
    FirstErrorPolicy,
    LastCompletedPolicy,
    CollectErrorsPolicy,
    WalkError,
    WalkArgumentError,
    WorkerError,
    WalkErrorGroup,
)

__all__ = [
    # Core abstractions
    'AsyncWalkAdapter',
    'AsyncWalker',
    # Adapters
    'AsyncFileSystemAdapter',
    # High-level API
    'walk',
    'walk_async',
    # Shared components
    'EntryStats',
    'WalkConfig',
    'ErrorMode',
    'ErrorPolicy',
    'FirstErrorPolicy',
    'LastCompletedPolicy',
    'CollectErrorsPolicy',
    'WalkError',
    'WalkArgumentError',
    'WorkerError',
    'WalkErrorGroup',
]
